"""Low-level terminal operations - raw ANSI escape output."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Escape-sequence writer bound to an output stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    @staticmethod
    def size(fd: int | None = None) -> TerminalSize:
        """Dimensions of the terminal on ``fd`` (stdout if omitted), 24x80 if unknown."""
        try:
            size = os.get_terminal_size() if fd is None else os.get_terminal_size(fd)
        except (OSError, ValueError):
            return TerminalSize(24, 80)
        if size.lines <= 0 or size.columns <= 0:
            return TerminalSize(24, 80)
        return TerminalSize(size.lines, size.columns)

    def write(self, text: str) -> None:
        """Queue text; nothing reaches the terminal until flush()."""
        self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self.write('\x1b[2J\x1b[H')

    def reset(self) -> None:
        """Reset all terminal attributes."""
        self.write('\x1b[0m')

    def hide_cursor(self) -> None:
        self.write('\x1b[?25l')

    def show_cursor(self) -> None:
        self.write('\x1b[?25h')

    def enter_alternate_screen(self) -> None:
        self.write('\x1b[?1049h')

    def leave_alternate_screen(self) -> None:
        self.write('\x1b[?1049l')

    def enable_mouse(self) -> None:
        """Button-event tracking with SGR extended coordinates."""
        self.write('\x1b[?1000h\x1b[?1006h')

    def disable_mouse(self) -> None:
        self.write('\x1b[?1006l\x1b[?1000l')
