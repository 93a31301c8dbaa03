"""Screen backends: the real terminal and a headless stand-in for tests."""

from __future__ import annotations

import logging
import os
import queue
import signal
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import ContextManager, Iterator, Optional, Protocol, Sequence, TextIO, runtime_checkable

from termcomp.core.cell import Cell, Style
from termcomp.core.grid import CellGrid, Surface
from termcomp.core.input import Event, InputReader, ResizeEvent
from termcomp.core.terminal import Terminal, TerminalSize

logger = logging.getLogger(__name__)


class ScreenError(RuntimeError):
    """The terminal could not be initialized."""


@runtime_checkable
class Screen(Surface, Protocol):
    """A Surface that can be flushed to a display and produces input events."""

    def init(self) -> None: ...

    def fini(self) -> None: ...

    def show(self) -> None:
        """Flush pending writes to the display."""
        ...

    def sync(self) -> None:
        """Force a full repaint, re-reading the display size."""
        ...

    def poll_event(self) -> Optional[Event]:
        """Block until the next event. None means the screen is gone."""
        ...

    def enable_mouse(self) -> None: ...

    def session(self) -> ContextManager[Screen]:
        """init() now, fini() on every exit path."""
        ...


class _ScreenBase(ABC):
    """Grid delegation and scoped init/fini shared by both backends."""

    grid: CellGrid

    @abstractmethod
    def init(self) -> None:
        """Take over the display."""

    @abstractmethod
    def fini(self) -> None:
        """Give the display back. Safe to call more than once."""

    @abstractmethod
    def show(self) -> None: ...

    @abstractmethod
    def sync(self) -> None: ...

    @abstractmethod
    def poll_event(self) -> Optional[Event]: ...

    @abstractmethod
    def enable_mouse(self) -> None: ...

    def size(self) -> tuple[int, int]:
        return self.grid.size()

    def set_content(
        self,
        x: int,
        y: int,
        ch: str,
        style: Style = Style.DEFAULT,
        combining: Sequence[str] = (),
    ) -> None:
        self.grid.set_content(x, y, ch, style, combining)

    def fill(self, ch: str, style: Style = Style.DEFAULT) -> None:
        self.grid.fill(ch, style)

    @contextmanager
    def session(self) -> Iterator[_ScreenBase]:
        """Initialize, and finalize on every exit path."""
        self.init()
        try:
            yield self
        finally:
            self.fini()


class TerminalScreen(_ScreenBase):
    """
    Full-screen terminal backend.

    Keeps a back buffer that widgets draw into and the last frame that
    was written out. ``show`` emits escapes only for cells that changed
    since that frame; ``sync`` drops it so the next ``show`` repaints
    everything.
    """

    def __init__(self, stream: Optional[TextIO] = None, fd: Optional[int] = None) -> None:
        self.terminal = Terminal(stream)
        self.reader = InputReader(fd)
        self.grid = CellGrid(0, 0)
        self._front: Optional[list[list[Cell]]] = None
        self._old_termios: Optional[list] = None
        self._old_sigwinch = None
        self._resized = threading.Event()
        self._active = False
        self._mouse = False

    def init(self) -> None:
        if self._active:
            return
        try:
            fd = self.reader.fd
        except (OSError, ValueError) as e:
            raise ScreenError(f"cannot access stdin: {e}") from e
        if not os.isatty(fd):
            raise ScreenError("stdin is not a terminal")

        try:
            import termios
            import tty
        except ImportError as e:
            raise ScreenError("terminal control requires termios (Unix only)") from e

        try:
            self._old_termios = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as e:
            raise ScreenError(f"cannot configure terminal: {e}") from e

        self._old_sigwinch = signal.getsignal(signal.SIGWINCH)
        signal.signal(signal.SIGWINCH, self._on_sigwinch)

        size = self._terminal_size()
        self.grid.resize(size.cols, size.rows)
        self._front = None
        self.terminal.enter_alternate_screen()
        self.terminal.hide_cursor()
        self.terminal.clear()
        self.terminal.flush()
        self._active = True
        logger.debug("terminal initialized at %dx%d", size.cols, size.rows)

    def fini(self) -> None:
        if not self._active:
            return
        self._active = False
        if self._mouse:
            self.terminal.disable_mouse()
            self._mouse = False
        self.terminal.reset()
        self.terminal.show_cursor()
        self.terminal.leave_alternate_screen()
        self.terminal.flush()

        import termios

        if self._old_termios is not None:
            termios.tcsetattr(self.reader.fd, termios.TCSADRAIN, self._old_termios)
            self._old_termios = None
        if self._old_sigwinch is not None:
            signal.signal(signal.SIGWINCH, self._old_sigwinch)
            self._old_sigwinch = None
        logger.debug("terminal restored")

    def _terminal_size(self) -> TerminalSize:
        """Size of the terminal on the input fd, else on the output stream."""
        fds = [self.reader.fd]
        try:
            fds.append(self.terminal.stream.fileno())
        except (AttributeError, OSError, ValueError):
            pass
        for fd in fds:
            if os.isatty(fd):
                return Terminal.size(fd)
        return Terminal.size()

    def _on_sigwinch(self, signum, frame) -> None:
        """SIGWINCH: set flag, the input pump turns it into an event."""
        self._resized.set()

    def enable_mouse(self) -> None:
        self.terminal.enable_mouse()
        self.terminal.flush()
        self._mouse = True

    def show(self) -> None:
        """Diff the back buffer against the last frame and write changes."""
        prev = self._front
        if prev is not None and len(prev) != self.grid.height:
            prev = None
        elif prev and len(prev[0]) != self.grid.width:
            prev = None
        out: list[str] = []
        last_style: Optional[Style] = None
        last_pos = (-1, -1)

        for y, row in enumerate(self.grid.rows()):
            for x, cell in enumerate(row):
                if prev is not None and prev[y][x] == cell:
                    continue
                if (y, x) != last_pos:
                    out.append(f'\x1b[{y + 1};{x + 1}H')
                if cell.style != last_style:
                    out.append(cell.style.sgr())
                    last_style = cell.style
                out.append(cell.char)
                last_pos = (y, x + 1)

        if out:
            out.append(Style.DEFAULT.sgr())
            self.terminal.write(''.join(out))
            self.terminal.flush()
        self._front = self.grid.snapshot()

    def sync(self) -> None:
        size = self._terminal_size()
        if (size.cols, size.rows) != self.grid.size():
            self.grid.resize(size.cols, size.rows)
        self._front = None
        self.terminal.clear()

    def poll_event(self) -> Optional[Event]:
        while self._active:
            if self._resized.is_set():
                self._resized.clear()
                size = self._terminal_size()
                return ResizeEvent(size.cols, size.rows)
            event = self.reader.read(timeout=0.1)
            if event is not None:
                return event
        return None


class MemoryScreen(_ScreenBase):
    """
    Headless screen backed by a CellGrid.

    Events are scripted with ``push``; ``poll_event`` blocks on them the
    way a real terminal blocks on input.
    """

    def __init__(self, width: int = 80, height: int = 24) -> None:
        self.grid = CellGrid(width, height)
        self.events: queue.Queue[Optional[Event]] = queue.Queue()
        self.shows = 0
        self.syncs = 0
        self.mouse_enabled = False
        self.active = False
        self._pending_size: Optional[tuple[int, int]] = None

    def init(self) -> None:
        self.active = True

    def fini(self) -> None:
        if self.active:
            self.active = False
            # unblock a pump thread waiting in poll_event
            self.events.put(None)

    def push(self, *events: Event) -> None:
        for event in events:
            self.events.put(event)

    def set_size(self, width: int, height: int) -> ResizeEvent:
        """Simulate a terminal resize; returns the event to deliver."""
        self._pending_size = (width, height)
        return ResizeEvent(width, height)

    def show(self) -> None:
        self.shows += 1

    def sync(self) -> None:
        self.syncs += 1
        if self._pending_size is not None and self._pending_size != self.grid.size():
            self.grid.resize(*self._pending_size)

    def poll_event(self) -> Optional[Event]:
        return self.events.get()

    def enable_mouse(self) -> None:
        self.mouse_enabled = True
