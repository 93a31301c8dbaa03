"""Scrollable list of lines with a selection cursor."""

from __future__ import annotations

from typing import Iterable, Optional

from termcomp.core.cell import Style
from termcomp.core.grid import Surface
from termcomp.widgets.base import BaseWidget


class ListWidget(BaseWidget):
    """
    Vertically scrollable list with one highlighted (underlined) line.

    ``offset`` is the index of the first visible line and ``selected``
    the highlighted one. ``down``/``up``/``first``/``last`` are the only
    operations that move either; after each of them

        0 <= offset <= selected < offset + visible_height
        offset <= max(0, len(lines) - visible_height)

    ``resize`` leaves both untouched so a transient resize does not lose
    the scroll position. They are brought back in range by the next
    navigation call or ``render``.

    Lines are appended from the render loop only (``append``), never
    removed or reordered.
    """

    def __init__(self, lines: Optional[Iterable[str]] = None, selected: int = 0) -> None:
        super().__init__()
        self.lines: list[str] = list(lines or [])
        self.offset: int = 0
        self.selected: int = selected

    @property
    def visible_height(self) -> int:
        return self.rect.height

    def append(self, line: str) -> None:
        self.lines.append(line)

    def down(self) -> None:
        """Move selection down one line, scrolling if it leaves the viewport."""
        if not self.lines:
            return
        self.selected = min(len(self.lines) - 1, self.selected + 1)
        self._adjust_scroll()

    def up(self) -> None:
        """Move selection up one line, scrolling if it leaves the viewport."""
        if not self.lines:
            return
        self.selected = max(0, self.selected - 1)
        self._adjust_scroll()

    def first(self) -> None:
        self.selected = 0
        self.offset = 0

    def last(self) -> None:
        self.selected = max(0, len(self.lines) - 1)
        self.offset = self._max_offset()

    def _max_offset(self) -> int:
        return max(0, len(self.lines) - max(1, self.visible_height))

    def _adjust_scroll(self) -> None:
        """Ensure selected line is visible and offset is in range."""
        if self.lines:
            self.selected = max(0, min(len(self.lines) - 1, self.selected))
        else:
            self.selected = 0
        height = self.visible_height
        if height > 0:
            if self.selected < self.offset:
                self.offset = self.selected
            elif self.selected >= self.offset + height:
                self.offset = self.selected - height + 1
        self.offset = max(0, min(self.offset, self._max_offset()))

    def render(self, surface: Surface) -> None:
        if self.rect.is_empty:
            return
        self._adjust_scroll()

        x0, y0, x1, y1 = self.rect.values()
        width = self.rect.width
        for j in range(y0, y1 + 1):
            idx = self.offset + (j - y0)
            if idx >= len(self.lines):
                break
            style = Style.HIGHLIGHT if idx == self.selected else Style.DEFAULT
            for i, ch in enumerate(self.lines[idx][:width]):
                surface.set_content(x0 + i, j, ch, style)

    @property
    def selected_line(self) -> Optional[str]:
        if self.lines and 0 <= self.selected < len(self.lines):
            return self.lines[self.selected]
        return None
