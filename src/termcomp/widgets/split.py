"""Two panes side by side or stacked."""

from __future__ import annotations

from termcomp.core.grid import Surface
from termcomp.widgets.base import BaseWidget, Rect, Widget


class SplitWidget(BaseWidget):
    """
    Partitions its rect between ``left`` and ``right``.

    With ``horizontal`` the split line runs across the rect and ``left``
    is the top pane; otherwise ``left`` is the left pane. ``ratio`` is
    the percentage of the extent given to the first pane and is trusted
    to be within 0..100.
    """

    def __init__(self, left: Widget, right: Widget, ratio: int = 50, horizontal: bool = False) -> None:
        super().__init__()
        self.left = left
        self.right = right
        self.ratio = ratio
        self.horizontal = horizontal

    def resize(self, rect: Rect) -> None:
        self._rect = rect
        x0, y0, x1, y1 = rect.values()
        if self.horizontal:
            split = y0 + (y1 - y0) * self.ratio // 100
            self.left.resize(Rect(x0, y0, x1, split))
            self.right.resize(Rect(x0, min(split + 1, y1), x1, y1))
        else:
            split = x0 + (x1 - x0) * self.ratio // 100
            self.left.resize(Rect(x0, y0, split, y1))
            self.right.resize(Rect(min(split + 1, x1), y0, x1, y1))

    def render(self, surface: Surface) -> None:
        self.left.render(surface)
        self.right.render(surface)
