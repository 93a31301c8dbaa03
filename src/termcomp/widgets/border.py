"""One-cell frame with an optional title around an inner widget."""

from __future__ import annotations

from termcomp.core.cell import Style
from termcomp.core.grid import Surface
from termcomp.widgets.base import BaseWidget, Rect, Widget

# Box-drawing glyphs
HLINE = '─'
VLINE = '│'
ULCORNER = '┌'
URCORNER = '┐'
LLCORNER = '└'
LRCORNER = '┘'


class BorderedWidget(BaseWidget):
    """
    Draws a frame around ``inner``.

    The inner widget always gets this widget's rect shrunk by one cell
    on each side. The frame is drawn after the inner widget so it is
    never overdrawn by it. The title, if any, replaces the top edge
    starting one cell in from the left corner and is cut at the right
    corner.
    """

    def __init__(self, inner: Widget, title: str = "") -> None:
        super().__init__()
        self.inner = inner
        self.title = title

    def resize(self, rect: Rect) -> None:
        self._rect = rect
        self.inner.resize(rect.shrink(1))

    def render(self, surface: Surface) -> None:
        self.inner.render(surface)
        if self.rect.is_empty:
            return

        x0, y0, x1, y1 = self.rect.values()
        style = Style.DEFAULT

        for i in range(x0 + 1, x1):
            surface.set_content(i, y0, HLINE, style)
            surface.set_content(i, y1, HLINE, style)
        for i, ch in zip(range(x0 + 1, x1), self.title):
            surface.set_content(i, y0, ch, style)
        for j in range(y0 + 1, y1):
            surface.set_content(x0, j, VLINE, style)
            surface.set_content(x1, j, VLINE, style)

        surface.set_content(x0, y0, ULCORNER, style)
        surface.set_content(x1, y0, URCORNER, style)
        surface.set_content(x0, y1, LLCORNER, style)
        surface.set_content(x1, y1, LRCORNER, style)
