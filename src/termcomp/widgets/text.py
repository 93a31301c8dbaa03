"""Static text block wrapped into its region."""

from __future__ import annotations

from termcomp.core.cell import Style
from termcomp.core.grid import Surface
from termcomp.widgets.base import BaseWidget


class TextWidget(BaseWidget):
    """
    Fills its region with ``text``, left to right then top to bottom.

    Wrapping ignores word boundaries. Text beyond width * height cells
    is cut off; cells past the end of the text are drawn blank.
    """

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self.text = text

    def render(self, surface: Surface) -> None:
        x0, y0, x1, y1 = self.rect.values()
        width = self.rect.width
        for j in range(y0, y1 + 1):
            for i in range(x0, x1 + 1):
                idx = (j - y0) * width + (i - x0)
                ch = self.text[idx] if idx < len(self.text) else ' '
                surface.set_content(i, j, ch, Style.DEFAULT)
