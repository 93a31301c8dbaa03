"""Cell - atomic unit of the character grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Style:
    """
    Display attributes for a single cell.

    Only one attribute is supported: the underline used to highlight the
    selected row of a list.
    """
    underline: bool = False

    DEFAULT: ClassVar[Style]
    HIGHLIGHT: ClassVar[Style]

    def sgr(self) -> str:
        """ANSI SGR sequence that selects this style from a reset state."""
        if self.underline:
            return '\x1b[0;4m'
        return '\x1b[0m'


Style.DEFAULT = Style()
Style.HIGHLIGHT = Style(underline=True)


@dataclass(slots=True)
class Cell:
    """
    A single character cell with its style.

    Combining code points, when present, are stored after the base
    character in ``char``.
    """
    char: str = ' '
    style: Style = Style.DEFAULT

    def copy(self) -> Cell:
        """Create a copy of this cell."""
        return Cell(char=self.char, style=self.style)

    def is_blank(self) -> bool:
        """Check if this cell is an unstyled space."""
        return self.char == ' ' and self.style == Style.DEFAULT
