"""CellGrid - 2D grid of cells that widgets render into."""

from __future__ import annotations

from typing import Iterator, Protocol, Sequence, runtime_checkable

from termcomp.core.cell import Cell, Style


@runtime_checkable
class Surface(Protocol):
    """Anything widgets can draw onto."""

    def size(self) -> tuple[int, int]:
        """Return (width, height) in cells."""
        ...

    def set_content(
        self,
        x: int,
        y: int,
        ch: str,
        style: Style = Style.DEFAULT,
        combining: Sequence[str] = (),
    ) -> None:
        """Write one cell. Writes outside the surface are ignored."""
        ...

    def fill(self, ch: str, style: Style = Style.DEFAULT) -> None:
        """Set every cell to ``ch``."""
        ...


class CellGrid:
    """
    A fixed-size grid of Cells.

    This is the shared rendering surface: every widget writes into it
    during a frame, and the terminal backend flushes it afterwards.
    Out-of-range writes are dropped so that widgets never have to guard
    against a terminal that is smaller than their region.
    """

    def __init__(self, width: int = 80, height: int = 24) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._buffer: list[list[Cell]] = self._blank_rows()

    def _blank_rows(self) -> list[list[Cell]]:
        return [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def resize(self, width: int, height: int) -> None:
        """Reallocate the grid. All content is discarded."""
        self.width = max(0, width)
        self.height = max(0, height)
        self._buffer = self._blank_rows()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_content(
        self,
        x: int,
        y: int,
        ch: str,
        style: Style = Style.DEFAULT,
        combining: Sequence[str] = (),
    ) -> None:
        if not self.in_bounds(x, y):
            return
        # control characters would move the real cursor
        if not ch.isprintable():
            ch = ' '
        if combining:
            ch = ch + ''.join(combining)
        self._buffer[y][x] = Cell(char=ch, style=style)

    def fill(self, ch: str, style: Style = Style.DEFAULT) -> None:
        for row in self._buffer:
            for x in range(self.width):
                row[x] = Cell(char=ch, style=style)

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")
        return self._buffer[y][x]

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: grid[x, y]."""
        x, y = pos
        return self.get(x, y)

    def row_text(self, y: int) -> str:
        """Characters of row ``y`` as a string, styles dropped."""
        if not 0 <= y < self.height:
            raise IndexError(f"y={y} out of bounds (height={self.height})")
        return ''.join(cell.char for cell in self._buffer[y])

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for y, row in enumerate(self._buffer):
            for x, cell in enumerate(row):
                yield x, y, cell

    def snapshot(self) -> list[list[Cell]]:
        """Deep copy of the current contents."""
        return [[cell.copy() for cell in row] for row in self._buffer]
