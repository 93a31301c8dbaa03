"""Tests for core data structures (no terminal needed)."""

import pytest

from termcomp.core.cell import Cell, Style
from termcomp.core.grid import CellGrid, Surface
from termcomp.widgets.base import Rect


class TestCell:
    """Tests for Cell and Style."""

    def test_default_cell(self) -> None:
        cell = Cell()
        assert cell.char == ' '
        assert cell.style == Style.DEFAULT
        assert cell.is_blank() is True

    def test_cell_copy(self) -> None:
        cell = Cell(char='X', style=Style.HIGHLIGHT)
        copy = cell.copy()
        assert copy == cell
        assert copy is not cell

    def test_styled_space_is_not_blank(self) -> None:
        assert Cell(style=Style.HIGHLIGHT).is_blank() is False

    def test_sgr(self) -> None:
        assert Style.DEFAULT.sgr() == '\x1b[0m'
        assert Style.HIGHLIGHT.sgr() == '\x1b[0;4m'


class TestCellGrid:
    """Tests for CellGrid."""

    def test_is_a_surface(self) -> None:
        assert isinstance(CellGrid(), Surface)

    def test_set_and_get(self) -> None:
        grid = CellGrid(5, 3)
        grid.set_content(2, 1, 'A', Style.HIGHLIGHT)
        assert grid.get(2, 1).char == 'A'
        assert grid[2, 1].style.underline is True

    def test_out_of_range_writes_are_dropped(self) -> None:
        grid = CellGrid(3, 2)
        grid.set_content(3, 0, 'X')
        grid.set_content(-1, 0, 'X')
        grid.set_content(0, 2, 'X')
        assert all(cell.char == ' ' for _, _, cell in grid.cells())

    def test_out_of_range_read_raises(self) -> None:
        grid = CellGrid(3, 2)
        with pytest.raises(IndexError):
            grid.get(3, 0)
        with pytest.raises(IndexError):
            grid.row_text(2)

    def test_combining_marks_stay_in_one_cell(self) -> None:
        grid = CellGrid(3, 1)
        grid.set_content(0, 0, 'e', combining=['\u0301'])
        assert grid.get(0, 0).char == 'e\u0301'
        assert grid.get(1, 0).char == ' '

    def test_control_characters_become_blanks(self) -> None:
        grid = CellGrid(4, 1)
        for x, ch in enumerate('\t\n\x1b\r'):
            grid.set_content(x, 0, ch)
        assert grid.row_text(0) == '    '

    def test_fill(self) -> None:
        grid = CellGrid(4, 2)
        grid.fill('#')
        assert grid.row_text(0) == '####'
        assert grid.row_text(1) == '####'

    def test_resize_discards_content(self) -> None:
        grid = CellGrid(2, 2)
        grid.fill('#')
        grid.resize(3, 1)
        assert grid.size() == (3, 1)
        assert grid.row_text(0) == '   '

    def test_snapshot_is_independent(self) -> None:
        grid = CellGrid(2, 1)
        snap = grid.snapshot()
        grid.set_content(0, 0, 'Z')
        assert snap[0][0].char == ' '


class TestRect:
    """Tests for Rect."""

    def test_inclusive_size(self) -> None:
        rect = Rect(2, 3, 11, 7)
        assert rect.width == 10
        assert rect.height == 5
        assert rect.values() == (2, 3, 11, 7)

    def test_from_size_round_trip(self) -> None:
        rect = Rect.from_size(4, 1, 20, 10)
        assert rect == Rect(4, 1, 23, 10)
        assert rect.to_size() == (4, 1, 20, 10)

    def test_shrink(self) -> None:
        assert Rect(0, 0, 4, 4).shrink() == Rect(1, 1, 3, 3)

    def test_shrink_small_rect_becomes_empty(self) -> None:
        inner = Rect(0, 0, 1, 1).shrink()
        assert inner.is_empty
        assert inner.width == 0
        assert inner.height == 0

    def test_default_rect_is_empty(self) -> None:
        assert Rect().is_empty

    def test_single_cell(self) -> None:
        rect = Rect(3, 3, 3, 3)
        assert not rect.is_empty
        assert rect.width == rect.height == 1

    def test_contains(self) -> None:
        rect = Rect(1, 1, 3, 3)
        assert rect.contains(1, 3)
        assert not rect.contains(4, 2)

    def test_immutable(self) -> None:
        rect = Rect(0, 0, 1, 1)
        with pytest.raises(AttributeError):
            rect.x0 = 5
