"""Shared fixtures: headless screens and small widget trees."""

import pytest

from termcomp.compositor import Compositor
from termcomp.core.grid import CellGrid
from termcomp.core.screen import MemoryScreen
from termcomp.widgets import BorderedWidget, ListWidget, Rect


@pytest.fixture
def grid() -> CellGrid:
    """A 10x6 grid pre-filled with dots so untouched cells are visible."""
    g = CellGrid(10, 6)
    g.fill('.')
    return g


@pytest.fixture
def screen() -> MemoryScreen:
    s = MemoryScreen(40, 12)
    s.init()
    yield s
    # release any input pump still waiting on the screen
    s.fini()


@pytest.fixture
def numbered_list() -> ListWidget:
    """Ten lines with a three-row viewport."""
    widget = ListWidget([f"line {i}" for i in range(10)])
    widget.resize(Rect(0, 0, 9, 2))
    return widget


@pytest.fixture
def compositor(screen: MemoryScreen) -> Compositor:
    """Compositor with a single bordered list as its only widget."""
    comp = Compositor(screen)
    comp.add(BorderedWidget(ListWidget(["a", "b", "c", "d", "e"]), title="log"))
    comp.resize(Rect.from_size(0, 0, 40, 12))
    return comp
