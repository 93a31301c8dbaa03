"""
termcomp: a small terminal widget compositor

A tree of widgets (text blocks, scrollable lists, borders and split
panes) renders into a shared character grid, while a single-threaded
loop merges keyboard, mouse and resize events with lines arriving from
background producers.

Quick Start:
    >>> from termcomp import Compositor, BorderedWidget, ListWidget, MemoryScreen, Rect
    >>> screen = MemoryScreen(20, 5)
    >>> comp = Compositor(screen)
    >>> log = ListWidget(["one", "two", "three"])
    >>> _ = comp.add(BorderedWidget(log, title="log"))
    >>> comp.resize(Rect.from_size(0, 0, 20, 5))
    >>> comp.render()
    >>> screen.grid.row_text(0)
    '┌log───────────────┐'
"""

__version__ = "0.1.0"

from termcomp.compositor import AppendLine, Compositor
from termcomp.config import CompositorConfig
from termcomp.core.cell import Cell, Style
from termcomp.core.grid import CellGrid, Surface
from termcomp.core.screen import MemoryScreen, Screen, ScreenError, TerminalScreen
from termcomp.producers import LogProducer
from termcomp.widgets import (
    BorderedWidget,
    ListWidget,
    Rect,
    SplitWidget,
    TextWidget,
    Widget,
)

__all__ = [
    "__version__",
    "AppendLine",
    "BorderedWidget",
    "Cell",
    "CellGrid",
    "Compositor",
    "CompositorConfig",
    "ListWidget",
    "LogProducer",
    "MemoryScreen",
    "Rect",
    "Screen",
    "ScreenError",
    "SplitWidget",
    "Style",
    "Surface",
    "TerminalScreen",
    "TextWidget",
    "Widget",
]
