"""Terminal backend: cell grid, escape output, input decoding, screens."""

from termcomp.core.cell import Cell, Style
from termcomp.core.grid import CellGrid, Surface
from termcomp.core.input import Event, InputReader, Key, KeyEvent, MouseEvent, ResizeEvent
from termcomp.core.keymap import Action, Binding, resolve
from termcomp.core.screen import MemoryScreen, Screen, ScreenError, TerminalScreen
from termcomp.core.terminal import Terminal, TerminalSize

__all__ = [
    "Action",
    "Binding",
    "Cell",
    "CellGrid",
    "Event",
    "InputReader",
    "Key",
    "KeyEvent",
    "MemoryScreen",
    "MouseEvent",
    "ResizeEvent",
    "Screen",
    "ScreenError",
    "Style",
    "Surface",
    "Terminal",
    "TerminalScreen",
    "TerminalSize",
    "resolve",
]
