"""Widget tree: text, list, border and split nodes."""

from typing import Union

from termcomp.widgets.base import BaseWidget, Rect, Widget
from termcomp.widgets.border import BorderedWidget
from termcomp.widgets.list_view import ListWidget
from termcomp.widgets.split import SplitWidget
from termcomp.widgets.text import TextWidget

AnyWidget = Union[TextWidget, ListWidget, BorderedWidget, SplitWidget]

__all__ = [
    "AnyWidget",
    "BaseWidget",
    "BorderedWidget",
    "ListWidget",
    "Rect",
    "SplitWidget",
    "TextWidget",
    "Widget",
]
