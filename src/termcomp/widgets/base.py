"""Base widget protocol and the Rect coordinate model."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from termcomp.core.grid import Surface


@dataclass(frozen=True)
class Rect:
    """
    Rectangle of grid cells with inclusive corners.

    ``(x0, y0)`` is the top-left cell and ``(x1, y1)`` the bottom-right
    cell, both part of the region. A rect with ``x1 < x0`` or
    ``y1 < y0`` is empty; widgets given one render nothing.

    Use ``from_size``/``to_size`` to convert from and to the
    origin+size convention at the boundary.
    """
    x0: int = 0
    y0: int = 0
    x1: int = -1
    y1: int = -1

    @classmethod
    def from_size(cls, x: int, y: int, width: int, height: int) -> Rect:
        return cls(x, y, x + width - 1, y + height - 1)

    def to_size(self) -> tuple[int, int, int, int]:
        """Return (x, y, width, height)."""
        return self.x0, self.y0, self.width, self.height

    def values(self) -> tuple[int, int, int, int]:
        return self.x0, self.y0, self.x1, self.y1

    @property
    def width(self) -> int:
        return max(0, self.x1 - self.x0 + 1)

    @property
    def height(self) -> int:
        return max(0, self.y1 - self.y0 + 1)

    @property
    def is_empty(self) -> bool:
        return self.x1 < self.x0 or self.y1 < self.y0

    def shrink(self, n: int = 1) -> Rect:
        """Rect inset by ``n`` cells on every side (may become empty)."""
        return Rect(self.x0 + n, self.y0 + n, self.x1 - n, self.y1 - n)

    def contains(self, x: int, y: int) -> bool:
        return self.x0 <= x <= self.x1 and self.y0 <= y <= self.y1


@runtime_checkable
class Widget(Protocol):
    """Protocol for renderable nodes of the widget tree."""

    def render(self, surface: Surface) -> None:
        """Draw into ``surface`` within the widget's own rect."""
        ...

    def resize(self, rect: Rect) -> None:
        """Take a new region, propagating to children."""
        ...

    def get_rect(self) -> Rect:
        ...


class BaseWidget(ABC):
    """Base class with common widget functionality."""

    def __init__(self) -> None:
        self._rect = Rect()

    @property
    def rect(self) -> Rect:
        return self._rect

    def get_rect(self) -> Rect:
        return self._rect

    def resize(self, rect: Rect) -> None:
        """Leaves replace their rect; containers also resize children."""
        self._rect = rect

    @abstractmethod
    def render(self, surface: Surface) -> None:
        """Subclasses must implement rendering."""
        pass
