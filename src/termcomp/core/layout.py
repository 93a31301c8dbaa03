"""Fixed panel layout for the demo screen.

Panels are placed at absolute positions and stretched to the right and
bottom edges of the root rect:

    +--------------+------------------+
    | text (41x11) |                  |
    +--------------+  log list        |
    |              |  (rows 0-20)     |
    +--------------+------------------+
    | titled text (rows 21-25)        |
    +---------------------------------+
    | split 25% | 75%  (rows 26-end)  |
    +---------------------------------+

Panels that fall outside a small terminal are clipped to the root and
may end up empty.
"""

from __future__ import annotations

from dataclasses import dataclass

from termcomp.widgets.base import Rect

# Layout constants
TEXT_PANEL = Rect(0, 0, 40, 10)
LIST_LEFT = 41
LIST_BOTTOM = 20
BANNER_TOP = 21
BANNER_BOTTOM = 25
SPLIT_TOP = 26


@dataclass(frozen=True)
class Layout:
    """Computed panel rects for the current root rect."""
    root: Rect
    text: Rect
    log: Rect
    banner: Rect
    split: Rect

    def as_list(self) -> list[Rect]:
        """Rects in top-level widget order: log, text, banner, split."""
        return [self.log, self.text, self.banner, self.split]


def _clip(rect: Rect, root: Rect) -> Rect:
    return Rect(
        rect.x0,
        rect.y0,
        min(rect.x1, root.x1),
        min(rect.y1, root.y1),
    )


def calculate_layout(root: Rect) -> Layout:
    """Calculate panel rects for the given root rect."""
    return Layout(
        root=root,
        text=_clip(TEXT_PANEL, root),
        log=_clip(Rect(LIST_LEFT, 0, root.x1, LIST_BOTTOM), root),
        banner=_clip(Rect(0, BANNER_TOP, root.x1, BANNER_BOTTOM), root),
        split=Rect(0, SPLIT_TOP, root.x1, root.y1),
    )


def demo_layout(root: Rect) -> list[Rect]:
    """Layout function for Compositor: one rect per top-level widget."""
    return calculate_layout(root).as_list()
