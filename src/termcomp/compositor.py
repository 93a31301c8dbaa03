"""Compositor: owns the widget tree and runs the render/event loop."""

from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, Sequence, Union

from termcomp.config import CompositorConfig
from termcomp.core.input import Event, KeyEvent, MouseEvent, ResizeEvent
from termcomp.core.keymap import Action, resolve
from termcomp.core.screen import Screen
from termcomp.widgets.base import Rect, Widget
from termcomp.widgets.border import BorderedWidget
from termcomp.widgets.list_view import ListWidget
from termcomp.widgets.split import SplitWidget

logger = logging.getLogger(__name__)

LayoutFunc = Callable[[Rect], Sequence[Rect]]


@dataclass(frozen=True)
class AppendLine:
    """Data event from a producer: add ``line`` to ``target``."""
    target: ListWidget = field(compare=False)
    line: str


LoopEvent = Union[Event, AppendLine]


class Producer(Protocol):
    """Background source of AppendLine events."""

    def start(self) -> None: ...


def find_list(widget: Widget) -> Optional[ListWidget]:
    """First ListWidget in ``widget``'s subtree, depth first."""
    if isinstance(widget, ListWidget):
        return widget
    if isinstance(widget, BorderedWidget):
        return find_list(widget.inner)
    if isinstance(widget, SplitWidget):
        return find_list(widget.left) or find_list(widget.right)
    return None


class Compositor:
    """
    Top-level widgets drawn in order onto one screen.

    Later widgets overdraw earlier ones where their rects intersect.
    Terminal input and producer data arrive on a single queue and are
    handled one at a time on the loop thread, with a full redraw before
    each. Widget state is only ever touched from that thread.
    """

    def __init__(
        self,
        screen: Screen,
        layout: Optional[LayoutFunc] = None,
        config: Optional[CompositorConfig] = None,
    ) -> None:
        self.screen = screen
        self.layout = layout
        self.config = config or CompositorConfig()
        self.rect = Rect()
        self.widgets: list[Widget] = []
        self.focused_widget_id = 0
        self.producers: list[Producer] = []
        self.events: queue.Queue[LoopEvent] = queue.Queue(maxsize=self.config.event_buffer)
        self.running = False
        self._pump: Optional[threading.Thread] = None

    def add(self, widget: Widget) -> Widget:
        """Append a top-level widget and return it."""
        self.widgets.append(widget)
        return widget

    def add_producer(self, producer: Producer) -> None:
        self.producers.append(producer)

    def post(self, event: LoopEvent) -> None:
        """Deliver an event to the loop. Safe to call from any thread."""
        self.events.put(event)

    def resize(self, root: Rect) -> None:
        """Store the root rect and resize every top-level widget."""
        self.rect = root
        if self.layout is None:
            rects: Sequence[Rect] = [root] * len(self.widgets)
        else:
            rects = self.layout(root)
            if len(rects) != len(self.widgets):
                raise ValueError(
                    f"layout returned {len(rects)} rects for {len(self.widgets)} widgets"
                )
        for widget, rect in zip(self.widgets, rects):
            widget.resize(rect)

    def render(self) -> None:
        for widget in self.widgets:
            widget.render(self.screen)

    def focus_target(self) -> Optional[ListWidget]:
        """The list that receives navigation, if any."""
        if not 0 <= self.focused_widget_id < len(self.widgets):
            return None
        return find_list(self.widgets[self.focused_widget_id])

    def handle_event(self, event: LoopEvent) -> None:
        if isinstance(event, AppendLine):
            event.target.append(event.line)
            event.target.last()
        elif isinstance(event, ResizeEvent):
            logger.debug("resize to %dx%d", event.width, event.height)
            self.resize(Rect.from_size(0, 0, event.width, event.height))
            self.screen.sync()
        elif isinstance(event, (KeyEvent, MouseEvent)):
            action = resolve(event)
            if action is not None:
                self.apply(action)

    def apply(self, action: Action) -> None:
        if action is Action.QUIT:
            logger.debug("quit requested")
            self.running = False
            return
        target = self.focus_target()
        if target is None:
            return
        if action is Action.DOWN:
            target.down()
        elif action is Action.UP:
            target.up()
        elif action is Action.FIRST:
            target.first()
        elif action is Action.LAST:
            target.last()

    def _pump_input(self) -> None:
        """Forward terminal events to the loop until the screen goes away."""
        while True:
            event = self.screen.poll_event()
            if event is None:
                return
            self.post(event)

    def start(self) -> None:
        """Size the tree and start the input pump and producers."""
        width, height = self.screen.size()
        self.resize(Rect.from_size(0, 0, width, height))
        self.screen.enable_mouse()

        self._pump = threading.Thread(target=self._pump_input, name="input-pump", daemon=True)
        self._pump.start()
        for producer in self.producers:
            producer.start()

    def run(self) -> None:
        """Main loop. Returns on the quit key, Ctrl-C or SIGINT."""
        self.running = True
        self.start()
        try:
            while self.running:
                self.screen.fill(' ')
                self.render()
                self.screen.show()
                self.handle_event(self.events.get())
        except KeyboardInterrupt:
            logger.debug("interrupted")
        finally:
            self.running = False
