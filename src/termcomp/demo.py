"""Demo screen: bordered texts, a live log list and a split pane."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from termcomp.compositor import Compositor
from termcomp.config import CompositorConfig
from termcomp.core.layout import demo_layout
from termcomp.core.screen import Screen, TerminalScreen
from termcomp.producers import LogProducer
from termcomp.widgets import BorderedWidget, ListWidget, SplitWidget, TextWidget

ALPHABET = "abcdefghiklmnopqrstuvwxyzw"
SYMBOLS = (
    "!@#$_+)+_)+_+_((*()&(*&(*(*()*()_)#%$%$$%^$^%$$##@#######%$_%^&*()_+{}:'>?()*()#&(!&(*&!!$&*<?"
)
INITIAL_LINES = [
    "00000000", "111111111", "222222222", "333333333333333", "4444", "55555",
    "666666666", "777777777777", "888888888888", "999999999", "aaaa", "bbbbbbb",
    "cccccc", "dddddd",
]


@dataclass
class Demo:
    """The assembled demo, with handles to the parts tests poke at."""
    compositor: Compositor
    log: ListWidget
    producer: LogProducer


def build_demo(screen: Screen, config: Optional[CompositorConfig] = None) -> Demo:
    """Create the widget tree, layout and log producer on ``screen``."""
    config = config or CompositorConfig()
    compositor = Compositor(screen, layout=demo_layout, config=config)

    log = ListWidget(INITIAL_LINES, selected=2)
    compositor.add(BorderedWidget(log))
    compositor.add(BorderedWidget(TextWidget(ALPHABET)))
    compositor.add(BorderedWidget(TextWidget(SYMBOLS), title="title"))
    compositor.add(SplitWidget(TextWidget("LEFT" * 32), TextWidget("RIGHT" * 20), ratio=25))
    compositor.focused_widget_id = 0

    producer = LogProducer(log, compositor.post, interval=config.producer_interval)
    compositor.add_producer(producer)
    return Demo(compositor=compositor, log=log, producer=producer)


def run_demo(config: Optional[CompositorConfig] = None, screen: Optional[Screen] = None) -> None:
    """Run the demo until quit, restoring the terminal on every exit path."""
    screen = screen or TerminalScreen()
    with screen.session():
        demo = build_demo(screen, config)
        demo.compositor.run()
