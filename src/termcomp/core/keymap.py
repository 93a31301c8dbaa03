"""Key bindings for list navigation and quitting.

A binding maps keys, characters or mouse wheel buttons to an Action.
The compositor resolves every input event through ``resolve`` and
applies the resulting action to the focused list.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence

from termcomp.core.input import Event, Key, KeyEvent, MouseEvent


class Action(Enum):
    """What an input event asks the compositor to do."""
    DOWN = auto()
    UP = auto()
    FIRST = auto()
    LAST = auto()
    QUIT = auto()


@dataclass(frozen=True)
class Binding:
    """
    Definition of a binding.

    Attributes:
        action: Action triggered by this binding
        keys: Named keys or characters that trigger it
        buttons: Mouse buttons that trigger it (wheel only)
        label: Short label for help output
    """
    action: Action
    keys: tuple[str | Key, ...] = ()
    buttons: tuple[int, ...] = ()
    label: str = ""

    def matches(self, event: Event) -> bool:
        """Check if an event matches this binding."""
        if isinstance(event, MouseEvent):
            return event.pressed and event.button in self.buttons
        if not isinstance(event, KeyEvent):
            return False
        for key in self.keys:
            if isinstance(key, Key):
                if event.key == key:
                    return True
            elif event.char == key:
                return True
        return False

    @property
    def key_display(self) -> str:
        """Get display string for the keys."""
        return "/".join(k.name.lower() if isinstance(k, Key) else k for k in self.keys)


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(Action.DOWN, keys=('j', Key.DOWN), buttons=(MouseEvent.WHEEL_DOWN,), label="Down"),
    Binding(Action.UP, keys=('k', Key.UP), buttons=(MouseEvent.WHEEL_UP,), label="Up"),
    Binding(Action.FIRST, keys=('g', Key.HOME), label="First"),
    Binding(Action.LAST, keys=('G', Key.END), label="Last"),
    Binding(Action.QUIT, keys=('q', Key.CTRL_C), label="Quit"),
)


def resolve(event: Event, bindings: Sequence[Binding] = DEFAULT_BINDINGS) -> Optional[Action]:
    """Return the action bound to ``event``, or None."""
    for binding in bindings:
        if binding.matches(event):
            return binding.action
    return None
