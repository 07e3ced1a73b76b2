"""Window event types, event masks and per-window hook tables."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from functools import reduce
from operator import or_
from typing import Any


class EventType(IntEnum):
    """X11 event type numbers."""

    KEY_PRESS = 2
    KEY_RELEASE = 3
    BUTTON_PRESS = 4
    BUTTON_RELEASE = 5
    MOTION_NOTIFY = 6
    ENTER_NOTIFY = 7
    LEAVE_NOTIFY = 8
    FOCUS_IN = 9
    FOCUS_OUT = 10
    KEYMAP_NOTIFY = 11
    EXPOSE = 12
    GRAPHICS_EXPOSE = 13
    NO_EXPOSE = 14
    VISIBILITY_NOTIFY = 15
    CREATE_NOTIFY = 16
    DESTROY_NOTIFY = 17
    UNMAP_NOTIFY = 18
    MAP_NOTIFY = 19
    MAP_REQUEST = 20
    REPARENT_NOTIFY = 21
    CONFIGURE_NOTIFY = 22
    CONFIGURE_REQUEST = 23
    GRAVITY_NOTIFY = 24
    RESIZE_REQUEST = 25
    CIRCULATE_NOTIFY = 26
    CIRCULATE_REQUEST = 27
    PROPERTY_NOTIFY = 28
    SELECTION_CLEAR = 29
    SELECTION_REQUEST = 30
    SELECTION_NOTIFY = 31
    COLORMAP_NOTIFY = 32
    CLIENT_MESSAGE = 33
    MAPPING_NOTIFY = 34
    GENERIC_EVENT = 35


MAX_EVENT = 36


class EventMask(IntFlag):
    """X11 event selection masks."""

    NONE = 0
    KEY_PRESS = 1 << 0
    KEY_RELEASE = 1 << 1
    BUTTON_PRESS = 1 << 2
    BUTTON_RELEASE = 1 << 3
    ENTER_WINDOW = 1 << 4
    LEAVE_WINDOW = 1 << 5
    POINTER_MOTION = 1 << 6
    POINTER_MOTION_HINT = 1 << 7
    BUTTON1_MOTION = 1 << 8
    BUTTON2_MOTION = 1 << 9
    BUTTON3_MOTION = 1 << 10
    BUTTON4_MOTION = 1 << 11
    BUTTON5_MOTION = 1 << 12
    BUTTON_MOTION = 1 << 13
    KEYMAP_STATE = 1 << 14
    EXPOSURE = 1 << 15
    VISIBILITY_CHANGE = 1 << 16
    STRUCTURE_NOTIFY = 1 << 17
    RESIZE_REDIRECT = 1 << 18
    SUBSTRUCTURE_NOTIFY = 1 << 19
    SUBSTRUCTURE_REDIRECT = 1 << 20
    FOCUS_CHANGE = 1 << 21
    PROPERTY_CHANGE = 1 << 22
    COLORMAP_CHANGE = 1 << 23
    OWNER_GRAB_BUTTON = 1 << 24


@dataclass(frozen=True)
class Event:
    """A window event: its type plus whichever details that type carries."""

    type: int
    keysym: int = 0
    button: int = 0
    x: int = 0
    y: int = 0
    count: int = 0


@dataclass(frozen=True)
class Hook:
    """A callback registered for one event type."""

    mask: int
    func: Callable[..., Any]
    param: Any = None


_UNDEFINED = frozenset({0, 1})
_KEYS = frozenset({EventType.KEY_PRESS, EventType.KEY_RELEASE})
_BUTTONS = frozenset({EventType.BUTTON_PRESS, EventType.BUTTON_RELEASE})


def _check_event(event: int) -> None:
    if not 0 <= event < MAX_EVENT:
        raise ValueError(f"event type must be in 0..{MAX_EVENT - 1}, got {event}")


class HookTable:
    """One hook slot per event type, as kept by each window."""

    def __init__(self) -> None:
        self._hooks: list[Hook | None] = [None] * MAX_EVENT

    def set(
        self, event: int, mask: int, func: Callable[..., Any], param: Any = None
    ) -> None:
        """Register ``func`` for ``event``, replacing any earlier hook."""
        _check_event(event)
        self._hooks[event] = Hook(int(mask), func, param)

    def get(self, event: int) -> Hook | None:
        """Return the hook registered for ``event``, if any."""
        _check_event(event)
        return self._hooks[event]

    def event_mask(self) -> int:
        """The union of the masks of all registered hooks."""
        return reduce(or_, (hook.mask for hook in self._hooks if hook), 0)

    def dispatch(self, event: Event) -> Any:
        """Call the hook for ``event`` with that event type's arguments.

        Key hooks get ``(keysym, param)``, button hooks
        ``(button, x, y, param)``, motion hooks ``(x, y, param)`` and all
        others ``(param)``. Expose hooks run only on the last expose of a
        series (``count == 0``). Returns the hook's result, or None when no
        hook ran.
        """
        if not 0 <= event.type < MAX_EVENT:
            return None
        hook = self._hooks[event.type]
        if hook is None or event.type in _UNDEFINED:
            return None
        if event.type in _KEYS:
            return hook.func(event.keysym, hook.param)
        if event.type in _BUTTONS:
            return hook.func(event.button, event.x, event.y, hook.param)
        if event.type == EventType.MOTION_NOTIFY:
            return hook.func(event.x, event.y, hook.param)
        if event.type == EventType.EXPOSE:
            return hook.func(hook.param) if event.count == 0 else None
        return hook.func(hook.param)