"""Input events, button-state helpers and a bounded event queue."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MAX_EVENTS = 64
BUTTON_STATE_MASK_VALUE = 0x7F
BUTTON_STATE_MASK_TRANSITION = 0x80
BUTTON_STATE_BIT_TRANSITION = 7


class EventType(enum.IntEnum):
    """Kinds of event delivered through the queue."""

    KEY = 0
    MOUSE = 1
    VIDEO_RESOLUTION_CHANGE = 2


@dataclass(frozen=True)
class Event:
    """A single input or video event."""

    type: EventType
    button_state: int = 0
    code: int = 0
    movement: int = 0


@dataclass(frozen=True)
class ButtonMapping:
    """Associates a logical button with an event code of a given type."""

    button_code: int
    event_code: int
    event_type: EventType


class EventQueueFullError(Exception):
    """Raised when an event is added to a queue that is already full."""


def is_button_down(button_state: int) -> bool:
    """True when the value bits of a button state are set."""
    return bool(button_state & BUTTON_STATE_MASK_VALUE)


class EventQueue:
    """Fixed-capacity queue read front to back, emptied once fully read."""

    def __init__(self, capacity: int = MAX_EVENTS) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._events: list[Event] = []
        self._position = 0

    def add(self, event: Event) -> None:
        """Append an event; EventQueueFullError if the queue holds capacity events."""
        if len(self._events) >= self.capacity:
            raise EventQueueFullError(
                f"cannot add more events, reached maximum of {self.capacity}"
            )
        self._events.append(event)

    def next_event(self) -> Event | None:
        """Return the next unread event, or None after resetting an exhausted queue."""
        if self._position < len(self._events):
            event = self._events[self._position]
            self._position += 1
            return event
        self._events.clear()
        self._position = 0
        return None

    def __len__(self) -> int:
        return len(self._events) - self._position