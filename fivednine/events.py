"""Selector events and the queue that carries them."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass


class SelectorInputEventType(enum.Enum):
    NONE = 0
    NEXT_SELECTION = 1
    PREVIOUS_SELECTION = 2
    CONFIRM_CURRENT = 3


class SelectorEventType(enum.Enum):
    NONE = 0
    INPUT = 1


@dataclass(frozen=True)
class SelectorEvent:
    """An event for the selector; input events carry their input kind."""

    event_type: SelectorEventType
    input_event_type: SelectorInputEventType | None = None


class EventPump:
    """First-in, first-out queue of selector events."""

    def __init__(self) -> None:
        self._queue: deque[SelectorEvent] = deque()

    def post_event(self, event: SelectorEvent) -> None:
        self._queue.append(event)

    def get_next_event(self) -> SelectorEvent | None:
        """Remove and return the oldest event, or None when empty."""
        return self._queue.popleft() if self._queue else None

    def peek_next_event(self) -> SelectorEvent | None:
        """Return the oldest event without removing it, or None when empty."""
        return self._queue[0] if self._queue else None

    def __len__(self) -> int:
        return len(self._queue)