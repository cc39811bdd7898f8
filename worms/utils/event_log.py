"""Thread-safe log of game events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single game event for the API event feed."""

    turn: int
    category: str
    message: str
    worm_names: tuple[str, ...] = ()


class EventLog:
    """Bounded event log. Writers append; readers snapshot a slice."""

    __slots__ = ("_buffer", "_lock")

    def __init__(self, capacity: int = 1000) -> None:
        self._buffer: deque[GameEvent] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def append(self, event: GameEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def latest(self, count: int = 50) -> list[GameEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:]
