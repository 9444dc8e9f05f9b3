"""Event log — bounded, queryable history of server events.

Thread Safety:
    All methods hold a ``threading.Lock``.  The server appends from the
    event loop while the directory walk and tests may read from other
    threads.

"""

import threading
from collections import Counter, deque
from typing import Any

from decklet.observability.events import StackEvent

# Attributes consulted, in order, when filtering events by path.
_PATH_FIELDS = ("path", "trigger_path")


class EventLog:
    """Ring buffer of ``StackEvent`` objects with simple queries.

    When the buffer is full the oldest events are discarded.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock", "_max_events")

    def __init__(self, max_events: int = 1_000) -> None:
        self._max_events = max_events
        self._events: deque[StackEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: StackEvent) -> None:
        """Record an event."""
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        since_ns: int = 0,
        path: str | None = None,
        limit: int = 100,
    ) -> list[StackEvent]:
        """Return matching events, most recent first.

        Args:
            event_type: Only events of this type.
            since_ns: Only events recorded at or after this timestamp.
            path: Only events whose path contains this substring.
            limit: Maximum number of events to return.

        """
        with self._lock:
            snapshot = list(self._events)

        results: list[StackEvent] = []
        for event in reversed(snapshot):
            if len(results) >= limit:
                break
            if event_type is not None and not isinstance(event, event_type):
                continue
            if since_ns and event.timestamp_ns < since_ns:
                continue
            if path is not None and path not in _event_path(event):
                continue
            results.append(event)
        return results

    def recent(self, n: int = 20) -> list[StackEvent]:
        """Return the N most recent events, oldest first."""
        with self._lock:
            items = list(self._events)
        return items[-n:] if n > 0 else []

    def clear(self) -> int:
        """Drop all events and return how many there were."""
        with self._lock:
            count = len(self._events)
            self._events.clear()
            return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Summary counts by event type."""
        with self._lock:
            events = list(self._events)
        return {
            "total": len(events),
            "max_events": self._max_events,
            "by_type": dict(Counter(type(event).__name__ for event in events)),
        }


def _event_path(event: StackEvent) -> str:
    for name in _PATH_FIELDS:
        value = getattr(event, name, None)
        if value:
            return str(value)
    return ""
