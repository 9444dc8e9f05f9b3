"""Observability — in-memory history of what the dev server did.

Records renders, live connections and reload broadcasts as frozen events
in a bounded ``EventLog``.  The running server exposes a summary at
``/__decklet/stats``.

Quick Start:
    >>> from decklet.observability import EventLog, ReloadBroadcast
    >>> from decklet.reactive.broadcaster import Broadcaster
    >>> log = EventLog()
    >>> broadcaster = Broadcaster(log)
    >>> log.query(event_type=ReloadBroadcast)
    []

"""

from decklet.observability.events import (
    ClientConnected,
    ClientDisconnected,
    PresentationRendered,
    ReloadBroadcast,
    RenderFailed,
    SendFailed,
    StackEvent,
    now_ns,
)
from decklet.observability.log import EventLog

__all__ = [
    "ClientConnected",
    "ClientDisconnected",
    "EventLog",
    "PresentationRendered",
    "ReloadBroadcast",
    "RenderFailed",
    "SendFailed",
    "StackEvent",
    "now_ns",
]
