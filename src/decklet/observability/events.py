"""Event model for the dev server's in-memory history.

Every event is a frozen dataclass carrying a ``timestamp_ns`` taken from
the monotonic clock, so events can be shared freely between the event loop
and worker threads.
"""

import time
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Rendering events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PresentationRendered:
    """The presentation was rendered for a request.

    Attributes:
        path: Content file that was rendered.
        size: Length of the rendered document in characters.
        render_ms: Time spent reading and substituting, in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    size: int
    render_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RenderFailed:
    """A request could not be served because a file was unreadable."""

    path: str
    error: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Live connection events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ClientConnected:
    """A browser tab opened a live connection."""

    client_id: str
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ClientDisconnected:
    """A live connection went away."""

    client_id: str
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ReloadBroadcast:
    """A reload token was fanned out after a content change.

    Attributes:
        trigger_path: File whose modification caused the reload.
        clients_notified: Connections that received the token.
        clients_skipped: Registered connections that were not open.
        failures: Open connections whose send raised.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    trigger_path: str
    clients_notified: int
    clients_skipped: int
    failures: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class SendFailed:
    """Delivering the reload token to one connection failed."""

    client_id: str
    error: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type StackEvent = (
    PresentationRendered
    | RenderFailed
    | ClientConnected
    | ClientDisconnected
    | ReloadBroadcast
    | SendFailed
)


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
