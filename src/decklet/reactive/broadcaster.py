"""Reload broadcaster — pushes the reload token to connected browsers.

Keeps the set of live websocket connections.  When the watched file
changes, every connection that is still open receives the ``reload``
token once.  Connections in any other state are skipped, and a failed
send is isolated to the connection it happened on.
"""

from __future__ import annotations

import asyncio
import sys
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from starlette.websockets import WebSocketState

from decklet._errors import ConnectionSendError
from decklet.observability import (
    ClientConnected,
    ClientDisconnected,
    ReloadBroadcast,
    SendFailed,
    now_ns,
)

if TYPE_CHECKING:
    from decklet.observability import EventLog, StackEvent

RELOAD_TOKEN = "reload"


class LiveSocket(Protocol):
    """The part of a websocket the broadcaster relies on."""

    client_state: WebSocketState
    application_state: WebSocketState

    async def send_text(self, data: str) -> None: ...


@dataclass(frozen=True, slots=True)
class LiveClient:
    """A connected browser tab.

    Attributes:
        websocket: The underlying websocket connection.
        client_id: Unique identifier for this connection.

    """

    websocket: LiveSocket = field(compare=False, hash=False)
    client_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def is_open(self) -> bool:
        """Whether both sides of the connection are established."""
        return (
            self.websocket.client_state == WebSocketState.CONNECTED
            and self.websocket.application_state == WebSocketState.CONNECTED
        )


class Broadcaster:
    """Registry of live clients with reload fan-out.

    All mutation happens from connection lifecycle coroutines on the
    server's event loop, and broadcasts iterate over a snapshot, so the
    client set needs no lock.

    Args:
        log: Optional event log receiving connection and broadcast events.

    """

    def __init__(self, log: EventLog | None = None) -> None:
        self._clients: set[LiveClient] = set()
        self._log = log

    @property
    def client_count(self) -> int:
        """Number of registered connections, open or not."""
        return len(self._clients)

    @property
    def clients(self) -> frozenset[LiveClient]:
        """Snapshot of the registered connections."""
        return frozenset(self._clients)

    def register(self, client: LiveClient) -> None:
        """Add a connection to the live set."""
        self._clients.add(client)
        self._record(ClientConnected(client_id=client.client_id, timestamp_ns=now_ns()))

    def unregister(self, client: LiveClient) -> None:
        """Remove a connection. Unknown connections are ignored."""
        if client in self._clients:
            self._clients.discard(client)
            self._record(
                ClientDisconnected(client_id=client.client_id, timestamp_ns=now_ns())
            )

    async def broadcast_reload(self, trigger: object = "") -> int:
        """Send the reload token to every open connection.

        Sends are issued concurrently; a failure on one connection is
        reported and does not affect the others.

        Args:
            trigger: What caused the reload (usually the changed file path).

        Returns:
            Number of connections that received the token.

        """
        snapshot = tuple(self._clients)
        targets = [client for client in snapshot if client.is_open]
        results = await asyncio.gather(
            *(self._deliver(client) for client in targets), return_exceptions=True
        )

        notified = 0
        for client, result in zip(targets, results, strict=True):
            if isinstance(result, ConnectionSendError):
                self._report_failure(client, result)
            elif isinstance(result, BaseException):
                raise result
            else:
                notified += 1
        self._record(
            ReloadBroadcast(
                trigger_path=str(trigger),
                clients_notified=notified,
                clients_skipped=len(snapshot) - len(targets),
                failures=len(targets) - notified,
                timestamp_ns=now_ns(),
            )
        )
        return notified

    async def _deliver(self, client: LiveClient) -> None:
        """Send the reload token to one connection.

        Raises:
            ConnectionSendError: If the send fails for any reason.

        """
        try:
            await client.websocket.send_text(RELOAD_TOKEN)
        except Exception as exc:
            msg = f"client {client.client_id}: {exc}"
            raise ConnectionSendError(msg) from exc

    def _report_failure(self, client: LiveClient, error: ConnectionSendError) -> None:
        print(f"  Reload not delivered to {error}", file=sys.stderr)
        self._record(
            SendFailed(client_id=client.client_id, error=str(error), timestamp_ns=now_ns())
        )

    def _record(self, event: StackEvent) -> None:
        if self._log is not None:
            self._log.append(event)
