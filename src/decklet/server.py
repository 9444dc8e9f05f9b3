"""HTTP/realtime endpoint — wires renderer, watcher and broadcaster together.

One FastAPI app on one port:

- ``GET /``               renders the selected presentation
- websocket ``/``         live connection receiving ``reload`` tokens
- ``/__decklet/stats``    event log summary (JSON)
- ``/reveal.js/*``        vendored viewer library
- ``/*``                  static assets (favicon, stylesheets)

All per-session state lives on a ``ServerContext``; the app itself holds
nothing else.
"""

from __future__ import annotations

import sys
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import anyio.to_thread
from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from decklet._errors import ContentReadError
from decklet.content.watcher import ContentWatcher
from decklet.observability import EventLog, PresentationRendered, RenderFailed, now_ns
from decklet.reactive.broadcaster import Broadcaster, LiveClient
from decklet.render import build_presentation

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from decklet.config import DeckConfig

STATS_ENDPOINT = "/__decklet/stats"
VIEWER_MOUNT = "/reveal.js"
RENDER_ERROR_BODY = "Error serving presentation"


@dataclass(slots=True)
class ServerContext:
    """Everything one running presentation session needs.

    Attributes:
        config: Resolved DeckConfig.
        content_path: Absolute path of the selected content file.
        log: Event history shared by the endpoint and the broadcaster.
        broadcaster: The live client set and reload fan-out.
        watcher: Watches ``content_path`` and drives the broadcaster.

    """

    config: DeckConfig
    content_path: Path
    log: EventLog = field(default_factory=EventLog)
    broadcaster: Broadcaster = field(init=False)
    watcher: ContentWatcher = field(init=False)

    def __post_init__(self) -> None:
        self.broadcaster = Broadcaster(self.log)
        self.watcher = ContentWatcher(
            self.content_path,
            self.broadcaster.broadcast_reload,
            debounce_ms=self.config.watch_debounce_ms,
        )

    @classmethod
    def for_selection(cls, config: DeckConfig, selection: str) -> ServerContext:
        """Build a context for a picker result relative to the content root."""
        return cls(config=config, content_path=config.content_path / selection)


def create_app(context: ServerContext) -> FastAPI:
    """Create the FastAPI app serving ``context``.

    The watcher starts with the app's lifespan, so it only runs while a
    server is actually up.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        context.watcher.start()
        if context.config.open_browser:
            import webbrowser

            await anyio.to_thread.run_sync(webbrowser.open, context.config.url)
        try:
            yield
        finally:
            await context.watcher.stop()

    app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.context = context

    @app.get("/", response_class=HTMLResponse)
    async def presentation() -> Response:
        t0 = time.perf_counter()
        try:
            html = await build_presentation(context.content_path, context.config)
        except ContentReadError as exc:
            print(f"  Error serving presentation: {exc}", file=sys.stderr)
            context.log.append(
                RenderFailed(path=str(context.content_path), error=str(exc), timestamp_ns=now_ns())
            )
            return PlainTextResponse(RENDER_ERROR_BODY, status_code=500)

        context.log.append(
            PresentationRendered(
                path=str(context.content_path),
                size=len(html),
                render_ms=(time.perf_counter() - t0) * 1000,
                timestamp_ns=now_ns(),
            )
        )
        return HTMLResponse(html)

    @app.websocket("/")
    async def live(websocket: WebSocket) -> None:
        # Registered before accept: the client counts as open only once
        # the handshake completes.
        client = LiveClient(websocket)
        context.broadcaster.register(client)
        try:
            await websocket.accept()
            # No client messages are defined; drain until the tab goes away.
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    break
        except WebSocketDisconnect:
            pass
        finally:
            context.broadcaster.unregister(client)

    @app.websocket("/{path:path}")
    async def stray(websocket: WebSocket) -> None:
        # Only "/" carries live reload; the asset mount below is HTTP-only.
        await websocket.close()

    @app.get(STATS_ENDPOINT)
    async def stats() -> JSONResponse:
        return JSONResponse(
            {
                "selected": str(context.content_path),
                "clients": context.broadcaster.client_count,
                "event_log": context.log.stats(),
            }
        )

    _mount_static_files(app, context.config)
    return app


def _mount_static_files(app: FastAPI, config: DeckConfig) -> None:
    """Mount the viewer library and the assets directory when present.

    Mounted after the routes above so ``/`` and the websocket keep
    priority over the catch-all asset mount.
    """
    if config.viewer_path.is_dir():
        app.mount(VIEWER_MOUNT, StaticFiles(directory=config.viewer_path), name="viewer")
    if config.assets_path.is_dir():
        app.mount("/", StaticFiles(directory=config.assets_path), name="assets")
