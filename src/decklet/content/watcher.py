"""File watcher — triggers a reload when the presented file is modified.

Watches exactly one content file for the lifetime of the server.  Only
"modified" events are forwarded; additions, deletions and renames are
ignored.  Every modified event reported by watchfiles is forwarded on its
own, without any coalescing on top of the backend's batching window.
"""

from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from watchfiles import Change, awatch

if TYPE_CHECKING:
    from collections.abc import Iterable

    from decklet._types import ChangeCallback


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """A file change reported by the watcher.

    Attributes:
        path: Absolute path to the changed file.
        kind: Type of filesystem change.

    """

    path: Path
    kind: Literal["created", "modified", "deleted"]


# Mapping from watchfiles Change enum to our kind literals.
_CHANGE_KIND_MAP: dict[Change, Literal["created", "modified", "deleted"]] = {
    Change.added: "created",
    Change.modified: "modified",
    Change.deleted: "deleted",
}


def to_events(raw_changes: Iterable[tuple[Change, str]]) -> list[ChangeEvent]:
    """Convert a watchfiles batch into ChangeEvents, preserving order."""
    return [
        ChangeEvent(path=Path(path_str), kind=_CHANGE_KIND_MAP[change])
        for change, path_str in raw_changes
    ]


class ContentWatcher:
    """Watches one content file and awaits ``notify`` on each modification.

    Runs watchfiles' ``awatch`` inside an asyncio task on the server's
    event loop.  A failing ``notify`` call is reported on stderr and the
    watch continues.

    Args:
        path: The content file to watch.
        notify: Coroutine function called with the file path per event.
        debounce_ms: watchfiles batching window in milliseconds.

    """

    def __init__(self, path: Path, notify: ChangeCallback, *, debounce_ms: int = 50) -> None:
        self._path = path
        self._notify = notify
        self._debounce_ms = debounce_ms
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task[None] | None = None

    @property
    def path(self) -> Path:
        """The watched file."""
        return self._path

    @property
    def is_running(self) -> bool:
        """Whether the watch task is active."""
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start watching in a task on the running event loop."""
        if self.is_running:
            return
        self._stop_event.clear()
        self._task = asyncio.create_task(self.run(), name="decklet-watcher")
        self._task.add_done_callback(_report_failure)

    async def stop(self) -> None:
        """Stop the watch task and wait for it to finish.

        A task that already failed was reported when it ended and does not
        raise again here.
        """
        self._stop_event.set()
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            await asyncio.wait([task])

    def accepts(self, change: Change, path: str) -> bool:
        """watchfiles filter: only events for the watched file pass."""
        return Path(path) == self._path

    async def run(self) -> None:
        """Consume watchfiles batches until stopped.

        The parent directory is watched rather than the file itself, so the
        watch survives editors that save by renaming a new file into place.
        """
        async for raw_changes in awatch(
            self._path.parent,
            watch_filter=self.accepts,
            stop_event=self._stop_event,
            debounce=self._debounce_ms,
            step=10,
        ):
            await self.dispatch(to_events(raw_changes))

    async def dispatch(self, events: Iterable[ChangeEvent]) -> int:
        """Forward every modified event to ``notify``.

        Returns:
            Number of notifications issued.

        """
        count = 0
        for event in events:
            if event.kind != "modified":
                continue
            count += 1
            try:
                await self._notify(event.path)
            except Exception as exc:
                print(f"  Reload error: {exc}", file=sys.stderr)
        return count


def _report_failure(task: asyncio.Task[None]) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        print(f"  Watcher stopped: {exc}", file=sys.stderr)
