"""Shared type definitions for decklet."""

from collections.abc import Awaitable, Callable
from pathlib import Path

# Content file path relative to the content root, POSIX separators
type ContentPath = str

# Callback invoked by the watcher for every modification of the watched file
type ChangeCallback = Callable[[Path], Awaitable[None]]

# Candidate source consumed by the interactive picker
type SearchSource = Callable[[str], list[ContentPath]]
