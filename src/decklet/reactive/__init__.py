"""Reactive layer — from a saved file to a reloaded browser tab."""

from decklet.reactive.broadcaster import RELOAD_TOKEN, Broadcaster, LiveClient

__all__ = [
    "RELOAD_TOKEN",
    "Broadcaster",
    "LiveClient",
]
