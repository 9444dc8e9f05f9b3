"""Decklet — a live-reloading dev server for slide-deck presentations.

Pick a content file, see it rendered inside the deck template, and have the
browser reload itself every time the file is saved.

Quick start::

    import decklet

    decklet.dev("my-talks/")

Building blocks (importable without starting a server)::

    from decklet import build_presentation, search_presentations

    matches = await search_presentations("intro", config)
    html = await build_presentation(config.content_path / matches[0], config)

"""

__version__ = "0.1.0"
__all__ = [
    "DeckConfig",
    "__version__",
    "build_presentation",
    "dev",
    "search_presentations",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import decklet`` fast; the web stack is only imported when a
    server is actually started.
    """
    if name == "DeckConfig":
        from decklet.config import DeckConfig

        return DeckConfig

    if name == "dev":
        from decklet.app import dev

        return dev

    if name == "build_presentation":
        from decklet.render import build_presentation

        return build_presentation

    if name == "search_presentations":
        from decklet.content.locator import search_presentations

        return search_presentations

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
