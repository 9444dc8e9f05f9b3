"""Decklet application — picker, renderer, watcher and server in one session.

``dev()`` walks the server through its states: configuration is loaded,
the user picks a presentation, then the listener runs until the process
exits.
"""

import time
from pathlib import Path

from decklet.config import DeckConfig
from decklet.config_loader import load_config


def select_presentation(config: DeckConfig) -> str:
    """Run the interactive picker over the content root.

    The prompt stays on the main thread; each query runs its own short
    event loop for the directory search.
    """
    import anyio

    from decklet.content.locator import search_presentations
    from decklet.picker import prompt_for_presentation

    def source(query: str) -> list[str]:
        return anyio.run(search_presentations, query, config)

    return prompt_for_presentation(source)


def dev(root: str | Path = ".", **kwargs: object) -> None:
    """Pick a presentation and serve it with live reload.

    Args:
        root: Project root containing the content root.
        **kwargs: Override DeckConfig fields.

    Raises:
        ConfigError: If the configuration is invalid.
        TemplateReadError: If the template document cannot be read.
        FileSystemError: If the content root cannot be searched.
        SelectionCancelled: If the picker is aborted.

    """
    import uvicorn

    from decklet.banner import print_banner
    from decklet.render import check_template
    from decklet.server import ServerContext, create_app

    config = load_config(Path(root), **kwargs)
    t0 = time.perf_counter()

    # Without a template no request can ever succeed.
    check_template(config)

    selection = select_presentation(config)
    context = ServerContext.for_selection(config, selection)
    app = create_app(context)

    load_ms = (time.perf_counter() - t0) * 1000
    print_banner(config, context.content_path, load_ms=load_ms)

    uvicorn.run(app, host=config.host, port=config.port, log_level="warning")
