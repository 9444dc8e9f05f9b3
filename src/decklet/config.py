"""Decklet configuration.

DeckConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DeckConfig:
    """Configuration for a Decklet session.

    Attributes:
        root: Project root (contains the content root, assets, node_modules).
              Always resolved to an absolute path on construction.
        content_dir: Content root, relative to ``root``.
        template_name: Template document, directly under the content root.
        examples_dir: Reserved first path segment holding example decks.
        extension: Extension of presentation content files.
        assets_dir: Static assets (favicon, stylesheets) served at ``/``.
        viewer_dir: Vendored viewer library served at ``/reveal.js``.
        host: Bind address.
        port: Bind port. Also substituted into the template's ``{{PORT}}``.
        examples: Search only the examples subtree instead of excluding it.
        open_browser: Open a browser tab once the server is running.
        watch_debounce_ms: Batching window handed to watchfiles.

    """

    root: Path = field(default_factory=Path.cwd)
    content_dir: str = "src"
    template_name: str = "index.html"
    examples_dir: str = "examples"
    extension: str = ".html"
    assets_dir: str = "assets"
    viewer_dir: str = "node_modules/reveal.js"
    host: str = "127.0.0.1"
    port: int = 8080
    examples: bool = False
    open_browser: bool = True
    watch_debounce_ms: int = 50

    def __post_init__(self) -> None:
        # watchfiles reports absolute paths; keep root comparable with them.
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())

    @property
    def content_path(self) -> Path:
        """Absolute path to the content root."""
        return self.root / self.content_dir

    @property
    def template_path(self) -> Path:
        """Absolute path to the template document."""
        return self.content_path / self.template_name

    @property
    def assets_path(self) -> Path:
        """Absolute path to the static assets directory."""
        return self.root / self.assets_dir

    @property
    def viewer_path(self) -> Path:
        """Absolute path to the vendored viewer library."""
        return self.root / self.viewer_dir

    @property
    def url(self) -> str:
        """Browser URL of the running presentation."""
        host = "localhost" if self.host in {"127.0.0.1", "0.0.0.0"} else self.host
        return f"http://{host}:{self.port}/"
