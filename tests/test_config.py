"""Tests for decklet.config."""

from pathlib import Path

import pytest

from decklet.config import DeckConfig


class TestDeckConfig:
    """DeckConfig — frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        config = DeckConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8080
        assert config.content_dir == "src"
        assert config.template_name == "index.html"
        assert config.examples_dir == "examples"
        assert config.extension == ".html"
        assert config.examples is False
        assert config.open_browser is True

    def test_frozen(self) -> None:
        config = DeckConfig()
        with pytest.raises(AttributeError):
            config.port = 9000  # type: ignore[misc]

    def test_paths_resolve_from_root(self, tmp_path: Path) -> None:
        config = DeckConfig(root=tmp_path)
        assert config.content_path == tmp_path / "src"
        assert config.template_path == tmp_path / "src" / "index.html"
        assert config.assets_path == tmp_path / "assets"
        assert config.viewer_path == tmp_path / "node_modules" / "reveal.js"

    def test_custom_dirs(self, tmp_path: Path) -> None:
        config = DeckConfig(root=tmp_path, content_dir="decks", template_name="shell.html")
        assert config.template_path == tmp_path / "decks" / "shell.html"

    def test_url_uses_localhost_for_loopback(self) -> None:
        assert DeckConfig().url == "http://localhost:8080/"
        assert DeckConfig(host="0.0.0.0", port=9000).url == "http://localhost:9000/"

    def test_url_keeps_explicit_host(self) -> None:
        assert DeckConfig(host="deck.local").url == "http://deck.local:8080/"

    def test_relative_root_resolved_to_absolute(self) -> None:
        config = DeckConfig(root=Path("talks"))
        assert config.root.is_absolute()

    def test_absolute_root_unchanged(self, tmp_path: Path) -> None:
        config = DeckConfig(root=tmp_path)
        assert config.root == tmp_path
