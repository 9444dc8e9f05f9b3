"""Tests for decklet.config_loader — file config merged with overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from decklet._errors import ConfigError
from decklet.config_loader import find_config_file, load_config


class TestLoadConfig:
    """Config file discovery and merging."""

    def test_no_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config.root == tmp_path
        assert config.port == 8080

    def test_yaml_section(self, tmp_path: Path) -> None:
        (tmp_path / "decklet.yaml").write_text("decklet:\n  port: 9000\n  examples: true\n")
        config = load_config(tmp_path)
        assert config.port == 9000
        assert config.examples is True

    def test_yaml_top_level_keys(self, tmp_path: Path) -> None:
        (tmp_path / "decklet.yml").write_text("host: 0.0.0.0\nopen_browser: false\n")
        config = load_config(tmp_path)
        assert config.host == "0.0.0.0"
        assert config.open_browser is False

    def test_toml(self, tmp_path: Path) -> None:
        (tmp_path / "decklet.toml").write_text('[decklet]\ncontent_dir = "decks"\n')
        assert load_config(tmp_path).content_dir == "decks"

    def test_overrides_win(self, tmp_path: Path) -> None:
        (tmp_path / "decklet.yaml").write_text("port: 9000\n")
        assert load_config(tmp_path, port=7000).port == 7000

    def test_none_overrides_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "decklet.yaml").write_text("port: 9000\n")
        assert load_config(tmp_path, port=None, host=None).port == 9000

    def test_empty_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "decklet.yaml").write_text("")
        assert load_config(tmp_path).port == 8080

    def test_yaml_preferred_over_toml(self, tmp_path: Path) -> None:
        (tmp_path / "decklet.yaml").write_text("port: 1111\n")
        (tmp_path / "decklet.toml").write_text("port = 2222\n")
        assert find_config_file(tmp_path) == tmp_path / "decklet.yaml"
        assert load_config(tmp_path).port == 1111


class TestLoadConfigErrors:
    """Bad config is a startup error."""

    def test_unknown_key(self, tmp_path: Path) -> None:
        (tmp_path / "decklet.yaml").write_text("colour: blue\n")
        with pytest.raises(ConfigError, match="colour"):
            load_config(tmp_path)

    def test_root_key_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "decklet.yaml").write_text("root: /elsewhere\n")
        with pytest.raises(ConfigError, match="root"):
            load_config(tmp_path)

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "decklet.yaml").write_text("port: [unclosed\n")
        with pytest.raises(ConfigError, match="decklet.yaml"):
            load_config(tmp_path)

    def test_malformed_toml(self, tmp_path: Path) -> None:
        (tmp_path / "decklet.toml").write_text("port = \n")
        with pytest.raises(ConfigError, match="decklet.toml"):
            load_config(tmp_path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        (tmp_path / "decklet.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(tmp_path)

    @pytest.mark.parametrize("port", ["8080", 0, 70000, True])
    def test_invalid_port(self, tmp_path: Path, port: object) -> None:
        with pytest.raises(ConfigError, match="port"):
            load_config(tmp_path, port=port)
