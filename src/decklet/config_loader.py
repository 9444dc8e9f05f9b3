"""Load DeckConfig from decklet.yaml / decklet.toml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from dataclasses import fields
from pathlib import Path

import yaml

from decklet._errors import ConfigError
from decklet.config import DeckConfig

_CONFIG_NAMES = ("decklet.yaml", "decklet.yml", "decklet.toml")
_KNOWN_KEYS = frozenset(f.name for f in fields(DeckConfig)) - {"root"}


def load_config(root: Path, **overrides: object) -> DeckConfig:
    """Load DeckConfig from root, optionally merging a decklet config file.

    Overrides whose value is None are ignored so that unset CLI options do
    not mask file values.

    Raises:
        ConfigError: If the config file is malformed or names unknown keys.

    """
    file_config = _read_deck_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}

    unknown = sorted(set(merged) - _KNOWN_KEYS)
    if unknown:
        msg = f"Unknown config key(s): {', '.join(unknown)}"
        raise ConfigError(msg)

    port = merged.get("port", 8080)
    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
        msg = f"Invalid port: {port!r}"
        raise ConfigError(msg)

    return DeckConfig(root=root, **merged)


def find_config_file(root: Path) -> Path | None:
    """Return the first decklet config file in root, or None."""
    for name in _CONFIG_NAMES:
        path = root / name
        if path.is_file():
            return path
    return None


def _read_deck_config(root: Path) -> dict[str, object]:
    """Read decklet config from yaml/toml if present. Returns empty dict otherwise."""
    path = find_config_file(root)
    if path is None:
        return {}
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix == ".toml":
            data = tomllib.loads(text)
        else:
            data = yaml.safe_load(text) or {}
    except (OSError, yaml.YAMLError, tomllib.TOMLDecodeError) as exc:
        msg = f"Failed to read {path.name}: {exc}"
        raise ConfigError(msg) from exc

    if not isinstance(data, dict):
        msg = f"{path.name} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    return _flatten_deck_section(data)


def _flatten_deck_section(data: dict[str, object]) -> dict[str, object]:
    """Lift ``decklet.*`` keys to the top level; top-level keys win."""
    result: dict[str, object] = {}
    section = data.get("decklet")
    if isinstance(section, dict):
        result.update(section)
    for key, value in data.items():
        if key != "decklet":
            result[key] = value
    return result
