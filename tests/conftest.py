"""Shared test fixtures for decklet."""

from __future__ import annotations

from pathlib import Path

import pytest

from decklet.config import DeckConfig

TEMPLATE = (
    "<!DOCTYPE html>\n<html>\n<head><title>{{TITLE}}</title></head>\n"
    "<body>\n<!-- CONTENT -->\n"
    "<script>new WebSocket('ws://' + location.hostname + ':{{PORT}}/');</script>\n"
    "</body>\n</html>\n"
)


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a minimal presentation project.

    Layout::

        src/index.html                  template
        src/talk.html                   <p>Hi</p>
        src/talks/intro-to-rust.html
        src/examples/demo.html
        src/notes.txt

    """
    src = tmp_path / "src"
    src.mkdir()
    (src / "index.html").write_text(TEMPLATE)
    (src / "talk.html").write_text("<p>Hi</p>")
    (src / "notes.txt").write_text("not a deck")

    talks = src / "talks"
    talks.mkdir()
    (talks / "intro-to-rust.html").write_text("<section>Rust</section>")

    examples = src / "examples"
    examples.mkdir()
    (examples / "demo.html").write_text("<section>Demo</section>")

    return tmp_path


@pytest.fixture
def config(tmp_project: Path) -> DeckConfig:
    """A DeckConfig rooted at the temp project, browser disabled."""
    return DeckConfig(root=tmp_project, open_browser=False)
