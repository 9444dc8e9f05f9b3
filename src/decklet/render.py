"""Presentation renderer — content file + template -> full HTML document.

The template and the content file are read fresh on every call, so edits
to either show up on the next request without restarting the server.
Nothing is cached and no state is shared between calls.

Template contract: the template places each of these tokens once.

- ``{{TITLE}}``         -> title derived from the content file name
- ``{{PORT}}``          -> server port (the page's websocket connects to it)
- ``<!-- CONTENT -->``  -> raw text of the content file

Only the first occurrence of each token is replaced; later occurrences are
left as literal text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import anyio

from decklet._errors import ContentFileReadError, TemplateReadError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from decklet.config import DeckConfig

TITLE_TOKEN = "{{TITLE}}"
PORT_TOKEN = "{{PORT}}"
CONTENT_MARKER = "<!-- CONTENT -->"

_WORD_SEPARATORS = re.compile(r"[-_]")


@dataclass(frozen=True, slots=True)
class PlaceholderMap:
    """One-shot substitutions, applied in order, first occurrence only."""

    title: str
    port: str
    content: str

    def items(self) -> Iterator[tuple[str, str]]:
        yield TITLE_TOKEN, self.title
        yield PORT_TOKEN, self.port
        yield CONTENT_MARKER, self.content

    def apply(self, template: str) -> str:
        """Return ``template`` with each token replaced once."""
        for token, value in self.items():
            template = template.replace(token, value, 1)
        return template


def derive_title(path: str | Path) -> str:
    """Turn a content file name into a display title.

    ``intro-to-systems.html`` -> ``Intro To Systems``.  Only the first
    letter of each word is touched; the rest keeps its case.
    """
    stem = Path(path).stem
    return " ".join(word[:1].upper() + word[1:] for word in _WORD_SEPARATORS.split(stem))


async def read_template(config: DeckConfig) -> str:
    """Read the template document.

    Raises:
        TemplateReadError: If the template is missing or unreadable.

    """
    try:
        return await anyio.Path(config.template_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read template {config.template_path}: {exc}"
        raise TemplateReadError(msg) from exc


async def build_presentation(content_path: Path, config: DeckConfig) -> str:
    """Render the presentation for ``content_path``.

    Raises:
        TemplateReadError: If the template cannot be read.
        ContentFileReadError: If the content file cannot be read.

    """
    template = await read_template(config)
    try:
        content = await anyio.Path(content_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read content file {content_path}: {exc}"
        raise ContentFileReadError(msg) from exc

    placeholders = PlaceholderMap(
        title=derive_title(content_path),
        port=str(config.port),
        content=content,
    )
    return placeholders.apply(template)


def check_template(config: DeckConfig) -> None:
    """Fail fast at startup when the template cannot be read.

    Raises:
        TemplateReadError: If the template is missing or unreadable.

    """
    try:
        config.template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read template {config.template_path}: {exc}"
        raise TemplateReadError(msg) from exc
