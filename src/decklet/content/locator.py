"""Content locator — finds presentation files for the picker.

Walks the content root and keeps the files accepted by a FilterRuleset.
The ruleset is rebuilt for every picker query from three parts:

- the query itself (case-insensitive substring + content extension),
- the template document, which is never a candidate,
- the examples toggle, which either hides the ``examples`` subtree or
  hides everything but it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import anyio.to_thread

from decklet._errors import FileSystemError

if TYPE_CHECKING:
    from decklet._types import ContentPath
    from decklet.config import DeckConfig


@dataclass(frozen=True, slots=True)
class FilterRuleset:
    """Inclusion and exclusion patterns over relative POSIX paths.

    Exclusion always wins: a path matched by any exclusion pattern is
    rejected regardless of inclusion matches.

    Attributes:
        include: A file must match at least one of these.
        exclude: A file (or directory subtree) must match none of these.

    """

    include: tuple[re.Pattern[str], ...]
    exclude: tuple[re.Pattern[str], ...]

    def is_excluded(self, rel: str) -> bool:
        """Whether any exclusion pattern matches ``rel``."""
        return any(pattern.search(rel) for pattern in self.exclude)

    def is_pruned(self, rel_dir: str) -> bool:
        """Whether the whole subtree under ``rel_dir`` is excluded.

        Probes the directory as a path prefix (``rel_dir/``), so a rule
        that only targets one exact file name never prunes a directory.
        """
        return self.is_excluded(f"{rel_dir}/")

    def accepts(self, rel: str) -> bool:
        """Whether a file at ``rel`` is a candidate."""
        if self.is_excluded(rel):
            return False
        return any(pattern.search(rel) for pattern in self.include)


def build_ruleset(
    query: str = "",
    *,
    examples: bool = False,
    template_name: str = "index.html",
    examples_dir: str = "examples",
    extension: str = ".html",
) -> FilterRuleset:
    """Build the ruleset for one picker query.

    Args:
        query: Free-text substring typed by the user (may be empty).
        examples: Search only the examples subtree instead of excluding it.
        template_name: Template document name, excluded at the content root.
        examples_dir: Reserved first path segment for example decks.
        extension: Content file extension.

    """
    include = (
        re.compile(f"^(?=.*{re.escape(query)}).*{re.escape(extension)}$", re.IGNORECASE),
    )

    subtree = f"{re.escape(examples_dir)}(?:/|$)"
    examples_rule = f"^(?!{subtree})" if examples else f"^{subtree}"

    exclude = (
        re.compile(f"^{re.escape(template_name)}$"),
        re.compile(examples_rule),
    )
    return FilterRuleset(include=include, exclude=exclude)


def search_directory(
    base: Path,
    current: Path,
    ruleset: FilterRuleset,
    files: list[ContentPath] | None = None,
    *,
    prune: bool = True,
) -> list[ContentPath]:
    """Recursively collect files under ``current`` accepted by ``ruleset``.

    Paths are reported relative to ``base`` in filesystem listing order.
    Directories whose subtree is excluded are skipped without being read
    unless ``prune`` is False; pruning never changes the result.

    Raises:
        FileSystemError: If a directory cannot be listed.

    """
    if files is None:
        files = []

    try:
        entries = list(current.iterdir())
    except OSError as exc:
        msg = f"Cannot read directory {current}: {exc}"
        raise FileSystemError(msg) from exc

    for entry in entries:
        rel = entry.relative_to(base).as_posix()
        if entry.is_dir():
            if not (prune and ruleset.is_pruned(rel)):
                search_directory(base, entry, ruleset, files, prune=prune)
        elif ruleset.accepts(rel):
            files.append(rel)

    return files


async def search_presentations(query: str, config: DeckConfig) -> list[ContentPath]:
    """Return content files under the content root matching ``query``.

    The walk runs in a worker thread so the event loop stays responsive
    while the picker is open.

    Raises:
        FileSystemError: If the content root is missing or unreadable.

    """
    ruleset = build_ruleset(
        query,
        examples=config.examples,
        template_name=config.template_name,
        examples_dir=config.examples_dir,
        extension=config.extension,
    )
    base = config.content_path
    return await anyio.to_thread.run_sync(search_directory, base, base, ruleset)
