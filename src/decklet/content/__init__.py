"""Content layer — finding presentation files and watching the chosen one."""

from decklet.content.locator import (
    FilterRuleset,
    build_ruleset,
    search_directory,
    search_presentations,
)
from decklet.content.watcher import ChangeEvent, ContentWatcher

__all__ = [
    "ChangeEvent",
    "ContentWatcher",
    "FilterRuleset",
    "build_ruleset",
    "search_directory",
    "search_presentations",
]
