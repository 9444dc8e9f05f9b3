"""Startup banner — status output once a presentation is selected.

Detects ``NO_COLOR`` / ``TERM`` for safe fallback to plain text.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from pathlib import Path

    from decklet.config import DeckConfig


# ---------------------------------------------------------------------------
# ANSI helpers — respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_CYAN = "\033[36m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""


def _mode_badge(examples: bool) -> str:
    """Return a styled [mode] badge."""
    if examples:
        return f"{_YELLOW}[examples]{_RESET}"
    return f"{_GREEN}[dev]{_RESET}"


def _clickable_url(url: str) -> str:
    """Wrap *url* in an OSC 8 hyperlink escape if the terminal supports it."""
    if not _COLOR:
        return url
    return f"\033]8;;{url}\033\\{_BOLD}{_CYAN}{url}{_RESET}\033]8;;\033\\"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def print_banner(
    config: DeckConfig,
    selected: Path,
    *,
    load_ms: float = 0.0,
    stream: TextIO | None = None,
) -> None:
    """Print the Decklet startup banner (stderr by default).

    Args:
        config: Resolved DeckConfig.
        selected: Absolute path of the presented content file.
        load_ms: Time from startup to selection in milliseconds.
        stream: Output stream override.

    """
    from decklet import __version__

    try:
        shown = selected.relative_to(config.content_path).as_posix()
    except ValueError:
        shown = str(selected)

    timing = f" {_DIM}in {load_ms:.0f}ms{_RESET}" if load_ms > 0 else ""
    lines: list[str] = [
        "",
        f"  {_BOLD}Decklet{_RESET} {_DIM}v{__version__}{_RESET}  {_mode_badge(config.examples)}",
        f"  {_DIM}{'─' * 43}{_RESET}",
        f"  {_DIM}├─{_RESET} presenting {_BOLD}{shown}{_RESET}{timing}",
        f"  {_DIM}├─{_RESET} content: {_DIM}{config.content_path}{_RESET}",
        f"  {_DIM}└─{_RESET} {_GREEN}live{_RESET} reload on ws://{config.host}:{config.port}/",
        "",
        f"  {_clickable_url(config.url)}",
        "",
        f"  {_DIM}Watching for changes...{_RESET}",
        "",
    ]

    print("\n".join(lines), file=stream if stream is not None else sys.stderr)
