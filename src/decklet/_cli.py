"""Decklet CLI — ``decklet [root] [--examples]``.

Entry point for the ``decklet`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the decklet CLI."""
    parser = argparse.ArgumentParser(
        prog="decklet",
        description="Live-reloading dev server for slide-deck presentations.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    parser.add_argument(
        "--examples",
        action="store_true",
        help="Search the examples/ presentations instead of your own",
    )
    parser.add_argument("--host", default=None, help="Bind address (default 127.0.0.1)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default 8080)")
    parser.add_argument(
        "--no-open",
        dest="open_browser",
        action="store_false",
        default=None,
        help="Do not open a browser tab",
    )
    return parser


def _get_version() -> str:
    """Get the package version."""
    from decklet import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    from decklet._errors import DeckError
    from decklet.app import dev

    try:
        dev(
            root=args.root,
            examples=args.examples or None,
            host=args.host,
            port=args.port,
            open_browser=args.open_browser,
        )
    except DeckError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
