"""Tests for decklet._cli — argument parsing and command dispatch."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from decklet._cli import _build_parser, main
from decklet._errors import FileSystemError, SelectionCancelled


class TestBuildParser:
    """_build_parser — CLI argument parsing."""

    def test_default_args(self) -> None:
        args = _build_parser().parse_args([])
        assert args.root == "."
        assert args.examples is False
        assert args.host is None
        assert args.port is None
        assert args.open_browser is None

    def test_examples_flag(self) -> None:
        args = _build_parser().parse_args(["--examples"])
        assert args.examples is True

    def test_examples_flag_anywhere(self) -> None:
        args = _build_parser().parse_args(["--port", "9000", "--examples", "talks/"])
        assert args.examples is True
        assert args.root == "talks/"
        assert args.port == 9000

    def test_no_open(self) -> None:
        args = _build_parser().parse_args(["--no-open"])
        assert args.open_browser is False


class TestMain:
    """main — dispatch to dev() and error reporting."""

    def test_dispatches_to_dev(self) -> None:
        with patch("decklet.app.dev") as dev:
            main(["talks/", "--examples", "--port", "9000"])
        dev.assert_called_once_with(
            root="talks/", examples=True, host=None, port=9000, open_browser=None,
        )

    def test_unset_examples_passed_as_none(self) -> None:
        with patch("decklet.app.dev") as dev:
            main([])
        assert dev.call_args.kwargs["examples"] is None

    def test_deck_error_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("decklet.app.dev", side_effect=FileSystemError("no src")):
            with pytest.raises(SystemExit) as excinfo:
                main([])
        assert excinfo.value.code == 1
        assert "error: no src" in capsys.readouterr().err

    def test_cancelled_selection_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        cancelled = SelectionCancelled("No presentation selected")
        with patch("decklet.app.dev", side_effect=cancelled):
            with pytest.raises(SystemExit) as excinfo:
                main([])
        assert excinfo.value.code == 1
        assert "No presentation selected" in capsys.readouterr().err
