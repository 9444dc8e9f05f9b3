"""Tests for decklet package exports and metadata."""

import pytest

import decklet


class TestPackageMetadata:
    """Package-level exports and metadata."""

    def test_version_string(self) -> None:
        assert isinstance(decklet.__version__, str)
        assert decklet.__version__ == "0.1.0"

    def test_all_exports_resolvable(self) -> None:
        for name in decklet.__all__:
            assert getattr(decklet, name) is not None

    def test_lazy_exports_are_the_real_objects(self) -> None:
        from decklet.config import DeckConfig
        from decklet.render import build_presentation

        assert decklet.DeckConfig is DeckConfig
        assert decklet.build_presentation is build_presentation

    def test_invalid_attribute_raises(self) -> None:
        with pytest.raises(AttributeError, match="no attribute"):
            decklet.nonexistent_thing  # type: ignore[attr-defined]  # noqa: B018
