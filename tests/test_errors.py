"""Tests for decklet._errors."""

from decklet._errors import (
    ConfigError,
    ConnectionSendError,
    ContentFileReadError,
    ContentReadError,
    DeckError,
    FileSystemError,
    SelectionCancelled,
    TemplateReadError,
)


class TestErrorHierarchy:
    """All decklet errors inherit from DeckError."""

    def test_deck_error_is_exception(self) -> None:
        assert issubclass(DeckError, Exception)

    def test_read_errors_share_base(self) -> None:
        assert issubclass(TemplateReadError, ContentReadError)
        assert issubclass(ContentFileReadError, ContentReadError)

    def test_template_and_content_errors_are_distinct(self) -> None:
        assert not issubclass(TemplateReadError, ContentFileReadError)
        assert not issubclass(ContentFileReadError, TemplateReadError)

    def test_catch_all_deck_errors(self) -> None:
        """All specific errors are catchable via DeckError."""
        for error_cls in (
            ConfigError,
            FileSystemError,
            ContentReadError,
            TemplateReadError,
            ContentFileReadError,
            ConnectionSendError,
            SelectionCancelled,
        ):
            try:
                raise error_cls("test")
            except DeckError:
                pass
