"""Decklet error hierarchy.

All decklet-specific errors inherit from DeckError for easy catching.
Startup errors (config, search, template) are fatal; request-time content
reads and reload delivery failures are recoverable.
"""


class DeckError(Exception):
    """Base error for all decklet operations."""


class ConfigError(DeckError):
    """Invalid or unreadable configuration."""


class FileSystemError(DeckError):
    """Content root missing or unreadable during a search."""


class ContentReadError(DeckError):
    """A file needed to render the presentation could not be read."""


class TemplateReadError(ContentReadError):
    """The template document is missing or unreadable.

    No presentation can be served without it.
    """


class ContentFileReadError(ContentReadError):
    """The selected content file is missing or unreadable.

    Reported per request; the server keeps running.
    """


class ConnectionSendError(DeckError):
    """A reload token could not be delivered to one live connection."""


class SelectionCancelled(DeckError):
    """The interactive picker was aborted before a file was chosen."""
