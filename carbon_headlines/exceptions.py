from __future__ import annotations


class HeadlineError(Exception):
    """Base class for errors raised while collecting headlines."""


class FetchError(HeadlineError):
    """Raised when a feed cannot be requested or answers with a non-200 status."""

    def __init__(self, message: str, *, url: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(HeadlineError):
    """Raised when a feed body is not valid RSS/Atom."""


class EmptyFeedError(HeadlineError):
    """Raised when a feed parses fine but carries no entries at all."""


class SerializationError(HeadlineError):
    """Raised when a value cannot be encoded to or decoded from JSON."""


class ConfigError(HeadlineError):
    """Raised when run configuration from the environment is invalid."""
