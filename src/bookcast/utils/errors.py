"""Custom exceptions for bookcast."""


class BookcastError(Exception):
    """Base exception for all bookcast errors.

    Args:
        message: Human-readable error message
        suggestion: Optional hint shown to the user on how to fix it
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.suggestion = suggestion


class UsageError(BookcastError):
    """Bad or missing command-line arguments."""

    pass


class NotFoundError(BookcastError):
    """Input directory does not exist."""

    pass


class ScanError(BookcastError):
    """Directory could not be listed."""

    pass


class NoEpisodesError(BookcastError):
    """Directory was readable but holds no supported audio files."""

    pass


class MetadataError(BookcastError):
    """Tag parsing or duration probing failed for an audio file."""

    pass


class RenderError(BookcastError):
    """Internal fault while serializing the feed."""

    pass


class WriteError(BookcastError):
    """Feed file could not be written."""

    pass


class ConfigError(BookcastError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass
