"""Utility functions and helpers for bookcast."""

from bookcast.utils.datetime import format_rfc1123, now_utc
from bookcast.utils.errors import (
    BookcastError,
    ConfigError,
    InvalidConfigError,
    MetadataError,
    NoEpisodesError,
    NotFoundError,
    RenderError,
    ScanError,
    UsageError,
    WriteError,
)

__all__ = [
    # Errors
    "BookcastError",
    "UsageError",
    "NotFoundError",
    "ScanError",
    "NoEpisodesError",
    "MetadataError",
    "RenderError",
    "WriteError",
    "ConfigError",
    "InvalidConfigError",
    # Datetime
    "now_utc",
    "format_rfc1123",
]
