"""Feed building and RSS rendering for bookcast."""

from bookcast.feeds.builder import (
    EpisodeBuilder,
    assemble_podcast,
    build_url,
    format_duration,
)
from bookcast.feeds.models import Episode, Podcast, ScanResult, get_mime_type
from bookcast.feeds.renderer import RSSRenderer
from bookcast.feeds.scanner import scan_directory

__all__ = [
    "Episode",
    "Podcast",
    "ScanResult",
    "EpisodeBuilder",
    "RSSRenderer",
    "assemble_podcast",
    "build_url",
    "format_duration",
    "get_mime_type",
    "scan_directory",
]
