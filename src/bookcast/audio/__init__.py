"""Audio metadata extraction for bookcast."""

from bookcast.audio.metadata import (
    GAPLESS_SENTINEL,
    AudioMetadata,
    MetadataSource,
    MutagenMetadataSource,
    read_tags,
    resolve_description,
    resolve_title,
)
from bookcast.audio.probe import probe_duration

__all__ = [
    "AudioMetadata",
    "MetadataSource",
    "MutagenMetadataSource",
    "GAPLESS_SENTINEL",
    "probe_duration",
    "read_tags",
    "resolve_description",
    "resolve_title",
]
