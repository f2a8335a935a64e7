"""Per-file audio metadata extraction.

Tags are read with mutagen and durations come from ffprobe. Both sit
behind the ``MetadataSource`` protocol so the feed pipeline can run
against fakes in tests.
"""

import logging
from pathlib import Path
from typing import Any, Protocol

import mutagen
from mutagen.id3 import ID3
from mutagen.mp4 import MP4Tags
from pydantic import BaseModel, ConfigDict, Field

from bookcast.audio.probe import probe_duration
from bookcast.utils.errors import MetadataError
from bookcast.utils.paths import printable, split_extension

logger = logging.getLogger(__name__)

# Some encoders store gapless-playback info in the comment field
GAPLESS_SENTINEL = "iTunPGAP"


class AudioMetadata(BaseModel):
    """Raw metadata for one audio file."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    comment: str = ""
    duration_seconds: float = Field(default=0.0, ge=0)


class MetadataSource(Protocol):
    """Anything that can extract metadata from an audio file."""

    def extract(self, path: Path) -> AudioMetadata:
        """Return tags and duration for ``path``.

        Raises:
            MetadataError: If the file cannot be read or probed
        """
        ...


def _first_text(value: Any) -> str:
    """Flatten a mutagen tag value (frame, list or str) to one string."""
    if value is None:
        return ""
    if hasattr(value, "text"):
        value = value.text
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    return str(value)


def _id3_comment(tags: ID3) -> str:
    frames = tags.getall("COMM")
    if not frames:
        return ""
    # Plain comments have no description; named ones (iTunNORM, ...) are encoder data
    plain = [frame for frame in frames if not frame.desc]
    return _first_text((plain or frames)[0])


def read_tags(path: Path) -> tuple[str, str]:
    """Read title and comment tags from an audio file.

    A recognized file without a tag block yields empty strings.

    Args:
        path: Audio file path

    Returns:
        Tuple of (title, comment)

    Raises:
        MetadataError: If mutagen cannot parse the file
    """
    try:
        audio = mutagen.File(path)
    except (mutagen.MutagenError, OSError) as e:
        raise MetadataError(f"Failed to read tags from {path.name}: {e}") from e

    if audio is None:
        raise MetadataError(
            f"Unrecognized audio container: {path.name}",
            suggestion="The file may be corrupt or use an unsupported codec",
        )

    tags = audio.tags
    if tags is None:
        return "", ""

    if isinstance(tags, ID3):
        return _first_text(tags.get("TIT2")), _id3_comment(tags)

    if isinstance(tags, MP4Tags):
        return _first_text(tags.get("\xa9nam")), _first_text(tags.get("\xa9cmt"))

    # Vorbis comments (FLAC, Ogg)
    comment = _first_text(tags.get("comment")) or _first_text(tags.get("description"))
    return _first_text(tags.get("title")), comment


def resolve_title(title: str, path: Path) -> str:
    """Use the tag title, or the filename without its extension.

    A name that is only an extension, like ``.mp3``, is used whole.
    Undecodable filename bytes become U+FFFD.
    """
    if title:
        return title
    return printable(split_extension(path.name)[0] or path.name)


def resolve_description(comment: str, title: str) -> str:
    """Use the tag comment unless it is empty or the gapless sentinel."""
    if comment and comment != GAPLESS_SENTINEL:
        return comment
    return title


class MutagenMetadataSource:
    """Metadata source backed by mutagen and ffprobe."""

    def __init__(self, ffprobe_path: str = "ffprobe", timeout: float | None = None):
        """Initialize the source.

        Args:
            ffprobe_path: ffprobe executable name or path
            timeout: Optional per-file probe timeout in seconds
        """
        self.ffprobe_path = ffprobe_path
        self.timeout = timeout

    def extract(self, path: Path) -> AudioMetadata:
        title, comment = read_tags(path)
        duration = probe_duration(path, ffprobe_path=self.ffprobe_path, timeout=self.timeout)
        logger.debug("Read %s: title=%r duration=%.3fs", path.name, title, duration)
        return AudioMetadata(title=title, comment=comment, duration_seconds=duration)
