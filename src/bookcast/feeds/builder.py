"""Episode building and podcast assembly."""

import logging
import os
from datetime import datetime, timedelta
from pathlib import Path
from urllib.parse import quote

from pydantic import ValidationError

from bookcast.audio.metadata import MetadataSource, resolve_description, resolve_title
from bookcast.feeds.models import Episode, Podcast, ScanResult
from bookcast.utils.errors import BookcastError, MetadataError
from bookcast.utils.paths import printable

logger = logging.getLogger(__name__)

# Sub-delimiters that may appear unescaped inside a URL path segment
PATH_SEGMENT_SAFE = "$&+,:;=@"

DEFAULT_DESCRIPTION_TEMPLATE = "Audiobook podcast for {title}"


def escape_segment(segment: str) -> str:
    """Percent-encode one URL path segment (``/`` is escaped too).

    The filesystem bytes of the name are encoded, so names that are not
    valid UTF-8 still map to a URL that decodes back to the same bytes.
    """
    return quote(os.fsencode(segment), safe=PATH_SEGMENT_SAFE)


def build_url(base_url: str, directory_name: str, filename: str) -> str:
    """Build the public URL for a file in the scanned directory.

    Example:
        >>> build_url("https://example.com/books/", "My Book", "ch 1.mp3")
        'https://example.com/books/My%20Book/ch%201.mp3'
    """
    base = base_url[:-1] if base_url.endswith("/") else base_url
    return f"{base}/{escape_segment(directory_name)}/{escape_segment(filename)}"


def format_duration(duration: timedelta) -> str:
    """Format a duration as ``H:MM:SS``, or ``M:SS`` under an hour.

    Fractional seconds are truncated.

    Example:
        >>> format_duration(timedelta(seconds=3725))
        '1:02:05'
    """
    total = int(duration.total_seconds())
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


class EpisodeBuilder:
    """Build Episode records for the audio files of one directory.

    Files are processed one at a time, in scan order. The first failure
    aborts the whole build: no episode list is returned with gaps in it.

    Example:
        >>> builder = EpisodeBuilder(source, "https://example.com/books")
        >>> episodes = builder.build_all(scan, now=now_utc())
    """

    def __init__(self, metadata_source: MetadataSource, base_url: str):
        """Initialize the builder.

        Args:
            metadata_source: Provider of tags and duration per file
            base_url: Public base URL the directory will be hosted under
        """
        self.metadata_source = metadata_source
        self.base_url = base_url

    def build(
        self,
        file_path: Path,
        directory_name: str,
        pub_date: datetime,
        episode_number: int,
    ) -> Episode:
        """Build one episode.

        Args:
            file_path: Audio file path
            directory_name: Base name of the containing directory
            pub_date: Publication timestamp assigned to this episode
            episode_number: 1-based position in sorted order

        Returns:
            Episode

        Raises:
            MetadataError: If tags, duration or size cannot be read
        """
        try:
            file_size = file_path.stat().st_size
        except OSError as e:
            raise MetadataError(f"Cannot stat {file_path.name}: {e}") from e

        metadata = self.metadata_source.extract(file_path)

        title = resolve_title(metadata.title, file_path)
        return Episode(
            title=title,
            description=resolve_description(metadata.comment, title),
            file_path=file_path,
            duration=timedelta(seconds=metadata.duration_seconds),
            file_size=file_size,
            pub_date=pub_date,
            url=build_url(self.base_url, directory_name, file_path.name),
            episode_number=episode_number,
        )

    def build_all(self, scan: ScanResult, now: datetime) -> list[Episode]:
        """Build every episode of a scan, fail-fast.

        Episode ``n`` is published at ``now + (n - 1)`` seconds.

        Args:
            scan: Scan result with sorted audio files
            now: Run timestamp, captured once by the caller

        Returns:
            Episodes in sorted order

        Raises:
            MetadataError: On the first file that cannot be processed
        """
        episodes = []
        for idx, filename in enumerate(scan.audio_files):
            file_path = scan.directory / filename
            logger.debug("Processing %s", filename)
            try:
                episode = self.build(
                    file_path,
                    scan.name,
                    pub_date=now + timedelta(seconds=idx),
                    episode_number=idx + 1,
                )
            except BookcastError as e:
                raise MetadataError(
                    f"Failed to process {filename}: {e}", suggestion=e.suggestion
                ) from e
            except ValidationError as e:
                raise MetadataError(f"Failed to process {filename}: {e}") from e
            episodes.append(episode)
        return episodes


def assemble_podcast(
    scan: ScanResult,
    episodes: list[Episode],
    base_url: str,
    description_template: str = DEFAULT_DESCRIPTION_TEMPLATE,
) -> Podcast:
    """Combine episodes and directory facts into a Podcast."""
    cover_art_url = None
    if scan.cover_art:
        cover_art_url = build_url(base_url, scan.name, scan.cover_art)

    title = printable(scan.name)
    return Podcast(
        title=title,
        description=description_template.format(title=title),
        episodes=tuple(episodes),
        cover_art_url=cover_art_url,
    )
