"""Feed generation pipeline.

scan -> extract metadata -> build episodes -> assemble -> render -> write
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from bookcast.audio.metadata import MetadataSource, MutagenMetadataSource
from bookcast.config.schema import BookcastConfig
from bookcast.feeds.builder import EpisodeBuilder, assemble_podcast
from bookcast.feeds.models import Podcast
from bookcast.feeds.renderer import RSSRenderer
from bookcast.feeds.scanner import scan_directory
from bookcast.output.writer import FeedWriter
from bookcast.utils.datetime import now_utc
from bookcast.utils.errors import NoEpisodesError, NotFoundError

logger = logging.getLogger(__name__)


@dataclass
class FeedResult:
    """Outcome of a successful run."""

    output_path: Path
    podcast: Podcast

    @property
    def episode_count(self) -> int:
        return len(self.podcast.episodes)


class FeedGenerator:
    """Turn one directory of audio files into a feed file.

    The run is all-or-nothing: any file that fails aborts before the feed
    is written.

    Example:
        >>> generator = FeedGenerator(config=BookcastConfig())
        >>> result = generator.run(Path("./audiobook1"), "https://example.com/books")
        >>> print(result.output_path, result.episode_count)
    """

    def __init__(
        self,
        config: BookcastConfig | None = None,
        metadata_source: MetadataSource | None = None,
        renderer: RSSRenderer | None = None,
        writer: FeedWriter | None = None,
    ):
        """Initialize the generator.

        Args:
            config: Configuration (defaults if None)
            metadata_source: Tag/duration provider (mutagen + ffprobe if None)
            renderer: RSS renderer (built from config if None)
            writer: Feed writer (built from config if None)
        """
        self.config = config or BookcastConfig()
        self.metadata_source = metadata_source or MutagenMetadataSource(
            ffprobe_path=self.config.ffprobe_path,
            timeout=self.config.probe_timeout_seconds,
        )
        self.renderer = renderer or RSSRenderer(
            language=self.config.language,
            itunes_type=self.config.itunes_type,
        )
        self.writer = writer or FeedWriter(filename=self.config.output_filename)

    def generate(self, directory: Path, base_url: str, now: datetime | None = None) -> Podcast:
        """Scan a directory and build its Podcast.

        Args:
            directory: Directory holding the audio files
            base_url: Public base URL the directory is hosted under
            now: Timestamp of the first episode (default: current time)

        Returns:
            Podcast with zero or more episodes

        Raises:
            ScanError: If the directory cannot be listed
            MetadataError: If any audio file cannot be processed
        """
        scan = scan_directory(directory, cover_selection=self.config.cover_selection)

        if now is None:
            now = now_utc()

        builder = EpisodeBuilder(self.metadata_source, base_url)
        episodes = builder.build_all(scan, now)

        return assemble_podcast(
            scan,
            episodes,
            base_url,
            description_template=self.config.description_template,
        )

    def run(self, directory: Path, base_url: str, now: datetime | None = None) -> FeedResult:
        """Generate, render and write the feed for ``directory``.

        Raises:
            NotFoundError: If the directory does not exist
            ScanError: If the directory cannot be listed
            NoEpisodesError: If no supported audio files were found
            MetadataError: If any audio file cannot be processed
            RenderError: On an internal serialization fault
            WriteError: If the feed cannot be written
        """
        if not directory.exists():
            raise NotFoundError(f"Directory '{directory}' does not exist")

        podcast = self.generate(directory, base_url, now=now)

        if not podcast.episodes:
            raise NoEpisodesError(
                f"No audio files found in directory '{directory}'",
                suggestion="Supported formats: mp3, m4a, m4b, aac, flac, ogg",
            )

        content = self.renderer.render(podcast)
        output_path = self.writer.write(directory, content)

        return FeedResult(output_path=output_path, podcast=podcast)
