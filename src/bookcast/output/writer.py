"""Feed file writer.

Writes are atomic: content goes to a temp file in the target directory,
is fsynced, then renamed over the destination. A failed write never
leaves a truncated feed behind.
"""

import logging
import os
import tempfile
from pathlib import Path

from bookcast.utils.errors import WriteError

logger = logging.getLogger(__name__)

DEFAULT_FEED_FILENAME = "podcast.rss"


class FeedWriter:
    """Write rendered feeds to disk.

    Example:
        >>> writer = FeedWriter()
        >>> writer.write(Path("./audiobook1"), xml)
        PosixPath('audiobook1/podcast.rss')
    """

    def __init__(self, filename: str = DEFAULT_FEED_FILENAME):
        """Initialize the writer.

        Args:
            filename: Name of the feed file inside the scanned directory
        """
        self.filename = filename

    def write(self, directory: Path, content: str) -> Path:
        """Write the feed into ``directory``, replacing any existing feed.

        Args:
            directory: Scanned directory
            content: Rendered XML

        Returns:
            Path of the written feed

        Raises:
            WriteError: If the file cannot be written
        """
        file_path = directory / self.filename
        try:
            self._write_file_atomic(file_path, content)
        except OSError as e:
            raise WriteError(f"Failed to write {file_path}: {e}") from e

        logger.info("Wrote %s (%d bytes)", file_path, len(content.encode("utf-8")))
        return file_path

    def _write_file_atomic(self, file_path: Path, content: str) -> None:
        """Write file atomically using temp file + fsync + rename.

        Args:
            file_path: Target file path
            content: File content

        Raises:
            OSError: If write or sync fails
        """
        temp_fd, temp_path = tempfile.mkstemp(
            dir=file_path.parent, prefix=".tmp_", suffix=".rss"
        )

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())

            # mkstemp creates 0600; feeds are meant to be served
            os.chmod(temp_path, 0o644)

            Path(temp_path).replace(file_path)

            # Persist the rename; not every filesystem supports directory fsync
            try:
                dir_fd = os.open(file_path.parent, os.O_RDONLY)
                try:
                    os.fsync(dir_fd)
                finally:
                    os.close(dir_fd)
            except (OSError, AttributeError) as e:
                logger.debug("Directory fsync not supported: %s", e)

        except Exception:
            Path(temp_path).unlink(missing_ok=True)
            raise
