"""Directory scanning: find audio files and cover art."""

import logging
import os
from pathlib import Path

from bookcast.config.schema import CoverSelection
from bookcast.feeds.models import AUDIO_EXTENSIONS, IMAGE_EXTENSIONS, ScanResult
from bookcast.utils.errors import ScanError
from bookcast.utils.paths import split_extension

logger = logging.getLogger(__name__)


def classify(filename: str) -> str | None:
    """Classify a file name by extension (case-insensitive).

    Returns:
        ``"audio"``, ``"image"`` or None for ignored files
    """
    _, ext = split_extension(filename)
    ext = ext.lower()
    if ext in AUDIO_EXTENSIONS:
        return "audio"
    if ext in IMAGE_EXTENSIONS:
        return "image"
    return None


def scan_directory(directory: Path, cover_selection: CoverSelection = "listing") -> ScanResult:
    """List a directory (non-recursively) and classify its files.

    Audio file names are sorted by codepoint; that order drives episode
    numbers and publication dates. With ``cover_selection="listing"`` the
    first image in raw listing order becomes cover art, which may differ
    between filesystems. ``"sorted"`` picks the smallest image name instead.

    Args:
        directory: Directory to scan
        cover_selection: Cover art tie-break when several images exist

    Returns:
        ScanResult with sorted audio file names and optional cover art

    Raises:
        ScanError: If the directory cannot be listed
    """
    audio_files: list[str] = []
    images: list[str] = []

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir():
                    continue
                kind = classify(entry.name)
                if kind == "audio":
                    audio_files.append(entry.name)
                elif kind == "image":
                    images.append(entry.name)
                else:
                    logger.debug("Ignoring %s", entry.name)
    except OSError as e:
        raise ScanError(f"Cannot list directory '{directory}': {e}") from e

    cover_art = None
    if images:
        cover_art = min(images) if cover_selection == "sorted" else images[0]
        if len(images) > 1:
            logger.warning(
                "Found %d images, using '%s' as cover art (%s order)",
                len(images),
                cover_art,
                cover_selection,
            )

    audio_files.sort()
    logger.debug("Found %d audio file(s) in %s", len(audio_files), directory)

    return ScanResult(
        directory=directory,
        audio_files=tuple(audio_files),
        cover_art=cover_art,
    )
