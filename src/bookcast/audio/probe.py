"""Audio duration probing with ffprobe."""

import logging
import math
import subprocess
from pathlib import Path

from bookcast.utils.errors import MetadataError

logger = logging.getLogger(__name__)


def probe_duration(
    audio_path: Path,
    ffprobe_path: str = "ffprobe",
    timeout: float | None = None,
) -> float:
    """Get audio duration in seconds using ffprobe.

    Args:
        audio_path: Path to audio file
        ffprobe_path: ffprobe executable name or path
        timeout: Optional timeout in seconds (no limit by default)

    Returns:
        Duration in seconds

    Raises:
        MetadataError: If ffprobe is missing, fails, or prints no usable number
    """
    cmd = [
        ffprobe_path,
        "-v",
        "quiet",
        "-show_entries",
        "format=duration",
        "-of",
        "csv=p=0",
        str(audio_path),
    ]
    logger.debug("Probing duration: %s", audio_path)

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise MetadataError(
            f"{ffprobe_path} not found",
            suggestion="Install ffmpeg or set ffprobe_path in the config file",
        ) from e
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
        raise MetadataError(f"ffprobe failed for {audio_path.name}: {detail}") from e
    except subprocess.TimeoutExpired as e:
        raise MetadataError(
            f"ffprobe timed out after {timeout}s for {audio_path.name}"
        ) from e

    output = result.stdout.strip()
    if not output:
        raise MetadataError(f"No duration found in ffprobe output for {audio_path.name}")

    try:
        seconds = float(output)
    except ValueError as e:
        raise MetadataError(
            f"Could not parse duration {output!r} for {audio_path.name}"
        ) from e

    if not math.isfinite(seconds) or seconds < 0:
        raise MetadataError(f"Invalid duration {output!r} for {audio_path.name}")

    return seconds
