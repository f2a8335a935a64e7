"""Shared fixtures for bookcast tests."""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

from bookcast.audio.metadata import AudioMetadata
from bookcast.utils.errors import MetadataError

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class FakeMetadataSource:
    """MetadataSource returning canned metadata keyed by file name."""

    def __init__(self, metadata: dict[str, AudioMetadata | Exception] | None = None):
        self.metadata = metadata or {}
        self.calls: list[str] = []

    def extract(self, path: Path) -> AudioMetadata:
        self.calls.append(path.name)
        value = self.metadata.get(path.name, AudioMetadata())
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def base_url() -> str:
    """Public base URL used across tests."""
    return "https://example.com/audiobooks"


@pytest.fixture
def make_source() -> type[FakeMetadataSource]:
    """Factory for fake metadata sources."""
    return FakeMetadataSource


@pytest.fixture
def golden_rss() -> str:
    """Expected feed for ``audiobook1`` with fixed timestamps."""
    return (FIXTURES_DIR / "audiobook1.rss").read_text(encoding="utf-8")


@pytest.fixture
def fixed_now() -> datetime:
    """Run timestamp used for the pubDate ladder."""
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def build_date() -> datetime:
    """Fixed lastBuildDate."""
    return datetime(2024, 1, 2, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def audiobook_dir(tmp_path: Path) -> Path:
    """Create the ``audiobook1`` directory: three chapters, a cover, noise."""
    directory = tmp_path / "audiobook1"
    directory.mkdir()
    (directory / "chapter02.mp3").write_bytes(b"\x00" * 2048)
    (directory / "chapter01.mp3").write_bytes(b"\x00" * 1024)
    (directory / "chapter03.m4a").write_bytes(b"\x00" * 3072)
    (directory / "cover.jpg").write_bytes(b"\xff\xd8\xff")
    (directory / "notes.txt").write_text("not audio")
    (directory / "extras").mkdir()
    (directory / "extras" / "bonus.mp3").write_bytes(b"\x00" * 10)
    return directory


@pytest.fixture
def audiobook_metadata() -> dict[str, AudioMetadata]:
    """Tags and durations for the ``audiobook1`` chapters."""
    return {
        "chapter01.mp3": AudioMetadata(
            title="Chapter One",
            comment="The beginning of our story",
            duration_seconds=1.045,
        ),
        "chapter02.mp3": AudioMetadata(
            title="Chapter Two",
            comment="The plot thickens",
            duration_seconds=2.02,
        ),
        "chapter03.m4a": AudioMetadata(
            title="Chapter Three",
            comment="",
            duration_seconds=3.1,
        ),
    }


@pytest.fixture
def metadata_source(audiobook_metadata: dict[str, AudioMetadata]) -> FakeMetadataSource:
    """Fake metadata source for the ``audiobook1`` chapters."""
    return FakeMetadataSource(audiobook_metadata)


@pytest.fixture
def failing_source() -> FakeMetadataSource:
    """Fake source whose second chapter cannot be probed."""
    return FakeMetadataSource(
        {
            "chapter01.mp3": AudioMetadata(title="Chapter One", duration_seconds=1.0),
            "chapter02.mp3": MetadataError("ffprobe failed for chapter02.mp3: exit status 1"),
        }
    )


@pytest.fixture
def undecodable_dir(tmp_path: Path) -> Path:
    """Directory holding files whose names are not valid UTF-8."""
    if sys.platform in ("win32", "darwin"):
        pytest.skip("filesystem requires valid unicode names")
    directory = tmp_path / "latin1"
    directory.mkdir()
    try:
        for name in (b"caf\xe9.mp3", b"couverture\xe9.jpg"):
            with open(os.path.join(os.fsencode(directory), name), "wb") as f:
                f.write(b"\x00" * 16)
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 names")
    return directory
