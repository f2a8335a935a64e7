"""Data models for episodes and podcasts."""

from datetime import datetime, timedelta
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bookcast.utils.paths import split_extension

AUDIO_MIME_TYPES = {
    ".mp3": "audio/mpeg",
    ".m4a": "audio/mp4",
    ".m4b": "audio/mp4",
    ".aac": "audio/aac",
    ".flac": "audio/flac",
    ".ogg": "audio/ogg",
}
DEFAULT_MIME_TYPE = "audio/mpeg"

AUDIO_EXTENSIONS = frozenset(AUDIO_MIME_TYPES)

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png"})


class Episode(BaseModel):
    """A single feed item built from one audio file."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    file_path: Path
    duration: timedelta = timedelta(0)
    file_size: int = Field(..., ge=0)
    pub_date: datetime
    url: str
    episode_number: int = Field(..., ge=1)

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: timedelta) -> timedelta:
        if v < timedelta(0):
            raise ValueError("duration must be non-negative")
        return v

    @field_validator("pub_date")
    @classmethod
    def validate_pub_date(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            raise ValueError("pub_date must be timezone-aware")
        return v

    @property
    def mime_type(self) -> str:
        """MIME type derived from the file extension."""
        return get_mime_type(self.file_path)


class Podcast(BaseModel):
    """A feed: channel metadata plus its ordered episodes."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    episodes: tuple[Episode, ...] = ()
    cover_art_url: str | None = None

    @field_validator("episodes")
    @classmethod
    def validate_episode_order(cls, v: tuple[Episode, ...]) -> tuple[Episode, ...]:
        """Episode numbers must run 1..N in order with a one-second pubDate ladder."""
        for idx, episode in enumerate(v, start=1):
            if episode.episode_number != idx:
                raise ValueError(
                    f"episode {idx} has episode_number {episode.episode_number}"
                )
            if idx > 1 and episode.pub_date - v[idx - 2].pub_date != timedelta(seconds=1):
                raise ValueError(f"episode {idx} pub_date is not one second after the previous")
        return v


class ScanResult(BaseModel):
    """Classified contents of a scanned directory."""

    model_config = ConfigDict(frozen=True)

    directory: Path
    audio_files: tuple[str, ...] = ()
    cover_art: str | None = None

    @property
    def name(self) -> str:
        """Directory base name, used as podcast title and URL segment."""
        if self.directory.name in ("", ".", ".."):
            return self.directory.resolve().name
        return self.directory.name


def get_mime_type(path: Path | str) -> str:
    """Look up the MIME type for an audio file by extension.

    Unknown extensions map to ``audio/mpeg``.
    """
    _, ext = split_extension(Path(path).name)
    return AUDIO_MIME_TYPES.get(ext.lower(), DEFAULT_MIME_TYPE)
