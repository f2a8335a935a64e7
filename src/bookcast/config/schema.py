"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

CoverSelection = Literal["listing", "sorted"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class BookcastConfig(BaseModel):
    """Global bookcast configuration."""

    version: str = "1"
    log_level: LogLevel = "WARNING"

    # Feed
    language: str = "en-us"
    itunes_type: Literal["episodic", "serial"] = "serial"
    description_template: str = "Audiobook podcast for {title}"
    output_filename: str = "podcast.rss"

    # Scanning
    cover_selection: CoverSelection = "listing"  # "sorted" makes the tie-break deterministic

    # Duration probing
    ffprobe_path: str = "ffprobe"
    probe_timeout_seconds: float | None = Field(default=None, gt=0)

    @field_validator("description_template")
    @classmethod
    def validate_description_template(cls, v: str) -> str:
        """Ensure the template only references the ``title`` placeholder."""
        try:
            v.format(title="")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"description_template may only use the {{title}} placeholder: {e}"
            ) from e
        return v

    @field_validator("output_filename")
    @classmethod
    def validate_output_filename(cls, v: str) -> str:
        """Keep the feed inside the scanned directory."""
        if not v or "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError("output_filename must be a plain file name")
        return v
