"""Tests for configuration schema."""

import pytest
from pydantic import ValidationError

from bookcast.config.schema import BookcastConfig


class TestBookcastConfig:
    """Tests for BookcastConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = BookcastConfig()

        assert config.language == "en-us"
        assert config.itunes_type == "serial"
        assert config.description_template == "Audiobook podcast for {title}"
        assert config.output_filename == "podcast.rss"
        assert config.cover_selection == "listing"
        assert config.ffprobe_path == "ffprobe"
        assert config.probe_timeout_seconds is None
        assert config.log_level == "WARNING"

    @pytest.mark.parametrize("template", ["{name}", "{0}", "{title"])
    def test_bad_description_template(self, template: str) -> None:
        """Test templates with unknown placeholders are rejected."""
        with pytest.raises(ValidationError, match="description_template"):
            BookcastConfig(description_template=template)

    def test_literal_braces_allowed(self) -> None:
        """Test escaped braces are fine."""
        config = BookcastConfig(description_template="{{{title}}}")

        assert config.description_template.format(title="x") == "{x}"

    @pytest.mark.parametrize("filename", ["", "a/b.rss", "..", "a\\b.rss"])
    def test_bad_output_filename(self, filename: str) -> None:
        """Test output filenames must stay inside the directory."""
        with pytest.raises(ValidationError):
            BookcastConfig(output_filename=filename)

    def test_timeout_must_be_positive(self) -> None:
        """Test a zero timeout is rejected."""
        with pytest.raises(ValidationError):
            BookcastConfig(probe_timeout_seconds=0)
