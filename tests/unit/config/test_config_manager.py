"""Tests for ConfigManager."""

from pathlib import Path

import pytest
import yaml

from bookcast.config.manager import ConfigManager, get_config_dir
from bookcast.config.schema import BookcastConfig
from bookcast.utils.errors import ConfigError, InvalidConfigError


class TestConfigManager:
    """Tests for ConfigManager class."""

    def test_default_location(self) -> None:
        """Test the default file lives in the user config dir."""
        manager = ConfigManager()

        assert manager.config_file == get_config_dir() / "config.yaml"
        assert get_config_dir().name == "bookcast"

    def test_missing_default_file_uses_defaults(self, tmp_path: Path, monkeypatch) -> None:
        """Test a missing default config yields defaults without creating a file."""
        monkeypatch.setattr(
            "bookcast.config.manager.get_config_dir", lambda: tmp_path / "bookcast"
        )
        manager = ConfigManager()

        config = manager.load_config()

        assert config == BookcastConfig()
        assert not manager.config_file.exists()

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        """Test an explicit missing config file is an error."""
        manager = ConfigManager(tmp_path / "nope.yaml")

        with pytest.raises(ConfigError, match="not found"):
            manager.load_config()

    def test_load_from_file(self, tmp_path: Path) -> None:
        """Test loading values from YAML."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.safe_dump({"language": "fr-fr", "cover_selection": "sorted"})
        )

        config = ConfigManager(config_file).load_config()

        assert config.language == "fr-fr"
        assert config.cover_selection == "sorted"
        assert config.itunes_type == "serial"

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file yields defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert ConfigManager(config_file).load_config() == BookcastConfig()

    @pytest.mark.parametrize(
        "content",
        [
            "cover_selection: random\n",
            "- just\n- a list\n",
            "language: [unclosed\n",
            "output_filename: ../escape.rss\n",
        ],
    )
    def test_invalid_config(self, tmp_path: Path, content: str) -> None:
        """Test invalid content raises InvalidConfigError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(content)

        with pytest.raises(InvalidConfigError, match="Invalid configuration"):
            ConfigManager(config_file).load_config()
