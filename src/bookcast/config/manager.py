"""Configuration manager for loading bookcast config."""

import logging
from pathlib import Path

import yaml
from platformdirs import user_config_dir

from bookcast.config.schema import BookcastConfig
from bookcast.utils.errors import ConfigError, InvalidConfigError

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Return the per-user bookcast configuration directory."""
    return Path(user_config_dir("bookcast"))


class ConfigManager:
    """Manages the bookcast configuration file."""

    def __init__(self, config_file: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_file: Optional explicit config file. Defaults to
                ``config.yaml`` in the user config directory.
        """
        self.explicit = config_file is not None
        self.config_file = config_file or get_config_dir() / "config.yaml"

    def load_config(self) -> BookcastConfig:
        """Load and validate configuration.

        A missing default config file yields defaults. A missing file that
        was requested explicitly is an error.

        Returns:
            Validated BookcastConfig instance

        Raises:
            ConfigError: If an explicitly requested file doesn't exist
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            if self.explicit:
                raise ConfigError(
                    f"Config file not found: {self.config_file}",
                    suggestion="Check the --config path",
                )
            logger.debug("No config file at %s, using defaults", self.config_file)
            return BookcastConfig()

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError("top level must be a mapping")
            return BookcastConfig(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e
