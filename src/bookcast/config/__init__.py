"""Configuration for bookcast."""

from bookcast.config.logging import setup_logging
from bookcast.config.manager import ConfigManager, get_config_dir
from bookcast.config.schema import BookcastConfig

__all__ = ["BookcastConfig", "ConfigManager", "get_config_dir", "setup_logging"]
