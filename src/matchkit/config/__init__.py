"""Configuration layer — settings discovery and logging setup."""

from matchkit.config.logging import configure_logging
from matchkit.config.settings import MatchkitSettings, get_settings, reset_settings

__all__ = ["MatchkitSettings", "configure_logging", "get_settings", "reset_settings"]
