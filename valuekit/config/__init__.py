"""Configuration package for Valuekit."""

from valuekit.config.logging_config import configure_logging
from valuekit.config.settings import Settings, get_settings, settings

__all__ = [
    "Settings",
    "configure_logging",
    "get_settings",
    "settings",
]
