"""Configuration management for the code mode API."""

from .config_manager import ConfigManager

__all__ = [
    "ConfigManager",
]
