"""Configuration manager for the code mode API.

Options live in an optional JSON file and can be overridden from the
environment.  Only two knobs exist today: debug logging and strict validation
of the static alias/promotion tables against the tool registry.
"""

from __future__ import annotations

import json
import logging
import os

from pathlib import Path
from typing import Any

from mysql_codemode.utils.debug_logger import DebugLogger

logger = logging.getLogger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _is_truthy_env(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


class ConfigManager:
    """Configuration manager for code mode API construction."""

    CODEMODE_OPTIONS = "Code Mode Options"

    DEBUG_MODE = "Debug Mode"
    STRICT_TABLE_VALIDATION = "Strict Table Validation"

    DEFAULT_DEBUG_MODE = False
    DEFAULT_STRICT_TABLE_VALIDATION = False

    ENV_DEBUG = "MYSQL_CODEMODE_DEBUG"
    ENV_STRICT = "MYSQL_CODEMODE_STRICT"

    def __init__(self, config_file: Path | None = None):
        """Initialize configuration manager.

        Args:
            config_file: Optional path to a JSON configuration file
        """
        self.config_file = config_file
        self._config: dict[str, dict[str, Any]] = {}

        self._load_config()
        self._apply_env_overrides()

    def _load_config(self) -> None:
        """Load configuration from file if available."""
        if self.config_file and self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to load config file {self.config_file}: {e}")
                loaded = {}
            self._config = loaded if isinstance(loaded, dict) else {}
            DebugLogger.debug(self, f"Loaded configuration from {self.config_file}")
        else:
            self._config = {}

        if not isinstance(self._config.get(self.CODEMODE_OPTIONS), dict):
            self._config[self.CODEMODE_OPTIONS] = {}

        if self.DEBUG_MODE in self._config[self.CODEMODE_OPTIONS]:
            DebugLogger.set_debug_enabled(self.is_debug_mode())

    def _apply_env_overrides(self) -> None:
        """Apply environment variable overrides without persisting them."""
        if self.ENV_DEBUG in os.environ:
            self._config[self.CODEMODE_OPTIONS][self.DEBUG_MODE] = _is_truthy_env(os.environ[self.ENV_DEBUG])
            DebugLogger.set_debug_enabled(self.is_debug_mode())

        if self.ENV_STRICT in os.environ:
            self._config[self.CODEMODE_OPTIONS][self.STRICT_TABLE_VALIDATION] = _is_truthy_env(os.environ[self.ENV_STRICT])

    def save_config(self) -> None:
        """Save configuration to file."""
        if not self.config_file:
            return
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2)
            DebugLogger.debug(self, f"Saved configuration to {self.config_file}")
        except OSError as e:
            logger.error(f"Failed to save config file {self.config_file}: {e}")

    def _get_option(self, name: str, default_value: Any = None) -> Any:
        return self._config.get(self.CODEMODE_OPTIONS, {}).get(name, default_value)

    def _set_option(self, name: str, value: Any) -> None:
        self._config.setdefault(self.CODEMODE_OPTIONS, {})[name] = value
        if self.config_file:
            self.save_config()

    def is_debug_mode(self) -> bool:
        """Check if debug logging of sandbox dispatch is enabled."""
        return bool(self._get_option(self.DEBUG_MODE, self.DEFAULT_DEBUG_MODE))

    def set_debug_mode(self, enabled: bool) -> None:
        self._set_option(self.DEBUG_MODE, bool(enabled))
        DebugLogger.set_debug_enabled(enabled)

    def is_strict_table_validation(self) -> bool:
        """Check if alias/promotion tables must match the registry exactly."""
        return bool(self._get_option(self.STRICT_TABLE_VALIDATION, self.DEFAULT_STRICT_TABLE_VALIDATION))

    def set_strict_table_validation(self, enabled: bool) -> None:
        self._set_option(self.STRICT_TABLE_VALIDATION, bool(enabled))

    def get_all_options(self) -> dict[str, dict[str, Any]]:
        """Get all configuration options."""
        return {category: dict(options) for category, options in self._config.items()}

    def __str__(self) -> str:
        return f"ConfigManager(config_file={self.config_file}, options={len(self._config.get(self.CODEMODE_OPTIONS, {}))})"
