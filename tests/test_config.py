"""Test code mode configuration file loading and options.

Verifies that:
- Defaults apply without a configuration file
- Options are loaded from and saved to JSON
- Environment variables override file values
- Invalid configs are handled gracefully
"""

from __future__ import annotations

import json
import logging

from pathlib import Path

import pytest

from mysql_codemode.config import ConfigManager
from mysql_codemode.utils.debug_logger import DebugLogger

pytestmark = pytest.mark.unit


def _write_config(path: Path, **options: bool) -> Path:
    path.write_text(json.dumps({ConfigManager.CODEMODE_OPTIONS: options}), encoding="utf-8")
    return path


class TestConfigurationLoading:
    """Test configuration file loading"""

    def test_default_configuration(self):
        config = ConfigManager()
        assert config.is_debug_mode() is False
        assert config.is_strict_table_validation() is False
        assert config.get_all_options() == {ConfigManager.CODEMODE_OPTIONS: {}}

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = ConfigManager(tmp_path / "absent.json")
        assert config.is_debug_mode() is False

    def test_file_configuration_loading(self, tmp_path: Path):
        config_file = _write_config(
            tmp_path / "codemode.json",
            **{ConfigManager.DEBUG_MODE: True, ConfigManager.STRICT_TABLE_VALIDATION: True},
        )

        config = ConfigManager(config_file)

        assert config.is_debug_mode() is True
        assert config.is_strict_table_validation() is True
        assert DebugLogger.is_debug_enabled() is True

    def test_unset_debug_option_leaves_debug_logger_alone(self, tmp_path: Path):
        DebugLogger.set_debug_enabled(True)
        config_file = _write_config(tmp_path / "codemode.json", **{ConfigManager.STRICT_TABLE_VALIDATION: True})

        ConfigManager()
        ConfigManager(config_file)

        assert DebugLogger.is_debug_enabled() is True

    def test_explicit_debug_option_disables_debug_logger(self, tmp_path: Path):
        DebugLogger.set_debug_enabled(True)
        config_file = _write_config(tmp_path / "codemode.json", **{ConfigManager.DEBUG_MODE: False})

        ConfigManager(config_file)

        assert DebugLogger.is_debug_enabled() is False

    def test_invalid_json_falls_back_to_defaults(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        config_file = tmp_path / "broken.json"
        config_file.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="mysql_codemode.config.config_manager"):
            config = ConfigManager(config_file)

        assert config.is_debug_mode() is False
        assert any("Failed to load config file" in record.getMessage() for record in caplog.records)

    def test_non_object_json_falls_back_to_defaults(self, tmp_path: Path):
        config_file = tmp_path / "list.json"
        config_file.write_text("[1, 2]", encoding="utf-8")
        assert ConfigManager(config_file).is_strict_table_validation() is False


class TestEnvironmentOverrides:
    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_truthy_values(self, monkeypatch: pytest.MonkeyPatch, value: str):
        monkeypatch.setenv(ConfigManager.ENV_STRICT, value)
        monkeypatch.setenv(ConfigManager.ENV_DEBUG, value)

        config = ConfigManager()

        assert config.is_strict_table_validation() is True
        assert config.is_debug_mode() is True
        assert DebugLogger.is_debug_enabled() is True

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        config_file = _write_config(tmp_path / "codemode.json", **{ConfigManager.STRICT_TABLE_VALIDATION: True})
        monkeypatch.setenv(ConfigManager.ENV_STRICT, "0")

        assert ConfigManager(config_file).is_strict_table_validation() is False

    def test_env_overrides_are_not_persisted(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        config_file = tmp_path / "codemode.json"
        monkeypatch.setenv(ConfigManager.ENV_DEBUG, "1")

        ConfigManager(config_file)

        assert not config_file.exists()


class TestSavingOptions:
    def test_setters_persist_to_file(self, tmp_path: Path):
        config_file = tmp_path / "nested" / "codemode.json"
        config = ConfigManager(config_file)

        config.set_strict_table_validation(True)
        config.set_debug_mode(True)

        saved = json.loads(config_file.read_text(encoding="utf-8"))
        assert saved == {
            ConfigManager.CODEMODE_OPTIONS: {
                ConfigManager.STRICT_TABLE_VALIDATION: True,
                ConfigManager.DEBUG_MODE: True,
            },
        }
        assert ConfigManager(config_file).is_strict_table_validation() is True

    def test_set_debug_mode_toggles_debug_logger(self):
        config = ConfigManager()
        config.set_debug_mode(True)
        assert DebugLogger.is_debug_enabled() is True
        config.set_debug_mode(False)
        assert DebugLogger.is_debug_enabled() is False

    def test_in_memory_config_is_not_saved(self):
        config = ConfigManager()
        config.set_strict_table_validation(True)
        assert config.config_file is None
        assert config.is_strict_table_validation() is True

    def test_get_all_options_is_a_copy(self):
        config = ConfigManager()
        options = config.get_all_options()
        options[ConfigManager.CODEMODE_OPTIONS][ConfigManager.DEBUG_MODE] = True
        assert config.is_debug_mode() is False

    def test_str(self, tmp_path: Path):
        assert "codemode.json" in str(ConfigManager(tmp_path / "codemode.json"))
