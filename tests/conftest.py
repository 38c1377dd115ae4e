from __future__ import annotations

import pytest

from mysql_codemode.config import ConfigManager
from mysql_codemode.utils.debug_logger import DebugLogger


@pytest.fixture(autouse=True)
def isolated_codemode_env(monkeypatch: pytest.MonkeyPatch):
    """Clear code mode environment overrides and the process-wide debug flag."""
    monkeypatch.delenv(ConfigManager.ENV_DEBUG, raising=False)
    monkeypatch.delenv(ConfigManager.ENV_STRICT, raising=False)
    monkeypatch.delenv("MYSQL_CODEMODE_REGISTRY", raising=False)
    DebugLogger.set_debug_enabled(False)
    yield
    DebugLogger.set_debug_enabled(False)
