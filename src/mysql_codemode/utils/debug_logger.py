"""Debug logger for code mode dispatch.

Debug output is off by default and is switched on by ``ConfigManager`` (or the
``MYSQL_CODEMODE_DEBUG`` environment variable).
"""

from __future__ import annotations

import logging
import time

from typing import Any

logger = logging.getLogger(__name__)


class DebugLogger:
    """Process-wide debug logging switch for the code mode API."""

    _debug_enabled: bool = False

    @staticmethod
    def set_debug_enabled(enabled: bool) -> None:
        DebugLogger._debug_enabled = bool(enabled)

    @staticmethod
    def is_debug_enabled() -> bool:
        return DebugLogger._debug_enabled

    @staticmethod
    def debug(source: Any, message: str) -> None:
        """Log a debug message if debug mode is enabled.

        Args:
            source: The object emitting the message (used for the prefix)
            message: The message to log
        """
        if DebugLogger._debug_enabled:
            logger.info(f"[DEBUG] {_source_name(source)}: {message}")

    @staticmethod
    def debug_performance(source: Any, operation: str, duration_ms: int) -> None:
        if DebugLogger._debug_enabled:
            logger.info(f"[DEBUG-PERF] {operation} took {duration_ms}ms")

    @staticmethod
    def debug_dispatch(source: Any, method: str, status: str, details: str | None = None) -> None:
        """Log a sandbox method dispatch event.

        Args:
            source: The object emitting the message
            method: Qualified method name, e.g. ``core.readQuery``
            status: START, SUCCESS or ERROR
            details: Extra text appended after the status (optional)
        """
        if DebugLogger._debug_enabled:
            message = f"[DEBUG-TOOL] {method} - {status}"
            if details:
                message += f": {details}"
            logger.info(message)

    @classmethod
    def time_operation(cls, source: Any, operation_name: str):
        """Context manager that logs START, the outcome and the duration of an operation.

        Example:
            with DebugLogger.time_operation(self, "core.readQuery"):
                result = await handler(params, context)
        """

        class Timer:
            def __init__(self, src: Any, op: str):
                self.source = src
                self.operation = op
                self.start_time: float | None = None

            def __enter__(self):
                self.start_time = time.perf_counter()
                cls.debug_dispatch(self.source, self.operation, "START")
                return self

            def __exit__(self, exc_type, exc_val, exc_tb):
                if self.start_time is not None:
                    duration_ms = int((time.perf_counter() - self.start_time) * 1000)
                    status = "ERROR" if exc_type else "SUCCESS"
                    details = f"{exc_type.__name__}: {exc_val}" if exc_type else None
                    cls.debug_performance(self.source, self.operation, duration_ms)
                    cls.debug_dispatch(self.source, self.operation, status, details)
                return False

        return Timer(source, operation_name)


def _source_name(source: Any) -> str:
    if source is None:
        return "-"
    if isinstance(source, str):
        return source
    return source.__class__.__name__
