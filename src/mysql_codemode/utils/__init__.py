"""Shared utilities for the code mode API."""

from .debug_logger import DebugLogger

__all__ = [
    "DebugLogger",
]
