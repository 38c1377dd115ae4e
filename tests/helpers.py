"""Test helper utilities for mysql-codemode tests.

Provides common functionality used across multiple test modules:
- Tool descriptor and adapter builders backed by AsyncMock handlers
- A representative sample registry (importable by the CLI as
  ``tests.helpers:sample_adapter``)
- Shared shape assertions
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any
from unittest.mock import AsyncMock

from mysql_codemode.adapter import StaticToolAdapter
from mysql_codemode.models import ToolDescriptor

# (tool name, group) pairs modeled on the real MySQL registry.
SAMPLE_TOOLS: tuple[tuple[str, str], ...] = (
    ("mysql_read_query", "core"),
    ("mysql_write_query", "core"),
    ("mysql_list_tables", "core"),
    ("mysql_describe_table", "core"),
    ("mysql_create_index", "core"),
    ("mysql_json_extract", "json"),
    ("mysql_json_set", "json"),
    ("mysql_json_get", "json"),
    ("mysql_json_keys", "json"),
    ("mysql_transaction_begin", "transactions"),
    ("mysql_transaction_commit", "transactions"),
    ("mysql_transaction_savepoint", "transactions"),
    ("mysql_transaction_execute", "transactions"),
    ("mysql_fulltext_search", "fulltext"),
    ("mysql_fulltext_create", "fulltext"),
    ("mysql_explain", "performance"),
    ("mysql_slow_queries", "performance"),
    ("mysql_stats_descriptive", "stats"),
    ("mysql_execute_code", "codemode"),
)

# The eight promoted core tools and nothing else: agrees with every static table.
CORE_ONLY_TOOLS: tuple[tuple[str, str], ...] = (
    ("mysql_read_query", "core"),
    ("mysql_write_query", "core"),
    ("mysql_list_tables", "core"),
    ("mysql_describe_table", "core"),
    ("mysql_create_table", "core"),
    ("mysql_drop_table", "core"),
    ("mysql_create_index", "core"),
    ("mysql_get_indexes", "core"),
)


def make_handler(name: str) -> AsyncMock:
    """Async handler that echoes which tool it belongs to."""
    return AsyncMock(return_value={"tool": name})


def make_tool(name: str, group: str, handler: Any = None) -> ToolDescriptor:
    return ToolDescriptor(name=name, group=group, handler=handler if handler is not None else make_handler(name))


def make_tools(entries: Iterable[tuple[str, str]] = SAMPLE_TOOLS) -> list[ToolDescriptor]:
    return [make_tool(name, group) for name, group in entries]


def make_adapter(
    entries: Iterable[tuple[str, str]] = SAMPLE_TOOLS,
    context_factory: Callable[[], Any] | None = None,
) -> StaticToolAdapter:
    return StaticToolAdapter(make_tools(entries), context_factory=context_factory)


def sample_adapter() -> StaticToolAdapter:
    """Zero-argument registry factory used by the CLI tests."""
    return make_adapter()


SAMPLE_DESCRIPTORS: list[ToolDescriptor] = make_tools()


def handler_of(adapter: StaticToolAdapter, tool_name: str) -> AsyncMock:
    """Return the AsyncMock handler registered for *tool_name*."""
    for tool in adapter.get_tool_definitions():
        if tool.name == tool_name:
            return tool.handler
    raise KeyError(tool_name)


def assert_method_name_invariants(value: str) -> None:
    """A method name is a non-empty identifier with no separators left in it."""
    assert isinstance(value, str)
    assert value
    assert value == value.strip()
    assert "-" not in value
    assert " " not in value
    assert value.isidentifier()
    assert value[0].islower()


def assert_mapping_invariants(mapping: dict[str, Any], *, expected_keys: list[str] | None = None) -> None:
    assert isinstance(mapping, dict)
    assert all(isinstance(k, str) for k in mapping)
    assert all(k != "" and k.strip() == k for k in mapping)
    assert mapping == dict(mapping)
    if expected_keys is not None:
        assert list(mapping.keys()) == expected_keys
