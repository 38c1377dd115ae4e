"""Callable code mode API synthesized from the MySQL tool registry.

``MysqlApi`` turns the adapter's flat tool list into one ``GroupApi`` per
domain group, each exposing camelCase async methods plus their aliases::

    api = create_mysql_api(adapter)
    rows = await api.core.readQuery("SELECT * FROM users LIMIT 10")
    plan = await api.performance.queryPlan("SELECT 1")     # alias of explain

``MysqlApi.create_sandbox_bindings`` produces the object handed to the sandbox
as ``mysql``: groups with ``help()``, promoted top-level shortcuts such as
``mysql.readQuery`` and ``mysql.jsonExtract``, and a top-level ``help()``.

Building is synchronous and happens once per adapter.  The only await in this
module is the handler call inside each method wrapper.
"""

from __future__ import annotations

import logging

from collections.abc import Awaitable, Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from mysql_codemode.adapter import ToolAdapter
from mysql_codemode.config import ConfigManager
from mysql_codemode.examples import get_group_examples
from mysql_codemode.models import GroupHelp, ToolDescriptor
from mysql_codemode.normalization import merge_keyword_params, normalize_params
from mysql_codemode.registry import (
    EXCLUDED_GROUPS,
    PROMOTION_PREFIXES,
    TOP_LEVEL_PROMOTIONS,
    classify_tools,
    promoted_name,
    resolve_aliases,
    tool_name_to_method_name,
)
from mysql_codemode.utils.debug_logger import DebugLogger
from mysql_codemode.validation import CodeModeConfigurationError, validate_static_tables

logger = logging.getLogger(__name__)

ApiMethod = Callable[..., Awaitable[Any]]

__all__ = [
    "PROMOTION_PREFIXES",
    "TOP_LEVEL_PROMOTIONS",
    "ApiMethod",
    "GroupApi",
    "SandboxGroupApi",
    "MysqlApi",
    "create_group_api",
    "create_mysql_api",
]


# ---------------------------------------------------------------------------
# Group API
# ---------------------------------------------------------------------------


class GroupApi:
    """Read-only set of callables for one tool group.

    Entries are reachable by attribute (``api.core.readQuery``) and by item
    (``api.core["readQuery"]``).  Names such as ``get`` and ``keys`` always
    resolve to tools (the json group has both), never to container helpers.
    """

    def __init__(self, group: str, methods: Mapping[str, Callable[..., Any]], canonical_names: Iterable[str]):
        self._group = group
        self._methods: dict[str, Callable[..., Any]] = dict(methods)
        self._canonical_names: tuple[str, ...] = tuple(canonical_names)

    @property
    def group_name(self) -> str:
        return self._group

    @property
    def canonical_names(self) -> tuple[str, ...]:
        """Method names derived from tool names, in registry order (aliases excluded)."""
        return self._canonical_names

    def list_methods(self) -> list[str]:
        """All callable names: canonical names first, then aliases."""
        return list(self._methods)

    def alias_names(self) -> list[str]:
        canonical = set(self._canonical_names)
        return [name for name in self._methods if name not in canonical]

    def to_dict(self) -> dict[str, Callable[..., Any]]:
        return dict(self._methods)

    def __getitem__(self, name: str) -> Callable[..., Any]:
        return self._methods[name]

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __iter__(self) -> Iterator[str]:
        return iter(self._methods)

    def __len__(self) -> int:
        return len(self._methods)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._methods[name]
        except KeyError:
            available = ", ".join(self._methods) or "(none)"
            raise AttributeError(f"Group '{self._group}' has no method '{name}'. Available methods: {available}") from None

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._methods))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(group={self._group!r}, methods={len(self._canonical_names)}, aliases={len(self._methods) - len(self._canonical_names)})"


class SandboxGroupApi(GroupApi):
    """Group as bound into the sandbox: the same callables plus ``help()``."""

    def help(self) -> dict[str, Any]:
        return _group_help(self._group, self)


def _make_method(adapter: ToolAdapter, group: str, method_name: str, tool: ToolDescriptor) -> ApiMethod:
    handler = tool.handler
    qualified_name = f"{group}.{method_name}"

    async def method(*args: Any, **kwargs: Any) -> Any:
        params = merge_keyword_params(method_name, normalize_params(method_name, args), kwargs)
        context = adapter.create_context()
        with DebugLogger.time_operation("GroupApi", qualified_name):
            return await handler(params if params is not None else {}, context)

    method.__name__ = method_name
    method.__qualname__ = qualified_name
    method.__doc__ = tool.description or f"Invoke the {tool.name} tool."
    return method


def create_group_api(adapter: ToolAdapter, group: str, tools: Iterable[ToolDescriptor]) -> GroupApi:
    """Build the callable surface of one group.

    Args:
    ----
        adapter: Supplies a fresh invocation context for every call
        group: Group tag shared by *tools*
        tools: The group's descriptors, in registry order

    Returns:
    -------
        A ``GroupApi`` holding one wrapper per tool under its canonical name,
        plus every alias whose target exists, bound to the very same wrapper.
    """
    methods: dict[str, ApiMethod] = {}
    canonical_names: list[str] = []

    for tool in tools:
        method_name = tool_name_to_method_name(tool.name, group)
        if method_name not in methods:
            canonical_names.append(method_name)
        methods[method_name] = _make_method(adapter, group, method_name, tool)

    for alias, canonical in resolve_aliases(group, canonical_names).items():
        methods[alias] = methods[canonical]

    return GroupApi(group, methods, canonical_names)


# ---------------------------------------------------------------------------
# Top-level API
# ---------------------------------------------------------------------------


class MysqlApi:
    """Code mode API over every tool group the adapter provides.

    Groups are attributes (``api.core``, ``api.json``, ...).  Groups listed in
    ``EXCLUDED_GROUPS`` are classified but never exposed.
    """

    def __init__(self, adapter: ToolAdapter, config: ConfigManager | None = None):
        self._adapter = adapter
        self._config = config if config is not None else ConfigManager()

        tools = adapter.get_tool_definitions()
        self._tools_by_group: dict[str, list[ToolDescriptor]] = classify_tools(tools)
        self._group_apis: dict[str, GroupApi] = {
            group: create_group_api(adapter, group, group_tools)
            for group, group_tools in self._tools_by_group.items()
            if group not in EXCLUDED_GROUPS
        }

        self._check_static_tables(tools)

        logger.debug(
            f"Built code mode API: {len(self._group_apis)} groups, "
            f"{sum(len(api.canonical_names) for api in self._group_apis.values())} methods",
        )

    def _check_static_tables(self, tools: list[ToolDescriptor]) -> None:
        problems = validate_static_tables(self._group_apis, tools)
        if not problems:
            return
        if self._config.is_strict_table_validation():
            raise CodeModeConfigurationError(problems)
        for problem in problems:
            DebugLogger.debug(self, f"Ignoring static table mismatch: {problem}")

    @property
    def group_apis(self) -> Mapping[str, GroupApi]:
        return MappingProxyType(self._group_apis)

    def __getattr__(self, name: str) -> GroupApi:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._group_apis[name]
        except KeyError:
            available = ", ".join(self._group_apis) or "(none)"
            raise AttributeError(f"Unknown group '{name}'. Available groups: {available}") from None

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._group_apis))

    def available_groups(self) -> dict[str, int]:
        """Number of registered tools per group, in first-seen order."""
        return {group: len(tools) for group, tools in self._tools_by_group.items()}

    def group_methods(self, group: str) -> list[str]:
        """All callable names of *group* (aliases included); empty for unknown groups."""
        group_api = self._group_apis.get(group)
        if group_api is None:
            return []
        return group_api.list_methods()

    def get_method(self, group: str, method: str) -> ApiMethod | None:
        group_api = self._group_apis.get(group)
        if group_api is None or method not in group_api:
            return None
        return group_api[method]

    def help(self) -> dict[str, list[str]]:
        """Canonical method names per exposed group.

        Examples::

            api.help()
            # {"core": ["readQuery", "writeQuery", ...], "json": ["extract", ...]}
        """
        return {group: list(group_api.canonical_names) for group, group_api in self._group_apis.items()}

    def create_sandbox_bindings(self) -> dict[str, Any]:
        """Build the object exposed to sandboxed code as ``mysql``.

        Contains one ``GroupApi`` per group (its methods plus ``help()``),
        the promoted top-level shortcuts that exist in this registry, and a
        top-level ``help()``.
        """
        bindings: dict[str, Any] = {}

        for group, group_api in self._group_apis.items():
            bindings[group] = SandboxGroupApi(group, group_api.to_dict(), group_api.canonical_names)

        bindings["help"] = self.help

        for group, methods in TOP_LEVEL_PROMOTIONS.items():
            group_api = self._group_apis.get(group)
            if group_api is None:
                continue
            for method in methods:
                if method in group_api:
                    bindings[promoted_name(group, method)] = group_api[method]

        return bindings

    def __repr__(self) -> str:
        return f"MysqlApi(groups={list(self._group_apis)})"


def _group_help(group: str, group_api: GroupApi) -> dict[str, Any]:
    lower_group = group.lower()
    useful_aliases = [alias for alias in group_api.alias_names() if not alias.lower().startswith(lower_group)]
    return GroupHelp(
        methods=list(group_api.canonical_names),
        method_aliases=useful_aliases,
        examples=get_group_examples(group),
    ).model_dump(by_alias=True)


def create_mysql_api(adapter: ToolAdapter, config: ConfigManager | None = None) -> MysqlApi:
    """Create the code mode API for *adapter*."""
    return MysqlApi(adapter, config)
