"""Consistency checks between the static alias/promotion tables and a registry.

The alias and promotion tables are maintained by hand and can drift from the
tools a server actually registers.  By default drift is tolerated: unresolvable
aliases and promotions are skipped at build time.  ``validate_static_tables``
reports that drift so strict mode can refuse to build instead.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from mysql_codemode.registry import (
    EXCLUDED_GROUPS,
    TOP_LEVEL_PROMOTIONS,
    get_group_aliases,
    tool_name_to_method_name,
)

if TYPE_CHECKING:
    from mysql_codemode.api import GroupApi
    from mysql_codemode.models import ToolDescriptor


class CodeModeConfigurationError(ValueError):
    """Raised in strict mode when the static tables disagree with the registry."""

    def __init__(self, problems: Iterable[str]):
        self.problems: list[str] = list(problems)
        summary = "; ".join(self.problems) if self.problems else "unknown problem"
        super().__init__(f"Code mode configuration is inconsistent with the tool registry: {summary}")


def validate_static_tables(
    group_apis: Mapping[str, GroupApi],
    tools: Iterable[ToolDescriptor],
) -> list[str]:
    """Return human-readable problems found between *group_apis* and *tools*.

    Checks, in order:

    - duplicate tool names in the registry
    - two tools of one group resolving to the same method name
    - aliases of a present group whose canonical target is missing
    - promotions of a present group whose method is missing

    An empty list means the tables and the registry agree.
    """
    problems: list[str] = []
    tool_list = list(tools)

    name_counts = Counter(tool.name for tool in tool_list)
    for name, count in name_counts.items():
        if count > 1:
            problems.append(f"duplicate tool name '{name}' registered {count} times")

    method_counts: Counter[tuple[str, str]] = Counter(
        (tool.group, tool_name_to_method_name(tool.name, tool.group))
        for tool in tool_list
        if tool.group not in EXCLUDED_GROUPS
    )
    for (group, method), count in method_counts.items():
        if count > 1:
            problems.append(f"{count} tools in group '{group}' resolve to method '{method}'")

    for group, group_api in group_apis.items():
        canonical = set(group_api.canonical_names)
        for alias, target in get_group_aliases(group).items():
            if target not in canonical:
                problems.append(f"alias '{group}.{alias}' targets missing method '{target}'")

        for method in TOP_LEVEL_PROMOTIONS.get(group, ()):
            if method not in group_api:
                problems.append(f"promotion '{group}.{method}' targets missing method")

    return problems
