"""Tests for static table consistency checks."""

from __future__ import annotations

import pytest

from mysql_codemode.api import create_group_api
from mysql_codemode.registry import EXCLUDED_GROUPS, classify_tools
from mysql_codemode.validation import CodeModeConfigurationError, validate_static_tables
from tests.helpers import CORE_ONLY_TOOLS, make_adapter, make_tools

pytestmark = pytest.mark.unit


def _problems(entries) -> list[str]:
    adapter = make_adapter(entries)
    tools = adapter.get_tool_definitions()
    group_apis = {
        group: create_group_api(adapter, group, group_tools)
        for group, group_tools in classify_tools(tools).items()
        if group not in EXCLUDED_GROUPS
    }
    return validate_static_tables(group_apis, tools)


def test_consistent_registry_has_no_problems():
    assert _problems(CORE_ONLY_TOOLS) == []


def test_empty_registry_has_no_problems():
    assert validate_static_tables({}, []) == []


def test_duplicate_tool_names_reported():
    problems = _problems((*CORE_ONLY_TOOLS, ("mysql_read_query", "core")))
    assert "duplicate tool name 'mysql_read_query' registered 2 times" in problems


def test_canonical_collision_reported():
    problems = _problems((("mysql_json_extract", "json"), ("mysql_extract", "json")))
    assert "2 tools in group 'json' resolve to method 'extract'" in problems


def test_dangling_alias_reported():
    problems = _problems((("mysql_json_extract", "json"),))
    assert "alias 'json.jsonSet' targets missing method 'set'" in problems
    assert not any("json.jsonExtract" in p for p in problems)


def test_missing_promotion_reported():
    problems = _problems([entry for entry in CORE_ONLY_TOOLS if entry[0] != "mysql_drop_table"])
    assert problems == ["promotion 'core.dropTable' targets missing method"]


def test_absent_groups_are_not_checked():
    problems = _problems(CORE_ONLY_TOOLS)
    assert not any("transactions" in p for p in problems)


def test_excluded_groups_are_ignored():
    entries = (*CORE_ONLY_TOOLS, ("mysql_execute_code", "codemode"), ("execute_code", "codemode"))
    assert _problems(entries) == []


def test_accepts_generator_of_tools():
    tools = make_tools(CORE_ONLY_TOOLS)
    assert validate_static_tables({}, (tool for tool in tools)) == []


class TestCodeModeConfigurationError:
    def test_is_value_error_with_problems(self):
        error = CodeModeConfigurationError(["a", "b"])
        assert isinstance(error, ValueError)
        assert error.problems == ["a", "b"]
        assert "a; b" in str(error)

    def test_without_problems(self):
        assert "unknown problem" in str(CodeModeConfigurationError([]))
