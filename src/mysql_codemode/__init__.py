"""MySQL code mode - callable API synthesized from the MySQL tool registry.

Agent-written code running in a sandbox calls MySQL tools as grouped async
methods (``await mysql.core.readQuery("SELECT 1")``) instead of issuing one
protocol tool call per operation.  This package builds that surface from a
flat list of tool descriptors and normalizes the call shapes agents use.

Programmatic use::

    from mysql_codemode import StaticToolAdapter, create_mysql_api

    api = create_mysql_api(StaticToolAdapter(descriptors))
    mysql = api.create_sandbox_bindings()
"""

try:
    from ._version import version as __version__
except ImportError:
    # Fallback version if not installed or in development without git tags
    __version__ = "0.0.0.dev0"

from mysql_codemode.adapter import StaticToolAdapter, ToolAdapter
from mysql_codemode.api import (
    GroupApi,
    MysqlApi,
    SandboxGroupApi,
    create_group_api,
    create_mysql_api,
)
from mysql_codemode.config import ConfigManager
from mysql_codemode.models import GroupHelp, RequestContext, ToolDescriptor
from mysql_codemode.normalization import merge_keyword_params, normalize_params
from mysql_codemode.registry import classify_tools, resolve_aliases, tool_name_to_method_name
from mysql_codemode.validation import CodeModeConfigurationError, validate_static_tables

__all__ = [
    "CodeModeConfigurationError",
    "ConfigManager",
    "GroupApi",
    "GroupHelp",
    "MysqlApi",
    "RequestContext",
    "SandboxGroupApi",
    "StaticToolAdapter",
    "ToolAdapter",
    "ToolDescriptor",
    "__version__",
    "classify_tools",
    "create_group_api",
    "create_mysql_api",
    "merge_keyword_params",
    "normalize_params",
    "resolve_aliases",
    "tool_name_to_method_name",
    "validate_static_tables",
]
