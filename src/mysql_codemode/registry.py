"""Tool grouping, method naming and alias tables for the code mode API.

The registry hands us a flat, ordered list of MySQL tool descriptors.  This
module partitions them by group, derives the camelCase method name each tool
gets inside its group (``mysql_json_extract`` -> ``json.extract``), and holds
the static alias table that widens each group's callable surface.

All tables are read-only and loaded once per process.
"""

from __future__ import annotations

import re

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from mysql_codemode.models import ToolDescriptor


# ---------------------------------------------------------------------------
# Method naming tables
# ---------------------------------------------------------------------------

# Every registered tool name starts with this prefix.
TOOL_NAME_PREFIX = "mysql_"

# Groups whose tool names do not literally start with ``<group>_``.
GROUP_PREFIX_OVERRIDES: Mapping[str, str] = MappingProxyType(
    {
        "sysschema": "sys_",
        "fulltext": "fulltext_",
        "docstore": "doc_",
        "transactions": "transaction_",
        "shell": "mysqlsh_",
    },
)

# Groups whose prefix stays in the method name (fulltextSearch, docAdd,
# transactionBegin, ...).  Stripping it would leave generic or colliding names.
KEEP_PREFIX_GROUPS: frozenset[str] = frozenset(
    {
        "fulltext",
        "sysschema",
        "docstore",
        "transactions",
        "cluster",
        "roles",
        "events",
    },
)

# Groups never exposed inside the sandbox.  ``codemode`` holds the
# code-execution tool itself.
EXCLUDED_GROUPS: frozenset[str] = frozenset({"codemode"})

# ---------------------------------------------------------------------------
# Method aliases: {group: {alias: canonical}}
# ---------------------------------------------------------------------------

_METHOD_ALIASES: dict[str, dict[str, str]] = {
    # json tools lose their prefix (extract), agents often guess jsonExtract
    "json": {
        "jsonExtract": "extract",
        "jsonSet": "set",
        "jsonInsert": "insert",
        "jsonRemove": "remove",
        "jsonContains": "contains",
        "jsonKeys": "keys",
        "jsonReplace": "replace",
        "jsonGet": "get",
        "jsonSearch": "search",
        "jsonUpdate": "update",
        "jsonValidate": "validate",
        "jsonMerge": "merge",
        "jsonNormalize": "normalize",
        "jsonDiff": "diff",
        "jsonIndexSuggest": "indexSuggest",
        "jsonStats": "stats",
        "jsonArrayAppend": "arrayAppend",
    },
    "text": {
        "regex": "regexpMatch",
        "regexp": "regexpMatch",
        "like": "likeSearch",
        "pattern": "likeSearch",
        "sound": "soundex",
        "substr": "substring",
        "concatenate": "concat",
        "collation": "collationConvert",
    },
    "fulltext": {
        "create": "fulltextCreate",
        "drop": "fulltextDrop",
        "search": "fulltextSearch",
        "boolean": "fulltextBoolean",
        "expand": "fulltextExpand",
        "createIndex": "fulltextCreate",
        "dropIndex": "fulltextDrop",
        "naturalLanguage": "fulltextSearch",
        "booleanMode": "fulltextBoolean",
        "queryExpansion": "fulltextExpand",
    },
    "transactions": {
        "begin": "transactionBegin",
        "commit": "transactionCommit",
        "rollback": "transactionRollback",
        "savepoint": "transactionSavepoint",
        "release": "transactionRelease",
        "rollbackTo": "transactionRollbackTo",
        "execute": "transactionExecute",
    },
    "performance": {
        "queryPlan": "explain",
        "analyze": "explainAnalyze",
        "slowLog": "slowQueries",
        "slow": "slowQueries",
        "trace": "optimizerTrace",
        "bufferPool": "bufferPoolStats",
        "innodb": "innodbStatus",
        "stats": "tableStats",
        "threads": "threadStats",
        "health": "serverHealth",
        "processes": "showProcesslist",
        "processlist": "showProcesslist",
    },
    "optimization": {
        "recommend": "indexRecommendation",
        "indexAdvice": "indexRecommendation",
        "hint": "forceIndex",
        "forceHint": "forceIndex",
        "rewrite": "queryRewrite",
    },
    "admin": {
        "check": "checkTable",
        "repair": "repairTable",
        "optimize": "optimizeTable",
        "analyze": "analyzeTable",
        "flush": "flushTables",
        "kill": "killQuery",
        "pool": "poolStats",
    },
    "monitoring": {
        "status": "showStatus",
        "variables": "showVariables",
        "processes": "showProcesslist",
        "processlist": "showProcesslist",
        "queries": "queryStats",
        "slowlog": "slowQueries",
    },
    "backup": {
        "dump": "createDump",
        "export": "exportTable",
        "import": "importData",
        "restore": "restoreDump",
    },
    "replication": {
        "status": "slaveStatus",
        "master": "masterStatus",
        "slave": "slaveStatus",
        "binlog": "binlogEvents",
        "gtid": "gtidStatus",
    },
    "partitioning": {
        "add": "addPartition",
        "drop": "dropPartition",
        "reorganize": "reorganizePartition",
        "info": "partitionInfo",
        "list": "partitionInfo",
    },
    "schema": {
        "views": "listViews",
        "functions": "listFunctions",
        "procedures": "listStoredProcedures",
        "triggers": "listTriggers",
        "constraints": "listConstraints",
        "schemas": "listSchemas",
        "createDb": "createSchema",
        "dropDb": "dropSchema",
    },
    "events": {
        "create": "eventCreate",
        "drop": "eventDrop",
        "alter": "eventAlter",
        "list": "eventList",
        "status": "eventStatus",
        "scheduler": "schedulerStatus",
    },
    "stats": {
        "summary": "descriptive",
        "percentile": "percentiles",
        "movingAverage": "timeSeries",
        "time_series": "timeSeries",
    },
    "spatial": {
        "addColumn": "createColumn",
        "addIndex": "createIndex",
        "dist": "distance",
        "distSphere": "distanceSphere",
        "pointInPolygon": "contains",
    },
    "security": {
        "ssl": "sslStatus",
        "encryption": "encryptionStatus",
        "firewall": "firewallStatus",
        "privileges": "userPrivileges",
        "password": "passwordValidate",
        "mask": "maskData",
        "sensitive": "sensitiveTables",
    },
    "cluster": {
        "status": "clusterStatus",
        "instances": "clusterInstances",
        "topology": "clusterTopology",
        "switchover": "clusterSwitchover",
        "routerStatus": "clusterRouterStatus",
    },
    "roles": {
        "create": "roleCreate",
        "drop": "roleDrop",
        "list": "roleList",
        "assign": "roleAssign",
        "grant": "roleGrant",
        "revoke": "roleRevoke",
        "grants": "roleGrants",
    },
    "docstore": {
        "add": "docAdd",
        "find": "docFind",
        "modify": "docModify",
        "remove": "docRemove",
        "createCollection": "docCreateCollection",
        "dropCollection": "docDropCollection",
        "listCollections": "docListCollections",
        "collectionInfo": "docCollectionInfo",
        "createIndex": "docCreateIndex",
    },
    "sysschema": {
        "schemaStats": "sysSchemaStats",
        "lockWaits": "sysInnodbLockWaits",
        "memory": "sysMemorySummary",
        "statements": "sysStatementSummary",
        "waits": "sysWaitSummary",
        "io": "sysIoSummary",
        "users": "sysUserSummary",
        "hosts": "sysHostSummary",
    },
    "router": {
        "metadata": "metadataStatus",
        "pool": "poolStatus",
        "connections": "routeConnections",
        "destinations": "routeDestinations",
        "blocked": "routeBlockedHosts",
    },
    "shell": {
        "run": "runScript",
        "script": "runScript",
        "upgrade": "checkUpgrade",
        "dump": "dumpInstance",
        "load": "loadDump",
        "export": "exportTable",
        "import": "importTable",
    },
}

METHOD_ALIASES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {group: MappingProxyType(aliases) for group, aliases in _METHOD_ALIASES.items()},
)

_EMPTY: Mapping[str, str] = MappingProxyType({})

# ---------------------------------------------------------------------------
# Top-level promotions: {group: (method, ...)}
#
# Promoted methods are also bound directly on the sandbox root, so
# ``mysql.readQuery(...)`` works alongside ``mysql.core.readQuery(...)``.
# ---------------------------------------------------------------------------

TOP_LEVEL_PROMOTIONS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "core": (
            "readQuery",
            "writeQuery",
            "listTables",
            "describeTable",
            "createTable",
            "dropTable",
            "createIndex",
            "getIndexes",
        ),
        "transactions": (
            "transactionBegin",
            "transactionCommit",
            "transactionRollback",
            "transactionSavepoint",
            "transactionRelease",
            "transactionRollbackTo",
            "transactionExecute",
        ),
        "json": (
            "extract",
            "set",
            "insert",
            "remove",
            "contains",
            "keys",
            "replace",
            "get",
            "search",
            "update",
            "validate",
            "merge",
            "diff",
            "stats",
            "indexSuggest",
            "normalize",
            "arrayAppend",
        ),
        "performance": (
            "explain",
            "explainAnalyze",
            "slowQueries",
            "bufferPoolStats",
            "innodbStatus",
            "tableStats",
            "threadStats",
            "serverHealth",
        ),
        "admin": (
            "checkTable",
            "repairTable",
            "optimizeTable",
            "analyzeTable",
            "flushTables",
            "killQuery",
        ),
        "monitoring": (
            "showStatus",
            "showVariables",
            "showProcesslist",
            "queryStats",
        ),
        "backup": (
            "createDump",
            "exportTable",
            "importData",
            "restoreDump",
        ),
        "stats": (
            "descriptive",
            "percentiles",
            "correlation",
            "regression",
            "timeSeries",
            "distribution",
            "histogram",
            "sampling",
        ),
    },
)

# Groups whose promoted names get a prefix at the top level; bare json names
# (set, get, keys, ...) would be ambiguous there.
PROMOTION_PREFIXES: Mapping[str, str] = MappingProxyType({"json": "json"})


def promoted_name(group: str, method: str) -> str:
    """Return the top-level name a promoted *method* of *group* is bound under.

    Examples::

        promoted_name("core", "readQuery")      # -> "readQuery"
        promoted_name("json", "arrayAppend")    # -> "jsonArrayAppend"
    """
    prefix = PROMOTION_PREFIXES.get(group)
    if not prefix:
        return method
    return f"{prefix}{method[:1].upper()}{method[1:]}"


# ---------------------------------------------------------------------------
# Group classification
# ---------------------------------------------------------------------------


def classify_tools(descriptors: Iterable[ToolDescriptor]) -> dict[str, list[ToolDescriptor]]:
    """Partition tools by group, keeping registration order within each group.

    Groups appear in the order their first tool was seen.  Duplicates are kept
    as-is; a duplicate name is a registry defect, not something to repair here.
    """
    grouped: dict[str, list[ToolDescriptor]] = {}
    for tool in descriptors:
        grouped.setdefault(tool.group, []).append(tool)
    return grouped


# ---------------------------------------------------------------------------
# Method naming
# ---------------------------------------------------------------------------

_SNAKE_SEGMENT = re.compile(r"_([a-z])")


def group_prefix(group: str) -> str:
    """Return the tool-name prefix used by *group* (``json`` -> ``json_``)."""
    return GROUP_PREFIX_OVERRIDES.get(group, f"{group}_")


def snake_to_camel(name: str) -> str:
    """Upper-case every lowercase letter that follows an underscore.

    Examples::

        snake_to_camel("read_query")        # -> "readQuery"
        snake_to_camel("sys_io_summary")    # -> "sysIoSummary"
        snake_to_camel("explain")           # -> "explain"
    """
    return _SNAKE_SEGMENT.sub(lambda match: match.group(1).upper(), name)


def tool_name_to_method_name(tool_name: str, group: str) -> str:
    """Convert a registry tool name to its camelCase method name within *group*.

    Examples::

        tool_name_to_method_name("mysql_read_query", "core")              # -> "readQuery"
        tool_name_to_method_name("mysql_json_extract", "json")            # -> "extract"
        tool_name_to_method_name("mysql_fulltext_search", "fulltext")     # -> "fulltextSearch"
        tool_name_to_method_name("mysql_sys_schema_stats", "sysschema")   # -> "sysSchemaStats"
        tool_name_to_method_name("mysql_mysqlsh_run_script", "shell")     # -> "runScript"

    A tail that does not start with the group prefix is used whole; this never
    raises.
    """
    name = tool_name.removeprefix(TOOL_NAME_PREFIX)

    prefix = group_prefix(group)
    if group not in KEEP_PREFIX_GROUPS and name.startswith(prefix):
        name = name[len(prefix) :]

    return snake_to_camel(name)


# ---------------------------------------------------------------------------
# Alias resolution
# ---------------------------------------------------------------------------


def get_group_aliases(group: str) -> Mapping[str, str]:
    """Return the full static alias table for *group* (possibly empty)."""
    return METHOD_ALIASES.get(group, _EMPTY)


def resolve_aliases(group: str, canonical_names: Iterable[str]) -> dict[str, str]:
    """Return the aliases of *group* whose canonical target is actually present.

    Aliases pointing at methods the registry did not provide are dropped, so a
    registry that omits some tools never produces dangling names.
    """
    present = set(canonical_names)
    resolved: dict[str, str] = {}
    for alias, canonical in get_group_aliases(group).items():
        if canonical in present:
            resolved[alias] = canonical
    return resolved
