"""Call-site argument normalization for code mode methods.

Sandbox code calls methods in whatever shape is convenient::

    await mysql.core.readQuery("SELECT 1")
    await mysql.core.createIndex("orders", ["id"], {"unique": True})
    await mysql.transactions.execute([{"sql": "..."}, {"sql": "..."}])
    await mysql.core.readQuery({"sql": "SELECT 1", "limit": 10})

``normalize_params`` folds every one of those into the single parameter
mapping a tool handler expects.  It never raises: a call it cannot interpret
is passed through as-is so the handler's own schema validation reports it.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

# ---------------------------------------------------------------------------
# Positional parameter map: {method name: key | (key, key, ...)}
#
# A single key receives the first positional argument; a tuple of keys
# receives positional arguments in order.  Keyed by canonical method name.
# ---------------------------------------------------------------------------

_POSITIONAL_PARAM_MAP: dict[str, str | tuple[str, ...]] = {
    # core
    "readQuery": "sql",
    "writeQuery": "sql",
    "describeTable": "table",
    "dropTable": "table",
    "listTables": "database",
    "getIndexes": "table",
    "dropIndex": "name",
    "createTable": ("name", "columns"),
    "createIndex": ("table", "columns"),
    # schema
    "createSchema": "name",
    "dropSchema": "name",
    "listSchemas": "pattern",
    "listViews": "database",
    "listFunctions": "database",
    "listStoredProcedures": "database",
    "listTriggers": "table",
    "listConstraints": "table",
    "createView": ("name", "sql"),
    # json
    "extract": ("table", "column", "path", "where"),
    "set": ("table", "column", "path", "value", "where"),
    "insert": ("table", "column", "path", "value", "where"),
    "remove": ("table", "column", "path", "where"),
    "contains": ("table", "column", "value"),
    "keys": ("table", "column", "where"),
    "replace": ("table", "column", "path", "value", "where"),
    "get": ("table", "column", "path"),
    "search": ("table", "column", "searchValue"),
    "update": ("table", "column", "path", "value", "where"),
    "validate": ("table", "column"),
    "stats": ("table", "column"),
    "indexSuggest": ("table", "column"),
    "normalize": ("table", "column"),
    "merge": ("json1", "json2"),
    "diff": ("json1", "json2"),
    "arrayAppend": ("table", "column", "path", "value"),
    # text
    "regexpMatch": ("table", "column", "pattern"),
    "likeSearch": ("table", "column", "pattern"),
    "soundex": ("table", "column", "value"),
    "substring": ("table", "column"),
    "concat": ("table", "columns"),
    "collationConvert": ("table", "column", "collation"),
    # fulltext
    "fulltextCreate": ("table", "columns"),
    "fulltextDrop": ("table", "indexName"),
    "fulltextSearch": ("table", "columns", "query"),
    "fulltextBoolean": ("table", "columns", "query"),
    "fulltextExpand": ("table", "columns", "query"),
    # transactions
    "transactionCommit": "transactionId",
    "transactionRollback": "transactionId",
    "transactionSavepoint": ("transactionId", "name"),
    "transactionRelease": ("transactionId", "name"),
    "transactionRollbackTo": ("transactionId", "name"),
    # performance
    "explain": "sql",
    "explainAnalyze": "sql",
    # admin
    "checkTable": "table",
    "repairTable": "table",
    "optimizeTable": "table",
    "analyzeTable": "table",
    # backup
    "createDump": "tables",
    "exportTable": "table",
    "importData": "table",
    "restoreDump": "filename",
    # stats
    "descriptive": ("table", "column"),
    "percentiles": ("table", "column", "percentiles"),
    "distribution": ("table", "column"),
    "histogram": ("table", "column", "buckets"),
    "correlation": ("table", "column1", "column2"),
    "regression": ("table", "xColumn", "yColumn"),
    "sampling": ("table", "sampleSize"),
    "timeSeries": ("table", "timeColumn", "valueColumn"),
    # partitioning
    "addPartition": ("table", "partitionName", "partitionType", "value"),
    "dropPartition": ("table", "partitionName"),
    "reorganizePartition": ("table", "partitions"),
    "partitionInfo": "table",
    # spatial
    "distance": ("table", "spatialColumn"),
    "distanceSphere": ("table", "spatialColumn"),
    "point": ("longitude", "latitude"),
    "polygon": "coordinates",
    # shell (exportTable is shared with backup and keeps the backup mapping)
    "checkUpgrade": "targetVersion",
    "runScript": ("script", "language"),
    "importTable": ("inputPath", "schema", "table"),
    "importJson": ("inputPath", "schema", "collection"),
    "dumpInstance": "outputDir",
    "dumpSchemas": ("schemas", "outputDir"),
    "dumpTables": ("schema", "tables", "outputDir"),
    "loadDump": "inputDir",
    # security
    "passwordValidate": "password",
}

POSITIONAL_PARAM_MAP: Mapping[str, str | tuple[str, ...]] = MappingProxyType(_POSITIONAL_PARAM_MAP)

# Methods whose bare list argument is the value of one named field.
ARRAY_WRAP_MAP: Mapping[str, str] = MappingProxyType(
    {
        "transactionExecute": "statements",
        "execute": "statements",
    },
)

# Keys filled with a lone string when a method has no positional mapping.
# The handler's schema keeps the one it expects and ignores the rest.
FALLBACK_PARAM_KEYS: tuple[str, ...] = ("sql", "query", "table", "name")


def _is_options(value: Any) -> bool:
    return isinstance(value, Mapping)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def normalize_params(method_name: str, args: Sequence[Any]) -> Any:
    """Fold call-site arguments into a single handler parameter object.

    Args:
    ----
        method_name: Canonical method name the call was dispatched to
        args: Positional arguments exactly as the sandbox passed them

    Returns:
    -------
        ``None`` for a zero-argument call, otherwise the parameter object.
        A lone mapping is returned unchanged (same object); every other shape
        yields a freshly built dict or a best-effort pass-through.
    """
    if not args:
        return None

    if len(args) == 1:
        return _normalize_single(method_name, args[0])

    first = args[0]
    last = args[-1]

    # list + options, e.g. execute([...], {"isolationLevel": "SERIALIZABLE"})
    if _is_array(first):
        wrap_key = ARRAY_WRAP_MAP.get(method_name)
        if wrap_key is not None:
            result: dict[Any, Any] = {wrap_key: first}
            if _is_options(last):
                result.update(last)
            return result

    mapping = POSITIONAL_PARAM_MAP.get(method_name)
    if mapping is None:
        return first

    if isinstance(mapping, str):
        result = {mapping: first}
        if _is_options(last):
            result.update(last)
        return result

    # A trailing mapping that names one of the slots is options, not a value.
    last_is_options = _is_options(last) and any(key in mapping for key in last)
    positional_count = len(args) - 1 if last_is_options else len(args)

    result = dict(zip(mapping, args[:positional_count]))

    if (last_is_options or len(args) > len(mapping)) and _is_options(last):
        result.update(last)

    return result


def _normalize_single(method_name: str, arg: Any) -> Any:
    if _is_options(arg):
        return arg

    if _is_array(arg):
        wrap_key = ARRAY_WRAP_MAP.get(method_name)
        if wrap_key is not None:
            return {wrap_key: arg}
        return arg

    if isinstance(arg, str):
        mapping = POSITIONAL_PARAM_MAP.get(method_name)
        if isinstance(mapping, str):
            return {mapping: arg}
        if mapping:
            return {mapping[0]: arg}
        return dict.fromkeys(FALLBACK_PARAM_KEYS, arg)

    return arg


def merge_keyword_params(method_name: str, params: Any, kwargs: Mapping[str, Any]) -> Any:
    """Overlay Python keyword arguments on already normalized parameters.

    Keywords are always named, so they never fill a positional slot.  A bare
    value left by ``normalize_params`` is first placed under the method's
    first slot (or the fallback keys) so the keywords have a dict to join.

    Examples::

        merge_keyword_params("createIndex", {"table": "orders"}, {"unique": True})
        # {"table": "orders", "unique": True}
        merge_keyword_params("readQuery", None, {"sql": "SELECT 1"})
        # {"sql": "SELECT 1"}
    """
    if not kwargs:
        return params
    if params is None:
        return dict(kwargs)
    if _is_options(params):
        return {**params, **kwargs}
    return {**_slot_params(method_name, params), **kwargs}


def _slot_params(method_name: str, value: Any) -> dict[str, Any]:
    mapping = POSITIONAL_PARAM_MAP.get(method_name)
    if isinstance(mapping, str):
        return {mapping: value}
    if mapping:
        return {mapping[0]: value}
    return dict.fromkeys(FALLBACK_PARAM_KEYS, value)
