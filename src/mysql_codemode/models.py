"""Pydantic models shared by the registry adapter and the code mode API."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ToolHandler = Callable[[Any, Any], Awaitable[Any]]


class ToolDescriptor(BaseModel):
    """A single registry entry: one callable MySQL operation.

    Only ``name``, ``group`` and ``handler`` are read by the code mode API; the
    remaining fields travel with the descriptor for the protocol layer.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Globally unique tool name, e.g. mysql_read_query.")
    group: str = Field(..., description="Domain group the tool belongs to, e.g. core or json.")
    handler: ToolHandler = Field(..., description="Async handler invoked as handler(params, context).")
    title: str | None = Field(None, description="Human-readable title.")
    description: str = Field("", description="Tool description shown to protocol clients.")
    input_schema: Any = Field(None, description="Input schema, validated by the handler itself.")
    required_scopes: tuple[str, ...] = Field((), description="Scopes required by the transport layer.")
    annotations: dict[str, Any] = Field(default_factory=dict, description="Protocol annotations (readOnlyHint, ...).")


class RequestContext(BaseModel):
    """Per-call invocation context handed to tool handlers."""

    request_id: str = Field(..., description="Unique id of this invocation.")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the invocation context was created.",
    )


class GroupHelp(BaseModel):
    """Payload returned by ``mysql.<group>.help()`` inside the sandbox."""

    model_config = ConfigDict(populate_by_name=True)

    methods: list[str] = Field(default_factory=list, description="Canonical method names (aliases excluded).")
    method_aliases: list[str] = Field(
        default_factory=list,
        alias="methodAliases",
        description="Shorthand aliases that do not repeat the group name.",
    )
    examples: list[str] = Field(default_factory=list, description="Illustrative sandbox calls.")
