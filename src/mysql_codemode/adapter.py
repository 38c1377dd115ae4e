"""Adapter contract consumed by the code mode API.

The surrounding server owns the tool registry and knows how to build a
request context; the code mode API only needs those two capabilities.
"""

from __future__ import annotations

import uuid

from collections.abc import Callable, Iterable
from typing import Any, Protocol, runtime_checkable

from mysql_codemode.models import RequestContext, ToolDescriptor


@runtime_checkable
class ToolAdapter(Protocol):
    def get_tool_definitions(self) -> list[ToolDescriptor]: ...

    def create_context(self) -> Any: ...


class StaticToolAdapter:
    """In-memory adapter over a fixed list of tool descriptors."""

    def __init__(
        self,
        descriptors: Iterable[ToolDescriptor],
        context_factory: Callable[[], Any] | None = None,
    ) -> None:
        self._descriptors: list[ToolDescriptor] = list(descriptors)
        self._context_factory = context_factory

    def get_tool_definitions(self) -> list[ToolDescriptor]:
        return list(self._descriptors)

    def create_context(self) -> Any:
        if self._context_factory is not None:
            return self._context_factory()
        return RequestContext(request_id=uuid.uuid4().hex)

    def __repr__(self) -> str:
        return f"StaticToolAdapter(tools={len(self._descriptors)})"
