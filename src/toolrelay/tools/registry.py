"""ToolRegistry: name-keyed dispatch of tool calls to handlers.

Implements the ToolProvider protocol, the only interface a tool backend
(mock or a real MCP client) needs to plug into the Orchestrator.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from toolrelay.exceptions import ToolExecutionError, ToolNotFoundError
from toolrelay.tools.models import FunctionToolHandler, ToolDescriptor, ToolInvocationResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from toolrelay.tools.models import ToolHandler

logger = logging.getLogger(__name__)


@runtime_checkable
class ToolProvider(Protocol):
    """Protocol for pluggable tool backends."""

    async def list_tools(self) -> list[ToolDescriptor]:
        """Return the tool catalog."""
        ...

    async def call_tool(
        self,
        name: str,
        arguments: dict,
        *,
        invocation_id: str | None = None,
    ) -> ToolInvocationResult:
        """Execute a tool by name and return its result."""
        ...


def _missing_required(arguments: dict, schema: dict) -> list[str]:
    required = schema.get("required", [])
    if not isinstance(required, list):
        return []
    return [name for name in required if name not in arguments]


class ToolRegistry:
    """In-process tool provider backed by registered handlers.

    Usage::

        registry = ToolRegistry()

        @registry.tool("echo", "Echo the input", {
            "type": "object",
            "properties": {"text": {"type": "string"}},
            "required": ["text"],
        })
        def echo(text):
            return text

        result = await registry.call_tool("echo", {"text": "hi"})
    """

    def __init__(self) -> None:
        self._descriptors: dict[str, ToolDescriptor] = {}
        self._handlers: dict[str, ToolHandler] = {}

    def register(self, descriptor: ToolDescriptor, handler: ToolHandler) -> None:
        """Register a handler under the descriptor's name.

        Raises:
            ValueError: If a tool with the same name is already registered.
        """
        if descriptor.name in self._descriptors:
            raise ValueError(f"Tool already registered: {descriptor.name}")
        self._descriptors[descriptor.name] = descriptor
        self._handlers[descriptor.name] = handler

    def tool(
        self,
        name: str,
        description: str,
        input_schema: dict | None = None,
    ) -> Callable[[Callable[..., object]], Callable[..., object]]:
        """Decorator registering a plain function as a tool."""

        def decorator(func: Callable[..., object]) -> Callable[..., object]:
            schema = input_schema or {"type": "object", "properties": {}}
            self.register(
                ToolDescriptor(name=name, description=description, input_schema=schema),
                FunctionToolHandler(func),
            )
            return func

        return decorator

    def available_tools(self) -> list[str]:
        """Return the names of all registered tools."""
        return list(self._descriptors.keys())

    async def list_tools(self) -> list[ToolDescriptor]:
        logger.info("Listing %d tool(s)", len(self._descriptors))
        return list(self._descriptors.values())

    async def call_tool(
        self,
        name: str,
        arguments: dict,
        *,
        invocation_id: str | None = None,
    ) -> ToolInvocationResult:
        """Execute a tool by name with the given arguments.

        Raises:
            ToolNotFoundError: If no tool is registered under ``name``.
            ToolExecutionError: If required arguments are missing or the
                handler raises.
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise ToolNotFoundError(name, self.available_tools())

        logger.info("Calling tool %s", name)
        logger.debug("Tool %s arguments: %r", name, arguments)

        missing = _missing_required(arguments, self._descriptors[name].input_schema)
        if missing:
            raise ToolExecutionError(
                name, f"missing required argument(s): {', '.join(missing)}"
            )

        try:
            text = handler.execute(arguments)
        except ToolExecutionError:
            raise
        except Exception as exc:
            logger.debug("Tool %s failed: %s", name, exc, exc_info=True)
            raise ToolExecutionError(name, f"{type(exc).__name__}: {exc}") from exc

        logger.debug("Tool %s result: %r", name, text)
        return ToolInvocationResult(text=text, invocation_id=invocation_id)
