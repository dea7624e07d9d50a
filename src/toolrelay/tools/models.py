"""Tool provider data models.

Frozen dataclasses for tool descriptors and invocation results, plus the
ToolHandler protocol that registered tools implement.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from toolrelay.models import ToolResultBlock

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class ToolDescriptor:
    """A single tool as advertised to the model.

    Attributes:
        name: Unique tool name (e.g. "get_weather").
        description: Human-readable description of what the tool does.
        input_schema: JSON Schema dict describing accepted arguments.
    """

    name: str
    description: str
    input_schema: dict = field(default_factory=lambda: {"type": "object", "properties": {}})

    def to_anthropic(self) -> dict:
        """Convert to Anthropic tool-use format.

        Returns:
            Dict with "name", "description", and "input_schema".
        """
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }


@dataclass(frozen=True)
class ToolInvocationResult:
    """Text output of one tool call.

    Attributes:
        text: Result text returned by the tool.
        is_error: Whether the text describes a failure.
        invocation_id: The tool_use id this result answers, when known.
    """

    text: str
    is_error: bool = False
    invocation_id: str | None = None

    def to_block(self) -> ToolResultBlock:
        """Convert to a tool_result content block.

        Raises:
            ValueError: If no invocation id is attached.
        """
        if not self.invocation_id:
            raise ValueError("Cannot build a tool_result block without an invocation id")
        return ToolResultBlock(
            tool_use_id=self.invocation_id,
            content=self.text,
            is_error=self.is_error,
        )


@runtime_checkable
class ToolHandler(Protocol):
    """Executes a tool against parsed arguments and returns result text."""

    def execute(self, arguments: dict) -> str:
        ...


@dataclass(frozen=True)
class FunctionToolHandler:
    """Adapts a plain function taking keyword arguments to ToolHandler."""

    func: Callable[..., object]

    def execute(self, arguments: dict) -> str:
        return str(self.func(**arguments))
