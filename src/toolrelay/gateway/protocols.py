"""Model gateway protocol.

Any object with send_initial(), send_follow_up() and aclose() matching
these signatures can drive the Orchestrator. The built-in
AnthropicGateway implements this protocol.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from toolrelay.models import Message, ModelResponse
    from toolrelay.tools.models import ToolDescriptor


@runtime_checkable
class ModelGateway(Protocol):
    """Protocol for pluggable model gateways."""

    async def send_initial(
        self,
        messages: Sequence[Message],
        tools: Sequence[ToolDescriptor],
    ) -> ModelResponse:
        """Send the opening request with the tool catalog."""
        ...

    async def send_follow_up(
        self,
        messages: Sequence[Message],
        tools: Sequence[ToolDescriptor] | None = None,
    ) -> ModelResponse:
        """Send the conversation carrying tool results."""
        ...

    async def aclose(self) -> None:
        """Release underlying resources."""
        ...
