"""Orchestrator: the two-round tool-use exchange.

The model proposes tool calls, the client executes them, the client
reports the results, and the model produces the final answer.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Literal

from toolrelay.exceptions import ToolExecutionError, ToolNotFoundError
from toolrelay.models import Message, ToolResultBlock

if TYPE_CHECKING:
    from toolrelay.gateway.protocols import ModelGateway
    from toolrelay.models import ModelResponse, ToolUseBlock
    from toolrelay.tools.registry import ToolProvider

logger = logging.getLogger(__name__)

ToolErrorPolicy = Literal["raise", "report"]


class Orchestrator:
    """Drives one query through the model and the tool provider.

    Holds no per-query state, so one instance can serve any number of
    sequential or concurrent ``run()`` calls.

    Args:
        provider: Source of the tool catalog and tool execution.
        gateway: Model API client.
        tool_errors: ``"raise"`` aborts the run on the first failed tool
            call and cancels the calls still in flight. ``"report"`` turns ToolNotFoundError/ToolExecutionError
            into ``is_error`` tool_result blocks and completes the round.
    """

    def __init__(
        self,
        provider: ToolProvider,
        gateway: ModelGateway,
        *,
        tool_errors: ToolErrorPolicy = "raise",
    ) -> None:
        if tool_errors not in ("raise", "report"):
            raise ValueError(f"tool_errors must be 'raise' or 'report', got {tool_errors!r}")
        self._provider = provider
        self._gateway = gateway
        self._tool_errors = tool_errors

    async def run(self, query: str) -> ModelResponse:
        """Answer ``query``, executing any tools the model asks for.

        Returns the first response unchanged when it holds no tool_use
        blocks, otherwise the response to the follow-up request.
        """
        logger.info("Processing query: %r", query)

        tools = await self._provider.list_tools()
        logger.info("Fetched %d tool(s)", len(tools))

        user_turn = Message.user(query)
        response = await self._gateway.send_initial([user_turn], tools)

        tool_uses = response.tool_uses
        if not tool_uses:
            logger.info("No tool use requested (stop_reason=%s)", response.stop_reason)
            return response

        logger.info("Executing %d tool call(s)", len(tool_uses))
        tasks = [asyncio.ensure_future(self._execute(block)) for block in tool_uses]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                logger.info("Cancelled %d pending tool call(s)", len(pending))
                await asyncio.gather(*pending, return_exceptions=True)
            raise

        conversation = [
            user_turn,
            Message.assistant(list(response.content)),
            Message.user(list(results)),
        ]
        logger.info("Sending tool results")
        final = await self._gateway.send_follow_up(conversation, tools)
        logger.info("Final response received (stop_reason=%s)", final.stop_reason)
        return final

    async def _execute(self, block: ToolUseBlock) -> ToolResultBlock:
        logger.debug("Tool use %s: %s(%r)", block.id, block.name, block.input)
        try:
            result = await self._provider.call_tool(
                block.name, block.input, invocation_id=block.id
            )
        except (ToolNotFoundError, ToolExecutionError) as exc:
            if self._tool_errors == "raise":
                raise
            logger.warning("Reporting failed tool call %s: %s", block.id, exc)
            return ToolResultBlock(tool_use_id=block.id, content=str(exc), is_error=True)
        # The request id wins over whatever the provider echoed.
        return replace(result, invocation_id=block.id).to_block()
