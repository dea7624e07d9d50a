"""Shared test fixtures for toolrelay.

Provides canned Messages API payloads, an httpx mock-transport gateway
factory, and a scripted in-memory gateway.
"""

from __future__ import annotations

import json

import httpx
import pytest

from toolrelay import AnthropicGateway, GatewayConfig, ModelResponse


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep real credentials and overrides out of every test."""
    for var in (
        "TOOLRELAY_API_KEY",
        "ANTHROPIC_API_KEY",
        "TOOLRELAY_BASE_URL",
        "TOOLRELAY_MODEL",
        "TOOLRELAY_MAX_TOKENS",
        "TOOLRELAY_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)


# ------------------------------------------------------------------
# Shared test helpers
# ------------------------------------------------------------------

def text_block(text: str) -> dict:
    return {"type": "text", "text": text}


def tool_use_block(tool_id: str, name: str, **arguments) -> dict:
    return {"type": "tool_use", "id": tool_id, "name": name, "input": arguments}


def response_payload(
    *blocks: dict,
    model: str = "claude-3-7-sonnet-20250219",
    stop_reason: str | None = None,
    input_tokens: int = 12,
    output_tokens: int = 7,
) -> dict:
    """Build a realistic Messages API response dict."""
    blocks = blocks or (text_block("Hello!"),)
    if stop_reason is None:
        has_tool_use = any(b["type"] == "tool_use" for b in blocks)
        stop_reason = "tool_use" if has_tool_use else "end_turn"
    return {
        "id": "msg_test123",
        "type": "message",
        "role": "assistant",
        "model": model,
        "content": list(blocks),
        "stop_reason": stop_reason,
        "usage": {"input_tokens": input_tokens, "output_tokens": output_tokens},
    }


def make_gateway(
    handler,
    *,
    api_key: str = "test-key",
    **config,
) -> AnthropicGateway:
    """Create an AnthropicGateway whose requests go to ``handler``."""
    config.setdefault("base_url", "http://test-api/v1")
    return AnthropicGateway(
        api_key=api_key,
        config=GatewayConfig(**config),
        transport=httpx.MockTransport(handler),
    )


class RecordingHandler:
    """MockTransport handler returning queued payloads and recording requests."""

    def __init__(self, *payloads: dict, status_code: int = 200):
        self.requests: list[httpx.Request] = []
        self._payloads = list(payloads)
        self._status_code = status_code

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        payload = self._payloads.pop(0) if self._payloads else response_payload()
        return httpx.Response(self._status_code, json=payload)

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


class ScriptedGateway:
    """In-memory ModelGateway returning queued responses."""

    def __init__(self, *payloads: dict):
        self._responses = [ModelResponse.from_wire(p) for p in payloads]
        self.initial_calls: list[tuple[list, list]] = []
        self.follow_up_calls: list[tuple[list, list | None]] = []
        self.closed = False

    async def send_initial(self, messages, tools):
        self.initial_calls.append((list(messages), list(tools)))
        return self._responses.pop(0)

    async def send_follow_up(self, messages, tools=None):
        self.follow_up_calls.append((list(messages), tools))
        return self._responses.pop(0)

    async def aclose(self):
        self.closed = True


class CountingProvider:
    """ToolProvider wrapper counting call_tool() invocations."""

    def __init__(self, inner):
        self._inner = inner
        self.calls: list[tuple[str, dict]] = []

    async def list_tools(self):
        return await self._inner.list_tools()

    async def call_tool(self, name, arguments, *, invocation_id=None):
        self.calls.append((name, arguments))
        return await self._inner.call_tool(name, arguments, invocation_id=invocation_id)
