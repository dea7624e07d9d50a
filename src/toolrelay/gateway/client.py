"""Anthropic Messages API gateway on httpx.

Provides an async HTTP client that turns a conversation plus tool catalog
into a Messages API request and parses the reply into a ModelResponse.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import httpx
import tenacity

from toolrelay.config import GatewayConfig, resolve_api_key
from toolrelay.exceptions import GatewayError, GatewayTransportError, MalformedResponseError
from toolrelay.models import ModelResponse

if TYPE_CHECKING:
    from toolrelay.models import Message
    from toolrelay.tools.models import ToolDescriptor

logger = logging.getLogger(__name__)


def _is_retryable(exc: BaseException) -> bool:
    """Only connection failures are retried; HTTP statuses never are."""
    return isinstance(exc, (httpx.ConnectError, httpx.ConnectTimeout))


class AnthropicGateway:
    """Async client for the Anthropic Messages API with tool support.

    Implements the ModelGateway protocol. Every call is a single request
    unless ``config.max_retries`` is raised above 1, in which case
    connection failures are retried with exponential backoff.

    Usage::

        async with AnthropicGateway(api_key="sk-ant-...") as gateway:
            response = await gateway.send_initial(
                [Message.user("What's the weather in Tokyo?")],
                await provider.list_tools(),
            )
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: GatewayConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            api_key: API key. Falls back to TOOLRELAY_API_KEY, then
                ANTHROPIC_API_KEY.
            config: Request and transport settings. Defaults to
                GatewayConfig.from_env().
            transport: Optional httpx transport (used in tests).

        Raises:
            ConfigurationError: If no API key is provided or found in environment.
        """
        self._api_key = resolve_api_key(api_key)
        self._config = config or GatewayConfig.from_env()
        self._url = f"{self._config.base_url.rstrip('/')}/messages"

        headers = {
            "x-api-key": self._api_key,
            "anthropic-version": self._config.api_version,
            "content-type": "application/json",
        }
        if self._config.beta:
            headers["anthropic-beta"] = self._config.beta

        self._client = httpx.AsyncClient(
            timeout=self._config.timeout,
            headers=headers,
            transport=transport,
        )

    @property
    def config(self) -> GatewayConfig:
        return self._config

    async def send_initial(
        self,
        messages: Sequence[Message],
        tools: Sequence[ToolDescriptor],
    ) -> ModelResponse:
        """Send the opening request with the flattened tool catalog.

        An empty catalog is sent as ``"tools": []``.

        Raises:
            GatewayError: On a non-2xx status.
            GatewayTransportError: If the API cannot be reached or times out.
            MalformedResponseError: On an unparseable body.
        """
        payload = self._build_payload(messages)
        payload["tools"] = [tool.to_anthropic() for tool in tools]
        return await self._send(payload)

    async def send_follow_up(
        self,
        messages: Sequence[Message],
        tools: Sequence[ToolDescriptor] | None = None,
    ) -> ModelResponse:
        """Send the full conversation carrying tool results.

        Raises:
            GatewayError: On a non-2xx status.
            GatewayTransportError: If the API cannot be reached or times out.
            MalformedResponseError: On an unparseable body.
        """
        payload = self._build_payload(messages)
        if tools is not None:
            payload["tools"] = [tool.to_anthropic() for tool in tools]
        return await self._send(payload)

    def _build_payload(self, messages: Sequence[Message]) -> dict[str, Any]:
        return {
            "model": self._config.model,
            "max_tokens": self._config.max_tokens,
            "messages": [message.to_wire() for message in messages],
        }

    async def _send(self, payload: dict[str, Any]) -> ModelResponse:
        retryer = tenacity.AsyncRetrying(
            retry=tenacity.retry_if_exception(_is_retryable),
            wait=tenacity.wait_exponential(multiplier=0.5, min=0.5, max=10),
            stop=tenacity.stop_after_attempt(max(self._config.max_retries, 1)),
            before_sleep=tenacity.before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        try:
            return await retryer(self._do_send, payload)
        except httpx.TransportError as exc:
            logger.warning("Model API unreachable: %s: %s", type(exc).__name__, exc)
            raise GatewayTransportError(
                f"Could not reach model API at {self._url}: {type(exc).__name__}: {exc}"
            ) from exc

    async def _do_send(self, payload: dict[str, Any]) -> ModelResponse:
        """Execute a single request (no retry)."""
        logger.debug(
            "POST %s model=%s messages=%d tools=%s",
            self._url,
            payload["model"],
            len(payload["messages"]),
            len(payload["tools"]) if "tools" in payload else "-",
        )
        response = await self._client.post(self._url, json=payload)

        if not response.is_success:
            logger.warning(
                "Model API returned %d %s", response.status_code, response.reason_phrase
            )
            raise GatewayError(response.status_code, response.reason_phrase, response.text)

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"Response body is not valid JSON: {response.text[:200]!r}"
            ) from exc

        result = ModelResponse.from_wire(data)
        logger.debug(
            "Response model=%s stop_reason=%s usage=%d/%d",
            result.model,
            result.stop_reason,
            result.usage.input_tokens,
            result.usage.output_tokens,
        )
        return result

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()

    async def __aenter__(self) -> AnthropicGateway:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
