"""toolrelay exception hierarchy.

All toolrelay-specific exceptions inherit from ToolRelayError.
"""

from __future__ import annotations


class ToolRelayError(Exception):
    """Base exception for all toolrelay errors."""


class ConfigurationError(ToolRelayError):
    """Missing or invalid configuration (e.g., no API key)."""


class GatewayError(ToolRelayError):
    """The model API answered with a non-success HTTP status.

    Attributes:
        status_code: HTTP status code of the response.
        status_text: Reason phrase for the status code.
        body: Raw response body text, possibly empty.
    """

    def __init__(self, status_code: int, status_text: str, body: str = "") -> None:
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        message = f"Model API error: {status_code} {status_text}"
        if body:
            message += f" - {body}"
        super().__init__(message)


class GatewayTransportError(ToolRelayError):
    """The model API could not be reached or did not answer in time.

    Wraps ``httpx.TransportError`` (connect failures, timeouts, dropped
    connections) after any configured retries are spent. The httpx
    exception is chained as ``__cause__``.
    """


class MalformedResponseError(ToolRelayError):
    """Response body could not be parsed into the expected shape."""


class ToolNotFoundError(ToolRelayError):
    """Raised when a tool name is not registered with the provider."""

    def __init__(self, tool_name: str, available: list[str] | None = None) -> None:
        self.tool_name = tool_name
        self.available = list(available or [])
        message = f"Unknown tool: {tool_name}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ToolExecutionError(ToolRelayError):
    """Raised when a tool handler fails or rejects its arguments.

    The original exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, tool_name: str, reason: str) -> None:
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(f"Tool '{tool_name}' failed: {reason}")
