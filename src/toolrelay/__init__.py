"""toolrelay: tool calling against the Anthropic Messages API.

Sends a query with a tool catalog, executes the tools the model asks for
through a pluggable provider, and replays the results for a final answer.
"""

from toolrelay._version import __version__

# Core entry point
from toolrelay.orchestrator import Orchestrator

# Conversation and response models
from toolrelay.models import (
    ContentBlock,
    Message,
    ModelResponse,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    Usage,
)

# Configuration
from toolrelay.config import GatewayConfig, resolve_api_key

# Model gateway
from toolrelay.gateway import AnthropicGateway, ModelGateway

# Tool provider
from toolrelay.tools import (
    FunctionToolHandler,
    MockToolProvider,
    ToolDescriptor,
    ToolHandler,
    ToolInvocationResult,
    ToolProvider,
    ToolRegistry,
)

# Exceptions
from toolrelay.exceptions import (
    ConfigurationError,
    GatewayError,
    GatewayTransportError,
    MalformedResponseError,
    ToolExecutionError,
    ToolNotFoundError,
    ToolRelayError,
)

# Formatting
from toolrelay.formatting import pprint_response, pprint_tools

__all__ = [
    "__version__",
    "Orchestrator",
    "ContentBlock",
    "Message",
    "ModelResponse",
    "TextBlock",
    "ToolResultBlock",
    "ToolUseBlock",
    "Usage",
    "GatewayConfig",
    "resolve_api_key",
    "AnthropicGateway",
    "ModelGateway",
    "FunctionToolHandler",
    "MockToolProvider",
    "ToolDescriptor",
    "ToolHandler",
    "ToolInvocationResult",
    "ToolProvider",
    "ToolRegistry",
    "ConfigurationError",
    "GatewayError",
    "GatewayTransportError",
    "MalformedResponseError",
    "ToolExecutionError",
    "ToolNotFoundError",
    "ToolRelayError",
    "pprint_response",
    "pprint_tools",
]
