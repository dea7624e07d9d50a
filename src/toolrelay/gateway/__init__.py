"""Model gateway for toolrelay.

Provides the Anthropic Messages API client and the pluggable
ModelGateway protocol.
"""

from toolrelay.gateway.client import AnthropicGateway
from toolrelay.gateway.protocols import ModelGateway

__all__ = [
    "AnthropicGateway",
    "ModelGateway",
]
