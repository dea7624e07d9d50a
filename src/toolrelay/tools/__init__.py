"""Tool provider: catalog and execution of callable tools.

Provides tool descriptors, a handler registry implementing the
ToolProvider protocol, and a mock provider with canned tools.
"""

from toolrelay.tools.mock import MockToolProvider
from toolrelay.tools.models import (
    FunctionToolHandler,
    ToolDescriptor,
    ToolHandler,
    ToolInvocationResult,
)
from toolrelay.tools.registry import ToolProvider, ToolRegistry

__all__ = [
    "ToolDescriptor",
    "ToolInvocationResult",
    "ToolHandler",
    "FunctionToolHandler",
    "ToolProvider",
    "ToolRegistry",
    "MockToolProvider",
]
