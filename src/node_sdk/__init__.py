"""
Node SDK - Minimal Python node execution semantics.

This package provides the runtime contract for Python nodes:
- BaseNode: Abstract base class for node implementations
- NodeExecutionContext: Runtime context for a node
- BinaryData / return_json_array: Item helpers
- HttpClient: Timeout-bounded HTTP access

All nodes execute synchronously.
"""

from .items import BinaryData, return_json_array
from .basenode import (
    BaseNode,
    NodeExecutionContext,
    NodeExecutionData,
    NodeParameter,
    NodeCredential,
    NodeOperationError,
    NodeApiError,
)
from .http import HttpApiError, HttpClient, HttpResponse, NodeTimeoutError

__all__ = [
    # Items
    "BinaryData",
    "NodeExecutionData",
    "return_json_array",
    # Context
    "NodeExecutionContext",
    # Base class
    "BaseNode",
    "NodeParameter",
    "NodeCredential",
    # Errors
    "NodeOperationError",
    "NodeApiError",
    # HTTP
    "HttpApiError",
    "HttpClient",
    "HttpResponse",
    "NodeTimeoutError",
]
