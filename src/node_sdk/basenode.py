"""
BaseNode - Abstract base class for Python node implementations.

All nodes inherit from BaseNode and implement the execute() method.
The host runtime hands each node a NodeExecutionContext carrying the
resolved parameters, credentials and input items.

Execution is synchronous: items are processed one after another.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Literal, Optional, TypedDict

from pydantic import BaseModel, ConfigDict, Field

from .items import BinaryData


logger = logging.getLogger(__name__)


# ==============================================================================
# Parameter types
# ==============================================================================

_ParameterType = Literal[
    "string", "number", "boolean", "options", "multiOptions",
    "color", "json", "collection", "dateTime", "node",
    "resourceLocator", "notice", "array", "code",
]


# ==============================================================================
# NodeParameter - Pydantic model for defining parameters
# ==============================================================================

class NodeParameter(BaseModel):
    """
    A single parameter in the node's properties.

    Node classes declare their parameters as plain dicts; this model
    validates those dicts when a schema needs checking.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(..., description="Parameter key (internal name)")
    display_name: str = Field(..., alias="displayName", description="Human-readable label")
    type: _ParameterType = Field(..., description="Parameter type")
    default: Any = Field(None, description="Default value")
    required: bool = Field(False, description="Is parameter required?")
    description: Optional[str] = Field(None, description="Help text")
    placeholder: Optional[str] = Field(None, description="Input placeholder")
    options: Optional[List[Dict[str, Any]]] = Field(
        None,
        description="Options for options/multiOptions/collection types"
    )
    display_options: Optional[Dict[str, Any]] = Field(
        None,
        alias="displayOptions",
        description="Conditional visibility"
    )


class NodeCredential(BaseModel):
    """Credential requirement definition."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(..., description="Credential type name")
    required: bool = Field(True, description="Is credential required?")
    display_name: Optional[str] = Field(None, alias="displayName")


# ==============================================================================
# NodeExecutionData - Output data format
# ==============================================================================

class NodeExecutionData(TypedDict, total=False):
    """
    Single item of execution output data.

    Format: {"json": {...}, "binary": {...}, "pairedItem": {"item": 0}}
    """
    json: Dict[str, Any]
    binary: Optional[Dict[str, Any]]
    pairedItem: Optional[Dict[str, int]]


# ==============================================================================
# BaseNode - Abstract base class
# ==============================================================================

class BaseNode(ABC):
    """
    Abstract base class for all Python node implementations.

    Nodes define:
    - type: Unique identifier (e.g., "n8n-nodes-posty5.posty5ShortLink")
    - version: Node version number
    - description: Node metadata dict
    - properties: Parameters and credentials

    And implement execute() which processes input items.

    Example:

        class EchoNode(BaseNode):
            type = "example.echo"
            version = 1

            def execute(self) -> List[List[NodeExecutionData]]:
                results = []
                for i, item in enumerate(self.get_input_data()):
                    text = self.get_node_parameter("text", i, "")
                    results.append({"json": {"text": text}, "pairedItem": {"item": i}})
                return [results]  # Single output branch
    """

    # Required class attributes (override in subclasses)
    type: str = "base"
    version: int = 1

    # Node metadata
    description: Dict[str, Any] = {
        "displayName": "Base Node",
        "name": "base",
        "description": "",
        "group": [],
        "version": 1,
        "inputs": ["main"],
        "outputs": ["main"],
    }

    # Node configuration - parameters and credentials
    properties: Dict[str, Any] = {
        "parameters": [],
        "credentials": [],
    }

    # Record a per-item error instead of failing the whole run
    continue_on_fail: bool = False

    def __init__(self) -> None:
        """Initialize node instance."""
        self.logger = logging.getLogger(f"node.{self.type}")
        self._context: Optional[NodeExecutionContext] = None

    @abstractmethod
    def execute(self) -> List[List[NodeExecutionData]]:
        """
        Execute node operation.

        Returns:
            List[List[NodeExecutionData]]: Nested list of execution results.
            - Outer list represents output branches (usually 1)
            - Inner list represents items in that branch

        Raises:
            NodeOperationError: On operation failure
            NodeApiError: On API call failure
        """
        raise NotImplementedError

    # ==== Context Management ====

    def set_context(self, context: "NodeExecutionContext") -> None:
        """Set the execution context."""
        self._context = context
        if context.continue_on_fail:
            self.continue_on_fail = True

    # ==== Helper methods for subclasses ====

    def get_node_parameter(
        self,
        name: str,
        item_index: int = 0,
        default: Any = None,
    ) -> Any:
        """
        Get parameter value.

        Args:
            name: Parameter name
            item_index: Index of the item the value is resolved for
            default: Default if not set
        """
        if self._context is None:
            return default
        return self._context.get_node_parameter(name, item_index, default)

    def get_credentials(self, name: str) -> Dict[str, Any]:
        """
        Get credentials by type name.

        Args:
            name: Credential type name (e.g., "posty5Api")

        Returns:
            Credentials dict with decrypted values
        """
        if self._context is None:
            raise NodeOperationError("No context set", node=self)
        return self._context.get_credentials(name)

    def get_input_data(self) -> List[Dict[str, Any]]:
        """
        Get input items from previous node.

        Returns:
            List of input items, each with 'json' key.
        """
        if self._context is None:
            return []
        return self._context.get_input_data()

    def has_binary_data(self, item_index: int, property_name: str) -> bool:
        """Check whether an input item carries the named binary property."""
        if self._context is None:
            return False
        return self._context.has_binary_data(item_index, property_name)

    def get_binary_data_buffer(self, item_index: int, property_name: str) -> bytes:
        """
        Get the raw bytes of a binary property on an input item.

        Raises:
            NodeOperationError: If the item has no such binary property
        """
        if self._context is None:
            raise NodeOperationError("No context set", node=self, item_index=item_index)
        return self._context.get_binary_data_buffer(item_index, property_name)


# ==============================================================================
# NodeExecutionContext - Runtime context for node execution
# ==============================================================================

class NodeExecutionContext:
    """
    Runtime context provided to nodes during execution.

    Provides access to:
    - Parameters (with optional per-item overrides)
    - Credentials
    - Input data, including binary attachments
    """

    def __init__(
        self,
        parameters: Dict[str, Any],
        credentials: Dict[str, Dict[str, Any]],
        input_data: List[Dict[str, Any]],
        workflow_id: Optional[str] = None,
        node_name: Optional[str] = None,
        item_parameters: Optional[List[Dict[str, Any]]] = None,
        continue_on_fail: bool = False,
    ) -> None:
        self._parameters = parameters
        self._credentials = credentials
        self._input_data = input_data
        self._item_parameters = item_parameters or []
        self.workflow_id = workflow_id
        self.node_name = node_name
        self.continue_on_fail = continue_on_fail

    def get_node_parameter(
        self,
        name: str,
        item_index: int = 0,
        default: Any = None,
    ) -> Any:
        """
        Get parameter value for an item.

        Per-item overrides (already resolved by the host runtime) win over
        the node-level value.
        """
        if item_index < len(self._item_parameters):
            overrides = self._item_parameters[item_index]
            if name in overrides:
                return overrides[name]
        return self._parameters.get(name, default)

    def get_credentials(self, name: str) -> Dict[str, Any]:
        """Get credentials by type name."""
        if name not in self._credentials:
            raise NodeOperationError(f"Credentials '{name}' not found")
        return self._credentials[name]

    def get_input_data(self) -> List[Dict[str, Any]]:
        """Get input items."""
        return self._input_data

    def _binary_entries(self, item_index: int) -> Dict[str, Any]:
        if item_index >= len(self._input_data):
            return {}
        return self._input_data[item_index].get("binary") or {}

    def has_binary_data(self, item_index: int, property_name: str) -> bool:
        """Check for a binary property on an item."""
        return property_name in self._binary_entries(item_index)

    def get_binary_data_buffer(self, item_index: int, property_name: str) -> bytes:
        """Decode a binary property on an item into bytes."""
        entries = self._binary_entries(item_index)
        if property_name not in entries:
            raise NodeOperationError(
                f"Item has no binary property '{property_name}'",
                item_index=item_index,
            )
        try:
            return BinaryData.from_value(entries[property_name]).data
        except (TypeError, ValueError) as e:
            raise NodeOperationError(
                f"Binary property '{property_name}' could not be read: {e}",
                item_index=item_index,
            ) from e


# ==============================================================================
# Errors
# ==============================================================================

class NodeOperationError(Exception):
    """Error during node operation."""

    def __init__(
        self,
        message: str,
        node: Optional[BaseNode] = None,
        item_index: Optional[int] = None,
    ) -> None:
        self.message = message
        self.node = node
        self.item_index = item_index
        super().__init__(message)


class NodeApiError(NodeOperationError):
    """Error from external API call."""

    def __init__(
        self,
        message: str,
        node: Optional[BaseNode] = None,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ) -> None:
        super().__init__(message, node)
        self.status_code = status_code
        self.response_body = response_body


# ==============================================================================
# Exports
# ==============================================================================

__all__ = [
    "BaseNode",
    "NodeExecutionContext",
    "NodeExecutionData",
    "NodeParameter",
    "NodeCredential",
    "NodeOperationError",
    "NodeApiError",
]
