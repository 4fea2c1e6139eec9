"""
Posty5Node - shared item loop for every Posty5 node.

A Posty5 node only declares its schema and its operation models; the
loop here does the rest:

1. Resolve the posty5Api credential once and open one gateway.
2. Read `operation` from item 0.
3. For each item, in order: validate that item's parameters into the
   operation's model, run it, and pair every output item with its source.
4. A failing item either aborts the run or, with continue_on_fail, becomes
   a single {"error": message} item.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Type

from pydantic import TypeAdapter, ValidationError

from src.node_sdk.basenode import BaseNode, NodeExecutionData, NodeOperationError
from src.node_sdk.items import return_json_array
from src.posty5.observability import with_execution_context

from .constants import CREDENTIAL_NAME
from .resources.base import ListParams, OperationParams, UploadParams
from .transport import Posty5Gateway


def posty5_description(name: str, display_name: str, description: str) -> Dict[str, Any]:
    """Node metadata shared by the Posty5 nodes."""
    return {
        "displayName": display_name,
        "name": name,
        "icon": "file:posty5.svg",
        "group": ["transform"],
        "version": 1,
        "subtitle": '={{$parameter["operation"]}}',
        "description": description,
        "defaults": {"name": display_name},
        "inputs": ["main"],
        "outputs": ["main"],
        "credentials": [{"name": CREDENTIAL_NAME, "required": True}],
    }


class Posty5Node(BaseNode):
    """Base class of the Posty5 nodes."""

    # Operation name -> parameter model, and the discriminated union over them
    operations: ClassVar[Dict[str, Type[OperationParams]]] = {}
    parameters_adapter: ClassVar[Optional[TypeAdapter]] = None
    default_operation: ClassVar[str] = ""

    def execute(self) -> List[List[NodeExecutionData]]:
        items = self.get_input_data()
        gateway = self.create_gateway()
        operation = self.get_node_parameter("operation", 0, self.default_operation)

        results: List[NodeExecutionData] = []
        for i in range(len(items)):
            try:
                params = self.resolve_parameters(operation, i)
                payload = self.run_operation(gateway, params, i)
            except NodeOperationError as e:
                if e.node is None:
                    e.node = self
                if e.item_index is None:
                    e.item_index = i
                if not self.continue_on_fail:
                    raise
                self.logger.warning(
                    f"Item {i} failed: {e.message}",
                    extra=self._log_context(operation, i),
                )
                results.append({"json": {"error": e.message}, "pairedItem": {"item": i}})
                continue

            results.extend(return_json_array(payload, i))

        return [results]

    # ==== Hooks ====

    def create_gateway(self) -> Posty5Gateway:
        credentials = self.get_credentials(CREDENTIAL_NAME)
        api_key = credentials.get("apiKey")
        if not api_key:
            raise NodeOperationError("Posty5 API key is missing from credentials", node=self)
        return Posty5Gateway(api_key=api_key)

    def resolve_parameters(self, operation: str, item_index: int) -> OperationParams:
        """
        Validate the item's parameters into the operation's model.

        Only parameters the model declares are read, under their node names.
        """
        model = self.operations.get(operation)
        if model is None:
            raise NodeOperationError(
                f'The operation "{operation}" is not supported',
                node=self,
                item_index=item_index,
            )

        raw: Dict[str, Any] = {"operation": operation}
        for name, field in model.model_fields.items():
            if name == "operation":
                continue
            key = field.alias or name
            value = self.get_node_parameter(key, item_index)
            if value is not None:
                raw[key] = value

        try:
            return self.parameters_adapter.validate_python(raw)
        except ValidationError as e:
            first = e.errors()[0]
            # loc starts with the union tag, i.e. the operation itself
            location = ".".join(str(part) for part in first["loc"][1:])
            detail = f"{location}: {first['msg']}" if location else first["msg"]
            raise NodeOperationError(
                f'Invalid parameters for "{operation}": {detail}',
                node=self,
                item_index=item_index,
            ) from e

    def run_operation(self, gateway: Posty5Gateway, params: OperationParams, item_index: int) -> Any:
        """Dispatch validated parameters to the gateway."""
        if isinstance(params, ListParams):
            filters = params.query_filters()
            if params.return_all:
                return gateway.list_all(params.path, filters)
            return gateway.fetch_page(params.path, filters, params.limit)

        if isinstance(params, UploadParams):
            data = self.get_binary_data_buffer(item_index, params.binary_property())
            return gateway.send_with_upload(params.to_request(), data)

        return gateway.send(params.to_request())

    def _log_context(self, operation: str, item_index: int) -> Dict[str, Any]:
        context = self._context
        return with_execution_context(
            workflow_id=context.workflow_id if context else None,
            node_name=context.node_name if context else None,
            node_type=self.type,
            operation=operation,
            item_index=item_index,
        )
