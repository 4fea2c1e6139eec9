"""HTML hosting variable operations (/api/html-hosting-variables)."""

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Union

from pydantic import Field

from ..constants import HTML_HOSTING_VARIABLES
from ..transport import RequestDescriptor
from .base import ListFilters, ListParams, OperationParams, operation_map


class _VariableFields(OperationParams):
    name: str
    key: str
    value: str

    def variable_body(self) -> Dict[str, Any]:
        return {"name": self.name, "key": self.key, "value": self.value}


class VariableCreate(_VariableFields):
    operation: Literal["create"] = "create"

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="POST", path=HTML_HOSTING_VARIABLES, body=self.variable_body())


class VariableUpdate(_VariableFields):
    operation: Literal["update"] = "update"
    variable_id: str = Field(..., alias="variableId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="PUT",
            path=f"{HTML_HOSTING_VARIABLES}/{self.variable_id}",
            body=self.variable_body(),
        )


class VariableGet(OperationParams):
    operation: Literal["get"] = "get"
    variable_id: str = Field(..., alias="variableId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path=f"{HTML_HOSTING_VARIABLES}/{self.variable_id}")


class VariableDelete(OperationParams):
    operation: Literal["delete"] = "delete"
    variable_id: str = Field(..., alias="variableId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="DELETE", path=f"{HTML_HOSTING_VARIABLES}/{self.variable_id}")


class VariableFilters(ListFilters):
    search_fields = ("name",)


class VariableList(ListParams):
    path = HTML_HOSTING_VARIABLES

    operation: Literal["list"] = "list"
    filters: VariableFilters = Field(default_factory=VariableFilters)


VariableOperation = Annotated[
    Union[VariableCreate, VariableGet, VariableUpdate, VariableDelete, VariableList],
    Field(discriminator="operation"),
]

VARIABLE_OPERATIONS = operation_map(
    VariableCreate, VariableGet, VariableUpdate, VariableDelete, VariableList
)
