"""Social publisher workspace operations (/api/social-publisher-workspace)."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from ..constants import SOCIAL_PUBLISHER_WORKSPACE
from ..transport import RequestDescriptor
from .base import ListParams, OperationParams, operation_map


class WorkspaceGet(OperationParams):
    operation: Literal["get"] = "get"
    workspace_id: str = Field(..., alias="workspaceId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="GET", path=f"{SOCIAL_PUBLISHER_WORKSPACE}/{self.workspace_id}"
        )


class WorkspaceGetForNewPost(OperationParams):
    operation: Literal["getForNewPost"] = "getForNewPost"
    workspace_id: str = Field(..., alias="workspaceId")

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="GET", path=f"{SOCIAL_PUBLISHER_WORKSPACE}/{self.workspace_id}/for-new-post"
        )


class WorkspaceList(ListParams):
    path = SOCIAL_PUBLISHER_WORKSPACE

    operation: Literal["list"] = "list"


WorkspaceOperation = Annotated[
    Union[WorkspaceGet, WorkspaceGetForNewPost, WorkspaceList],
    Field(discriminator="operation"),
]

WORKSPACE_OPERATIONS = operation_map(WorkspaceGet, WorkspaceGetForNewPost, WorkspaceList)
