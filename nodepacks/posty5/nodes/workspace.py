"""
Posty5 Social Publisher Workspace node.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from ..base import Posty5Node, posty5_description
from ..constants import NODE_TYPE_PREFIX
from ..resources.workspace import WORKSPACE_OPERATIONS, WorkspaceOperation
from .common import list_properties, operation_property, string_property


class SocialPublisherWorkspaceNode(Posty5Node):
    type = f"{NODE_TYPE_PREFIX}.posty5SocialPublisherWorkspace"
    version = 1

    operations = WORKSPACE_OPERATIONS
    parameters_adapter = TypeAdapter(WorkspaceOperation)
    default_operation = "get"

    description = posty5_description(
        "posty5SocialPublisherWorkspace",
        "Posty5 Social Publisher Workspace",
        "Read Posty5 social publisher workspaces",
    )

    properties = {
        "parameters": [
            operation_property(
                [
                    {"name": "Get", "value": "get", "action": "Get a workspace"},
                    {
                        "name": "Get For New Post",
                        "value": "getForNewPost",
                        "action": "Get a workspace prepared for a new post",
                    },
                    {"name": "List", "value": "list", "action": "List workspaces"},
                ],
                default="get",
            ),
            string_property("workspaceId", "Workspace ID", ["get", "getForNewPost"]),
            *list_properties(),
        ],
        "credentials": [],
    }
