"""
Posty5 HTML Hosting Variables node - key/value variables injected into hosted pages.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from ..base import Posty5Node, posty5_description
from ..constants import NODE_TYPE_PREFIX
from ..resources.html_hosting_variables import VARIABLE_OPERATIONS, VariableOperation
from .common import SEARCH_FILTER, list_properties, operation_property, string_property


class HtmlHostingVariablesNode(Posty5Node):
    type = f"{NODE_TYPE_PREFIX}.posty5HtmlHostingVariables"
    version = 1

    operations = VARIABLE_OPERATIONS
    parameters_adapter = TypeAdapter(VariableOperation)
    default_operation = "create"

    description = posty5_description(
        "posty5HtmlHostingVariables",
        "Posty5 HTML Hosting Variables",
        "Manage variables used by Posty5 hosted pages",
    )

    properties = {
        "parameters": [
            operation_property(
                [
                    {"name": "Create", "value": "create", "action": "Create a variable"},
                    {"name": "Get", "value": "get", "action": "Get a variable"},
                    {"name": "Update", "value": "update", "action": "Update a variable"},
                    {"name": "Delete", "value": "delete", "action": "Delete a variable"},
                    {"name": "List", "value": "list", "action": "List variables"},
                ],
                default="create",
            ),
            string_property("variableId", "Variable ID", ["get", "update", "delete"]),
            string_property("name", "Name", ["create", "update"]),
            string_property(
                "key", "Key", ["create", "update"],
                description="Placeholder key referenced from the page",
            ),
            string_property("value", "Value", ["create", "update"]),
            *list_properties(filters=[SEARCH_FILTER]),
        ],
        "credentials": [],
    }
