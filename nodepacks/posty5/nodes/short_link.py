"""
Posty5 Short Link node - create and manage short links.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from ..base import Posty5Node, posty5_description
from ..constants import NODE_TYPE_PREFIX
from ..resources.short_link import SHORT_LINK_OPERATIONS, ShortLinkOperation
from .common import (
    REF_ID_FILTER,
    SEARCH_FILTER,
    TAG_FILTER,
    list_properties,
    operation_property,
    string_property,
)


class ShortLinkNode(Posty5Node):
    """Short links with optional landing page, monetization and page info."""

    type = f"{NODE_TYPE_PREFIX}.posty5ShortLink"
    version = 1

    operations = SHORT_LINK_OPERATIONS
    parameters_adapter = TypeAdapter(ShortLinkOperation)
    default_operation = "create"

    description = posty5_description(
        "posty5ShortLink", "Posty5 Short Link", "Create and manage Posty5 short links"
    )

    properties = {
        "parameters": [
            operation_property(
                [
                    {"name": "Create", "value": "create", "action": "Create a short link"},
                    {"name": "Get", "value": "get", "action": "Get a short link"},
                    {"name": "Update", "value": "update", "action": "Update a short link"},
                    {"name": "Delete", "value": "delete", "action": "Delete a short link"},
                    {"name": "List", "value": "list", "action": "List short links"},
                ],
                default="create",
            ),
            string_property(
                "url", "URL", ["create"],
                description="The destination URL",
                placeholder="https://example.com",
            ),
            string_property(
                "shortLinkId", "Short Link ID", ["get", "update", "delete"],
            ),
            string_property("name", "Name", ["create", "update"], required=False),
            string_property(
                "customLandingId", "Custom Landing ID", ["create", "update"], required=False,
                description="Custom slug for the short link",
            ),
            {
                "displayName": "Additional Fields",
                "name": "additionalFields",
                "type": "collection",
                "placeholder": "Add Field",
                "default": {},
                "displayOptions": {"show": {"operation": ["create", "update"]}},
                "options": [
                    {"displayName": "Tag", "name": "tag", "type": "string", "default": ""},
                    {"displayName": "Reference ID", "name": "refId", "type": "string", "default": ""},
                    {"displayName": "Template ID", "name": "templateId", "type": "string", "default": ""},
                    {
                        "displayName": "Enable Monetization",
                        "name": "isEnableMonetization",
                        "type": "boolean",
                        "default": False,
                    },
                    {"displayName": "Page Title", "name": "pageTitle", "type": "string", "default": ""},
                    {
                        "displayName": "Page Description",
                        "name": "pageDescription",
                        "type": "string",
                        "default": "",
                    },
                ],
            },
            *list_properties(filters=[SEARCH_FILTER, TAG_FILTER, REF_ID_FILTER]),
        ],
        "credentials": [],
    }
