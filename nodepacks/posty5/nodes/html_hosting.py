"""
Posty5 HTML Hosting node - host HTML pages from a file or a GitHub URL.

File operations are two-phase: the metadata call returns a pre-signed
URL, the item's binary is PUT there, and only the page details are output.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from ..base import Posty5Node, posty5_description
from ..constants import NODE_TYPE_PREFIX
from ..resources.html_hosting import HTML_HOSTING_OPERATIONS, HtmlHostingOperation
from .common import (
    REF_ID_FILTER,
    SEARCH_FILTER,
    TAG_FILTER,
    list_properties,
    operation_property,
    string_property,
)


_FILE_OPS = ["createFromFile", "updateFromFile"]
_GITHUB_OPS = ["createFromGithub", "updateFromGithub"]
_WRITE_OPS = _FILE_OPS + _GITHUB_OPS
_BY_ID_OPS = ["updateFromFile", "updateFromGithub", "get", "delete", "clearCache", "getFormIds"]


class HtmlHostingNode(Posty5Node):
    type = f"{NODE_TYPE_PREFIX}.posty5HtmlHosting"
    version = 1

    operations = HTML_HOSTING_OPERATIONS
    parameters_adapter = TypeAdapter(HtmlHostingOperation)
    default_operation = "createFromFile"

    description = posty5_description(
        "posty5HtmlHosting", "Posty5 HTML Hosting", "Host and manage HTML pages on Posty5"
    )

    properties = {
        "parameters": [
            operation_property(
                [
                    {"name": "Create From File", "value": "createFromFile", "action": "Create a page from a file"},
                    {"name": "Create From GitHub", "value": "createFromGithub", "action": "Create a page from GitHub"},
                    {"name": "Update From File", "value": "updateFromFile", "action": "Update a page from a file"},
                    {"name": "Update From GitHub", "value": "updateFromGithub", "action": "Update a page from GitHub"},
                    {"name": "Get", "value": "get", "action": "Get a page"},
                    {"name": "List", "value": "list", "action": "List pages"},
                    {"name": "Delete", "value": "delete", "action": "Delete a page"},
                    {"name": "Clear Cache", "value": "clearCache", "action": "Clear the cache of a page"},
                    {"name": "Get Form IDs", "value": "getFormIds", "action": "Get the form IDs of a page"},
                ],
                default="createFromFile",
            ),
            string_property("htmlHostingId", "HTML Hosting ID", _BY_ID_OPS),
            string_property("name", "Name", _WRITE_OPS),
            string_property(
                "fileName", "File Name", _FILE_OPS,
                description="File name stored on Posty5, e.g. index.html",
            ),
            string_property(
                "htmlFile", "Input Binary Field", _FILE_OPS,
                description="Name of the binary property holding the HTML file",
                default="data",
            ),
            string_property(
                "githubFileUrl", "GitHub File URL", _GITHUB_OPS,
                placeholder="https://github.com/user/repo/blob/main/index.html",
            ),
            string_property("customLandingId", "Custom Landing ID", _WRITE_OPS, required=False),
            {
                "displayName": "Additional Fields",
                "name": "additionalFields",
                "type": "collection",
                "placeholder": "Add Field",
                "default": {},
                "displayOptions": {"show": {"operation": _WRITE_OPS}},
                "options": [TAG_FILTER, REF_ID_FILTER],
            },
            *list_properties(filters=[SEARCH_FILTER, TAG_FILTER, REF_ID_FILTER]),
        ],
        "credentials": [],
    }
