"""
Parameter schema fragments reused across the Posty5 nodes.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


def operation_property(options: List[Dict[str, str]], default: str) -> Dict[str, Any]:
    return {
        "displayName": "Operation",
        "name": "operation",
        "type": "options",
        "noDataExpression": True,
        "default": default,
        "options": options,
    }


def string_property(
    name: str,
    display_name: str,
    operations: List[str],
    required: bool = True,
    description: Optional[str] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """A string parameter shown for the given operations."""
    prop: Dict[str, Any] = {
        "displayName": display_name,
        "name": name,
        "type": "string",
        "default": "",
        "required": required,
        "displayOptions": {"show": {"operation": operations}},
    }
    if description:
        prop["description"] = description
    prop.update(extra)
    return prop


def list_properties(
    operation: str = "list",
    filters: Optional[List[Dict[str, Any]]] = None,
) -> List[Dict[str, Any]]:
    """returnAll / limit / filters for a list operation."""
    show = {"operation": [operation]}
    props: List[Dict[str, Any]] = [
        {
            "displayName": "Return All",
            "name": "returnAll",
            "type": "boolean",
            "default": False,
            "description": "Whether to return all results or only up to a given limit",
            "displayOptions": {"show": show},
        },
        {
            "displayName": "Limit",
            "name": "limit",
            "type": "number",
            "default": DEFAULT_PAGE_SIZE,
            "typeOptions": {"minValue": 1, "maxValue": MAX_PAGE_SIZE},
            "description": "Max number of results to return",
            "displayOptions": {"show": {**show, "returnAll": [False]}},
        },
    ]
    if filters is not None:
        props.append(
            {
                "displayName": "Filters",
                "name": "filters",
                "type": "collection",
                "placeholder": "Add Filter",
                "default": {},
                "displayOptions": {"show": show},
                "options": filters,
            }
        )
    return props


SEARCH_FILTER = {
    "displayName": "Search",
    "name": "search",
    "type": "string",
    "default": "",
}

TAG_FILTER = {"displayName": "Tag", "name": "tag", "type": "string", "default": ""}

REF_ID_FILTER = {
    "displayName": "Reference ID",
    "name": "refId",
    "type": "string",
    "default": "",
}
