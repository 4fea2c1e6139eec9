"""
Posty5 Form Submission node - review submissions collected by hosted pages.
"""

from __future__ import annotations

from typing import get_args

from pydantic import TypeAdapter

from ..base import Posty5Node, posty5_description
from ..constants import NODE_TYPE_PREFIX
from ..resources.form_submission import (
    FORM_SUBMISSION_OPERATIONS,
    FormSubmissionOperation,
    SubmissionStatus,
)
from .common import SEARCH_FILTER, list_properties, operation_property, string_property


STATUS_OPTIONS = [
    {"name": status[0].upper() + status[1:], "value": status}
    for status in get_args(SubmissionStatus)
]


class FormSubmissionNode(Posty5Node):
    type = f"{NODE_TYPE_PREFIX}.posty5FormSubmission"
    version = 1

    operations = FORM_SUBMISSION_OPERATIONS
    parameters_adapter = TypeAdapter(FormSubmissionOperation)
    default_operation = "get"

    description = posty5_description(
        "posty5FormSubmission",
        "Posty5 Form Submission",
        "Read and manage form submissions of Posty5 pages",
    )

    properties = {
        "parameters": [
            operation_property(
                [
                    {"name": "Get", "value": "get", "action": "Get a submission"},
                    {
                        "name": "Get Adjacent",
                        "value": "getAdjacent",
                        "action": "Get the next and previous submissions",
                    },
                    {"name": "Change Status", "value": "changeStatus", "action": "Change the status of a submission"},
                    {"name": "Delete", "value": "delete", "action": "Delete a submission"},
                    {"name": "List", "value": "list", "action": "List submissions"},
                ],
                default="get",
            ),
            string_property(
                "submissionId", "Submission ID", ["get", "getAdjacent", "changeStatus", "delete"],
            ),
            {
                "displayName": "Status",
                "name": "status",
                "type": "options",
                "default": "new",
                "required": True,
                "displayOptions": {"show": {"operation": ["changeStatus"]}},
                "options": STATUS_OPTIONS,
            },
            {
                "displayName": "Rejected Reason",
                "name": "rejectedReason",
                "type": "string",
                "default": "",
                "displayOptions": {"show": {"operation": ["changeStatus"], "status": ["rejected"]}},
            },
            string_property("notes", "Notes", ["changeStatus"], required=False),
            *list_properties(
                filters=[
                    SEARCH_FILTER,
                    {"displayName": "HTML Hosting ID", "name": "htmlHostingId", "type": "string", "default": ""},
                    {"displayName": "Form ID", "name": "formId", "type": "string", "default": ""},
                    {
                        "displayName": "Status",
                        "name": "status",
                        "type": "options",
                        "default": "new",
                        "options": STATUS_OPTIONS,
                    },
                ]
            ),
        ],
        "credentials": [],
    }
