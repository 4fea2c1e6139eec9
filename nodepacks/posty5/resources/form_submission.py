"""Form submission operations (/api/html-hosting-form-submission)."""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from ..constants import FORM_SUBMISSION
from ..transport import RequestDescriptor
from .base import ListFilters, ListParams, OperationParams, compact, operation_map


SubmissionStatus = Literal[
    "new",
    "pendingReview",
    "inProgress",
    "onHold",
    "needMoreInfo",
    "approved",
    "partiallyApproved",
    "rejected",
    "completed",
    "archived",
    "cancelled",
]


class _SubmissionFields(OperationParams):
    submission_id: str = Field(..., alias="submissionId")


class FormSubmissionGet(_SubmissionFields):
    operation: Literal["get"] = "get"

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="GET", path=f"{FORM_SUBMISSION}/{self.submission_id}")


class FormSubmissionGetAdjacent(_SubmissionFields):
    operation: Literal["getAdjacent"] = "getAdjacent"

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="GET", path=f"{FORM_SUBMISSION}/{self.submission_id}/next-previous"
        )


class FormSubmissionChangeStatus(_SubmissionFields):
    operation: Literal["changeStatus"] = "changeStatus"
    status: SubmissionStatus
    rejected_reason: Optional[str] = Field(None, alias="rejectedReason")
    notes: Optional[str] = None

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(
            method="PUT",
            path=f"{FORM_SUBMISSION}/{self.submission_id}/status",
            body={
                "status": self.status,
                **compact(rejectedReason=self.rejected_reason, notes=self.notes),
            },
        )


class FormSubmissionDelete(_SubmissionFields):
    operation: Literal["delete"] = "delete"

    def to_request(self) -> RequestDescriptor:
        return RequestDescriptor(method="DELETE", path=f"{FORM_SUBMISSION}/{self.submission_id}")


class FormSubmissionFilters(ListFilters):
    search_fields = ("numbering",)

    html_hosting_id: Optional[str] = Field(None, alias="htmlHostingId")
    form_id: Optional[str] = Field(None, alias="formId")
    status: Optional[SubmissionStatus] = None


class FormSubmissionList(ListParams):
    path = FORM_SUBMISSION

    operation: Literal["list"] = "list"
    filters: FormSubmissionFilters = Field(default_factory=FormSubmissionFilters)


FormSubmissionOperation = Annotated[
    Union[
        FormSubmissionGet,
        FormSubmissionGetAdjacent,
        FormSubmissionChangeStatus,
        FormSubmissionDelete,
        FormSubmissionList,
    ],
    Field(discriminator="operation"),
]

FORM_SUBMISSION_OPERATIONS = operation_map(
    FormSubmissionGet,
    FormSubmissionGetAdjacent,
    FormSubmissionChangeStatus,
    FormSubmissionDelete,
    FormSubmissionList,
)
