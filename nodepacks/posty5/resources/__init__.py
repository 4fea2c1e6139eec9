"""
Posty5 resources - typed operation parameters and request builders.

One module per API resource. Each exposes a discriminated union of its
operation models (`<Resource>Operation`) and an operation -> model map.
"""

from .base import ListFilters, ListParams, OperationParams, UploadParams
from .form_submission import FORM_SUBMISSION_OPERATIONS, FormSubmissionOperation
from .html_hosting import HTML_HOSTING_OPERATIONS, HtmlHostingOperation
from .html_hosting_variables import VARIABLE_OPERATIONS, VariableOperation
from .qr_code import QR_CODE_OPERATIONS, QrCodeOperation
from .short_link import SHORT_LINK_OPERATIONS, ShortLinkOperation
from .social_publisher import (
    POST_OPERATIONS,
    TASK_OPERATIONS,
    PostOperation,
    PublishVideoParams,
    TaskOperation,
    sniff_video_source,
)
from .workspace import WORKSPACE_OPERATIONS, WorkspaceOperation

__all__ = [
    "ListFilters",
    "ListParams",
    "OperationParams",
    "UploadParams",
    "PublishVideoParams",
    "sniff_video_source",
    "FORM_SUBMISSION_OPERATIONS",
    "FormSubmissionOperation",
    "HTML_HOSTING_OPERATIONS",
    "HtmlHostingOperation",
    "VARIABLE_OPERATIONS",
    "VariableOperation",
    "QR_CODE_OPERATIONS",
    "QrCodeOperation",
    "SHORT_LINK_OPERATIONS",
    "ShortLinkOperation",
    "POST_OPERATIONS",
    "PostOperation",
    "TASK_OPERATIONS",
    "TaskOperation",
    "WORKSPACE_OPERATIONS",
    "WorkspaceOperation",
]
