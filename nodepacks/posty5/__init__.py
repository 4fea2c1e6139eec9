"""
Posty5 Node Pack - nodes for the Posty5 API.

This pack provides:
- ShortLink: short links with landing pages and monetization
- QrCode: dynamic QR codes of seven types
- HtmlHosting / HtmlHostingVariables: hosted HTML pages and their variables
- FormSubmission: submissions collected by hosted pages
- SocialPublisherWorkspace / Task / Post: short-video publishing

All nodes authenticate with the posty5Api credential.
"""

from .credentials import POSTY5_API_CREDENTIAL, check_credentials
from .manifest import CREDENTIALS, MANIFEST, NODE_CLASSES, register_nodes
from .nodes import (
    FormSubmissionNode,
    HtmlHostingNode,
    HtmlHostingVariablesNode,
    QrCodeNode,
    ShortLinkNode,
    SocialPublisherPostNode,
    SocialPublisherTaskNode,
    SocialPublisherWorkspaceNode,
)
from .transport import FileUploadError, Posty5ApiError, Posty5Gateway

__all__ = [
    "FormSubmissionNode",
    "HtmlHostingNode",
    "HtmlHostingVariablesNode",
    "QrCodeNode",
    "ShortLinkNode",
    "SocialPublisherPostNode",
    "SocialPublisherTaskNode",
    "SocialPublisherWorkspaceNode",
    "FileUploadError",
    "Posty5ApiError",
    "Posty5Gateway",
    "POSTY5_API_CREDENTIAL",
    "check_credentials",
    "CREDENTIALS",
    "MANIFEST",
    "NODE_CLASSES",
    "register_nodes",
]
