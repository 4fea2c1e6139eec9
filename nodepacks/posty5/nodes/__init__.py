"""Posty5 node classes, one module per resource."""

from .form_submission import FormSubmissionNode
from .html_hosting import HtmlHostingNode
from .html_hosting_variables import HtmlHostingVariablesNode
from .qr_code import QrCodeNode
from .short_link import ShortLinkNode
from .social_publisher import SocialPublisherPostNode, SocialPublisherTaskNode
from .workspace import SocialPublisherWorkspaceNode

__all__ = [
    "FormSubmissionNode",
    "HtmlHostingNode",
    "HtmlHostingVariablesNode",
    "QrCodeNode",
    "ShortLinkNode",
    "SocialPublisherPostNode",
    "SocialPublisherTaskNode",
    "SocialPublisherWorkspaceNode",
]
