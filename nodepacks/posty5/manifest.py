"""
Posty5 Node Pack Manifest - Registration function for entry-points.
"""

from src.node_registry.models import NodePackManifest
from .credentials import POSTY5_API_CREDENTIAL
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


# Node classes by type
NODE_CLASSES = {
    node_class.type: node_class
    for node_class in (
        ShortLinkNode,
        QrCodeNode,
        HtmlHostingNode,
        HtmlHostingVariablesNode,
        FormSubmissionNode,
        SocialPublisherWorkspaceNode,
        SocialPublisherTaskNode,
        SocialPublisherPostNode,
    )
}

CREDENTIALS = [POSTY5_API_CREDENTIAL]


MANIFEST = NodePackManifest(
    name="posty5",
    version="1.0.0",
    description="Posty5 short links, QR codes, HTML hosting, form submissions and social publishing",
    author="Posty5",
    license="MIT",
    nodes=list(NODE_CLASSES),
    credentials=[credential.name for credential in CREDENTIALS],
    entry_point="nodepacks.posty5",
)


def register_nodes():
    """
    Entry point function for node pack discovery.

    Returns tuple of (manifest, node_classes, credentials).
    """
    return MANIFEST, NODE_CLASSES, CREDENTIALS


__all__ = [
    "CREDENTIALS",
    "MANIFEST",
    "NODE_CLASSES",
    "register_nodes",
]
