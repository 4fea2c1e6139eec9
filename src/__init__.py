"""
Posty5 Nodes

Python node pack for the Posty5 API (short links, QR codes, HTML hosting,
form submissions and social publishing), built on a small n8n-style node SDK.

Architecture:
- node_sdk/: Node execution semantics (BaseNode, NodeExecutionContext, items, HTTP)
- node_registry/: Node pack discovery and registration
- posty5/: Settings and structured logging shared by the Posty5 nodes

The nodes themselves live in nodepacks/posty5.
"""

__version__ = "1.0.0"
