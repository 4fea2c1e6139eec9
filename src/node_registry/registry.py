"""
Node Registry - Central registry for node discovery and instantiation.

Node packs are registered either explicitly (register_pack) or through
the "posty5.nodepacks" entry point group declared in pyproject.toml.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import Dict, Iterable, Iterator, List, Optional, Type, TYPE_CHECKING

from .models import CredentialDefinition, NodeDefinition, NodePackManifest


if TYPE_CHECKING:
    from src.node_sdk.basenode import BaseNode


logger = logging.getLogger(__name__)

# Entry point group for node packs
NODE_PACK_ENTRY_POINT = "posty5.nodepacks"


class NodeRegistry:
    """
    Central registry for discovering and instantiating nodes.

    Usage:
        registry = NodeRegistry()
        registry.discover_entry_points()

        node = registry.create_node("n8n-nodes-posty5.posty5ShortLink")
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._nodes: Dict[str, NodeDefinition] = {}
        self._node_classes: Dict[str, Type["BaseNode"]] = {}
        self._credentials: Dict[str, CredentialDefinition] = {}
        self._packs: Dict[str, NodePackManifest] = {}
        self._discovered = False

    def register_node(
        self,
        node_class: Type["BaseNode"],
        node_type: Optional[str] = None,
    ) -> NodeDefinition:
        """
        Register a node class.

        Args:
            node_class: BaseNode subclass
            node_type: Override node type (uses class.type if not provided)

        Returns:
            NodeDefinition for the registered node
        """
        definition = NodeDefinition.from_node_class(node_class)
        if node_type is not None:
            definition.node_type = node_type

        self._nodes[definition.node_type] = definition
        self._node_classes[definition.node_type] = node_class

        logger.debug(f"Registered node: {definition.node_type}")
        return definition

    def register_credential(self, credential: CredentialDefinition) -> None:
        """Register a credential type."""
        self._credentials[credential.name] = credential
        logger.debug(f"Registered credential: {credential.name}")

    def register_pack(
        self,
        manifest: NodePackManifest,
        node_classes: Dict[str, Type["BaseNode"]],
        credentials: Iterable[CredentialDefinition] = (),
    ) -> None:
        """
        Register a node pack with its nodes and credential types.

        Args:
            manifest: Pack manifest
            node_classes: Map of node_type -> node class
            credentials: Credential definitions shipped with the pack
        """
        self._packs[manifest.name] = manifest

        for node_type, node_class in node_classes.items():
            definition = self.register_node(node_class, node_type)
            definition.node_pack = manifest.name

        for credential in credentials:
            self.register_credential(credential)

        logger.info(f"Registered pack '{manifest.name}' with {len(node_classes)} nodes")

    def discover_entry_points(self, force: bool = False) -> int:
        """
        Discover node packs via entry points.

        Each entry point resolves to a callable returning
        (manifest, node_classes) or (manifest, node_classes, credentials).

        Args:
            force: Re-discover even if already done

        Returns:
            Number of packs discovered
        """
        if self._discovered and not force:
            return len(self._packs)

        count = 0
        for ep in entry_points(group=NODE_PACK_ENTRY_POINT):
            try:
                register_func = ep.load()
            except ImportError as e:
                logger.error(f"Failed to load node pack '{ep.name}': {e}")
                continue

            self.register_pack(*register_func())
            count += 1
            logger.info(f"Discovered node pack: {ep.name}")

        self._discovered = True
        return count

    def get_node(self, node_type: str) -> Optional[NodeDefinition]:
        """Get node definition by type."""
        return self._nodes.get(node_type)

    def get_node_class(self, node_type: str) -> Optional[Type["BaseNode"]]:
        """Get node class by type."""
        return self._node_classes.get(node_type)

    def get_credential(self, name: str) -> Optional[CredentialDefinition]:
        """Get credential definition by name."""
        return self._credentials.get(name)

    def create_node(self, node_type: str) -> Optional["BaseNode"]:
        """
        Create a node instance.

        Args:
            node_type: Node type identifier

        Returns:
            Node instance or None if not found
        """
        node_class = self.get_node_class(node_type)
        if node_class:
            return node_class()
        return None

    def list_nodes(self) -> List[NodeDefinition]:
        """List all registered nodes."""
        return list(self._nodes.values())

    def list_packs(self) -> List[NodePackManifest]:
        """List all registered packs."""
        return list(self._packs.values())

    def list_node_types(self) -> List[str]:
        """List all registered node types."""
        return list(self._nodes.keys())

    def __len__(self) -> int:
        """Number of registered nodes."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeDefinition]:
        """Iterate over node definitions."""
        return iter(self._nodes.values())

    def __contains__(self, node_type: str) -> bool:
        """Check if node type is registered."""
        return node_type in self._nodes


__all__ = [
    "NodeRegistry",
    "NODE_PACK_ENTRY_POINT",
]
