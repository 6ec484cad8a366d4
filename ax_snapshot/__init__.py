"""
Accessibility snapshot module.

This module builds a tree from a flat Chrome DevTools Protocol accessibility snapshot,
classifies its nodes the way platform accessibility APIs expose them, and serializes
them into canonical records for assistive-technology consumers.
"""

from .classification import collect_interesting_nodes
from .config import A11ySnapshotConfig, RootSelection
from .correlation import BackendNodeResolver, find_element
from .errors import (
	A11yTreeError,
	DanglingChildReference,
	DuplicateNodeId,
	ElementNotDescribed,
	EmptyNodeSet,
	InvalidPropertyValue,
	InvalidTreeStructure,
	MalformedNodeRecord,
	TreeConstructionError,
)
from .node import AXTreeNode
from .serializer import serialize_node, serialize_tree
from .service import A11yService, CDPBackendNodeResolver, CDPSnapshotSource, SnapshotSource
from .tree_builder import build_tree
from .views import AXNodePayload, AXProperty, AXValue, PropertyKind, SerializedAXNode

__all__ = [
	'A11yService',
	'A11ySnapshotConfig',
	'A11yTreeError',
	'AXNodePayload',
	'AXProperty',
	'AXTreeNode',
	'AXValue',
	'BackendNodeResolver',
	'CDPBackendNodeResolver',
	'CDPSnapshotSource',
	'DanglingChildReference',
	'DuplicateNodeId',
	'ElementNotDescribed',
	'EmptyNodeSet',
	'InvalidPropertyValue',
	'InvalidTreeStructure',
	'MalformedNodeRecord',
	'PropertyKind',
	'RootSelection',
	'SerializedAXNode',
	'SnapshotSource',
	'TreeConstructionError',
	'build_tree',
	'collect_interesting_nodes',
	'find_element',
	'serialize_node',
	'serialize_tree',
]
