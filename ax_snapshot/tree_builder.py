import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from ax_snapshot.config import A11ySnapshotConfig, RootSelection
from ax_snapshot.errors import (
	DanglingChildReference,
	DuplicateNodeId,
	EmptyNodeSet,
	InvalidTreeStructure,
	MalformedNodeRecord,
)
from ax_snapshot.node import AXTreeNode
from ax_snapshot.views import AXNodePayload

logger = logging.getLogger(__name__)


def _to_payload(index: int, record: AXNodePayload | Mapping[str, Any]) -> AXNodePayload:
	if isinstance(record, AXNodePayload):
		return record
	try:
		return AXNodePayload.model_validate(record)
	except ValidationError as e:
		raise MalformedNodeRecord(index, str(e)) from e


def build_tree(
	records: Iterable[AXNodePayload | Mapping[str, Any]], config: A11ySnapshotConfig | None = None
) -> AXTreeNode:
	"""Assemble a flat accessibility snapshot into a tree and return its root.

	The records are the `nodes` of an `Accessibility.getFullAXTree` response (raw dicts
	or validated payloads). Any inconsistency aborts the build; a partially linked tree
	is never returned.
	"""
	config = config or A11ySnapshotConfig()

	# First pass: wrap every record, parsing its properties
	node_by_id: dict[str, AXTreeNode] = {}
	for index, record in enumerate(records):
		node = AXTreeNode(_to_payload(index, record))
		if node.node_id in node_by_id:
			raise DuplicateNodeId(node.node_id)
		node_by_id[node.node_id] = node

	if not node_by_id:
		raise EmptyNodeSet()

	# Second pass: resolve child ids, checking every node has at most one parent
	parent_by_id: dict[str, str] = {}
	children_by_id: dict[str, list[AXTreeNode]] = {}
	for node_id, node in node_by_id.items():
		children = []
		for child_id in node.payload.childIds or []:
			child = node_by_id.get(child_id)
			if child is None:
				raise DanglingChildReference(node_id, child_id)
			if child_id in parent_by_id:
				raise InvalidTreeStructure(
					f'Node {child_id!r} is listed as a child of both {parent_by_id[child_id]!r} and {node_id!r}'
				)
			parent_by_id[child_id] = node_id
			children.append(child)
		children_by_id[node_id] = children

	root = _select_root(node_by_id, parent_by_id, config.root_selection)
	_check_reachable(root, node_by_id, children_by_id)

	# Only link once the whole snapshot is known to be consistent
	for node_id, children in children_by_id.items():
		node_by_id[node_id].children.extend(children)

	logger.debug(f'Built accessibility tree with {len(node_by_id)} nodes rooted at {root.node_id!r} ({root.role})')
	return root


def _select_root(
	node_by_id: dict[str, AXTreeNode], parent_by_id: dict[str, str], root_selection: RootSelection
) -> AXTreeNode:
	if root_selection == RootSelection.FIRST_RECORD:
		root = next(iter(node_by_id.values()))
		if root.node_id in parent_by_id:
			raise InvalidTreeStructure(
				f'First record {root.node_id!r} is listed as a child of {parent_by_id[root.node_id]!r} and cannot be the root'
			)
		return root

	candidates = [node for node_id, node in node_by_id.items() if node_id not in parent_by_id]
	if len(candidates) != 1:
		ids = ', '.join(repr(node.node_id) for node in candidates) or 'none'
		raise InvalidTreeStructure(f'Expected exactly one unreferenced root node, found {len(candidates)}: {ids}')
	return candidates[0]


def _check_reachable(
	root: AXTreeNode, node_by_id: dict[str, AXTreeNode], children_by_id: dict[str, list[AXTreeNode]]
) -> None:
	seen = {root.node_id}
	stack = [root.node_id]
	while stack:
		for child in children_by_id[stack.pop()]:
			if child.node_id not in seen:
				seen.add(child.node_id)
				stack.append(child.node_id)

	if len(seen) != len(node_by_id):
		unreachable = [node_id for node_id in node_by_id if node_id not in seen]
		raise InvalidTreeStructure(
			f'{len(unreachable)} node(s) are not reachable from root {root.node_id!r}: {", ".join(map(repr, unreachable[:5]))}'
		)
