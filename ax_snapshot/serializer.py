# @file purpose: Serializes classified accessibility nodes to the canonical consumer-facing record format

from collections.abc import Collection
from typing import Any, cast

from ax_snapshot.node import AXTreeNode
from ax_snapshot.views import SerializedAXNode

STRING_PROPERTIES = ('value', 'description', 'keyshortcuts', 'roledescription', 'valuetext')

BOOLEAN_PROPERTIES = (
	'disabled',
	'expanded',
	'focused',
	'modal',
	'multiline',
	'multiselectable',
	'readonly',
	'required',
	'selected',
)

TRISTATE_PROPERTIES = ('checked', 'pressed')

NUMERIC_PROPERTIES = ('level', 'valuemax', 'valuemin')

TOKEN_PROPERTIES = ('autocomplete', 'haspopup', 'invalid', 'orientation')


def _collect_properties(node: AXTreeNode) -> dict[str, Any]:
	properties: dict[str, Any] = dict(node.properties)

	# name, value and description come from their own payload fields
	payload = node.payload
	if payload.name:
		properties['name'] = payload.name.value
	if payload.value:
		properties['value'] = payload.value.value
	if payload.description:
		properties['description'] = payload.description.value
	return properties


def serialize_node(node: AXTreeNode) -> SerializedAXNode:
	"""Serialize one node. Optional keys appear only when the node carries the property."""
	properties = _collect_properties(node)

	serialized: dict[str, Any] = {
		'role': node.role,
		'name': node.name,
	}

	for key in STRING_PROPERTIES:
		if key in properties:
			serialized[key] = properties[key]

	for key in BOOLEAN_PROPERTIES:
		# A WebArea reports whether its frame has focus, not whether the node itself does
		if key == 'focused' and node.role == 'WebArea':
			continue
		value = properties.get(key)
		if not value:
			continue
		serialized[key] = value

	for key in TRISTATE_PROPERTIES:
		if key not in properties:
			continue
		value = properties[key]
		serialized[key] = 'mixed' if value == 'mixed' else value == 'true'

	for key in NUMERIC_PROPERTIES:
		if key in properties:
			serialized[key] = properties[key]

	for key in TOKEN_PROPERTIES:
		if key not in properties or properties[key] == 'false':
			continue
		serialized[key] = properties[key]

	return cast(SerializedAXNode, serialized)


def serialize_tree(node: AXTreeNode, interesting: Collection[AXTreeNode] | None = None) -> list[SerializedAXNode]:
	"""Serialize a subtree.

	When `interesting` is given, nodes outside it are dropped and their serialized
	children are hoisted into the nearest kept ancestor. Returns the list of top-level
	records (a single record unless the subtree root itself was dropped).
	"""
	# Post-order walk; each entry collects the records its children produced
	results: dict[int, list[SerializedAXNode]] = {}
	stack: list[tuple[AXTreeNode, bool]] = [(node, False)]
	while stack:
		current, children_done = stack.pop()
		if not children_done:
			stack.append((current, True))
			stack.extend((child, False) for child in reversed(current.children))
			continue

		children: list[SerializedAXNode] = []
		for child in current.children:
			children.extend(results.pop(id(child)))

		if interesting is not None and current not in interesting:
			results[id(current)] = children
			continue

		serialized = serialize_node(current)
		if children:
			serialized['children'] = children
		results[id(current)] = [serialized]

	return results[id(node)]
