from collections.abc import Callable, Iterator
from typing import Any, Optional

from ax_snapshot import classification
from ax_snapshot.errors import InvalidPropertyValue
from ax_snapshot.views import PROPERTY_KINDS, AXNodePayload, PropertyKind, PropertyValue

DEFAULT_ROLE = 'unknown'


def _validate_property(node_id: str, name: str, value: Any) -> PropertyValue:
	"""Check a property value against the kind registered for its name."""
	kind = PROPERTY_KINDS.get(name)
	if kind is None:
		return value

	if kind == PropertyKind.BOOLEAN:
		if isinstance(value, bool):
			return value
	elif kind in (PropertyKind.STRING, PropertyKind.TOKEN):
		if isinstance(value, str):
			return value
	elif kind == PropertyKind.TRISTATE:
		# some producers send plain booleans for tristates
		if isinstance(value, bool):
			return 'true' if value else 'false'
		if isinstance(value, str):
			return value
	elif kind == PropertyKind.NUMBER:
		if isinstance(value, (int, float)) and not isinstance(value, bool):
			return value

	raise InvalidPropertyValue(node_id, name, value, kind.value)


class AXTreeNode:
	"""One node of an accessibility snapshot, with its flags parsed up front.

	Nodes are immutable once the tree builder has attached their children. The only
	state computed after construction is `has_focusable_child`, which is memoized on
	first access and never changes afterwards.
	"""

	def __init__(self, payload: AXNodePayload):
		self.payload = payload
		self.children: list['AXTreeNode'] = []
		self._has_focusable_child: bool | None = None

		self.name: str = str(payload.name.value) if payload.name and payload.name.value is not None else ''
		self.role: str = str(payload.role.value) if payload.role and payload.role.value else DEFAULT_ROLE

		self.editable = False
		self.richly_editable = False
		self.focusable = False
		self.expanded = False
		self.hidden = False

		self.properties: dict[str, PropertyValue] = {}
		for prop in payload.properties or []:
			name = prop.name.lower()
			value = _validate_property(self.node_id, name, prop.value.value)
			self.properties[name] = value

			if name == 'editable':
				self.editable = True
				self.richly_editable = value == 'richtext'
			elif name == 'focusable':
				self.focusable = value
			elif name == 'expanded':
				self.expanded = value
			elif name == 'hidden':
				self.hidden = value

	@property
	def node_id(self) -> str:
		return self.payload.nodeId

	@property
	def backend_dom_node_id(self) -> int | None:
		return self.payload.backendDOMNodeId

	@property
	def ignored(self) -> bool:
		return self.payload.ignored

	@property
	def has_focusable_child(self) -> bool:
		if self._has_focusable_child is None:
			self._fill_focusable_child_cache()
		return self._has_focusable_child

	def _fill_focusable_child_cache(self) -> None:
		# Walk the uncomputed part of the subtree, then evaluate children before parents
		pending = []
		stack = [self]
		while stack:
			node = stack.pop()
			pending.append(node)
			stack.extend(child for child in node.children if child._has_focusable_child is None)
		for node in reversed(pending):
			node._has_focusable_child = classification.has_focusable_child(node)

	def is_plain_text_field(self) -> bool:
		return classification.is_plain_text_field(self)

	def is_text_only_object(self) -> bool:
		return classification.is_text_only_object(self)

	def is_leaf_node(self) -> bool:
		return classification.is_leaf_node(self)

	def is_control(self) -> bool:
		return classification.is_control(self)

	def is_interesting(self, inside_control: bool) -> bool:
		return classification.is_interesting(self, inside_control)

	def iter_descendants(self) -> Iterator['AXTreeNode']:
		"""Yield every descendant in depth-first pre-order, children left to right."""
		stack = list(reversed(self.children))
		while stack:
			node = stack.pop()
			yield node
			stack.extend(reversed(node.children))

	def find(self, predicate: Callable[['AXTreeNode'], bool]) -> Optional['AXTreeNode']:
		"""Return the first node of this subtree (self included) matching the predicate."""
		if predicate(self):
			return self
		for node in self.iter_descendants():
			if predicate(node):
				return node
		return None

	def __repr__(self) -> str:
		extras = []
		if self.name:
			extras.append(f'name={self.name!r}')
		if self.focusable:
			extras.append('focusable')
		if self.children:
			extras.append(f'children={len(self.children)}')

		extra_str = f' [{", ".join(extras)}]' if extras else ''
		return f'<AXTreeNode {self.node_id} {self.role}{extra_str}>'
