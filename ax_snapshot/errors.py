class A11yTreeError(Exception):
	"""Base class for accessibility tree errors."""


class TreeConstructionError(A11yTreeError):
	"""The snapshot could not be assembled into a tree. No partial tree is returned."""


class EmptyNodeSet(TreeConstructionError):
	def __init__(self):
		super().__init__('Accessibility snapshot contains no nodes')


class DanglingChildReference(TreeConstructionError):
	def __init__(self, parent_id: str, child_id: str):
		self.parent_id = parent_id
		self.child_id = child_id
		super().__init__(f'Node {parent_id!r} references unknown child {child_id!r}')


class DuplicateNodeId(TreeConstructionError):
	def __init__(self, node_id: str):
		self.node_id = node_id
		super().__init__(f'Node id {node_id!r} appears more than once in the snapshot')


class MalformedNodeRecord(TreeConstructionError):
	def __init__(self, index: int, reason: str):
		self.index = index
		super().__init__(f'Record #{index} is not a valid accessibility node: {reason}')


class InvalidPropertyValue(TreeConstructionError):
	def __init__(self, node_id: str, property_name: str, value: object, expected: str):
		self.node_id = node_id
		self.property_name = property_name
		self.value = value
		super().__init__(f'Node {node_id!r}: property {property_name!r} expects a {expected} value, got {value!r}')


class InvalidTreeStructure(TreeConstructionError):
	"""Raised when the child references do not form a single rooted tree."""


class ElementNotDescribed(A11yTreeError):
	"""Resolving an element handle to a backend node id failed."""
