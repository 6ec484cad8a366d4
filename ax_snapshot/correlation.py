import logging
from typing import Any, Protocol

from ax_snapshot.errors import ElementNotDescribed
from ax_snapshot.node import AXTreeNode

logger = logging.getLogger(__name__)


class BackendNodeResolver(Protocol):
	"""Maps an opaque element handle to the backend DOM node id it refers to."""

	async def resolve_backend_node_id(self, handle: Any) -> int: ...


async def find_element(root: AXTreeNode, handle: Any, resolver: BackendNodeResolver) -> AXTreeNode | None:
	"""Find the accessibility node backing an element handle.

	Raises ElementNotDescribed when the handle cannot be resolved. A handle that resolves
	to a node outside this tree yields None.
	"""
	try:
		backend_node_id = await resolver.resolve_backend_node_id(handle)
	except Exception as e:
		logger.warning(f'Failed to describe element {handle!r}: {e}')
		raise ElementNotDescribed(f'Could not resolve a backend node id for {handle!r}') from e

	return root.find(lambda node: node.backend_dom_node_id == backend_node_id)
