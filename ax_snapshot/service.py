import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from cdp_use import CDPClient
from cdp_use.cdp.accessibility.types import AXNode

from ax_snapshot.classification import collect_interesting_nodes
from ax_snapshot.config import A11ySnapshotConfig
from ax_snapshot.correlation import BackendNodeResolver, find_element
from ax_snapshot.node import AXTreeNode
from ax_snapshot.serializer import serialize_tree
from ax_snapshot.tree_builder import build_tree
from ax_snapshot.views import SerializedAXNode

if TYPE_CHECKING:
	from cdp_use.cdp.runtime.types import RemoteObject

logger = logging.getLogger(__name__)


class SnapshotSource(Protocol):
	"""Fetches one flat accessibility snapshot."""

	async def fetch_nodes(self) -> list[AXNode]: ...


class CDPSnapshotSource:
	"""Snapshot source backed by `Accessibility.getFullAXTree` on a CDP session."""

	def __init__(self, cdp: CDPClient, session_id: str | None = None):
		self.cdp = cdp
		self.session_id = session_id

	async def fetch_nodes(self) -> list[AXNode]:
		await self.cdp.send.Accessibility.enable(session_id=self.session_id)
		response = await self.cdp.send.Accessibility.getFullAXTree(session_id=self.session_id)
		nodes = response.get('nodes', [])
		logger.debug(f'Fetched {len(nodes)} accessibility nodes')
		return nodes


class CDPBackendNodeResolver:
	"""Resolves a CDP remote object (or its object id) with `DOM.describeNode`."""

	def __init__(self, cdp: CDPClient, session_id: str | None = None):
		self.cdp = cdp
		self.session_id = session_id

	async def resolve_backend_node_id(self, handle: 'RemoteObject | Mapping[str, Any] | str') -> int:
		object_id = handle if isinstance(handle, str) else handle.get('objectId')
		if not object_id:
			raise ValueError('Element handle has no objectId')

		await self.cdp.send.DOM.enable(session_id=self.session_id)
		response = await self.cdp.send.DOM.describeNode(params={'objectId': object_id}, session_id=self.session_id)
		return response['node']['backendNodeId']


class A11yService:
	def __init__(
		self,
		source: SnapshotSource,
		resolver: BackendNodeResolver | None = None,
		config: A11ySnapshotConfig | None = None,
	):
		self.source = source
		self.resolver = resolver
		self.config = config or A11ySnapshotConfig()

	@classmethod
	def from_cdp(cls, cdp: CDPClient, session_id: str | None = None, config: A11ySnapshotConfig | None = None) -> 'A11yService':
		return cls(CDPSnapshotSource(cdp, session_id), CDPBackendNodeResolver(cdp, session_id), config)

	async def get_accessibility_tree(self) -> AXTreeNode:
		"""Fetch a fresh snapshot and build its tree."""
		nodes = await self.source.fetch_nodes()
		return build_tree(nodes, self.config)

	async def snapshot(self, interesting_only: bool | None = None, root: Any | None = None) -> SerializedAXNode | None:
		"""Serialize the accessibility tree, or the subtree of the element `root` refers to.

		Returns None when `root` does not map to a node of the tree, or when pruning to
		interesting nodes removes it.
		"""
		if interesting_only is None:
			interesting_only = self.config.interesting_only

		default_root = await self.get_accessibility_tree()

		needle = default_root
		if root is not None:
			if self.resolver is None:
				raise ValueError('A backend node resolver is required to snapshot from an element')
			found = await find_element(default_root, root, self.resolver)
			if found is None:
				logger.debug(f'Element {root!r} has no node in the accessibility tree')
				return None
			needle = found

		if not interesting_only:
			return serialize_tree(needle)[0]

		# Interesting nodes are collected from the real root so that inside-control
		# state is inherited from the needle's ancestors
		interesting = collect_interesting_nodes(default_root)
		if root is not None and needle not in interesting:
			return None

		serialized = serialize_tree(needle, interesting)
		return serialized[0] if serialized else None
