import pytest

from ax_snapshot import AXTreeNode, build_tree
from tests.factories import scenario_records


@pytest.fixture
def scenario_tree() -> AXTreeNode:
	return build_tree(scenario_records())


@pytest.fixture
def nodes_by_id(scenario_tree: AXTreeNode) -> dict[str, AXTreeNode]:
	return {node.node_id: node for node in [scenario_tree, *scenario_tree.iter_descendants()]}
