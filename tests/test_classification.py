# @file purpose: Tests for leaf / control / interesting classification of accessibility nodes
import pytest

from ax_snapshot import build_tree, collect_interesting_nodes
from ax_snapshot.classification import CONTROL_ROLES, PRESENTATIONAL_CHILDREN_ROLES
from tests.factories import ax_record


def single(role: str | None = None, name: str | None = None, **properties):
	return build_tree([ax_record('1', role=role, name=name, properties=properties)])


def with_child(role: str, name: str | None = None, child_properties: dict | None = None, **properties):
	return build_tree(
		[
			ax_record('1', role=role, name=name, properties=properties, child_ids=['2']),
			ax_record('2', role='generic', properties=child_properties),
		]
	)


class TestScenario:
	def test_text_node_inside_button(self, nodes_by_id):
		c = nodes_by_id['C']
		assert c.is_leaf_node()
		assert c.is_text_only_object()
		assert not c.is_interesting(True)

	def test_button(self, nodes_by_id):
		a = nodes_by_id['A']
		assert a.is_control()
		assert a.is_interesting(False)

	def test_structural_nodes(self, nodes_by_id):
		assert not nodes_by_id['B'].is_control()
		assert not nodes_by_id['B'].is_interesting(False)
		assert nodes_by_id['R'].has_focusable_child
		assert not nodes_by_id['R'].is_leaf_node()


class TestTextFields:
	@pytest.mark.parametrize('role', ['textbox', 'combobox', 'searchbox'])
	def test_text_field_roles(self, role):
		assert single(role).is_plain_text_field()

	def test_plain_editable(self):
		assert single('generic', editable='plaintext').is_plain_text_field()

	def test_richly_editable_is_not_plain(self):
		assert not single('textbox', editable='richtext').is_plain_text_field()

	def test_other_roles(self):
		assert not single('button').is_plain_text_field()
		assert not single().is_plain_text_field()

	@pytest.mark.parametrize('role', ['linebreak', 'text', 'inlinetextbox'])
	def test_text_only_roles(self, role):
		assert single(role).is_text_only_object()

	def test_static_text_is_not_text_only(self):
		assert not single('paragraph').is_text_only_object()


class TestFocusableDescendants:
	def test_leaf_has_no_focusable_child(self):
		assert not single(focusable=True).has_focusable_child

	def test_direct_child(self):
		assert with_child('group', child_properties={'focusable': True}).has_focusable_child

	def test_transitive_descendant(self):
		root = build_tree(
			[
				ax_record('1', role='group', child_ids=['2']),
				ax_record('2', role='generic', child_ids=['3']),
				ax_record('3', role='generic', child_ids=['4']),
				ax_record('4', role='link', properties={'focusable': True}),
			]
		)
		assert root.has_focusable_child
		assert root.children[0].has_focusable_child
		assert not root.children[0].children[0].children[0].has_focusable_child

	def test_cached_values_fill_bottom_up(self):
		root = build_tree(
			[
				ax_record('1', role='group', child_ids=['2', '4']),
				ax_record('2', role='generic', child_ids=['3']),
				ax_record('3', role='link', properties={'focusable': True}),
				ax_record('4', role='generic'),
			]
		)
		middle, sibling = root.children
		assert middle.has_focusable_child
		assert root.has_focusable_child
		assert not sibling.has_focusable_child
		assert not middle.children[0].has_focusable_child

	def test_memoized_value_is_stable(self):
		root = with_child('group')
		first = root.has_focusable_child
		assert root.has_focusable_child == first
		assert first is False

	def test_deep_tree(self):
		"""Descendant checks do not recurse per level."""
		depth = 3000
		records = [ax_record(str(i), role='generic', child_ids=[str(i + 1)]) for i in range(depth)]
		records.append(ax_record(str(depth), role='button', properties={'focusable': True}))
		root = build_tree(records)
		assert root.has_focusable_child
		assert root.find(lambda node: node.focusable).node_id == str(depth)


class TestLeafNodes:
	def test_childless_node_is_always_leaf(self):
		assert single().is_leaf_node()
		assert single('group', focusable=True).is_leaf_node()

	def test_text_field_with_children(self):
		assert with_child('textbox', child_properties={'focusable': True}).is_leaf_node()

	def test_text_only_with_children(self):
		assert with_child('text').is_leaf_node()

	@pytest.mark.parametrize('role', sorted(PRESENTATIONAL_CHILDREN_ROLES))
	def test_presentational_children(self, role):
		"""Presentational roles win over the focusable-descendant rule."""
		assert with_child(role, child_properties={'focusable': True}).is_leaf_node()

	def test_focusable_descendant_prevents_leaf(self):
		assert not with_child('heading', name='Title', child_properties={'focusable': True}).is_leaf_node()

	def test_focusable_with_name(self):
		assert with_child('link', name='Home', focusable=True).is_leaf_node()
		assert not with_child('link', focusable=True).is_leaf_node()

	def test_heading_with_name(self):
		assert with_child('heading', name='Title').is_leaf_node()
		assert not with_child('heading').is_leaf_node()

	def test_container(self):
		assert not with_child('list', name='Items').is_leaf_node()


class TestControls:
	@pytest.mark.parametrize('role', sorted(CONTROL_ROLES))
	def test_control_roles(self, role):
		assert single(role).is_control()

	@pytest.mark.parametrize('role', ['link', 'heading', 'generic', 'WebArea', 'unknown'])
	def test_non_control_roles(self, role):
		assert not single(role).is_control()


class TestInteresting:
	def test_ignored_role(self):
		assert not single('ignored', name='x', focusable=True).is_interesting(False)

	def test_hidden(self):
		assert not single('button', hidden=True, focusable=True).is_interesting(False)

	def test_focusable(self):
		assert single('generic', focusable=True).is_interesting(True)

	def test_richly_editable(self):
		assert single('generic', editable='richtext').is_interesting(True)

	def test_control_without_focus(self):
		assert single('checkbox').is_interesting(True)

	def test_inside_control_suppresses_descendants(self):
		assert not single('img', name='icon').is_interesting(True)

	def test_named_leaf(self):
		assert single('img', name='Logo').is_interesting(False)
		assert not single('img').is_interesting(False)

	def test_named_container_is_not_interesting(self):
		assert not with_child('list', name='Items').is_interesting(False)


class TestCollectInterestingNodes:
	def test_scenario(self, scenario_tree, nodes_by_id):
		interesting = collect_interesting_nodes(scenario_tree)
		assert interesting == {nodes_by_id['A']}

	def test_does_not_descend_below_leaves(self):
		root = build_tree(
			[
				ax_record('1', role='WebArea', child_ids=['2']),
				ax_record('2', role='textbox', name='Search', child_ids=['3']),
				ax_record('3', role='generic', name='inner', properties={'focusable': True}),
			]
		)
		interesting = collect_interesting_nodes(root)
		assert {node.node_id for node in interesting} == {'2'}

	def test_inside_control_propagates(self):
		root = build_tree(
			[
				ax_record('1', role='WebArea', child_ids=['2', '4']),
				ax_record('2', role='menu', child_ids=['3']),
				ax_record('3', role='group', child_ids=['5']),
				ax_record('4', role='img', name='Logo'),
				ax_record('5', role='img', name='Icon', child_ids=['6']),
				ax_record('6', role='generic'),
			]
		)
		interesting = collect_interesting_nodes(root)
		assert {node.node_id for node in interesting} == {'2', '4'}

	def test_deep_chain(self):
		"""A chain far deeper than the interpreter's recursion limit is walked without recursion."""
		depth = 3000
		records = [ax_record(str(i), role='generic', child_ids=[str(i + 1)]) for i in range(depth)]
		records.append(ax_record(str(depth), role='button', name='Deep', properties={'focusable': True}))
		root = build_tree(records)
		interesting = collect_interesting_nodes(root)
		assert {node.node_id for node in interesting} == {str(depth)}


class TestChromeRoleNames:
	"""Chrome reports some internal roles camel-cased."""

	@pytest.mark.parametrize('role', ['LineBreak', 'InlineTextBox'])
	def test_text_only(self, role):
		assert single(role).is_text_only_object()

	@pytest.mark.parametrize('role', ['ColorWell', 'DisclosureTriangle', 'ComboBox'])
	def test_controls(self, role):
		assert single(role).is_control()

	def test_combo_box_is_text_field(self):
		assert single('ComboBox').is_plain_text_field()

	def test_meter_has_presentational_children(self):
		assert with_child('Meter', child_properties={'focusable': True}).is_leaf_node()

	def test_ignored(self):
		assert not single('Ignored', name='x', focusable=True).is_interesting(False)
