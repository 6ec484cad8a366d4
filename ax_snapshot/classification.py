# @file purpose: Leaf / control / interesting heuristics applied to accessibility nodes
"""
Classification rules deciding how a node is exposed to assistive technology.

All functions are pure: they only read the flags parsed at node construction, the
role, the name and the (already attached) children.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from ax_snapshot.node import AXTreeNode

PLAIN_TEXT_FIELD_ROLES = frozenset({'textbox', 'combobox', 'searchbox'})

TEXT_ONLY_ROLES = frozenset({'linebreak', 'text', 'inlinetextbox'})

# Roles whose children are only presentational according to the ARIA and HTML5 specs
PRESENTATIONAL_CHILDREN_ROLES = frozenset(
	{
		'doc-cover',
		'graphics-symbol',
		'img',
		'meter',
		'scrollbar',
		'slider',
		'separator',
		'progressbar',
	}
)

CONTROL_ROLES = frozenset(
	{
		'button',
		'checkbox',
		'colorwell',
		'combobox',
		'disclosuretriangle',
		'listbox',
		'menu',
		'menubar',
		'menuitem',
		'menuitemcheckbox',
		'menuitemradio',
		'radio',
		'scrollbar',
		'searchbox',
		'slider',
		'spinbutton',
		'switch',
		'tab',
		'textbox',
		'tree',
	}
)

IGNORED_ROLE = 'ignored'


def _role(node: 'AXTreeNode') -> str:
	# Chrome reports some internal roles camel-cased (LineBreak, InlineTextBox, ColorWell)
	return node.role.lower()


def is_plain_text_field(node: 'AXTreeNode') -> bool:
	if node.richly_editable:
		return False
	if node.editable:
		return True
	return _role(node) in PLAIN_TEXT_FIELD_ROLES


def is_text_only_object(node: 'AXTreeNode') -> bool:
	return _role(node) in TEXT_ONLY_ROLES


def has_focusable_child(node: 'AXTreeNode') -> bool:
	"""Check if any direct child is focusable or has a focusable child itself."""
	return any(child.focusable or child.has_focusable_child for child in node.children)


def is_leaf_node(node: 'AXTreeNode') -> bool:
	if not node.children:
		return True

	# Text fields and text runs keep their children as implementation details;
	# screen readers expect them to be leaves
	if is_plain_text_field(node) or is_text_only_object(node):
		return True

	if _role(node) in PRESENTATIONAL_CHILDREN_ROLES:
		return True

	# Android heuristics from here on
	if node.has_focusable_child:
		return False
	if node.focusable and node.name:
		return True
	if _role(node) == 'heading' and node.name:
		return True
	return False


def is_control(node: 'AXTreeNode') -> bool:
	return _role(node) in CONTROL_ROLES


def is_interesting(node: 'AXTreeNode', inside_control: bool) -> bool:
	if _role(node) == IGNORED_ROLE or node.hidden:
		return False

	if node.focusable or node.richly_editable:
		return True

	# Not focusable, but a control role is still interesting
	if is_control(node):
		return True

	# A non focusable child of a control is not interesting
	if inside_control:
		return False

	return is_leaf_node(node) and bool(node.name)


def collect_interesting_nodes(root: 'AXTreeNode', inside_control: bool = False) -> set['AXTreeNode']:
	"""Collect every interesting node of the tree, not descending below leaf nodes."""
	collection: set['AXTreeNode'] = set()

	stack = [(root, inside_control)]
	while stack:
		node, inside_control = stack.pop()
		if is_interesting(node, inside_control):
			collection.add(node)
		if is_leaf_node(node):
			continue
		inside_control = inside_control or is_control(node)
		stack.extend((child, inside_control) for child in reversed(node.children))

	return collection
