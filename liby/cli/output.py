"""
Output formatting for CLI operations.

Node lines follow the ``name: value`` shape::

    graphics: {..}
    vsync: 1
    refresh: 59.9
    title: Untitled
    missing: null
"""

from typing import Optional

from rich.text import Text
from rich.tree import Tree

from liby.tree import Node, ValueKind


def describe_value(node: Node) -> str:
    """Short text for a node's value."""
    kind = node.value.kind
    payload = node.value.payload
    if kind is ValueKind.BLOCK:
        return "{..}"
    if kind is ValueKind.STRING:
        return payload
    if kind is ValueKind.INTEGER:
        return str(payload)
    if kind is ValueKind.DECIMAL:
        return f"{payload:.1f}"
    return "none"


def describe_node(node: Optional[Node]) -> str:
    """``name: value`` for a node, ``null`` when there is none."""
    if node is None:
        return "null"
    return f"{node.name}: {describe_value(node)}"


def _label(node: Node) -> str:
    label = node.name if node.is_block else describe_node(node)
    if node.notes:
        label += " " + " ".join(str(note) for note in node.notes)
    return label


def _add_branch(parent: Tree, node: Node) -> None:
    branch = parent.add(Text(_label(node)))
    for child in node.children:
        _add_branch(branch, child)


def build_tree(roots, title: str = "forest") -> Tree:
    """Build a rich tree of every root and its descendants."""
    tree = Tree(title)
    for root in roots:
        _add_branch(tree, root)
    return tree
