"""Expand/collapse state of a rendered tree.

These helpers flip ``TreeNode.expanded`` on nodes that were already built.
They never call the builder again; re-rendering the markup afterwards only
changes the children-container class and the toggle glyph.
"""

from __future__ import annotations

from collections.abc import Iterator

from json_viewer.tree.nodes import TreeNode

EXPANDED_GLYPH = "▼"
COLLAPSED_GLYPH = "▶"


def glyph(node: TreeNode) -> str:
    """Return the toggle indicator for a container node."""
    return EXPANDED_GLYPH if node.expanded else COLLAPSED_GLYPH


def toggle(node: TreeNode) -> bool:
    """Flip a container's expanded flag and return the new state.

    Scalars and empty containers have no toggle: they are left unchanged and
    False is returned.
    """
    if not node.is_collapsible:
        return False
    node.expanded = not node.expanded
    return node.expanded


def iter_containers(root: TreeNode) -> Iterator[TreeNode]:
    """Yield every collapsible node of the tree in document order."""
    if root.is_collapsible:
        yield root
    for child in root.children:
        yield from iter_containers(child)


def expand_all(root: TreeNode) -> None:
    """Expand every collapsible node of the tree."""
    for node in iter_containers(root):
        node.expanded = True


def collapse_all(root: TreeNode) -> None:
    """Collapse every collapsible node of the tree."""
    for node in iter_containers(root):
        node.expanded = False


def find(root: TreeNode, path: str) -> TreeNode | None:
    """Return the first node whose path equals ``path``, or None."""
    if root.path == path:
        return root
    for child in root.children:
        found = find(child, path)
        if found is not None:
            return found
    return None
