"""TreeMarkupRenderer: writes a TreeNode tree as collapsible HTML markup.

Layout of a non-empty container::

    <div class="tree-node" ...>        header: toggle glyph, bracket, count, path
    <div class="tree-children expanded">
      <div class="tree-row">...</div>  one row per child
      <div class="tree-node">]</div>   closing bracket
    </div>

The host page wires ``toggleTreeNode(this)`` on headers and
``copyPath('<path>')`` on object keys.  Text content escapes ``&``, ``<``
and ``>``; attribute values additionally escape ``"``.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_viewer.highlight.tokenizer import escape_html
from json_viewer.tree.nodes import NodeKind, ScalarType, TreeNode
from json_viewer.tree.view import glyph


def escape_attr(text: str) -> str:
    """Escape text for a double-quoted HTML attribute."""
    return escape_html(text).replace('"', "&quot;")


def copy_payload(path: str) -> str:
    """Escape a path for ``copyPath('...')`` inside a double-quoted attribute."""
    return escape_attr(path).replace("'", "\\'")


_BRACKETS = {
    NodeKind.ARRAY: ("[", "]", "items"),
    NodeKind.OBJECT: ("{", "}", "keys"),
}


@dataclass
class TreeMarkupRenderer:
    """Renders TreeNode trees built by ``TreeBuilder`` to HTML markup.

    Pure function of the node tree: container ``expanded`` flags only pick
    the children-container class and the toggle glyph.
    """

    def render(self, node: TreeNode) -> str:
        """Return the markup for ``node`` and its whole subtree."""
        if node.kind is NodeKind.SCALAR:
            return self._render_scalar(node)
        return self._render_container(node)

    def _render_scalar(self, node: TreeNode) -> str:
        path = escape_attr(node.path)
        if node.scalar_type is ScalarType.STRING:
            title = f"Path: {path}\nValue: {escape_attr(node.value)}"
            return f'<span class="json-string" title="{title}">"{escape_html(node.preview)}"</span>'
        return f'<span class="json-{node.scalar_type}" title="Path: {path}">{node.preview}</span>'

    def _render_container(self, node: TreeNode) -> str:
        opener, closer, noun = _BRACKETS[node.kind]
        if not node.children:
            return f'<span class="json-punctuation">{opener}{closer}</span>'

        path = escape_attr(node.path)
        state = " expanded" if node.expanded else ""
        parts = [
            f'<div class="tree-node" onclick="toggleTreeNode(this)" data-path="{path}" '
            f'title="Path: {path}"><span class="tree-toggle">{glyph(node)}</span>'
            f'<span class="json-punctuation">{opener}</span> '
            f'<span class="tree-count">{node.child_count} {noun}</span> '
            f'<span class="tree-path" title="Click to copy path">{escape_html(node.path)}</span></div>',
            f'<div class="tree-children{state}">',
        ]
        for child in node.children:
            parts.append(f'<div class="tree-row">{self._row_label(node, child)} {self.render(child)}</div>')
        parts.append(f'<div class="tree-node"><span class="json-punctuation">{closer}</span></div></div>')
        return "".join(parts)

    @staticmethod
    def _row_label(parent: TreeNode, child: TreeNode) -> str:
        if parent.kind is NodeKind.ARRAY:
            return f'<span class="tree-index">{child.label}:</span>'
        return (
            f'<span class="json-key" onclick="copyPath(\'{copy_payload(child.path)}\')" '
            f'title="Click to copy path">"{escape_html(child.label)}"</span>'
            '<span class="json-punctuation">:</span>'
        )
