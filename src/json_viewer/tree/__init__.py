"""Tree subpackage for the collapsible tree view.

Re-exports the public API for the tree module:
- TreeNode: dataclass representing a node in the tree view
- NodeKind: StrEnum of the three node kinds (SCALAR, ARRAY, OBJECT)
- ScalarType: StrEnum of scalar type tags (STRING, NUMBER, BOOLEAN, NULL)
- TreeBuilder: converts any decoded JSON value into a TreeNode tree
- TreeMarkupRenderer: writes a TreeNode tree as HTML markup
- toggle, expand_all, collapse_all, find: view-state helpers
"""

from json_viewer.tree.builder import TreeBuilder
from json_viewer.tree.markup import TreeMarkupRenderer
from json_viewer.tree.nodes import NodeKind, ScalarType, TreeNode
from json_viewer.tree.view import collapse_all, expand_all, find, toggle

__all__ = [
    "NodeKind",
    "ScalarType",
    "TreeBuilder",
    "TreeMarkupRenderer",
    "TreeNode",
    "collapse_all",
    "expand_all",
    "find",
    "toggle",
]
