"""TreeBuilder: converts any decoded JSON value into a TreeNode tree.

Uses recursive dispatch to convert JSON dicts, lists, and scalar values into
a tree of TreeNode objects.  Array children are labelled with their index,
object children with their key.  String previews longer than ``truncate_at``
characters are cut for display; the full value is always kept.

Path expressions are built during traversal:
- Root is "root"
- Array elements append "[{index}]"
- Object members append ".{key}", EXCEPT the direct members of the root,
  which are named by their bare key ("a", not "root.a").  Only the root
  object gets this treatment: elements of a root array are "root[0]".
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from json_viewer.tree.nodes import NodeKind, ScalarType, TreeNode

ROOT_PATH = "root"
ELLIPSIS = "..."


@dataclass
class TreeBuilder:
    """Converts any decoded JSON value into a TreeNode tree.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    Attributes:
        truncate_at: Maximum number of characters shown for a string preview.

    Example::
        builder = TreeBuilder()
        tree = builder.build({"a": {"b": 1}})
        # tree: OBJECT(root) -> OBJECT(a) -> SCALAR(a.b, preview="1")
    """

    truncate_at: int = 100

    def build(self, value: Any, path: str = ROOT_PATH, is_root: bool = True) -> TreeNode:
        """Convert a decoded JSON value to a TreeNode tree.

        Args:
            value:   Any decoded JSON value (dict, list, str, int, float, bool, None).
            path:    Path expression of this node.  Defaults to "root".
            is_root: True only for the top-level call; controls the bare-key
                     naming of the root object's members.

        Returns:
            A TreeNode tree rooted at the appropriate node kind.

        Raises:
            TypeError: If value is not a valid JSON type.
        """
        # CRITICAL: bool MUST be checked before int
        if isinstance(value, bool):
            return self._scalar(value, ScalarType.BOOLEAN, "true" if value else "false", path)

        if isinstance(value, dict):
            return self._build_object(value, path, is_root)

        if isinstance(value, list):
            return self._build_array(value, path)

        if isinstance(value, str):
            return self._scalar(value, ScalarType.STRING, self._preview(value), path)

        if isinstance(value, (int, float)):
            return self._scalar(value, ScalarType.NUMBER, json.dumps(value), path)

        if value is None:
            return self._scalar(None, ScalarType.NULL, "null", path)

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def _preview(self, text: str) -> str:
        if len(text) > self.truncate_at:
            return text[: self.truncate_at] + ELLIPSIS
        return text

    @staticmethod
    def _scalar(value: Any, scalar_type: ScalarType, preview: str, path: str) -> TreeNode:
        return TreeNode(
            kind=NodeKind.SCALAR,
            path=path,
            value=value,
            scalar_type=scalar_type,
            preview=preview,
        )

    def _build_object(self, obj: dict[str, Any], path: str, is_root: bool) -> TreeNode:
        """Build an OBJECT node with one child per member.

        Args:
            obj:     The JSON object (Python dict).
            path:    Path expression of this object node.
            is_root: Whether this object is the document root.

        Returns:
            An OBJECT TreeNode whose children carry their key as label.
        """
        object_node = TreeNode(kind=NodeKind.OBJECT, path=path)

        for key, val in obj.items():
            member_path = key if is_root else f"{path}.{key}"
            child = self.build(val, path=member_path, is_root=False)
            child.label = key
            object_node.children.append(child)

        return object_node

    def _build_array(self, arr: list[Any], path: str) -> TreeNode:
        """Build an ARRAY node with one child per element.

        Args:
            arr:  The JSON array (Python list).
            path: Path expression of this array node.

        Returns:
            An ARRAY TreeNode whose children carry their index as label.
        """
        array_node = TreeNode(kind=NodeKind.ARRAY, path=path)

        for idx, item in enumerate(arr):
            child = self.build(item, path=f"{path}[{idx}]", is_root=False)
            child.label = str(idx)
            array_node.children.append(child)

        return array_node
