"""TreeNode dataclass and NodeKind/ScalarType StrEnums for the tree view.

Provides the data types produced by TreeBuilder and consumed by
TreeMarkupRenderer and the view-state helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any


class NodeKind(StrEnum):
    """Enumeration of the three structural node kinds in the tree view.

    - SCALAR -> "scalar" : A leaf value (string, number, bool, null)
    - ARRAY  -> "array"  : JSON array []
    - OBJECT -> "object" : JSON object {}
    """

    SCALAR = auto()
    ARRAY = auto()
    OBJECT = auto()


class ScalarType(StrEnum):
    """Type tag of a SCALAR node; values double as CSS class suffixes."""

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()


@dataclass(slots=True)
class TreeNode:
    """A node in the rendered tree view.

    Attributes:
        kind:        Which kind of node this is (see NodeKind).
        path:        Path expression, e.g. "root", "a.b", "root[0].name".
        label:       Member key when the parent is an object, index string when
                     the parent is an array, empty for the root.
        value:       Full decoded value for SCALAR nodes; None for containers.
        scalar_type: Type tag for SCALAR nodes; None for containers.
        preview:     Display text for SCALAR nodes.  Long strings are truncated
                     here only, never in ``value``.
        children:    Child nodes in document order.
        expanded:    Transient view state of a container; flipping it never
                     rebuilds the tree.
    """

    kind: NodeKind
    path: str
    label: str = ""
    value: Any = None
    scalar_type: ScalarType | None = None
    preview: str = ""
    children: list[TreeNode] = field(default_factory=list)
    expanded: bool = True

    @property
    def is_container(self) -> bool:
        """True for ARRAY and OBJECT nodes."""
        return self.kind is not NodeKind.SCALAR

    @property
    def child_count(self) -> int:
        """Number of elements (arrays) or members (objects); 0 for scalars."""
        return len(self.children)

    @property
    def is_collapsible(self) -> bool:
        """True for non-empty containers, the only nodes with a toggle."""
        return self.is_container and bool(self.children)
