"""StructureAnalyzer: total key/element count and maximum nesting depth.

Walks a decoded JSON value recursively in one pass:

- A scalar (including null) at depth d counts 0 keys and reaches depth d.
- An array of n elements at depth d counts n, plus each element's own count,
  and reaches the deepest of its elements evaluated at d + 1 (d if empty).
- An object of k members is treated exactly like an array of its k values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_viewer.result import Stats


@dataclass
class StructureAnalyzer:
    """Computes ``Stats`` for any decoded JSON value.

    Stateless: every call recomputes from scratch.  Decoded JSON is always
    acyclic, so the recursion terminates.

    Example::
        StructureAnalyzer().analyze({"a": 1, "b": [1, 2, 3]})
        # Stats(total_keys=5, max_depth=2)
    """

    def analyze(self, value: Any, depth: int = 0) -> Stats:
        """Return the key count and maximum depth of ``value``.

        Args:
            value: Any decoded JSON value.
            depth: Depth at which ``value`` sits.  Defaults to 0 (root).

        Returns:
            A ``Stats`` record for the subtree rooted at ``value``.

        Raises:
            TypeError: If ``value`` (or anything inside it) is not a JSON type.
        """
        # bool and None are scalars too; only containers recurse
        if isinstance(value, dict):
            return self._analyze_children(list(value.values()), depth)

        if isinstance(value, list):
            return self._analyze_children(value, depth)

        if value is None or isinstance(value, (bool, int, float, str)):
            return Stats(total_keys=0, max_depth=depth)

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def _analyze_children(self, children: list[Any], depth: int) -> Stats:
        total_keys = len(children)
        max_depth = depth
        for child in children:
            child_stats = self.analyze(child, depth + 1)
            total_keys += child_stats.total_keys
            max_depth = max(max_depth, child_stats.max_depth)
        return Stats(total_keys=total_keys, max_depth=max_depth)
