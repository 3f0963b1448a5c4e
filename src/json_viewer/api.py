"""Public API functions for json-viewer.

Stateless helpers over a single decoded value or text blob: parse, analyze,
serialize, format_text, minify_text, render_tree, and present.  None of them
keeps state between calls; ``ViewerSession`` builds on top of them.
"""

from __future__ import annotations

import json
from typing import Any

from json_viewer.analysis.analyzer import StructureAnalyzer
from json_viewer.analysis.metrics import line_count, locate
from json_viewer.config import ViewerConfig, ViewMode
from json_viewer.errors import ParseError
from json_viewer.highlight.markup import highlight
from json_viewer.result import Presentation, Stats
from json_viewer.tree.builder import TreeBuilder
from json_viewer.tree.markup import TreeMarkupRenderer

__all__ = [
    "analyze",
    "format_text",
    "minify_text",
    "parse",
    "present",
    "render_tree",
    "serialize",
]

_COMPACT_SEPARATORS = (",", ":")


class _NonJsonConstant(Exception):
    """Raised by the decoder hook for ``NaN``, ``Infinity`` and ``-Infinity``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)


def _reject_constant(name: str) -> Any:
    raise _NonJsonConstant(name)


def _constant_offset(text: str, name: str) -> int:
    """Return the offset of the first ``name`` outside a string literal."""
    in_string = False
    i = 0
    while i < len(text):
        char = text[i]
        if in_string:
            if char == "\\":
                i += 2
                continue
            if char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif text.startswith(name, i):
            return i
        i += 1
    return 0


def parse(text: str) -> Any:
    """Decode JSON text.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected: the stdlib decoder
    accepts them by default but they are not JSON.

    Args:
        text: Raw JSON text.

    Returns:
        The decoded value.

    Raises:
        ParseError: With the 1-based line/column of the failure and the
            decoder's message.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        line, column = locate(text, exc.pos)
        raise ParseError(exc.msg, line=line, column=column, position=exc.pos) from exc
    except _NonJsonConstant as exc:
        position = _constant_offset(text, exc.name)
        line, column = locate(text, position)
        raise ParseError(
            f"Unexpected token {exc.name}", line=line, column=column, position=position
        ) from None


def analyze(value: Any) -> Stats:
    """Return total key/element count and maximum depth of ``value``."""
    return StructureAnalyzer().analyze(value)


def serialize(value: Any, mode: ViewMode = ViewMode.FORMATTED, indent: int = 2) -> str:
    """Serialize ``value`` the way ``mode`` shows it.

    RAW gives the compact form with no whitespace; FORMATTED and TREE give the
    indented form (tree output is copied as formatted text).
    """
    if mode is ViewMode.RAW:
        return json.dumps(value, separators=_COMPACT_SEPARATORS, ensure_ascii=False)
    return json.dumps(value, indent=indent, ensure_ascii=False)


def format_text(text: str, indent: int = 2) -> str:
    """Pretty-print JSON text; already-formatted text is returned unchanged."""
    return serialize(parse(text), ViewMode.FORMATTED, indent=indent)


def minify_text(text: str) -> str:
    """Minify JSON text; already-minified text is returned unchanged."""
    return serialize(parse(text), ViewMode.RAW)


def render_tree(value: Any, truncate_at: int = 100) -> str:
    """Return collapsible tree markup for ``value`` with every node expanded."""
    tree = TreeBuilder(truncate_at=truncate_at).build(value)
    return TreeMarkupRenderer().render(tree)


def present(
    value: Any,
    mode: ViewMode = ViewMode.FORMATTED,
    config: ViewerConfig | None = None,
) -> Presentation:
    """Render ``value`` for a view mode.

    FORMATTED and RAW serialize first and run the highlight tokenizer over the
    text; TREE renders the value directly without serializing.

    Args:
        value:  Decoded JSON value.
        mode:   Requested view mode.
        config: Presentation parameters.  Defaults to ``ViewerConfig()``.

    Returns:
        A ``Presentation`` with markup and, for text modes, the serialized text
        and its line count.
    """
    config = config if config is not None else ViewerConfig()
    if mode is ViewMode.TREE:
        return Presentation(mode=mode, markup=render_tree(value, truncate_at=config.truncate_at))
    text = serialize(value, mode, indent=config.indent)
    return Presentation(mode=mode, markup=highlight(text), text=text, line_count=line_count(text))
