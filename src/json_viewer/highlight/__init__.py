"""Highlight subpackage for syntax markup of serialized JSON text.

Re-exports the public API for the highlight module:
- HighlightTokenizer: two-state scanner producing classified spans
- HighlightSpan: one classified run of escaped text
- SpanCategory: StrEnum of span categories (key, string, number, ...)
- highlight: serialized text -> HTML markup
- spans_to_markup: spans -> HTML markup
"""

from json_viewer.highlight.markup import highlight, spans_to_markup
from json_viewer.highlight.tokenizer import (
    HighlightSpan,
    HighlightTokenizer,
    SpanCategory,
    escape_html,
)

__all__ = [
    "HighlightSpan",
    "HighlightTokenizer",
    "SpanCategory",
    "escape_html",
    "highlight",
    "spans_to_markup",
]
