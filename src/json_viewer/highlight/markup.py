"""Write highlight spans as HTML markup.

Every classified span becomes ``<span class="json-{category}">text</span>``;
PLAIN spans (whitespace, stray characters, unterminated strings) are written
bare.  Span texts are already HTML-escaped by the tokenizer.
"""

from __future__ import annotations

from collections.abc import Iterable

from json_viewer.highlight.tokenizer import HighlightSpan, HighlightTokenizer, SpanCategory

# Module-level tokenizer (stateless, safe to share)
_tokenizer = HighlightTokenizer()


def spans_to_markup(spans: Iterable[HighlightSpan]) -> str:
    """Join spans into one markup string, wrapping every classified span."""
    parts: list[str] = []
    for span in spans:
        if span.category is SpanCategory.PLAIN:
            parts.append(span.text)
        else:
            parts.append(f'<span class="json-{span.category}">{span.text}</span>')
    return "".join(parts)


def highlight(serialized: str) -> str:
    """Return syntax-highlighted markup for serialized JSON text.

    Args:
        serialized: JSON text; formatting is preserved exactly.

    Returns:
        HTML-safe markup.  Stripping the tags and unescaping entities yields
        ``serialized`` again.
    """
    return spans_to_markup(_tokenizer.tokenize(serialized))
