"""Mark search matches inside rendered output markup.

Only text content is searched; tags and their attributes are copied through
untouched, so marking never breaks the markup.  Matching is case-insensitive
and runs on the unescaped text, so a search for ``<`` finds ``&lt;``.
"""

from __future__ import annotations

import html
import re

from json_viewer.highlight.tokenizer import escape_html
from json_viewer.result import SearchResult

_TAG = re.compile(r"(<[^>]*>)")


def mark_matches(markup: str, term: str) -> SearchResult:
    """Wrap every case-insensitive occurrence of ``term`` in ``<mark>``.

    Args:
        markup: Output markup as produced by the highlight or tree renderers.
        term:   Literal search text.  An empty term marks nothing.

    Returns:
        A ``SearchResult`` with the marked markup and the number of matches.
    """
    if not term:
        return SearchResult(markup=markup, match_count=0)

    pattern = re.compile(f"({re.escape(term)})", re.IGNORECASE)
    count = 0
    parts: list[str] = []
    for i, segment in enumerate(_TAG.split(markup)):
        # split() with a capture group puts tags at odd indices
        if i % 2 == 1 or not segment:
            parts.append(segment)
            continue
        pieces = pattern.split(html.unescape(segment))
        if len(pieces) == 1:
            parts.append(segment)
            continue
        for j, piece in enumerate(pieces):
            if j % 2 == 1:
                count += 1
                parts.append(f'<mark class="search-match">{escape_html(piece)}</mark>')
            else:
                parts.append(escape_html(piece))
    return SearchResult(markup="".join(parts), match_count=count)
