"""Result records returned by the analysis and presentation layers."""

from __future__ import annotations

from dataclasses import dataclass

from json_viewer.config import ViewMode

__all__ = ["DocumentStats", "Presentation", "SearchResult", "Stats"]


@dataclass(frozen=True, slots=True)
class Stats:
    """Structural statistics of a decoded value.

    Attributes:
        total_keys: Object members plus array elements across the whole tree.
        max_depth: Deepest level reached by a scalar or empty container; a
            root scalar or empty root container is depth 0.
    """

    total_keys: int
    max_depth: int


@dataclass(frozen=True, slots=True)
class DocumentStats:
    """Statistics shown for the current input text.

    Attributes:
        size: UTF-8 byte length of the (trimmed) input text.
        lines: Number of lines in the input text.
        total_keys: See ``Stats.total_keys``; 0 when the input is not valid JSON.
        max_depth: See ``Stats.max_depth``; 0 when the input is not valid JSON.
    """

    size: int
    lines: int
    total_keys: int = 0
    max_depth: int = 0


@dataclass(frozen=True, slots=True)
class Presentation:
    """Renderable output for one view mode.

    Attributes:
        mode: The view mode this output was rendered for.
        markup: HTML-safe markup to display verbatim.
        text: Serialized text behind the markup (None in tree mode).
        line_count: Lines of ``text`` for a line-number gutter (0 in tree mode).
        deferred: True when this is a placeholder and the real output will be
            delivered through the scheduler.
    """

    mode: ViewMode
    markup: str
    text: str | None = None
    line_count: int = 0
    deferred: bool = False


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Output markup with search matches wrapped in ``<mark>`` elements."""

    markup: str
    match_count: int
