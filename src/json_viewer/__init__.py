"""JSON viewer - syntax markup, tree rendering and statistics for JSON documents."""

from __future__ import annotations

from json_viewer.api import (
    analyze,
    format_text,
    minify_text,
    parse,
    present,
    render_tree,
    serialize,
)
from json_viewer.config import ViewerConfig, ViewMode
from json_viewer.errors import JsonViewerError, ParseError, RenderError, TransferError
from json_viewer.highlight import highlight
from json_viewer.result import DocumentStats, Presentation, SearchResult, Stats
from json_viewer.session import DocumentStatus, ViewerSession

__version__: str = "0.1.0"
__all__: list[str] = [
    "DocumentStats",
    "DocumentStatus",
    "JsonViewerError",
    "ParseError",
    "Presentation",
    "RenderError",
    "SearchResult",
    "Stats",
    "TransferError",
    "ViewMode",
    "ViewerConfig",
    "ViewerSession",
    "analyze",
    "format_text",
    "highlight",
    "minify_text",
    "parse",
    "present",
    "render_tree",
    "serialize",
]
