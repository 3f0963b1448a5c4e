"""ViewerSession: orchestrator that owns the current document and its views.

This is the wiring layer between raw input text and the rendering pipeline.
It replaces any notion of a global "current document" with one explicit
session object.

Architecture:
- update_input() trims and decodes the input text and recomputes the stats.
  A successful parse replaces the document wholesale; a failed one keeps the
  previous document and records the ParseError.
- display() renders the document for the current view mode.  Documents whose
  compact serialization exceeds ``defer_threshold`` are handed to the
  scheduler, and a placeholder is returned in the meantime.  Deferred and
  inline renders produce identical output.
- Any exception while rendering is caught at the render boundary, logged,
  and turned into an inline error presentation.  The session keeps working.
- Nothing is cached: stats and output are recomputed on every call.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import UTC, datetime
from enum import StrEnum, auto
from pathlib import Path
from typing import Any

from json_viewer.analysis.analyzer import StructureAnalyzer
from json_viewer.analysis.metrics import byte_size, encode_utf8, line_count
from json_viewer.api import parse, present, serialize
from json_viewer.config import ViewerConfig, ViewMode
from json_viewer.errors import JsonViewerError, ParseError, RenderError
from json_viewer.highlight.tokenizer import escape_html
from json_viewer.protocols import Scheduler, TextSource
from json_viewer.result import DocumentStats, Presentation, SearchResult
from json_viewer.search import mark_matches
from json_viewer.sources.file import read_file
from json_viewer.sources.url import UrlSource

__all__ = ["DocumentStatus", "ViewerSession"]

logger = logging.getLogger(__name__)

EMPTY_MARKUP = (
    '<div class="placeholder"><p>JSON output will appear here</p>'
    "<p>Format, validate, or load JSON to see results</p></div>"
)
PROCESSING_MARKUP = (
    '<div class="placeholder"><p>Processing large JSON file...</p>'
    "<p>This may take a moment</p></div>"
)
DOWNLOAD_NAME = "data.json"


class DocumentStatus(StrEnum):
    """Validity of the current input text.

    - READY:   No input.
    - VALID:   Input decoded successfully.
    - INVALID: Input is not valid JSON; see ``ViewerSession.parse_error``.
    """

    READY = auto()
    VALID = auto()
    INVALID = auto()


def _run_now(job: Callable[[], None]) -> None:
    job()


def sample_document() -> dict[str, Any]:
    """Return the built-in sample document."""
    return {
        "application": "JSON Viewer & Formatter",
        "version": "1.0.0",
        "features": [
            "Load from URL",
            "Format & Minify",
            "Tree View",
            "Validation",
            "Search",
            "Export",
        ],
        "metadata": {
            "author": "Developer Tools",
            "license": "MIT",
            "performance": {"maxFileSize": "64MB+", "optimized": True},
        },
        "stats": {
            "totalKeys": 15,
            "depth": 3,
            "lastUpdated": datetime.now(UTC).isoformat(),
        },
    }


class ViewerSession:
    """Owns one document at a time and renders it on demand.

    Example::

        session = ViewerSession()
        session.update_input('{"a": 1, "b": [1, 2, 3]}')
        session.stats.total_keys         # 5
        session.set_view_mode(ViewMode.TREE).markup
    """

    def __init__(
        self,
        config: ViewerConfig | None = None,
        scheduler: Scheduler | None = None,
        source: TextSource | None = None,
    ) -> None:
        """Initialise an empty session.

        Args:
            config: Presentation parameters.  Defaults to ``ViewerConfig()``.
            scheduler: Runs deferred renders of large documents.  Defaults to
                running them immediately.
            source: URL fetcher used by ``load_url``.  Defaults to a
                ``UrlSource`` built from the config on first use.
        """
        self._config: ViewerConfig = config if config is not None else ViewerConfig()
        self._scheduler: Scheduler = scheduler if scheduler is not None else _run_now
        self._source: TextSource | None = source
        self._analyzer = StructureAnalyzer()

        self.text: str = ""
        self.document: Any = None
        self.has_document: bool = False
        self.status: DocumentStatus = DocumentStatus.READY
        self.parse_error: ParseError | None = None
        self.render_error: RenderError | None = None
        self.stats: DocumentStats = DocumentStats(size=0, lines=1)
        self.view_mode: ViewMode = ViewMode.FORMATTED
        self.output: Presentation | None = None

    @property
    def config(self) -> ViewerConfig:
        return self._config

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def update_input(self, text: str) -> DocumentStats:
        """Replace the input text, decode it, and recompute the stats.

        Args:
            text: Raw input; surrounding whitespace is ignored.

        Returns:
            The new ``DocumentStats``.  Key count and depth are 0 unless the
            text is valid JSON.
        """
        self.text = text
        trimmed = text.strip()
        self.parse_error = None

        if not trimmed:
            self.status = DocumentStatus.READY
            self.stats = DocumentStats(size=0, lines=1)
            return self.stats

        size, lines = byte_size(trimmed), line_count(trimmed)
        try:
            value = parse(trimmed)
        except ParseError as exc:
            logger.warning("Invalid JSON input: %s", exc)
            self.parse_error = exc
            self.status = DocumentStatus.INVALID
            self.stats = DocumentStats(size=size, lines=lines)
            return self.stats

        self.document = value
        self.has_document = True
        self.status = DocumentStatus.VALID
        structure = self._analyzer.analyze(value)
        self.stats = DocumentStats(
            size=size,
            lines=lines,
            total_keys=structure.total_keys,
            max_depth=structure.max_depth,
        )
        return self.stats

    def _check_input(self, action: str) -> None:
        """Re-decode the input, raising when it is empty or invalid."""
        if not self.text.strip():
            raise JsonViewerError(f"No JSON to {action}")
        self.update_input(self.text)
        if self.parse_error is not None:
            raise self.parse_error

    def validate(self) -> bool:
        """Check the current input.

        Raises:
            JsonViewerError: If there is no input.
            ParseError: If the input is not valid JSON.
        """
        self._check_input("validate")
        return True

    def format(self) -> Presentation:
        """Decode the input and show it; the input text is left as typed."""
        self._check_input("format")
        return self.display()

    def minify(self) -> Presentation:
        """Replace the input text with its compact serialization and show it."""
        self._check_input("minify")
        self.update_input(serialize(self.document, ViewMode.RAW))
        return self.display()

    def clear(self) -> None:
        """Drop the input text, the document and the rendered output."""
        self.document = None
        self.has_document = False
        self.output = None
        self.render_error = None
        self.update_input("")

    def load_sample(self) -> Presentation:
        """Load the built-in sample document as pretty-printed input."""
        self.update_input(serialize(sample_document(), ViewMode.FORMATTED, indent=self._config.indent))
        return self.display()

    def load_url(
        self,
        url: str,
        confirm: Callable[[int], bool] | None = None,
    ) -> Presentation | None:
        """Fetch ``url`` and make its body the new input.

        Args:
            url: Location of the JSON text.
            confirm: Asked with the text length when it exceeds
                ``confirm_threshold``; returning False cancels the load.

        Returns:
            The rendered presentation, or None when the load was cancelled.

        Raises:
            TransferError: If the fetch failed; session state is unchanged.
            ParseError: If the fetched text is not valid JSON.  The text is
                still placed in the input.
        """
        if self._source is None:
            self._source = UrlSource(
                timeout=self._config.fetch_timeout,
                attempts=self._config.fetch_attempts,
            )
        text = self._source.fetch(url)
        if len(text) > self._config.confirm_threshold and confirm is not None:
            if not confirm(len(text)):
                logger.info("Load of %d characters from %s cancelled", len(text), url)
                return None
        return self._accept_loaded(text)

    def load_file(self, path: str | Path) -> Presentation:
        """Read a ``.json`` file and make its contents the new input.

        Raises:
            TransferError: If the file cannot be read; session state is unchanged.
            ParseError: If the file is not valid JSON.
        """
        return self._accept_loaded(read_file(path))

    def _accept_loaded(self, text: str) -> Presentation:
        self.update_input(text)
        if self.parse_error is not None:
            raise self.parse_error
        return self.display()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def set_view_mode(self, mode: ViewMode | str) -> Presentation:
        """Switch the view mode and re-render."""
        self.view_mode = ViewMode(mode)
        return self.display()

    def display(self, on_ready: Callable[[Presentation], None] | None = None) -> Presentation:
        """Render the current document in the current view mode.

        Args:
            on_ready: Called with the finished presentation, immediately for
                small documents or from the scheduler for large ones.

        Returns:
            The finished presentation, or a placeholder with ``deferred=True``
            when the render was handed to the scheduler.
        """
        mode = self.view_mode
        if not self.has_document:
            self.output = Presentation(mode=mode, markup=EMPTY_MARKUP)
            return self.output

        size = len(serialize(self.document, ViewMode.RAW))
        if size > self._config.defer_threshold:
            logger.debug("Deferring %s render of %d characters", mode, size)

            def job() -> None:
                presentation = self._render(mode)
                if on_ready is not None:
                    on_ready(presentation)

            placeholder = Presentation(mode=mode, markup=PROCESSING_MARKUP, deferred=True)
            self.output = placeholder
            self._scheduler(job)
            return placeholder

        presentation = self._render(mode)
        if on_ready is not None:
            on_ready(presentation)
        return presentation

    def _render(self, mode: ViewMode) -> Presentation:
        t0 = time.perf_counter()
        try:
            presentation = present(self.document, mode, self._config)
        except Exception as exc:  # noqa: BLE001 - render boundary
            self.render_error = RenderError(str(exc))
            logger.exception("Rendering %s view failed", mode)
            presentation = Presentation(
                mode=mode,
                markup=f'<div class="render-error">Error displaying JSON: {escape_html(str(exc))}</div>',
            )
        else:
            self.render_error = None
            elapsed_ms = (time.perf_counter() - t0) * 1000.0
            logger.debug("Rendered %s view in %.1f ms", mode, elapsed_ms)
        self.output = presentation
        return presentation

    def copy_output(self) -> str:
        """Return the text behind the current output for the clipboard.

        Raw mode copies the compact form; formatted and tree modes copy the
        indented form.

        Raises:
            JsonViewerError: If there is no document.
        """
        if not self.has_document:
            raise JsonViewerError("No output to copy")
        return serialize(self.document, self.view_mode, indent=self._config.indent)

    def download(self) -> tuple[str, bytes]:
        """Return ``(filename, payload)`` for saving the trimmed input text.

        Raises:
            JsonViewerError: If there is no input.
        """
        trimmed = self.text.strip()
        if not trimmed:
            raise JsonViewerError("No JSON to download")
        return DOWNLOAD_NAME, encode_utf8(trimmed)

    def search(self, term: str) -> SearchResult:
        """Mark ``term`` in the current output; renders first if needed."""
        presentation = self.output if self.output is not None else self.display()
        return mark_matches(presentation.markup, term)
