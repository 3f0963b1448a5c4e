"""Tests for ViewerSession.

Covers input handling and stats, the format/minify/validate actions, view
modes, deferred rendering of large documents, the render-error boundary,
copy/download, loading from URL and file sources, and search.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest

from json_viewer import (
    DocumentStats,
    DocumentStatus,
    JsonViewerError,
    ParseError,
    Presentation,
    RenderError,
    TransferError,
    ViewerConfig,
    ViewerSession,
    ViewMode,
)
from json_viewer.session import EMPTY_MARKUP, PROCESSING_MARKUP

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class CannedSource:
    """TextSource stand-in returning fixed text or raising."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.urls: list[str] = []

    def fetch(self, url: str) -> str:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.text


class QueueScheduler:
    """Collects jobs so tests decide when the 'next idle point' happens."""

    def __init__(self) -> None:
        self.jobs: list[Callable[[], None]] = []

    def __call__(self, job: Callable[[], None]) -> None:
        self.jobs.append(job)

    def run(self) -> None:
        jobs, self.jobs = self.jobs, []
        for job in jobs:
            job()


@pytest.fixture
def session() -> ViewerSession:
    return ViewerSession()


# ---------------------------------------------------------------------------
# Input and stats
# ---------------------------------------------------------------------------


class TestUpdateInput:
    def test_initial_state(self, session: ViewerSession) -> None:
        assert session.status is DocumentStatus.READY
        assert session.stats == DocumentStats(size=0, lines=1)
        assert not session.has_document

    def test_valid_input(self, session: ViewerSession) -> None:
        stats = session.update_input('{"a":1,"b":[1,2,3]}')
        assert session.status is DocumentStatus.VALID
        assert stats == DocumentStats(size=19, lines=1, total_keys=5, max_depth=2)
        assert session.document == {"a": 1, "b": [1, 2, 3]}

    def test_surrounding_whitespace_is_ignored(self, session: ViewerSession) -> None:
        stats = session.update_input("  \n[1]\n\n")
        assert stats.size == 3
        assert stats.lines == 1

    def test_blank_input_is_ready(self, session: ViewerSession) -> None:
        session.update_input("[1]")
        assert session.update_input("   ") == DocumentStats(size=0, lines=1)
        assert session.status is DocumentStatus.READY

    def test_invalid_input_keeps_previous_document(self, session: ViewerSession) -> None:
        session.update_input('{"keep": true}')
        stats = session.update_input('{"keep": tru')
        assert session.status is DocumentStatus.INVALID
        assert stats.total_keys == 0
        assert stats.max_depth == 0
        assert stats.size == 12
        assert session.document == {"keep": True}
        assert session.text == '{"keep": tru'
        assert isinstance(session.parse_error, ParseError)
        assert session.parse_error.line == 1

    def test_null_document_is_a_document(self, session: ViewerSession) -> None:
        session.update_input("null")
        assert session.has_document
        assert session.document is None
        assert "json-null" in session.display().markup

    def test_multibyte_size(self, session: ViewerSession) -> None:
        assert session.update_input('"€"').size == 5

    def test_non_json_constant_is_invalid(self, session: ViewerSession) -> None:
        session.update_input("[1]")
        session.update_input('{"x": NaN}')
        assert session.status is DocumentStatus.INVALID
        assert session.parse_error is not None
        assert (session.parse_error.line, session.parse_error.column) == (1, 7)
        assert session.document == [1]
        with pytest.raises(ParseError, match="Unexpected token NaN"):
            session.validate()


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


class TestActions:
    def test_format_shows_formatted_output_and_keeps_input(self, session: ViewerSession) -> None:
        session.update_input('{"a":1}')
        result = session.format()
        assert result.text == '{\n  "a": 1\n}'
        assert session.text == '{"a":1}'

    def test_format_without_input(self, session: ViewerSession) -> None:
        with pytest.raises(JsonViewerError, match="No JSON to format"):
            session.format()

    def test_format_invalid_input(self, session: ViewerSession) -> None:
        session.update_input('{\n  "a": }')
        with pytest.raises(ParseError) as info:
            session.format()
        assert info.value.line == 2
        assert session.text == '{\n  "a": }'
        assert session.status is DocumentStatus.INVALID

    def test_minify_replaces_input(self, session: ViewerSession) -> None:
        session.update_input('{\n  "a": [1, 2]\n}')
        session.minify()
        assert session.text == '{"a":[1,2]}'
        assert session.stats.lines == 1

    def test_minify_lone_surrogate_document(self, session: ViewerSession) -> None:
        session.update_input('{"a": "\\ud800"}')
        session.minify()
        assert session.status is DocumentStatus.VALID
        assert session.document == {"a": "\ud800"}
        assert session.text == '{"a":"\ud800"}'
        assert session.stats.size == 11
        assert session.download() == ("data.json", b'{"a":"\xef\xbf\xbd"}')

    def test_minify_without_input(self, session: ViewerSession) -> None:
        with pytest.raises(JsonViewerError, match="No JSON to minify"):
            session.minify()

    def test_validate(self, session: ViewerSession) -> None:
        session.update_input("[1, 2]")
        assert session.validate() is True
        session.text = "[1, 2"
        with pytest.raises(ParseError):
            session.validate()
        assert session.status is DocumentStatus.INVALID

    def test_clear(self, session: ViewerSession) -> None:
        session.update_input("[1]")
        session.display()
        session.clear()
        assert session.text == ""
        assert not session.has_document
        assert session.output is None
        assert session.status is DocumentStatus.READY
        assert session.display().markup == EMPTY_MARKUP

    def test_load_sample(self, session: ViewerSession) -> None:
        result = session.load_sample()
        assert session.status is DocumentStatus.VALID
        assert session.document["application"] == "JSON Viewer & Formatter"
        assert session.stats.total_keys == 19
        assert session.stats.max_depth == 3
        assert "Formatter" in result.markup


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


class TestDisplay:
    def test_no_document_shows_placeholder(self, session: ViewerSession) -> None:
        result = session.display()
        assert result.markup == EMPTY_MARKUP
        assert not result.deferred

    @pytest.mark.parametrize("mode", list(ViewMode))
    def test_view_modes(self, session: ViewerSession, mode: ViewMode) -> None:
        session.update_input('{"a": [1, "two"]}')
        result = session.set_view_mode(mode)
        assert result.mode is mode
        assert session.view_mode is mode
        assert session.output is result

    def test_view_mode_from_string(self, session: ViewerSession) -> None:
        session.update_input("[]")
        assert session.set_view_mode("raw").mode is ViewMode.RAW

    def test_on_ready_called_inline_for_small_documents(self, session: ViewerSession) -> None:
        session.update_input("[1]")
        delivered: list[Presentation] = []
        result = session.display(on_ready=delivered.append)
        assert delivered == [result]

    def test_large_document_is_deferred(self) -> None:
        scheduler = QueueScheduler()
        config = ViewerConfig(defer_threshold=10)
        deferred_session = ViewerSession(config=config, scheduler=scheduler)
        text = '{"items": [1, 2, 3, 4, 5, 6, 7, 8, 9]}'
        deferred_session.update_input(text)

        delivered: list[Presentation] = []
        placeholder = deferred_session.display(on_ready=delivered.append)
        assert placeholder.deferred
        assert placeholder.markup == PROCESSING_MARKUP
        assert delivered == []

        scheduler.run()
        immediate = ViewerSession()
        immediate.update_input(text)
        assert delivered == [immediate.display()]
        assert deferred_session.output == delivered[0]

    def test_pending_render_replaces_previous_output(self) -> None:
        scheduler = QueueScheduler()
        session = ViewerSession(config=ViewerConfig(defer_threshold=10), scheduler=scheduler)
        session.update_input('["short"]')
        session.display()
        session.update_input('{"items": ["alpha", "beta", "gamma"]}')

        placeholder = session.display()
        assert session.output is placeholder
        assert session.search("short").match_count == 0
        assert session.search("Processing").match_count == 1

        scheduler.run()
        assert not session.output.deferred
        assert session.search("gamma").match_count == 1

    def test_render_failure_is_reported_inline(self, session: ViewerSession) -> None:
        session.update_input("[1]")
        with patch("json_viewer.session.present", side_effect=RuntimeError("boom <x>")):
            result = session.display()
        assert result.markup == (
            '<div class="render-error">Error displaying JSON: boom &lt;x&gt;</div>'
        )
        assert isinstance(session.render_error, RenderError)
        assert session.display().markup.startswith('<span class="json-punctuation">')
        assert session.render_error is None


# ---------------------------------------------------------------------------
# Copy and download
# ---------------------------------------------------------------------------


class TestCopyAndDownload:
    def test_copy_output_follows_mode(self, session: ViewerSession) -> None:
        session.update_input('{"a": [1]}')
        session.set_view_mode(ViewMode.RAW)
        assert session.copy_output() == '{"a":[1]}'
        session.set_view_mode(ViewMode.FORMATTED)
        assert session.copy_output() == '{\n  "a": [\n    1\n  ]\n}'
        session.set_view_mode(ViewMode.TREE)
        assert session.copy_output() == '{\n  "a": [\n    1\n  ]\n}'

    def test_copy_output_without_document(self, session: ViewerSession) -> None:
        with pytest.raises(JsonViewerError, match="No output to copy"):
            session.copy_output()

    def test_download_uses_trimmed_input(self, session: ViewerSession) -> None:
        session.update_input('  {"é": 1}\n')
        assert session.download() == ("data.json", '{"é": 1}'.encode())

    def test_download_without_input(self, session: ViewerSession) -> None:
        with pytest.raises(JsonViewerError, match="No JSON to download"):
            session.download()


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


class TestLoadUrl:
    def test_successful_load(self) -> None:
        source = CannedSource('{"remote": [1, 2]}')
        session = ViewerSession(source=source)
        result = session.load_url("https://example.test/a.json")
        assert source.urls == ["https://example.test/a.json"]
        assert result is not None
        assert session.document == {"remote": [1, 2]}
        assert session.stats.total_keys == 3

    def test_transfer_error_leaves_state_unchanged(self) -> None:
        session = ViewerSession(source=CannedSource(error=TransferError("HTTP 404: Not Found")))
        session.update_input("[1]")
        with pytest.raises(TransferError):
            session.load_url("https://example.test/missing.json")
        assert session.text == "[1]"
        assert session.document == [1]

    def test_invalid_remote_json(self) -> None:
        session = ViewerSession(source=CannedSource("{broken"))
        with pytest.raises(ParseError):
            session.load_url("https://example.test/bad.json")
        assert session.text == "{broken"
        assert session.status is DocumentStatus.INVALID

    def test_large_load_can_be_cancelled(self) -> None:
        config = ViewerConfig(confirm_threshold=5)
        session = ViewerSession(config=config, source=CannedSource("[1, 2, 3]"))
        asked: list[int] = []

        def confirm(length: int) -> bool:
            asked.append(length)
            return False

        assert session.load_url("https://example.test/big.json", confirm=confirm) is None
        assert asked == [9]
        assert session.text == ""

    def test_large_load_confirmed(self) -> None:
        config = ViewerConfig(confirm_threshold=5)
        session = ViewerSession(config=config, source=CannedSource("[1, 2, 3]"))
        assert session.load_url("https://example.test/big.json", confirm=lambda n: True)
        assert session.document == [1, 2, 3]


class TestLoadFile:
    def test_load_file(self, session: ViewerSession, tmp_path: Path) -> None:
        target = tmp_path / "doc.json"
        target.write_text('{"from": "disk"}', encoding="utf-8")
        session.load_file(target)
        assert session.document == {"from": "disk"}

    def test_wrong_suffix(self, session: ViewerSession, tmp_path: Path) -> None:
        target = tmp_path / "doc.yaml"
        target.write_text("a: 1", encoding="utf-8")
        with pytest.raises(TransferError):
            session.load_file(target)
        assert session.text == ""


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


class TestSearch:
    def test_search_current_output(self, session: ViewerSession) -> None:
        session.update_input('{"needle": "haystack needle"}')
        session.display()
        result = session.search("needle")
        assert result.match_count == 2

    def test_search_renders_when_needed(self, session: ViewerSession) -> None:
        session.update_input('["x"]')
        assert session.search("x").match_count == 1
