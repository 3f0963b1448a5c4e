"""HighlightTokenizer: classify lexical spans of already-serialized JSON text.

The tokenizer never decodes the text into values.  It re-derives the lexical
structure in a single left-to-right scan so that presentation markup can be
applied without changing a single character of the original formatting.

Scanning happens on the HTML-escaped text (``&``, ``<``, ``>`` replaced by
entities), so every span is already safe to embed in markup and the span
texts concatenate to exactly the escaped input.

State machine with two states:
- DEFAULT:   literals, punctuation, numbers, and everything else.
- IN_STRING: characters accumulate until an unescaped closing quote.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum, auto

__all__ = ["HighlightSpan", "HighlightTokenizer", "SpanCategory", "escape_html"]

_WHITESPACE = frozenset(" \t\n\r")
_PUNCTUATION = frozenset("{}[],:")
_NUMBER_START = frozenset("0123456789-")
_NUMBER_BODY = frozenset("0123456789.eE+-")
_WORD = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_")


def escape_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` (quotes are left alone)."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


class SpanCategory(StrEnum):
    """Presentation category of a span; values double as CSS class suffixes."""

    KEY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    PUNCTUATION = auto()
    PLAIN = auto()


# Literal keywords in match order, with their categories
_LITERALS: tuple[tuple[str, SpanCategory], ...] = (
    ("true", SpanCategory.BOOLEAN),
    ("false", SpanCategory.BOOLEAN),
    ("null", SpanCategory.NULL),
)


@dataclass(frozen=True, slots=True)
class HighlightSpan:
    """A contiguous run of escaped text sharing one presentation category."""

    category: SpanCategory
    text: str


class _State(Enum):
    DEFAULT = auto()
    IN_STRING = auto()


@dataclass
class HighlightTokenizer:
    """Splits serialized JSON text into classified ``HighlightSpan`` objects.

    Total over any input: malformed text only degrades classification, it
    never raises.  Callers are expected to have validated the JSON first.

    Example::
        HighlightTokenizer().tokenize('{"a": 1}')
        # [punctuation '{', key '"a"', punctuation ':', plain ' ',
        #  number '1', punctuation '}']
    """

    def tokenize(self, serialized: str) -> list[HighlightSpan]:
        """Classify every span of ``serialized``.

        Args:
            serialized: JSON text as produced by an encoder (or typed by a user).

        Returns:
            Ordered spans whose texts concatenate to ``escape_html(serialized)``.
            Adjacent unclassified characters are merged into one PLAIN span.
        """
        text = escape_html(serialized)
        length = len(text)
        spans: list[HighlightSpan] = []
        state = _State.DEFAULT
        i = 0
        string_start = 0
        plain_start = -1

        while i < length:
            char = text[i]

            if state is _State.IN_STRING:
                if char == "\\":
                    # Skip the escaped character, whatever it is
                    i += 2
                    continue
                if char == '"':
                    i += 1
                    category = (
                        SpanCategory.KEY
                        if self._followed_by_colon(text, i)
                        else SpanCategory.STRING
                    )
                    spans.append(HighlightSpan(category, text[string_start:i]))
                    state = _State.DEFAULT
                    continue
                i += 1
                continue

            if char == '"':
                plain_start = self._flush_plain(spans, text, plain_start, i)
                state = _State.IN_STRING
                string_start = i
                i += 1
                continue

            literal = self._match_literal(text, i)
            if literal is not None:
                plain_start = self._flush_plain(spans, text, plain_start, i)
                word, category = literal
                spans.append(HighlightSpan(category, word))
                i += len(word)
                continue

            if char in _PUNCTUATION:
                plain_start = self._flush_plain(spans, text, plain_start, i)
                spans.append(HighlightSpan(SpanCategory.PUNCTUATION, char))
                i += 1
                continue

            if char in _NUMBER_START:
                plain_start = self._flush_plain(spans, text, plain_start, i)
                end = i + 1
                while end < length and text[end] in _NUMBER_BODY:
                    end += 1
                spans.append(HighlightSpan(SpanCategory.NUMBER, text[i:end]))
                i = end
                continue

            if plain_start < 0:
                plain_start = i
            i += 1

        if state is _State.IN_STRING:
            # Unterminated string: hand back the buffered text unclassified
            spans.append(HighlightSpan(SpanCategory.PLAIN, text[string_start:]))
        else:
            self._flush_plain(spans, text, plain_start, length)

        return spans

    # ------------------------------------------------------------------
    # Scan helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _followed_by_colon(text: str, start: int) -> bool:
        """Return True if the next non-whitespace character at ``start`` is ``:``."""
        j = start
        while j < len(text) and text[j] in _WHITESPACE:
            j += 1
        return j < len(text) and text[j] == ":"

    @staticmethod
    def _match_literal(text: str, start: int) -> tuple[str, SpanCategory] | None:
        """Match ``true``/``false``/``null`` not followed by a word character."""
        for word, category in _LITERALS:
            if text.startswith(word, start):
                end = start + len(word)
                if end >= len(text) or text[end] not in _WORD:
                    return word, category
        return None

    @staticmethod
    def _flush_plain(
        spans: list[HighlightSpan], text: str, plain_start: int, end: int
    ) -> int:
        """Emit a pending PLAIN run ending at ``end``; returns the reset marker."""
        if plain_start >= 0 and end > plain_start:
            spans.append(HighlightSpan(SpanCategory.PLAIN, text[plain_start:end]))
        return -1
