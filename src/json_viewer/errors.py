"""Exception hierarchy for json-viewer.

- ParseError:    malformed JSON text, located by line and column.
- RenderError:   unexpected failure while building markup for a decoded value.
- TransferError: network or file failure while loading text.

All three derive from JsonViewerError so hosts can catch the family at once.
"""

from __future__ import annotations

__all__ = ["JsonViewerError", "ParseError", "RenderError", "TransferError"]


class JsonViewerError(Exception):
    """Base class for all json-viewer errors."""


class ParseError(JsonViewerError, ValueError):
    """Raised when input text is not valid JSON.

    Attributes:
        line: 1-based line of the failure.
        column: 1-based column of the failure.
        position: 0-based character offset reported by the decoder.
        detail: The decoder's own message.
    """

    def __init__(self, detail: str, line: int, column: int, position: int) -> None:
        self.detail = detail
        self.line = line
        self.column = column
        self.position = position
        super().__init__(f"Error at line {line}, column {column}: {detail}")


class RenderError(JsonViewerError):
    """Raised when markup cannot be built for an already-decoded value."""


class TransferError(JsonViewerError):
    """Raised when text cannot be fetched from a URL or read from a file."""
