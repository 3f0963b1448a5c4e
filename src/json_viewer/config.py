"""ViewerConfig and ViewMode for presentation configuration.

ViewerConfig is a frozen (immutable) dataclass holding the presentation
parameters.  ViewMode selects how a decoded document is shown:
pretty-printed text, compact text, or a collapsible tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class ViewMode(StrEnum):
    """How a decoded document is presented.

    - FORMATTED: 2-space indented serialization with syntax markup.
    - RAW:       Compact serialization (no whitespace) with syntax markup.
    - TREE:      Collapsible node tree rendered straight from the value.
    """

    FORMATTED = auto()
    RAW = auto()
    TREE = auto()


@dataclass(frozen=True, slots=True)
class ViewerConfig:
    """Immutable configuration for the viewer session.

    Attributes:
        indent: Spaces per level in formatted mode (>= 0).
        truncate_at: Tree previews of strings longer than this are cut to this
            many characters followed by ``...`` (>= 1).
        defer_threshold: Compact-serialized size in characters above which
            rendering is handed to the scheduler instead of running inline.
        confirm_threshold: Fetched text longer than this asks the confirm
            callback before it is loaded.
        fetch_timeout: Seconds before a URL fetch times out (> 0).
        fetch_attempts: Total attempts for a URL fetch on transport errors (>= 1).
    """

    indent: int = 2
    truncate_at: int = 100
    defer_threshold: int = 500_000
    confirm_threshold: int = 1_000_000
    fetch_timeout: float = 30.0
    fetch_attempts: int = 3

    def __post_init__(self) -> None:
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if self.truncate_at < 1:
            msg = f"truncate_at must be >= 1, got {self.truncate_at}"
            raise ValueError(msg)
        if self.defer_threshold < 0:
            msg = f"defer_threshold must be >= 0, got {self.defer_threshold}"
            raise ValueError(msg)
        if self.confirm_threshold < 0:
            msg = f"confirm_threshold must be >= 0, got {self.confirm_threshold}"
            raise ValueError(msg)
        if self.fetch_timeout <= 0.0:
            msg = f"fetch_timeout must be > 0, got {self.fetch_timeout}"
            raise ValueError(msg)
        if self.fetch_attempts < 1:
            msg = f"fetch_attempts must be >= 1, got {self.fetch_attempts}"
            raise ValueError(msg)
