"""Structural protocols for the collaborators of ViewerSession.

Hosts can plug in their own URL fetcher or scheduler without inheriting from
any base class.  Any object with a conformant method passes ``isinstance``
checks.

Example::

    from json_viewer.protocols import TextSource

    class CannedSource:
        def fetch(self, url: str) -> str:
            return '{"ok": true}'

    assert isinstance(CannedSource(), TextSource)  # True, structural conformance
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

# Receives a zero-argument job and runs it at the next idle point.
# An asyncio host passes ``loop.call_soon``.
Scheduler = Callable[[Callable[[], None]], None]


@runtime_checkable
class TextSource(Protocol):
    """Structural protocol for URL fetchers.

    ``fetch`` must return the body text of ``url`` or raise
    ``json_viewer.errors.TransferError``.
    """

    def fetch(self, url: str) -> str: ...
