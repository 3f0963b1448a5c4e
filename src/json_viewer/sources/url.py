"""UrlSource: fetch JSON text over HTTP(S).

Wraps an ``httpx.Client``.  Transport failures (connection errors,
timeouts) are retried automatically with jittered exponential backoff via
``tenacity``; HTTP error statuses are not retried and surface as
``TransferError("HTTP 404: Not Found")``.

Example::

    from json_viewer.sources import UrlSource

    source = UrlSource()
    text = source.fetch("https://example.com/data.json")
"""

from __future__ import annotations

import logging

import httpx
from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from json_viewer.errors import TransferError

logger = logging.getLogger(__name__)


class UrlSource:
    """Fetches text from a URL with retry on transport errors.

    Args:
        timeout: Seconds before a single request times out.
        attempts: Total attempts per ``fetch`` when the transport fails.
        max_wait: Upper bound in seconds of the backoff between attempts.
    """

    def __init__(self, timeout: float = 30.0, attempts: int = 3, max_wait: float = 10.0) -> None:
        self._client = httpx.Client(timeout=timeout, follow_redirects=True)
        self._attempts = attempts
        self._max_wait = max_wait

    def __repr__(self) -> str:
        return f"UrlSource(attempts={self._attempts})"

    def close(self) -> None:
        self._client.close()

    def fetch(self, url: str) -> str:
        """Return the decoded body text of ``url``.

        Args:
            url: Absolute http(s) URL.

        Returns:
            The response body decoded with the response's charset.

        Raises:
            TransferError: On an empty URL, an HTTP error status, or when
                every attempt failed at the transport level.
        """
        url = url.strip()
        if not url:
            raise TransferError("Please enter a URL")

        retrying = Retrying(
            retry=(
                retry_if_exception_type(httpx.TransportError)
                & retry_if_not_exception_type(httpx.UnsupportedProtocol)
            ),
            wait=wait_random_exponential(min=0.1, max=self._max_wait),
            stop=stop_after_attempt(self._attempts),
        )
        try:
            response = retrying(self._client.get, url)
        except RetryError as exc:
            cause = exc.last_attempt.exception()
            logger.warning("GET %s failed after %d attempts: %s", url, self._attempts, cause)
            raise TransferError(f"Failed to load JSON from URL: {cause}") from cause
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise TransferError(f"Failed to load JSON from URL: {exc}") from exc

        if response.is_error:
            logger.warning("GET %s returned HTTP %d", url, response.status_code)
            raise TransferError(
                f"Failed to load JSON from URL: HTTP {response.status_code}: {response.reason_phrase}"
            )
        logger.info("Fetched %d characters from %s", len(response.text), url)
        return response.text
