"""Read JSON text from local files."""

from __future__ import annotations

import logging
from pathlib import Path

from json_viewer.errors import TransferError

logger = logging.getLogger(__name__)

JSON_SUFFIX = ".json"


def read_file(path: str | Path) -> str:
    """Return the UTF-8 text of a ``.json`` file.

    Args:
        path: Location of the file.  Only the ``.json`` suffix is accepted
              (case-insensitive).

    Raises:
        TransferError: If the suffix is wrong or the file cannot be read.
    """
    path = Path(path)
    if path.suffix.lower() != JSON_SUFFIX:
        raise TransferError(f"Please drop a JSON file: {path.name}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TransferError(f"Failed to read file: {exc}") from exc
    logger.info("Read %d characters from %s", len(text), path)
    return text
