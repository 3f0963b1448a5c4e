"""Sources subpackage: where input text comes from.

- UrlSource: HTTP(S) fetch via httpx with tenacity retry on transport errors
- read_file: local ``.json`` files
"""

from json_viewer.sources.file import read_file
from json_viewer.sources.url import UrlSource

__all__ = ["UrlSource", "read_file"]
