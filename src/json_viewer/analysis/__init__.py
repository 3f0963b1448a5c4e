"""Analysis subpackage: structural statistics and text metrics.

Re-exports the public API for the analysis module:
- StructureAnalyzer: total key/element count and maximum depth of a value
- byte_size, encode_utf8, line_count, format_bytes, locate: text-level metrics
"""

from json_viewer.analysis.analyzer import StructureAnalyzer
from json_viewer.analysis.metrics import byte_size, encode_utf8, format_bytes, line_count, locate

__all__ = ["StructureAnalyzer", "byte_size", "encode_utf8", "format_bytes", "line_count", "locate"]
