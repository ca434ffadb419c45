"""Character layer for ReliableTXT processing.

This module provides encoding kinds with preamble detection, and the code
point and line views of text.
"""

from .codepoints import from_code_points, is_scalar_value, to_code_points
from .encoding import (
    PREAMBLES,
    PreambleDetector,
    ReliableTxtEncoding,
    detect_encoding,
)
from .lines import LINE_SEPARATOR, join_lines, split_lines

__all__ = [
    # Modules
    "codepoints",
    "encoding",
    "lines",
    # Encoding kinds and detection
    "PREAMBLES",
    "PreambleDetector",
    "ReliableTxtEncoding",
    "detect_encoding",
    # Code point view
    "from_code_points",
    "is_scalar_value",
    "to_code_points",
    # Line view
    "LINE_SEPARATOR",
    "join_lines",
    "split_lines",
]
