"""ReliableTXT.

Plain text files that state their own encoding: every document starts with
the byte order mark of one of four Unicode encodings, and readers detect the
encoding from that preamble alone. Documents without a preamble, or with bytes
that are malformed for the announced encoding, are rejected.

Progressive API Disclosure:
- Level 1: Codec functions - encode(), decode(), detect_encoding()
- Level 2: Document class - ReliableTxtDocument
- Level 3: File helpers - load_file(), save_file()
"""

__version__ = "0.1.0"
__author__ = "ReliableTXT Python Team"

from .api import (
    ReliableTxtDocument,
    decode,
    detect_encoding,
    encode,
    load_file,
    save_file,
)
from .character import (
    ReliableTxtEncoding,
    from_code_points,
    join_lines,
    split_lines,
    to_code_points,
)
from .shared import (
    InvalidCodePointError,
    InvalidEncodingError,
    MissingPreambleError,
    ReliableTxtConfig,
    ReliableTxtError,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Codec functions
    "encode",
    "decode",
    "detect_encoding",
    "ReliableTxtEncoding",

    # Level 2: Document and text views
    "ReliableTxtDocument",
    "join_lines",
    "split_lines",
    "to_code_points",
    "from_code_points",

    # Level 3: File helpers
    "load_file",
    "save_file",

    # Errors
    "ReliableTxtError",
    "MissingPreambleError",
    "InvalidEncodingError",
    "InvalidCodePointError",

    # Configuration
    "ReliableTxtConfig",
]
