"""Public API for ReliableTXT processing.

Progressive API disclosure:
- Level 1: Codec functions - encode(), decode(), detect_encoding()
- Level 2: ReliableTxtDocument with line and code point views
- Level 3: File helpers - load_file(), save_file()
"""

from reliable_txt.character.encoding import detect_encoding
from reliable_txt.codec import decode, encode
from reliable_txt.document import ReliableTxtDocument

from .files import load_file, save_file

__all__ = [
    "decode",
    "detect_encoding",
    "encode",
    "ReliableTxtDocument",
    "load_file",
    "save_file",
]
