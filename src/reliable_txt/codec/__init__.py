"""Codec layer for ReliableTXT documents.

Encoding and decoding are pure functions without retained state.
"""

from .decoder import decode, decode_payload
from .encoder import encode

__all__ = [
    "decode",
    "decode_payload",
    "encode",
]
