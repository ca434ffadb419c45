"""Encoding kinds and preamble detection for ReliableTXT documents.

A ReliableTXT document always starts with the serialized form of U+FEFF, so
the encoding of a document is identified by its first two to four bytes and
nothing else. There is no statistical guessing and no fallback encoding.
"""

import logging
from enum import Enum
from typing import ClassVar, Dict, Union

from reliable_txt.shared.errors import MissingPreambleError
from reliable_txt.shared.logging import get_logger

BytesLike = Union[bytes, bytearray, memoryview]

# Byte order mark code point, serialized as the preamble of every document
BOM_CODE_POINT = 0xFEFF
BOM_CHARACTER = "\ufeff"

# Longest preamble (UTF-32) bounds how many bytes detection ever inspects
MAX_PREAMBLE_LENGTH = 4


class ReliableTxtEncoding(Enum):
    """The four encoding kinds a ReliableTXT document can use."""
    UTF_8 = "utf-8"
    UTF_16 = "utf-16"
    UTF_16_REVERSE = "utf-16-reverse"
    UTF_32 = "utf-32"

    @property
    def preamble(self) -> bytes:
        """Bytes U+FEFF serializes to in this encoding."""
        return PREAMBLES[self]

    @property
    def codec_name(self) -> str:
        """Name of the byte-order-explicit Python codec for this encoding."""
        return CODEC_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "ReliableTxtEncoding":
        """Look up an encoding kind by value or member name, case-insensitively.

        Raises:
            ValueError: If no encoding kind has that name
        """
        normalized = name.strip().lower().replace("_", "-")
        for encoding in cls:
            if normalized in (encoding.value, encoding.name.lower().replace("_", "-")):
                return encoding
        raise ValueError(
            f"Unknown ReliableTXT encoding {name!r}, "
            f"expected one of {[encoding.value for encoding in cls]}"
        )


# Insertion order is the detection order
PREAMBLES: Dict[ReliableTxtEncoding, bytes] = {
    ReliableTxtEncoding.UTF_8: b"\xef\xbb\xbf",
    ReliableTxtEncoding.UTF_16: b"\xfe\xff",
    ReliableTxtEncoding.UTF_16_REVERSE: b"\xff\xfe",
    ReliableTxtEncoding.UTF_32: b"\x00\x00\xfe\xff",
}

CODEC_NAMES: Dict[ReliableTxtEncoding, str] = {
    ReliableTxtEncoding.UTF_8: "utf-8",
    ReliableTxtEncoding.UTF_16: "utf-16-be",
    ReliableTxtEncoding.UTF_16_REVERSE: "utf-16-le",
    ReliableTxtEncoding.UTF_32: "utf-32-be",
}


class PreambleDetector:
    """Preamble detection for the four ReliableTXT encodings."""

    PREAMBLE_PATTERNS: ClassVar[Dict[ReliableTxtEncoding, bytes]] = PREAMBLES

    def __init__(self) -> None:
        self.logger = get_logger(__name__, None, "preamble_detector")

    def detect(self, data: BytesLike) -> ReliableTxtEncoding:
        """Detect the encoding announced by the preamble of ``data``.

        A candidate only matches when ``data`` holds at least as many bytes as
        its preamble, so truncated preambles never match.

        Args:
            data: Byte data to analyze

        Returns:
            The encoding kind whose preamble starts ``data``

        Raises:
            TypeError: If ``data`` is not bytes-like
            MissingPreambleError: If no preamble matches
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"data must be bytes-like, got {type(data).__name__}")

        leading = bytes(data[:MAX_PREAMBLE_LENGTH])

        for encoding, preamble in self.PREAMBLE_PATTERNS.items():
            if leading.startswith(preamble):
                self.logger.debug(
                    "Preamble detected",
                    extra={"encoding": encoding.value, "preamble_length": len(preamble)}
                )
                return encoding

        if self.logger.is_enabled_for(logging.DEBUG):
            self.logger.debug(
                "No ReliableTXT preamble found",
                extra={"leading_bytes": leading.hex()}
            )
        raise MissingPreambleError(leading)


_DEFAULT_DETECTOR = PreambleDetector()


def detect_encoding(data: BytesLike) -> ReliableTxtEncoding:
    """Detect the encoding of a ReliableTXT byte sequence from its preamble.

    Raises:
        MissingPreambleError: If ``data`` does not start with a known preamble
    """
    return _DEFAULT_DETECTOR.detect(data)
