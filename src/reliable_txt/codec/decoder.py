"""Deserialization of ReliableTXT byte sequences.

Decoding first identifies the encoding from the preamble, then decodes the
remaining bytes strictly. Malformed payloads are reported, never repaired.
"""

from typing import Tuple

from reliable_txt.character.encoding import (
    BytesLike,
    ReliableTxtEncoding,
    detect_encoding,
)
from reliable_txt.shared.errors import InvalidEncodingError
from reliable_txt.shared.logging import get_logger

logger = get_logger(__name__, None, "decoder")


def decode_payload(payload: BytesLike, encoding: ReliableTxtEncoding) -> str:
    """Strictly decode the bytes that follow a preamble.

    Positions in a raised InvalidEncodingError are offsets into the whole
    document, preamble included.

    Raises:
        InvalidEncodingError: If ``payload`` is not well-formed for ``encoding``
    """
    try:
        return bytes(payload).decode(encoding.codec_name, errors="strict")
    except UnicodeDecodeError as e:
        position = len(encoding.preamble) + e.start
        logger.debug(
            "Malformed payload",
            extra={
                "encoding": encoding.value,
                "position": position,
                "reason": e.reason,
            }
        )
        raise InvalidEncodingError(encoding, position, e.reason) from e


def decode(data: BytesLike) -> Tuple[ReliableTxtEncoding, str]:
    """Decode a ReliableTXT byte sequence.

    Args:
        data: Complete document bytes, preamble included

    Returns:
        Tuple of the detected encoding and the text without its leading marker

    Raises:
        MissingPreambleError: If ``data`` does not start with a known preamble
        InvalidEncodingError: If the bytes after the preamble are malformed

    Examples:
        >>> decode(b"\\xef\\xbb\\xbfA")
        (<ReliableTxtEncoding.UTF_8: 'utf-8'>, 'A')
    """
    encoding = detect_encoding(data)
    payload = memoryview(data)[len(encoding.preamble):]
    text = decode_payload(payload, encoding)

    logger.debug(
        "Decoded document",
        extra={
            "encoding": encoding.value,
            "bytes": len(data),
            "characters": len(text),
        }
    )
    return encoding, text
