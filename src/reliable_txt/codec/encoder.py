"""Serialization of text into ReliableTXT byte sequences.

The encoder prepends U+FEFF to the text and serializes the result with the
strict, byte-order-explicit Python codec of the chosen encoding, so the output
always starts with that encoding's preamble.
"""

from reliable_txt.character.encoding import BOM_CHARACTER, ReliableTxtEncoding
from reliable_txt.shared.errors import InvalidCodePointError
from reliable_txt.shared.logging import get_logger

logger = get_logger(__name__, None, "encoder")


def encode(text: str, encoding: ReliableTxtEncoding = ReliableTxtEncoding.UTF_8) -> bytes:
    """Encode text as a ReliableTXT byte sequence.

    Args:
        text: Text to encode
        encoding: Encoding kind to serialize with

    Returns:
        Preamble followed by the serialized text

    Raises:
        TypeError: If ``text`` is not a str or ``encoding`` is not a
            ReliableTxtEncoding
        InvalidCodePointError: If ``text`` contains an unpaired surrogate

    Examples:
        >>> encode("A", ReliableTxtEncoding.UTF_16)
        b'\\xfe\\xff\\x00A'
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")
    if not isinstance(encoding, ReliableTxtEncoding):
        raise TypeError(
            f"encoding must be ReliableTxtEncoding, got {type(encoding).__name__}"
        )

    try:
        data = (BOM_CHARACTER + text).encode(encoding.codec_name, errors="strict")
    except UnicodeEncodeError as e:
        # Offsets in e refer to the text with the marker prepended
        index = e.start - 1
        raise InvalidCodePointError(ord(text[index]), index) from e

    logger.debug(
        "Encoded text",
        extra={
            "encoding": encoding.value,
            "characters": len(text),
            "bytes": len(data),
        }
    )
    return data
