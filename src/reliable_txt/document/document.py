"""In-memory ReliableTXT document.

A document pairs a text value with an encoding kind and offers line and code
point views of the text. Reading and writing files is left to the callers of
``get_bytes`` and ``load_from_bytes``.
"""

from typing import Any, Dict, Iterable, List, Optional

from reliable_txt.character.codepoints import from_code_points, to_code_points
from reliable_txt.character.encoding import BytesLike, ReliableTxtEncoding
from reliable_txt.character.lines import join_lines, split_lines
from reliable_txt.codec import decode, encode
from reliable_txt.shared.config import ReliableTxtConfig
from reliable_txt.shared.logging import get_logger


class ReliableTxtDocument:
    """Text plus the encoding it is stored with.

    Text and encoding are independent: setting one never alters the other.
    A single instance is not synchronized; callers sharing one between threads
    must serialize access themselves.

    Examples:
        >>> document = ReliableTxtDocument("a\\nb", ReliableTxtEncoding.UTF_16)
        >>> document.get_lines()
        ['a', 'b']
        >>> document.get_bytes()[:2]
        b'\\xfe\\xff'
    """

    def __init__(
        self,
        text: str = "",
        encoding: ReliableTxtEncoding = ReliableTxtEncoding.UTF_8,
        correlation_id: Optional[str] = None
    ) -> None:
        self.logger = get_logger(__name__, correlation_id, "document")
        self.text = text
        self.encoding = encoding

    @classmethod
    def from_config(
        cls,
        config: ReliableTxtConfig,
        text: str = "",
        correlation_id: Optional[str] = None
    ) -> "ReliableTxtDocument":
        """Create a document using the configured default encoding."""
        encoding = ReliableTxtEncoding(config.document.default_encoding)
        return cls(text, encoding, correlation_id)

    @classmethod
    def load_from_bytes(
        cls,
        data: BytesLike,
        correlation_id: Optional[str] = None
    ) -> "ReliableTxtDocument":
        """Create a document by decoding a ReliableTXT byte sequence.

        Raises:
            MissingPreambleError: If ``data`` has no known preamble
            InvalidEncodingError: If the bytes after the preamble are malformed
        """
        encoding, text = decode(data)
        return cls(text, encoding, correlation_id)

    @property
    def text(self) -> str:
        """Document text, without the preamble marker."""
        return self._text

    @text.setter
    def text(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        self._text = text

    @property
    def encoding(self) -> ReliableTxtEncoding:
        """Encoding kind used by ``get_bytes``."""
        return self._encoding

    @encoding.setter
    def encoding(self, encoding: ReliableTxtEncoding) -> None:
        if not isinstance(encoding, ReliableTxtEncoding):
            raise TypeError(
                f"encoding must be ReliableTxtEncoding, got {type(encoding).__name__}"
            )
        self._encoding = encoding

    def get_lines(self) -> List[str]:
        """Return the text split on line feeds."""
        return split_lines(self._text)

    def set_lines(self, lines: Iterable[str]) -> None:
        """Replace the text with ``lines`` joined by line feeds."""
        self.text = join_lines(lines)

    def get_code_points(self) -> List[int]:
        """Return the code points of the text."""
        return to_code_points(self._text)

    def set_code_points(self, code_points: Iterable[int]) -> None:
        """Replace the text with the given code points.

        The text is left unchanged when a value is invalid.

        Raises:
            InvalidCodePointError: If a value is not a Unicode scalar value
        """
        self.text = from_code_points(code_points)

    def get_bytes(self) -> bytes:
        """Serialize the document with its preamble."""
        data = encode(self._text, self._encoding)
        self.logger.debug(
            "Serialized document",
            extra={"encoding": self._encoding.value, "bytes": len(data)}
        )
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Summarize the document for reporting.

        ``byte_count`` comes from a full serialization, so summarizing holds the
        encoded bytes in memory alongside the text.
        """
        return {
            "encoding": self._encoding.value,
            "line_count": len(self.get_lines()),
            "code_point_count": len(self._text),
            "byte_count": len(self.get_bytes()),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReliableTxtDocument):
            return NotImplemented
        return self._text == other._text and self._encoding == other._encoding

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        preview = self._text if len(self._text) <= 40 else self._text[:37] + "..."
        return (
            f"ReliableTxtDocument(text={preview!r}, "
            f"encoding={self._encoding.name})"
        )
