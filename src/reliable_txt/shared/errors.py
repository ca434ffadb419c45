"""Exception types raised by the ReliableTXT codec and document layers.

Every codec operation either returns a fully valid result or raises one of
these exceptions. None of them is recoverable for the input that caused it.
"""

from typing import Any, Optional


class ReliableTxtError(Exception):
    """Base exception for all ReliableTXT errors."""


class MissingPreambleError(ReliableTxtError):
    """Raised when a byte sequence does not start with a known preamble.

    Attributes:
        leading_bytes: The bytes that were inspected (at most four)
    """

    def __init__(self, leading_bytes: bytes = b"") -> None:
        super().__init__("Document does not have a ReliableTXT preamble")
        self.leading_bytes = leading_bytes


class InvalidEncodingError(ReliableTxtError):
    """Raised when the bytes after a recognized preamble are malformed.

    Attributes:
        encoding: Encoding kind announced by the preamble
        position: Byte offset of the first malformed byte, counted from the
            start of the whole input (preamble included)
        reason: Short description of what was wrong
    """

    def __init__(
        self,
        encoding: Any,
        position: Optional[int] = None,
        reason: str = "malformed data"
    ) -> None:
        name = getattr(encoding, "value", encoding)
        location = f" at byte {position}" if position is not None else ""
        super().__init__(f"Invalid {name} data{location}: {reason}")
        self.encoding = encoding
        self.position = position
        self.reason = reason


class InvalidCodePointError(ReliableTxtError):
    """Raised when a value is not a Unicode scalar value.

    Attributes:
        value: The offending value
        index: Position of the value in its sequence, if known
    """

    def __init__(self, value: Any, index: Optional[int] = None) -> None:
        if isinstance(value, int) and not isinstance(value, bool):
            shown = f"0x{value:X}" if value >= 0 else str(value)
        else:
            shown = repr(value)
        location = f" at index {index}" if index is not None else ""
        super().__init__(f"Invalid code point {shown}{location}")
        self.value = value
        self.index = index
