"""Conversion between text and its sequence of Unicode scalar values.

Python strings are already sequences of code points, so a supplementary-plane
character such as U+1D538 is one element here, never a surrogate pair.
"""

from typing import Any, Iterable, List

from reliable_txt.shared.errors import InvalidCodePointError

MAX_CODE_POINT = 0x10FFFF
SURROGATE_RANGE_START = 0xD800
SURROGATE_RANGE_END = 0xDFFF


def is_scalar_value(value: Any) -> bool:
    """Check whether ``value`` is an integer Unicode scalar value."""
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    if value < 0 or value > MAX_CODE_POINT:
        return False
    return not SURROGATE_RANGE_START <= value <= SURROGATE_RANGE_END


def to_code_points(text: str) -> List[int]:
    """Decompose ``text`` into its code points in document order."""
    return [ord(char) for char in text]


def from_code_points(code_points: Iterable[int]) -> str:
    """Build text from a sequence of code points.

    Args:
        code_points: Unicode scalar values in order

    Returns:
        The concatenated text

    Raises:
        InvalidCodePointError: If a value is not an integer, is negative,
            exceeds U+10FFFF or lies in the surrogate range
    """
    chars = []
    for index, value in enumerate(code_points):
        if not is_scalar_value(value):
            raise InvalidCodePointError(value, index)
        chars.append(chr(value))
    return "".join(chars)
