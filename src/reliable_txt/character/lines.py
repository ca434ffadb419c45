"""Line view of ReliableTXT text.

Lines are separated by a single line feed. Carriage returns and every other
character are ordinary line content.
"""

from typing import Iterable, List

LINE_SEPARATOR = "\n"


def join_lines(lines: Iterable[str]) -> str:
    """Join lines with a line feed between consecutive entries.

    No lines give the empty text, and a single line is returned unchanged.
    """
    return LINE_SEPARATOR.join(lines)


def split_lines(text: str) -> List[str]:
    """Split text on line feeds.

    The empty text yields one empty line, so ``split_lines("") == [""]``.
    """
    return text.split(LINE_SEPARATOR)
