"""File helpers for ReliableTXT documents.

These are the only functions outside the CLI that touch the file system. They
write exactly the bytes ``get_bytes`` produces and read files back through
``load_from_bytes``, so every codec error propagates unchanged.
"""

from pathlib import Path
from typing import Optional, Union

from reliable_txt.document import ReliableTxtDocument
from reliable_txt.shared.logging import get_logger

PathType = Union[str, Path]


def save_file(
    document: ReliableTxtDocument,
    file_path: PathType,
    correlation_id: Optional[str] = None
) -> int:
    """Write a document to ``file_path``, replacing any existing file.

    Args:
        document: Document to serialize
        file_path: Destination path (string or Path object)
        correlation_id: Optional correlation ID for request tracking

    Returns:
        Number of bytes written

    Examples:
        >>> save_file(ReliableTxtDocument("Hello"), "hello.txt")
        8
    """
    logger = get_logger(__name__, correlation_id, "save_file")
    path_obj = Path(file_path)

    data = document.get_bytes()
    path_obj.write_bytes(data)

    logger.info(
        "Saved document",
        extra={
            "file_path": str(path_obj),
            "encoding": document.encoding.value,
            "bytes": len(data),
        }
    )
    return len(data)


def load_file(
    file_path: PathType,
    correlation_id: Optional[str] = None
) -> ReliableTxtDocument:
    """Read a ReliableTXT document from ``file_path``.

    Args:
        file_path: Source path (string or Path object)
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The decoded document

    Raises:
        FileNotFoundError: If the file does not exist
        MissingPreambleError: If the file has no ReliableTXT preamble
        InvalidEncodingError: If the bytes after the preamble are malformed
    """
    logger = get_logger(__name__, correlation_id, "load_file")
    path_obj = Path(file_path)

    data = path_obj.read_bytes()
    document = ReliableTxtDocument.load_from_bytes(data, correlation_id)

    logger.info(
        "Loaded document",
        extra={
            "file_path": str(path_obj),
            "encoding": document.encoding.value,
            "bytes": len(data),
        }
    )
    return document
