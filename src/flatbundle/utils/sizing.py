"""Container size calculation utilities.

This module provides functions to calculate the encoded size of a container
without actually encoding it.
"""

from __future__ import annotations

from ..exceptions import EncodeError
from ..models.base import Container

# magic, x and file count
_MAGIC_BYTES = 1
_X_BYTES = 8
_COUNT_BYTES = 2
# u64 content length, the name terminator is counted with the name
_FILE_OVERHEAD_BYTES = 8


def field_sizes(container: Container) -> dict[str, int]:
    """Get the size in bytes of each section of an encoded container.

    Text fields count their UTF-8 bytes plus the 0x00 terminator.

    Args:
        container: Container to analyze

    Returns:
        Dictionary mapping section names (magic, comment, x, file_count,
        files) to their size in bytes

    Raises:
        EncodeError: If the comment or a file name is not encodable as UTF-8

    Example:
        >>> container = Container(comment="hi", x=1000)
        >>> container.add_file(File(name="a.txt", content=b"\\x01\\x02\\x03"))
        >>> field_sizes(container)
        {'magic': 1, 'comment': 3, 'x': 8, 'file_count': 2, 'files': 17}
    """
    files = sum(
        _text_size(f.name, f"files[{index}].name") + _FILE_OVERHEAD_BYTES + len(f.content)
        for index, f in enumerate(container.files)
    )
    return {
        "magic": _MAGIC_BYTES,
        "comment": _text_size(container.comment, "comment"),
        "x": _X_BYTES,
        "file_count": _COUNT_BYTES,
        "files": files,
    }


def encoded_size(container: Container) -> int:
    """Calculate the encoded size of a container in bytes.

    Always equal to ``len(encode(container))``.

    Raises:
        EncodeError: If the comment or a file name is not encodable as UTF-8

    Example:
        >>> encoded_size(Container(comment="hi", x=1000))
        14
    """
    return sum(field_sizes(container).values())


def _text_size(value: str, field_name: str) -> int:
    """Return the encoded size of a terminated text field, terminator included."""
    try:
        return len(value.encode("utf-8")) + 1
    except UnicodeEncodeError as e:
        raise EncodeError(f"Field {field_name}: cannot encode as UTF-8: {e}") from e
