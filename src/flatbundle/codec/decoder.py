"""Binary decoder for containers.

This module provides the decode() function that converts container bytes back
to a Container instance.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..config import CodecConfig
from ..exceptions import BadMagicError, TextDecodingError, TruncatedError
from ..models.base import MAGIC_NUMBER, Container, File
from .cursor import ByteReader

logger = logging.getLogger(__name__)


def decode(data: bytes | bytearray | memoryview, config: CodecConfig | None = None) -> Container:
    """Decode binary data to a Container.

    Fields are read in wire order with a single forward cursor. The file
    count is trusted as declared: a short buffer is detected while reading
    the file that runs past its end, not up front. Bytes after the last file
    are ignored.

    Args:
        data: Binary data to decode
        config: Optional codec configuration

    Returns:
        Decoded container

    Raises:
        BadMagicError: If the first byte is not 0x46
        TruncatedError: If the data ends before a field is complete
        TextDecodingError: If a text field is not valid UTF-8 and
            ``config.text_errors`` is "strict"

    Examples:
        ```python
        from flatbundle import decode

        container = decode(data)
        print(container.comment, container.x, container.y, container.z)
        for file in container.files:
            print(file.name, len(file.content))
        ```
    """
    config = config or CodecConfig()
    reader = ByteReader(data)

    magic = _read("magic number", reader.read_u8)
    if magic != MAGIC_NUMBER:
        raise BadMagicError(magic)

    comment = _read_text(reader, "comment", config)
    x = _read("x", reader.read_u64)
    file_count = _read("file count", reader.read_u16)
    logger.debug("decoding container x=%d with %d declared files", x, file_count)

    files: list[File] = []
    for index in range(file_count):
        files.append(_decode_file(reader, index, config))

    trailing = reader.bytes_remaining()
    if trailing:
        logger.debug("ignoring %d trailing bytes at offset %d", trailing, reader.position())

    return Container(comment=comment, x=x, files=files)


def _decode_file(reader: ByteReader, index: int, config: CodecConfig) -> File:
    """Decode a single file entry.

    Args:
        reader: ByteReader to read from
        index: Position of the file, for error messages
        config: Codec configuration

    Returns:
        Decoded file

    Raises:
        TruncatedError: If the data ends inside the entry
    """
    name = _read_text(reader, f"files[{index}].name", config)
    length = _read(f"files[{index}].length", reader.read_u64)
    content = _read(f"files[{index}].content", reader.read_bytes, length)
    return File(name=name, content=content)


def _read(field_name: str, method: Callable[..., Any], *args: Any) -> Any:
    try:
        return method(*args)
    except IndexError as e:
        raise TruncatedError(field_name, str(e)) from e


def _read_text(reader: ByteReader, field_name: str, config: CodecConfig) -> str:
    raw = _read(field_name, reader.read_cstring)
    try:
        return raw.decode("utf-8", errors=config.text_errors)
    except UnicodeDecodeError as e:
        raise TextDecodingError(f"Field {field_name}: invalid UTF-8 encoding: {e}") from e
