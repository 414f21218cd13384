"""Binary encoder for containers.

This module provides the encode() function that converts a Container instance
to the flat binary container format.
"""

from __future__ import annotations

import logging

from ..config import CodecConfig
from ..exceptions import EncodeError
from ..models.base import MAGIC_NUMBER, U16_MAX, Container, File
from .cursor import ByteWriter

logger = logging.getLogger(__name__)


def encode(container: Container, config: CodecConfig | None = None) -> bytes:
    """Encode a container to its binary representation.

    Layout (integers little-endian):
        magic (1 byte, 0x46) | comment 0x00 | x (u64) | file count (u16) |
        per file: name 0x00 | content length (u64) | content

    The derived fields ``y`` and ``z`` are not written.

    Two inputs cannot be decoded back faithfully: more than 65535 files (the
    count keeps only its low 16 bits) and a 0x00 byte inside the comment or a
    file name (the reader stops at the first 0x00). Both are encoded as-is and
    logged as warnings, unless ``config.strict_encode`` is set.

    Args:
        container: Container instance to encode
        config: Optional codec configuration

    Returns:
        Encoded bytes

    Raises:
        EncodeError: If a value cannot be represented, or if strict encoding
            rejects the container

    Examples:
        ```python
        from flatbundle import Container, File, encode

        container = Container(comment="hi", x=1000)
        container.add_file(File(name="a.txt", content=bytes([1, 2, 3])))
        data = encode(container)
        ```
    """
    config = config or CodecConfig()
    writer = ByteWriter()

    writer.write_u8(MAGIC_NUMBER)
    writer.write_cstring(_encode_text(container.comment, "comment", config))

    try:
        writer.write_u64(container.x)
    except ValueError as e:
        raise EncodeError(f"Field x: {e}") from e

    file_count = len(container.files)
    if file_count > U16_MAX:
        if config.strict_encode:
            raise EncodeError(
                f"Too many files: {file_count} (the file count field holds at most {U16_MAX})"
            )
        logger.warning(
            "file count %d exceeds %d, only the low 16 bits are written", file_count, U16_MAX
        )
    writer.write_u16(file_count & U16_MAX)

    for index, file in enumerate(container.files):
        _encode_file(writer, file, index, config)

    encoded = writer.to_bytes()
    logger.debug("encoded container with %d files into %d bytes", file_count, len(encoded))
    return encoded


def _encode_file(writer: ByteWriter, file: File, index: int, config: CodecConfig) -> None:
    """Encode a single file entry.

    Args:
        writer: ByteWriter to write to
        file: File to encode
        index: Position of the file, for error messages
        config: Codec configuration

    Raises:
        EncodeError: If the file cannot be represented
    """
    writer.write_cstring(_encode_text(file.name, f"files[{index}].name", config))

    try:
        writer.write_u64(len(file.content))
    except ValueError as e:
        raise EncodeError(f"Field files[{index}].content: {e}") from e

    writer.write_bytes(file.content)


def _encode_text(value: str, field_name: str, config: CodecConfig) -> bytes:
    """Encode a sentinel-terminated text field to UTF-8.

    Raises:
        EncodeError: If the text is not encodable, or holds 0x00 under strict encoding
    """
    try:
        raw = value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodeError(f"Field {field_name}: cannot encode as UTF-8: {e}") from e

    if b"\x00" in raw:
        if config.strict_encode:
            raise EncodeError(f"Field {field_name}: contains a 0x00 byte")
        logger.warning("field %s contains a 0x00 byte and will not decode intact", field_name)

    return raw
