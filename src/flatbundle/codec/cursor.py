"""Byte-level writing and reading utilities.

This module provides the low-level primitives of the container format:
little-endian fixed-width integers, raw byte runs and 0x00-terminated strings.
Reading is done through an explicit position over an immutable buffer so that
every read is a separate, individually failing step.
"""

from __future__ import annotations

import struct

_U16 = struct.Struct("<H")
_U64 = struct.Struct("<Q")

TERMINATOR = b"\x00"


class ByteWriter:
    """Appends values to a growing byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_u8(0x46)
        >>> writer.write_cstring(b"hi")
        >>> writer.write_u64(1000)
        >>> data = writer.to_bytes()
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_u8(self, value: int) -> None:
        """Write a single unsigned byte.

        Raises:
            ValueError: If value is outside 0-255
        """
        if value < 0 or value > 0xFF:
            raise ValueError(f"Value {value} does not fit in 8 bits")
        self._buffer.append(value)

    def write_u16(self, value: int) -> None:
        """Write an unsigned 16-bit integer, little-endian.

        Raises:
            ValueError: If value is outside 0-65535
        """
        if value < 0 or value > 0xFFFF:
            raise ValueError(f"Value {value} does not fit in 16 bits")
        self._buffer += _U16.pack(value)

    def write_u64(self, value: int) -> None:
        """Write an unsigned 64-bit integer, little-endian.

        Raises:
            ValueError: If value is negative or needs more than 64 bits
        """
        if value < 0 or value > 0xFFFFFFFFFFFFFFFF:
            raise ValueError(f"Value {value} does not fit in 64 bits")
        self._buffer += _U64.pack(value)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes unchanged."""
        self._buffer += data

    def write_cstring(self, data: bytes) -> None:
        """Write bytes followed by a single 0x00 terminator.

        The data is written as given; a 0x00 inside it is not escaped.
        """
        self._buffer += data
        self._buffer += TERMINATOR

    def byte_length(self) -> int:
        """Return the number of bytes written so far."""
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the written bytes."""
        return bytes(self._buffer)


class ByteReader:
    """Reads values from a byte buffer at an advancing position.

    All read methods raise IndexError if the buffer is exhausted before the
    read completes. A failed read leaves the position where it was.

    Example:
        >>> reader = ByteReader(data)
        >>> magic = reader.read_u8()
        >>> comment = reader.read_cstring()
        >>> x = reader.read_u64()
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        """Initialize a reader over a snapshot of the given data.

        Args:
            data: Byte buffer to read
        """
        self._data = bytes(data)
        self._position = 0

    def _take(self, num_bytes: int) -> bytes:
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be non-negative, got {num_bytes}")

        remaining = self.bytes_remaining()
        if num_bytes > remaining:
            raise IndexError(f"Not enough bytes: need {num_bytes}, have {remaining}")

        start = self._position
        self._position += num_bytes
        return self._data[start : self._position]

    def read_u8(self) -> int:
        """Read a single unsigned byte.

        Raises:
            IndexError: If no bytes are left
        """
        return self._take(1)[0]

    def read_u16(self) -> int:
        """Read an unsigned 16-bit little-endian integer.

        Raises:
            IndexError: If fewer than 2 bytes are left
        """
        return _U16.unpack(self._take(2))[0]

    def read_u64(self) -> int:
        """Read an unsigned 64-bit little-endian integer.

        Raises:
            IndexError: If fewer than 8 bytes are left
        """
        return _U64.unpack(self._take(8))[0]

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes raw bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from buffer

        Raises:
            IndexError: If not enough bytes are available
        """
        return self._take(num_bytes)

    def read_cstring(self) -> bytes:
        """Read bytes up to the next 0x00 and consume the terminator.

        Returns:
            The bytes before the terminator (terminator excluded)

        Raises:
            IndexError: If the buffer ends before a terminator is found
        """
        end = self._data.find(TERMINATOR, self._position)
        if end < 0:
            raise IndexError(
                f"No 0x00 terminator in the remaining {self.bytes_remaining()} bytes"
            )

        value = self._data[self._position : end]
        self._position = end + 1
        return value

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read offset in bytes."""
        return self._position
