"""Container and File models.

This module provides the pydantic data model for a flatbundle container. The
two derived fields ``y`` and ``z`` are not stored: they are read-only
properties computed from ``x`` by derive(), so the relation between the three
values holds for every instance, however it was built.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import ClockError

logger = logging.getLogger(__name__)

MAGIC_NUMBER = 0x46
Y_DIFFERENCE = 43
Z_DIFFERENCE = 34

U16_MAX = (1 << 16) - 1
U64_MAX = (1 << 64) - 1


def derive(x: int) -> tuple[int, int]:
    """Return the derived ``(y, z)`` pair for a given ``x``.

    Example:
        >>> derive(1000)
        (1043, 1034)
    """
    return x + Y_DIFFERENCE, x + Z_DIFFERENCE


class File(BaseModel):
    """A named blob of bytes owned by a Container."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: str
    content: bytes = b""


class Container(BaseModel):
    """Root entity of the format: a comment, a timestamp and an ordered file list.

    Example:
        >>> container = Container(comment="hi", x=1000)
        >>> container.add_file(File(name="a.txt", content=b"\\x01\\x02\\x03"))
        >>> container.y, container.z
        (1043, 1034)
        >>> container.to_bytes()[:4]
        b'Fhi\\x00'

    Attributes:
        comment: Free text stored ahead of the timestamp
        x: Unsigned 64-bit timestamp, seconds since the Unix epoch
        files: Files in serialization order
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # y and z are derived, never accepted as input
        extra="forbid",
    )

    comment: str = ""
    x: int = Field(ge=0, le=U64_MAX)
    files: list[File] = Field(default_factory=list)

    @classmethod
    def new(cls, comment: str, clock: Callable[[], float] | None = None) -> Container:
        """Create a fresh, empty container stamped with the current time.

        Args:
            comment: Comment text to store
            clock: Optional callable returning seconds since the Unix epoch
                (defaults to time.time)

        Returns:
            Container with ``x`` set to the current time in whole seconds

        Raises:
            ClockError: If the clock fails or reports a time before the epoch
        """
        clock = clock or time.time
        try:
            now = clock()
            x = int(now)
        except (OSError, OverflowError, ValueError) as e:
            raise ClockError(f"Clock failed to produce a timestamp: {e}") from e

        if now < 0:
            raise ClockError(f"Clock reports a time before the Unix epoch: {now}")

        if x > U64_MAX:
            raise ClockError(f"Timestamp {x} does not fit in 64 bits")

        logger.debug("new container stamped at x=%d", x)
        return cls(comment=comment, x=x)

    @classmethod
    def from_bytes(cls, data: bytes) -> Container:
        """Decode a container from its binary representation.

        Raises:
            FormatError: If the data is not a well-formed container
        """
        # Import here to avoid circular dependency
        from ..codec.decoder import decode

        return decode(data)

    def to_bytes(self) -> bytes:
        """Encode this container to its binary representation."""
        # Import here to avoid circular dependency
        from ..codec.encoder import encode

        return encode(self)

    @property
    def y(self) -> int:
        return derive(self.x)[0]

    @property
    def z(self) -> int:
        return derive(self.x)[1]

    def add_file(self, file: File) -> None:
        """Append a file to the end of the file list.

        No uniqueness check is made on the name.

        Raises:
            ValidationError: If file is not a File (or a mapping of its fields)
        """
        self.files.append(File.model_validate(file))

    def remove_file(self, name: str) -> None:
        """Remove every file called ``name``. Does nothing if none matches."""
        self.files[:] = [f for f in self.files if f.name != name]

    def get_file(self, name: str) -> File | None:
        """Return the first file called ``name``, or None."""
        return next((f for f in self.files if f.name == name), None)

    def file_names(self) -> list[str]:
        return [f.name for f in self.files]
