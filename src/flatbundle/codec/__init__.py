"""Binary codec for flatbundle.

This module provides encoding and decoding between Container instances and
the flat binary container format.
"""

from __future__ import annotations

from .cursor import ByteReader, ByteWriter
from .decoder import decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "ByteReader",
    "ByteWriter",
]
