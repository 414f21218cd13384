"""flatbundle: Flat Binary Container Format

A Python library for bundling a comment, a creation timestamp and an ordered
set of named byte blobs into a single flat byte sequence, and back.

Key Features:
- Pydantic-based Container and File models
- Exact, deterministic little-endian wire format
- Cursor-based decoder with typed errors for bad magic and truncation
- Timestamp-derived fields that always satisfy y == x + 43 and z == x + 34

Quick Start:
    >>> from flatbundle import Container, File, decode, encode
    >>>
    >>> container = Container.new("holiday pictures")
    >>> container.add_file(File(name="beach.png", content=b"\\x89PNG..."))
    >>> data = encode(container)
    >>> decoded = decode(data)
    >>> decoded.get_file("beach.png").content
    b'\\x89PNG...'
"""

from __future__ import annotations

from .codec import decode, encode
from .config import CodecConfig
from .exceptions import (
    BadMagicError,
    ClockError,
    DecodeError,
    EncodeError,
    FlatbundleError,
    FormatError,
    TextDecodingError,
    TruncatedError,
)
from .models import (
    MAGIC_NUMBER,
    Y_DIFFERENCE,
    Z_DIFFERENCE,
    Container,
    File,
    derive,
)
from .utils import encoded_size, field_sizes

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Container",
    "File",
    "encode",
    "decode",
    "derive",
    "CodecConfig",
    # Constants
    "MAGIC_NUMBER",
    "Y_DIFFERENCE",
    "Z_DIFFERENCE",
    # Exceptions
    "FlatbundleError",
    "EncodeError",
    "ClockError",
    "DecodeError",
    "FormatError",
    "BadMagicError",
    "TruncatedError",
    "TextDecodingError",
    # Sizing
    "encoded_size",
    "field_sizes",
    # Version
    "__version__",
]
