"""Codec configuration.

This module provides the configuration dataclass that tunes how strictly
containers are encoded and how text fields are decoded.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass


@dataclass
class CodecConfig:
    """Behaviour switches for encode() and decode().

    The defaults reproduce the format's historical behaviour exactly: lossy
    text decoding, silent truncation of the file count and no check for
    embedded terminator bytes.

    Attributes:
        text_errors: Error handler used when decoding comment and file names
            from UTF-8 (default "replace"). Any handler registered with the
            codecs module is accepted. Use "strict" to raise
            TextDecodingError on malformed input instead of substituting
            U+FFFD.

        strict_encode: Raise EncodeError instead of logging a warning when
            a container cannot round-trip (default False):
            - more than 65535 files (the count field only keeps 16 bits)
            - a 0x00 byte inside the comment or a file name

    Examples:
        ```python
        from flatbundle import CodecConfig, decode, encode

        data = encode(container, config=CodecConfig(strict_encode=True))
        container = decode(data, config=CodecConfig(text_errors="strict"))
        ```
    """

    text_errors: str = "replace"
    strict_encode: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        try:
            codecs.lookup_error(self.text_errors)
        except LookupError as e:
            raise ValueError(f"Unknown text error handler: {self.text_errors!r}") from e
