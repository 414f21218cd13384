"""Exception hierarchy for flatbundle.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from FlatbundleError for easy catching of any flatbundle-specific error.
"""

from __future__ import annotations


class FlatbundleError(Exception):
    """Base exception for all flatbundle errors."""

    pass


class EncodeError(FlatbundleError):
    """Raised when encoding a container fails.

    Examples:
        - Comment or file name cannot be encoded as UTF-8
        - Value does not fit its fixed-width field
        - Embedded 0x00 or too many files while strict encoding is enabled
    """

    pass


class ClockError(FlatbundleError):
    """Raised when the wall-clock source cannot produce a usable timestamp.

    Examples:
        - Clock reports a time before the Unix epoch
        - Clock call itself fails (OSError, OverflowError)
    """

    pass


class DecodeError(FlatbundleError):
    """Raised when decoding binary data fails."""

    pass


class FormatError(DecodeError):
    """Raised when a byte buffer is not a well-formed container."""

    pass


class BadMagicError(FormatError):
    """Raised when the first byte of a buffer is not the magic number."""

    def __init__(self, found: int) -> None:
        self.found = found
        super().__init__(f"Invalid magic number: expected 0x46, got 0x{found:02x}")


class TruncatedError(FormatError):
    """Raised when the buffer ends before a required field is complete.

    Examples:
        - Missing 0x00 terminator after the comment or a file name
        - Fewer than 8 bytes left for x or a content length
        - Fewer bytes left than a declared content length
    """

    def __init__(self, field: str, detail: str = "") -> None:
        self.field = field
        message = f"Truncated data while decoding {field}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class TextDecodingError(FormatError):
    """Raised when a text field is not valid UTF-8 and strict text decoding is on."""

    pass
