"""Pydantic data model for flatbundle.

This module provides the Container and File classes together with the format
constants and the derive() helper for the timestamp-derived fields.
"""

from __future__ import annotations

from .base import (
    MAGIC_NUMBER,
    U16_MAX,
    U64_MAX,
    Y_DIFFERENCE,
    Z_DIFFERENCE,
    Container,
    File,
    derive,
)

__all__ = [
    "Container",
    "File",
    "derive",
    "MAGIC_NUMBER",
    "Y_DIFFERENCE",
    "Z_DIFFERENCE",
    "U16_MAX",
    "U64_MAX",
]
