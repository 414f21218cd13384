"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from flatbundle import Container, File


@pytest.fixture
def sample_container() -> Container:
    """Container with comment "hi", x=1000 and one three-byte file."""
    container = Container(comment="hi", x=1000)
    container.add_file(File(name="a.txt", content=bytes([1, 2, 3])))
    return container


@pytest.fixture
def sample_bytes() -> bytes:
    """Encoding of sample_container."""
    return bytes.fromhex(
        "46 68 69 00 E8 03 00 00 00 00 00 00 01 00 61 2E 74 78 74 00"
        " 03 00 00 00 00 00 00 00 01 02 03"
    )
