"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from flatbundle import (
    BadMagicError,
    Container,
    File,
    FormatError,
    TruncatedError,
    decode,
    encode,
    encoded_size,
)

# Text that survives the format: no terminator byte and no lone surrogates
safe_text = st.text(
    alphabet=st.characters(exclude_characters="\x00", exclude_categories=("Cs",)),
    max_size=20,
)

files = st.lists(
    st.builds(File, name=safe_text, content=st.binary(max_size=64)),
    max_size=5,
)

containers = st.builds(
    Container,
    comment=safe_text,
    x=st.integers(min_value=0, max_value=2**64 - 1),
    files=files,
)


class TestCodecProperties:
    """Property-based tests for codec."""

    @given(container=containers)
    def test_encode_decode_roundtrip(self, container: Container) -> None:
        """Test decode(encode(c)) reproduces every field."""
        decoded = decode(encode(container))

        assert decoded.comment == container.comment
        assert (decoded.x, decoded.y, decoded.z) == (container.x, container.y, container.z)
        assert [(f.name, f.content) for f in decoded.files] == [
            (f.name, f.content) for f in container.files
        ]

    @given(container=containers)
    def test_derived_offsets(self, container: Container) -> None:
        """Test y and z offsets hold for built and decoded containers."""
        decoded = decode(encode(container))

        for c in (container, decoded):
            assert c.y - c.x == 43
            assert c.z - c.x == 34

    @given(container=containers)
    def test_encoded_size(self, container: Container) -> None:
        """Test the size helper matches the encoder."""
        assert encoded_size(container) == len(encode(container))

    @given(container=containers, data=st.data())
    def test_truncation_detected(self, container: Container, data: st.DataObject) -> None:
        """Test any shortened encoding fails with TruncatedError."""
        encoded = encode(container)
        cut = data.draw(st.integers(min_value=1, max_value=len(encoded) - 1))

        try:
            decode(encoded[:-cut])
        except TruncatedError:
            pass
        else:
            raise AssertionError(f"decode accepted data cut by {cut} bytes")

    @given(payload=st.binary(min_size=1).filter(lambda b: b[0] != 0x46))
    def test_bad_magic_rejected(self, payload: bytes) -> None:
        """Test any other first byte is rejected."""
        try:
            decode(payload)
        except BadMagicError:
            pass
        else:
            raise AssertionError("decode accepted a bad magic number")

    @given(payload=st.binary(max_size=200))
    def test_arbitrary_input(self, payload: bytes) -> None:
        """Test arbitrary bytes either decode or raise FormatError."""
        try:
            container = decode(b"\x46" + payload)
        except FormatError:
            return

        assert container.y == container.x + 43
