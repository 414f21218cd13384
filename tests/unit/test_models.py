"""Unit tests for the Container and File models."""

from __future__ import annotations

import time

import pytest
from pydantic import ValidationError

from flatbundle import ClockError, Container, File, derive


class TestDerive:
    """Test the derived field helper."""

    def test_derive(self) -> None:
        """Test y and z offsets."""
        assert derive(0) == (43, 34)
        assert derive(1000) == (1043, 1034)

    def test_derive_at_u64_max(self) -> None:
        """Test offsets are kept exact at the top of the range."""
        x = 2**64 - 1
        y, z = derive(x)
        assert y - x == 43
        assert z - x == 34


class TestContainerNew:
    """Test fresh container construction."""

    def test_new_uses_current_time(self) -> None:
        """Test x is the current time in whole seconds."""
        before = int(time.time())
        container = Container.new("Example")
        after = int(time.time())

        assert before <= container.x <= after
        assert container.y == container.x + 43
        assert container.z == container.x + 34
        assert container.comment == "Example"
        assert container.files == []

    def test_new_with_clock(self) -> None:
        """Test an injected clock is truncated to whole seconds."""
        container = Container.new("Example", clock=lambda: 1234.9)
        assert container.x == 1234
        assert container.y == 1277
        assert container.z == 1268

    def test_new_before_epoch(self) -> None:
        """Test a negative clock reading is rejected."""
        with pytest.raises(ClockError, match="before the Unix epoch"):
            Container.new("Example", clock=lambda: -5.0)

    def test_new_clock_failure(self) -> None:
        """Test clock exceptions become ClockError."""

        def broken_clock() -> float:
            raise OSError("clock unavailable")

        with pytest.raises(ClockError, match="clock unavailable"):
            Container.new("Example", clock=broken_clock)

    @pytest.mark.parametrize("reading", [float("nan"), float("inf")])
    def test_new_clock_not_a_number(self, reading: float) -> None:
        """Test non-finite clock readings are rejected."""
        with pytest.raises(ClockError):
            Container.new("Example", clock=lambda: reading)

    def test_new_clock_too_large(self) -> None:
        """Test readings beyond 64 bits are rejected."""
        with pytest.raises(ClockError, match="64 bits"):
            Container.new("Example", clock=lambda: 2**64)


class TestContainerFields:
    """Test field validation and the derived properties."""

    def test_derived_fields_follow_x(self) -> None:
        """Test y and z track assignments to x."""
        container = Container(comment="", x=1)
        assert (container.y, container.z) == (44, 35)

        container.x = 1000
        assert (container.y, container.z) == (1043, 1034)

    def test_derived_fields_not_accepted(self) -> None:
        """Test y and z cannot be passed in."""
        with pytest.raises(ValidationError):
            Container(comment="", x=1, y=5)

    def test_derived_fields_not_settable(self) -> None:
        """Test y and z cannot be assigned."""
        container = Container(comment="", x=1)
        with pytest.raises((AttributeError, ValueError)):
            container.y = 5  # type: ignore[misc]
        assert container.y == 44

    def test_derived_fields_not_dumped(self) -> None:
        """Test y and z are not part of the stored data."""
        dumped = Container(comment="c", x=1).model_dump()
        assert dumped == {"comment": "c", "x": 1, "files": []}

    @pytest.mark.parametrize("x", [-1, 2**64])
    def test_x_out_of_range(self, x: int) -> None:
        """Test x must fit an unsigned 64-bit integer."""
        with pytest.raises(ValidationError):
            Container(comment="", x=x)

    def test_x_validated_on_assignment(self) -> None:
        """Test assignment revalidates x."""
        container = Container(comment="", x=1)
        with pytest.raises(ValidationError):
            container.x = -1


class TestFileOperations:
    """Test add/remove/get on the file list."""

    def test_add_then_remove(self) -> None:
        """Test add followed by remove leaves an empty list."""
        container = Container.new("Example")
        file_name = "C:\\picture.png"
        container.add_file(File(name=file_name, content=b"\x00\xf2"))
        assert len(container.files) == 1

        container.remove_file(file_name)
        assert container.files == []

    def test_add_keeps_order_and_duplicates(self) -> None:
        """Test files are appended in order without uniqueness checks."""
        container = Container(comment="", x=0)
        container.add_file(File(name="b", content=b"1"))
        container.add_file(File(name="a", content=b"2"))
        container.add_file(File(name="b", content=b"3"))

        assert container.file_names() == ["b", "a", "b"]

    def test_remove_all_matches(self) -> None:
        """Test remove_file drops every file with the name."""
        container = Container(comment="", x=0)
        container.add_file(File(name="dup", content=b"1"))
        container.add_file(File(name="keep", content=b"2"))
        container.add_file(File(name="dup", content=b"3"))

        container.remove_file("dup")
        assert container.file_names() == ["keep"]

    def test_remove_missing_is_noop(self) -> None:
        """Test removing an unknown name changes nothing."""
        container = Container(comment="", x=0)
        container.add_file(File(name="keep", content=b""))

        container.remove_file("missing")
        assert container.file_names() == ["keep"]

    def test_get_file_returns_first_match(self) -> None:
        """Test get_file picks the first file in order."""
        container = Container(comment="", x=0)
        container.add_file(File(name="dup", content=b"first"))
        container.add_file(File(name="dup", content=b"second"))

        found = container.get_file("dup")
        assert found is not None
        assert found.content == b"first"

    def test_add_file_validates(self) -> None:
        """Test add_file rejects values that are not files."""
        container = Container(comment="", x=0)

        with pytest.raises(ValidationError):
            container.add_file("not a file")  # type: ignore[arg-type]

        assert container.files == []

    def test_add_file_keeps_instance(self) -> None:
        """Test add_file stores the given File itself."""
        container = Container(comment="", x=0)
        file = File(name="a", content=b"1")
        container.add_file(file)

        assert container.files[0] is file

    def test_get_file_missing(self) -> None:
        """Test get_file returns None when nothing matches."""
        assert Container(comment="", x=0).get_file("missing") is None
