#!/usr/bin/env python3
"""Basic usage example for flatbundle.

This example demonstrates:
1. Creating a container stamped with the current time
2. Adding, finding and removing files
3. Encoding to the binary format and decoding it back
4. Calculating sizes and handling malformed input
"""

from __future__ import annotations

from flatbundle import (
    Container,
    File,
    FormatError,
    decode,
    encode,
    encoded_size,
    field_sizes,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("flatbundle Basic Usage Example")
    print("=" * 60)
    print()

    # Create a container
    print("1. Creating a container...")
    container = Container.new("Holiday pictures")
    print(f"   comment: {container.comment!r}")
    print(f"   x={container.x}  y={container.y}  z={container.z}")
    print()

    # Manage files
    print("2. Adding files...")
    container.add_file(File(name="beach.png", content=b"\x89PNG\r\n\x1a\n"))
    container.add_file(File(name="notes.txt", content=b"sunny, 28C"))
    container.add_file(File(name="draft.txt", content=b"to delete"))
    container.remove_file("draft.txt")
    print(f"   files: {container.file_names()}")
    print()

    # Encode
    print("3. Encoding...")
    data = encode(container)
    print(f"   {len(data)} bytes: {data[:24].hex(' ')} ...")
    for section, size in field_sizes(container).items():
        print(f"   {section:<12}{size:>6} bytes")
    assert encoded_size(container) == len(data)
    print()

    # Decode
    print("4. Decoding...")
    decoded = decode(data)
    notes = decoded.get_file("notes.txt")
    print(f"   comment: {decoded.comment!r}, x={decoded.x}")
    print(f"   notes.txt: {notes.content if notes else None!r}")
    print()

    # Malformed input
    print("5. Decoding damaged data...")
    for label, damaged in (("bad magic", b"G" + data[1:]), ("truncated", data[:-3])):
        try:
            decode(damaged)
        except FormatError as e:
            print(f"   {label}: {type(e).__name__}: {e}")
    print()


if __name__ == "__main__":
    main()
