"""Container inspection, packing and extraction CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path

from ..codec import decode, encode
from ..models.base import Container, File
from ..utils.sizing import field_sizes

logger = logging.getLogger(__name__)


def inspect_file(file_path: Path) -> None:
    """Print the header fields and file listing of a container file.

    Args:
        file_path: Path to an encoded container

    Raises:
        FormatError: If the file is not a well-formed container
    """
    container = decode(file_path.read_bytes())
    sizes = field_sizes(container)
    total = sum(sizes.values())

    # Header section
    print(f"{'=' * 19} {file_path.name} {'=' * 19}")
    print(f"comment{'.' * 20}{container.comment!r}")
    print(f"x{'.' * 26}{container.x}")
    print(f"y{'.' * 26}{container.y}")
    print(f"z{'.' * 26}{container.z}")
    print(f"size{'.' * 23}{total} bytes")
    print()

    # File listing
    print(f"{'-' * 20} {len(container.files)} file{'s' if len(container.files) != 1 else ''} {'-' * 20}")
    for i, file in enumerate(container.files, 1):
        entry = f"{i}. {file.name}"
        size = f"{len(file.content)} bytes"
        dots = "." * max(1, 54 - len(entry) - len(size))
        print(f"        {entry}{dots}{size}")

    print()


def pack_files(output: Path, comment: str, inputs: list[Path]) -> Container:
    """Build a fresh container from files on disk and write it to output.

    Each file is stored under its base name, in the order given.

    Args:
        output: Destination path for the encoded container
        comment: Comment to store
        inputs: Files to include

    Returns:
        The container that was written

    Raises:
        ClockError: If the current time cannot be read
        EncodeError: If the container cannot be encoded
    """
    container = Container.new(comment)
    for path in inputs:
        logger.debug("adding %s", path)
        container.add_file(File(name=path.name, content=path.read_bytes()))

    output.write_bytes(encode(container))
    print(f"Wrote {len(container.files)} file(s) to {output}")
    return container


def extract_files(file_path: Path, output_dir: Path) -> list[Path]:
    """Write every file of a container into output_dir.

    Stored names are reduced to their base name, so nothing is written
    outside output_dir. A later file with the same name overwrites an
    earlier one.

    Args:
        file_path: Path to an encoded container
        output_dir: Directory to write into (created if missing)

    Returns:
        Paths written, in container order

    Raises:
        FormatError: If the file is not a well-formed container
    """
    container = decode(file_path.read_bytes())
    output_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for file in container.files:
        # Names may come from other platforms, strip both separator styles
        base_name = file.name.replace("\\", "/").rsplit("/", 1)[-1]
        if base_name in ("", ".", ".."):
            logger.warning("skipping file with unusable name %r", file.name)
            continue

        target = output_dir / base_name
        target.write_bytes(file.content)
        written.append(target)

    print(f"Extracted {len(written)} file(s) to {output_dir}")
    return written
