"""Main CLI entry point for flatbundle."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..exceptions import FlatbundleError
from .commands import extract_files, inspect_file, pack_files


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the flatbundle CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="flatbundle: Flat Binary Container Format",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  flatbundle --inspect photos.fb                         Show header and file list
  flatbundle --pack photos.fb --comment "trip" a.png b.png
  flatbundle --extract photos.fb --output ./photos       Unpack all files
  flatbundle --version                                   Show version
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--inspect",
        metavar="FILE",
        type=str,
        help="Show the comment, timestamps and file list of a container",
    )
    action.add_argument(
        "--pack",
        metavar="OUT",
        type=str,
        help="Create a container from the given input files",
    )
    action.add_argument(
        "--extract",
        metavar="FILE",
        type=str,
        help="Write every file of a container to --output",
    )

    parser.add_argument("inputs", nargs="*", metavar="PATH", help="Input files for --pack")
    parser.add_argument("--comment", default="", help="Comment stored by --pack")
    parser.add_argument("--output", default=".", help="Destination directory for --extract")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"flatbundle {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        # Handle --inspect
        if args.inspect:
            file_path = Path(args.inspect)
            if not file_path.exists():
                print(f"Error: File not found: {file_path}", file=sys.stderr)
                return 1
            inspect_file(file_path)
            return 0

        # Handle --pack
        if args.pack:
            inputs = [Path(p) for p in args.inputs]
            missing = [p for p in inputs if not p.is_file()]
            if missing:
                print(f"Error: File not found: {missing[0]}", file=sys.stderr)
                return 1
            pack_files(Path(args.pack), args.comment, inputs)
            return 0

        # Handle --extract
        if args.extract:
            file_path = Path(args.extract)
            if not file_path.exists():
                print(f"Error: File not found: {file_path}", file=sys.stderr)
                return 1
            extract_files(file_path, Path(args.output))
            return 0
    except FlatbundleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
