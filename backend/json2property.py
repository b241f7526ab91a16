"""
Command-line converter from JSON to Gameplay3D property files
"""
import argparse
import logging
import sys
from typing import List, Optional

from errors import ConversionError
from property_converter import INPUT_FORMATS, convert_file


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="JSON to Gameplay3D property converter"
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="The JSON file to convert",
    )
    parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="The Gameplay3D property file to output",
    )
    parser.add_argument(
        "--format",
        default="auto",
        choices=INPUT_FORMATS,
        help="Input format; auto detects JSON or YAML.",
    )
    parser.add_argument(
        "--sort-keys",
        action="store_true",
        help="Write object members in sorted key order.",
    )
    parser.add_argument(
        "--name-key",
        default="name",
        help="Member that names namespaces built from array elements (empty to disable).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        convert_file(
            args.input,
            args.output,
            from_format=args.format,
            sort_keys=args.sort_keys,
            name_key=args.name_key or None,
        )
    except ConversionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
