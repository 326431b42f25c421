"""
gp102-poi entry point
Decodes GP-102 POI files to text, or encodes one POI record to stdout

Usage:
    gp102-poi poi_file [poi_file...]
    gp102-poi -e NAME "N 48° 30' 15\" E 2° 20' 0\"" > poi.bin
"""
import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

from gp102_poi.coordinates import CoordinateParseError, format_record, parse_coordinates
from gp102_poi.logging_config import setup_logging_from_config
from gp102_poi.poi_codec import (
    EncodeError, InvalidIconIndex, TruncatedInput, UnexpectedSize, decode_file, encode_record,
)

logger = logging.getLogger(__name__)


class PoiArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit with status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = PoiArgumentParser(
        prog='gp102-poi',
        description="Show the contents of GP-102 POI files, or create one."
    )
    parser.add_argument(
        '-e', '--encode',
        action="store_true",
        help="Write a POI to stdout; must be first, followed by NAME and COORDINATES (latitude first)."
    )
    parser.add_argument(
        'files',
        nargs='*',
        metavar='poi_file',
        help="POI files to decode."
    )
    return parser


def read_poi(path: str) -> int:
    """
    Decode one file and print it.

    Returns:
        0 on success, 1 if the file could not be decoded
    """
    try:
        record = decode_file(path)
    except OSError as e:
        logger.error(f"Error reading from '{path}': {e.strerror or e}")
        return 1
    except (TruncatedInput, UnexpectedSize) as e:
        logger.debug(f"{path}: {e}")
        logger.error(f"Error: unexpected size of '{path}'.")
        return 1
    except InvalidIconIndex as e:
        logger.debug(f"{path}: {e}")
        logger.error(f"Error: {path}: invalid file type.")
        return 1

    if not record.has_valid_signature:
        logger.warning(f"Warning: {path}: invalid signature, continuing anyway.")

    print(format_record(record))
    return 0


def write_poi(name: str, coordinates: str, out: BinaryIO) -> int:
    """
    Encode one POI with icon 0 and write it to out.

    Returns:
        0 on success, 1 on invalid name or coordinates
    """
    try:
        latitude, longitude = parse_coordinates(coordinates)
    except CoordinateParseError as e:
        logger.error(f"Error: {e}\n{e.caret()}")
        return 1

    try:
        data = encode_record(name, latitude, longitude)
    except EncodeError as e:
        logger.error(f"Error: {e}")
        return 1

    out.write(data)
    out.flush()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging_from_config()

    parser = build_arg_parser()
    argv = sys.argv[1:] if argv is None else list(argv)

    # NAME may start with "-", so encode arguments are taken verbatim
    if argv[:1] in (["-e"], ["--encode"]):
        if len(argv) != 3:
            parser.error("-e takes exactly NAME and COORDINATES")
        return write_poi(argv[1], argv[2], sys.stdout.buffer)

    args = parser.parse_args(argv)
    if args.encode:
        parser.error("-e must be the first argument")

    if not args.files:
        parser.print_usage()
        return 1

    err = 0
    for path in args.files:
        err |= read_poi(path)
    return err


if __name__ == "__main__":
    raise SystemExit(main())
