import argparse
import sys


def with_file_argument(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Read the PKGBUILD from a file, or from stdin when none is given."""
    parser.add_argument(
        "-f",
        "--file",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="PKGBUILD to read (default: stdin)",
    )
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pkgbuild", description="Parse and inspect PKGBUILD files"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set the logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    with_file_argument(
        subparsers.add_parser("test", help="Check that the file rebuilds identically")
    )
    with_file_argument(subparsers.add_parser("tokens", help="Print the token tree"))
    with_file_argument(
        subparsers.add_parser("format", help="Print the canonical serialization")
    )
    get_parser = with_file_argument(
        subparsers.add_parser("get", help="Print the value assigned to a key")
    )
    get_parser.add_argument("key", help="Assignment key, e.g. pkgver")
    with_file_argument(
        subparsers.add_parser("info", help="Print the mandatory fields as JSON")
    )
    return parser
