"""
Command line entry point for inspecting PKGBUILD files.
"""

import json
import logging
import sys

from pkgbuild_parser.cli.parser import build_parser
from pkgbuild_parser.color import colorize_pkgbuild
from pkgbuild_parser.exceptions import MissingFieldError, PkgbuildSyntaxError
from pkgbuild_parser.metadata import extract_metadata
from pkgbuild_parser.parser import parse
from pkgbuild_parser.utils import pretty_print_tokens

logger = logging.getLogger(__name__)


def _configure_logging(args) -> None:
    logging_level = getattr(logging, args.log_level)
    if args.verbose and logging_level > logging.DEBUG:
        logging_level = logging.DEBUG
    logging.basicConfig(
        level=logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _report(filename: str, error: PkgbuildSyntaxError) -> None:
    """Point at the offending line the way compilers do."""
    location = f"{filename}:{error.position}" if error.position else filename
    print(f"{location}: {error.msg}", file=sys.stderr)
    if error.text:
        print(f"    {error.text}", file=sys.stderr)


def main(args=None) -> int:
    """Return CLI exit codes so automation can distinguish success from failure."""
    parser = build_parser()
    args = parser.parse_args(args)
    _configure_logging(args)

    if args.command is None:
        parser.print_help(sys.stderr)
        return 2

    filename = getattr(args.file, "name", "<stdin>")
    original = args.file.read()
    logger.debug(f"Read {len(original)} characters from {filename}")
    try:
        source = parse(original)
    except PkgbuildSyntaxError as error:
        _report(filename, error)
        if args.command == "test":
            print("Fail")
        return 1

    match args.command:
        case "test":
            if source.rebuild() == original:
                print("OK")
                return 0
            print("Fail")
            return 1
        case "tokens":
            print(pretty_print_tokens(source))
            return 0
        case "format":
            print(colorize_pkgbuild(source.format(), sys.stdout), end="")
            return 0
        case "get":
            assignment = source.get(args.key)
            if assignment is None:
                print(f"{filename}: no assignment for {args.key!r}", file=sys.stderr)
                return 1
            print(assignment.value)
            return 0
        case "info":
            try:
                metadata = extract_metadata(source)
            except (MissingFieldError, ValueError) as error:
                print(f"{filename}: {error}", file=sys.stderr)
                return 1
            print(json.dumps(metadata.to_dict(), indent=2))
            return 0
        case _:
            parser.print_help(sys.stderr)
            return 2
