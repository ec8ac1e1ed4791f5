"""CLI package for the PKGBUILD parser entrypoints."""

from pkgbuild_parser.cli.main import main
from pkgbuild_parser.cli.parser import build_parser, with_file_argument

__all__ = ["build_parser", "main", "with_file_argument"]
