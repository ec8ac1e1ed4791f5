"""
PKGBUILD parser

A Python library for parsing PKGBUILD build descriptors into an ordered token
tree that rebuilds to the original text byte for byte.
"""

from pkgbuild_parser.parser import parse, parse_file, parse_prefix

__all__ = ["parse", "parse_file", "parse_prefix"]
