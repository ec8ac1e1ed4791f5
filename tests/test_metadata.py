from pathlib import Path

import pytest

from pkgbuild_parser.exceptions import MissingFieldError
from pkgbuild_parser.metadata import PkgbuildMetadata, extract_metadata
from pkgbuild_parser.parser import parse, parse_file

PKGBUILDS = Path(__file__).parent / "pkgbuilds"


def test_extract_rust_metadata():
    metadata = extract_metadata(parse_file(PKGBUILDS / "rust.PKGBUILD"))
    assert metadata == PkgbuildMetadata(
        pkgname="rust", pkgver="1.51.0", pkgrel="1", arch=("x86_64", "aarch64")
    )


def test_quotes_are_not_part_of_field_values():
    metadata = extract_metadata(parse_file(PKGBUILDS / "loose.PKGBUILD"))
    assert metadata.pkgver == "2.12.1"
    assert metadata.arch == ("x86_64",)


def test_single_arch_literal():
    metadata = extract_metadata(parse("pkgname=a\npkgver=1\npkgrel=1\narch=any\n"))
    assert metadata.arch == ("any",)


def test_missing_field():
    with pytest.raises(MissingFieldError) as error:
        extract_metadata(parse("pkgname=a\npkgver=1\narch=(any)\n"))
    assert error.value.args == ("pkgrel",)


def test_scalar_field_given_as_array():
    with pytest.raises(ValueError, match="pkgname must be a single value"):
        extract_metadata(parse("pkgname=(a b)\npkgver=1\npkgrel=1\narch=(any)\n"))


def test_to_dict():
    metadata = PkgbuildMetadata(pkgname="a", pkgver="1", pkgrel="2", arch=("any",))
    assert metadata.to_dict() == {
        "pkgname": "a",
        "pkgver": "1",
        "pkgrel": "2",
        "arch": ["any"],
    }
