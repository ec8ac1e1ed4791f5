from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from pkgbuild_parser.cursor import Cursor, Position
from pkgbuild_parser.exceptions import (MalformedConstructError,
                                        UnrecognizedTokenError)
from pkgbuild_parser.parser import parse, parse_file, parse_prefix
from pkgbuild_parser.tokens import (Array, Assignment, Comment, Function,
                                    Literal, PkgbuildSource, SingleQuoted,
                                    Token, Unquoted)

PKGBUILDS = Path(__file__).parent / "pkgbuilds"


def test_parse_rust_pkgbuild():
    """Tokens come back in source order with the comment in place."""
    source = parse_file(PKGBUILDS / "rust.PKGBUILD")
    assert list(source) == [
        Assignment("pkgname", Literal(Unquoted("rust"))),
        Assignment("pkgver", Literal(Unquoted("1.51.0"))),
        Assignment("pkgrel", Literal(Unquoted("1"))),
        Comment(" comment out of nowhere"),
        Assignment(
            "arch", Array((SingleQuoted("x86_64"), SingleQuoted("aarch64")))
        ),
    ]
    assert source[3].position == Position(offset=36, line=4, column=1)
    assert source[4].position == Position(offset=61, line=5, column=1)


def test_comment_takes_priority_over_assignment():
    source = parse("#comment=value\n")
    assert list(source) == [Comment("comment=value")]


def test_indented_comment_with_equals_is_not_an_assignment():
    """Only the comment recognizer may claim a line starting with a hash."""
    source, remainder = parse_prefix("arch=(any)\n  # pkgver=2\n")
    assert list(source) == [Assignment("arch", Array((Unquoted("any"),)))]
    assert source.get("# pkgver") is None
    assert remainder == "  # pkgver=2\n"
    with pytest.raises(UnrecognizedTokenError) as error:
        parse("arch=(any)\n  # set pkgver=2 here\n")
    assert error.value.position == Position(offset=11, line=2, column=1)


def test_indented_comment_after_literal_is_a_comment():
    source = parse("pkgver=1\n  # pkgver=2\n")
    assert source.comments == [Comment(" pkgver=2")]
    assert source.get("pkgver").value == Literal(Unquoted("1"))


def test_dispatcher_declines_unknown_input():
    cursor = Cursor("!\n")
    assert Token.parse(cursor) is None
    assert cursor.offset == 0


def test_dispatcher_tries_function_last():
    assert Token.parse(Cursor("function fname ()\n")) == Function("fname")


def test_unrecognized_input_is_reported():
    with pytest.raises(UnrecognizedTokenError) as error:
        parse("pkgname=foo!\n")
    assert error.value.position == Position(offset=11, line=1, column=12)
    assert error.value.remainder == "!\n"
    assert error.value.lineno == 1
    assert error.value.offset == 12
    assert str(error.value) == "unrecognized input '!' (line 1, column 12)"


def test_parse_prefix_returns_unparsed_rest():
    source, remainder = parse_prefix("pkgname=foo!\n")
    assert list(source) == [Assignment("pkgname", Literal(Unquoted("foo")))]
    assert remainder == "!\n"


def test_parse_prefix_of_complete_input():
    source, remainder = parse_prefix("pkgname=foo\n")
    assert len(source) == 1
    assert remainder == ""


def test_function_body_is_not_parsed():
    with pytest.raises(UnrecognizedTokenError) as error:
        parse("function build {\n  cd src\n}\n")
    assert error.value.position.line == 2


def test_malformed_construct_aborts_prefix_parse():
    with pytest.raises(MalformedConstructError):
        parse_prefix("pkgname=foo\narch=(x86_64\n")


def test_unterminated_trailing_comment_is_rejected():
    with pytest.raises(MalformedConstructError) as error:
        parse_file(PKGBUILDS / "unterminated.PKGBUILD")
    assert error.value.construct == "comment"
    assert error.value.lineno == 3
    assert error.value.text == "# trailing comment without newline"


def test_parse_accepts_bytes_and_paths():
    path = PKGBUILDS / "rust.PKGBUILD"
    assert parse(path.read_bytes()) == parse(path) == parse(path.read_text())


def test_parse_empty_input():
    source = parse("")
    assert len(source) == 0
    assert source.rebuild() == ""
    assert source.format() == ""


def test_accessors():
    source = parse("# c\nfunction f ()\na=1\nb=(x)\n")
    assert source.comments == [Comment(" c")]
    assert source.functions == [Function("f")]
    assert [assignment.key for assignment in source.assignments] == ["a", "b"]


def test_get_returns_last_assignment():
    source = parse("pkgver=1\npkgver=2\n")
    assert source.get("pkgver").value == Literal(Unquoted("2"))
    assert source.get("pkgrel") is None


def test_replace_value_returns_new_document():
    original = parse("# keep me\npkgver=1.0\npkgrel=2\n")
    updated = original.replace_value("pkgver", Unquoted("1.1"))
    assert updated.rebuild() == "# keep me\npkgver=1.1\npkgrel=2\n"
    assert original.rebuild() == "# keep me\npkgver=1.0\npkgrel=2\n"


def test_replace_literal_with_array():
    source = parse("arch=any")
    updated = source.replace_value(
        "arch", Array((Unquoted("x86_64"), Unquoted("aarch64")))
    )
    assert updated.rebuild() == "arch=(x86_64 aarch64)\n"


def test_replace_value_keeps_glued_assignments_apart():
    source = parse('a="x"b=1\n')
    updated = source.replace_value("a", Unquoted("y"))
    assert updated.rebuild() == "a=y b=1\n"
    assert parse(updated.rebuild()) == updated


def test_replace_value_before_glued_comment():
    source = parse('a="x"# note\n')
    updated = source.replace_value("a", Unquoted("y"))
    assert updated.rebuild() == "a=y# note\n"
    assert parse(updated.rebuild()) == updated


def test_replace_missing_key():
    with pytest.raises(KeyError):
        parse("pkgver=1\n").replace_value("pkgrel", Unquoted("1"))


def test_document_is_immutable():
    source = parse("pkgver=1\n")
    with pytest.raises(FrozenInstanceError):
        source.tokens = ()
    assert isinstance(source, PkgbuildSource)


def test_positions_in_large_input():
    """Line numbers stay right deep into a long file."""
    lines = [f"key{index}=value{index}\n" for index in range(5000)]
    source = parse("".join(lines))
    assert len(source) == 5000
    assert source[4999].position.line == 5000
    assert source[4999].position.column == 1
    assert source[4999].position.offset == sum(len(line) for line in lines[:4999])
