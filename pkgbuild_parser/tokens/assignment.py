from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Union

from pkgbuild_parser.cursor import Cursor
from pkgbuild_parser.exceptions import MalformedConstructError
from pkgbuild_parser.tokens.token import Token
from pkgbuild_parser.tokens.value import Value

WHITESPACE_RE = re.compile(r"[ \t\r\n]*")
# everything before the first "=" of the line, unless the line is a comment
KEY_RE = re.compile(r"[^=\n#][^=\n]*(?==)")


@dataclass(frozen=True, slots=True)
class Literal:
    """Scalar right-hand side, ``key=value``."""

    value: Value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Array:
    """Parenthesized right-hand side, ``key=(a b c)``."""

    values: tuple[Value, ...] = ()

    def __str__(self) -> str:
        return "(" + " ".join(str(value) for value in self.values) + ")"


AssignmentValue = Union[Literal, Array]


@dataclass(frozen=True, slots=True)
class Assignment(Token):
    """``key=value`` or ``key=(values...)``.

    ``trailing`` is the text consumed after the value: the newline closing
    an array, or the run of whitespace and newlines after a literal.
    """

    key: str
    value: AssignmentValue
    trailing: str = field(default="\n", compare=False)

    def __str__(self) -> str:
        return f"{self.key}={self.value}"

    def rebuild(self) -> str:
        return f"{self.before}{self}{self.trailing}"


def _malformed_array(message: str, cursor: Cursor) -> MalformedConstructError:
    return MalformedConstructError(
        message,
        construct="array",
        position=cursor.position(),
        remainder=cursor.remainder,
    )


def parse_array(cursor: Cursor) -> Array:
    """Read ``(v v v)`` followed by a newline; the cursor must be on ``(``."""
    cursor.consume("(")
    values: list[Value] = []
    value = Value.parse(cursor)
    if value is not None:
        values.append(value)
        while True:
            mark = cursor.offset
            if not cursor.consume(" "):
                break
            value = Value.parse(cursor)
            if value is None:
                cursor.offset = mark
                break
            values.append(value)
    if not cursor.consume(")"):
        raise _malformed_array("expected ')' to close the array", cursor)
    if not cursor.consume("\n"):
        raise _malformed_array("expected a newline after the array", cursor)
    return Array(tuple(values))


def parse_literal(cursor: Cursor) -> tuple[Literal, str] | None:
    """Read one value and the whitespace after it."""
    value = Value.parse(cursor)
    if value is None:
        return None
    trailing = cursor.match(WHITESPACE_RE)
    return Literal(value), trailing.group() if trailing else ""


def parse_assignment(cursor: Cursor) -> Assignment | None:
    start = cursor.offset
    leading = cursor.match(WHITESPACE_RE)
    position = cursor.position()
    key = cursor.match(KEY_RE)
    if key is None:
        cursor.offset = start
        return None
    cursor.consume("=")

    value: AssignmentValue
    if cursor.startswith("("):
        value = parse_array(cursor)
        trailing = "\n"
    else:
        literal = parse_literal(cursor)
        if literal is None:
            cursor.offset = start
            return None
        value, trailing = literal

    return Assignment(
        key.group(),
        value,
        trailing=trailing,
        before=leading.group() if leading else "",
        position=position,
    )


__all__ = [
    "Array",
    "Assignment",
    "AssignmentValue",
    "Literal",
    "parse_array",
    "parse_assignment",
    "parse_literal",
]
