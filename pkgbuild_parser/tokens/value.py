from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from pkgbuild_parser.cursor import Cursor
from pkgbuild_parser.exceptions import MalformedConstructError

UNQUOTED_RE = re.compile(r"[A-Za-z0-9_.\-]+")


@dataclass(frozen=True, slots=True)
class Value:
    """Scalar kept as the raw text between its quotes.

    Escapes are never decoded, so ``str(value)`` always gives back exactly
    what was read.
    """

    text: str
    quote: ClassVar[str] = ""

    def __str__(self) -> str:
        return f"{self.quote}{self.text}{self.quote}"

    @classmethod
    def recognize(cls, cursor: Cursor) -> Value | None:
        raise NotImplementedError

    @staticmethod
    def parse(cursor: Cursor) -> Value | None:
        """Read a double-quoted, single-quoted or unquoted value, in that order."""
        for value_cls in VALUE_TYPES:
            value = value_cls.recognize(cursor)
            if value is not None:
                return value
        return None


class QuotedValue(Value):
    """Shared scanning for both quote styles."""

    __slots__ = ()

    construct: ClassVar[str]

    @classmethod
    def recognize(cls, cursor: Cursor) -> Value | None:
        start = cursor.offset
        if not cursor.consume(cls.quote):
            return None
        text = cursor.text
        index = cursor.offset
        while index < len(text):
            char = text[index]
            # only an escaped quote of the same kind is special
            if char == "\\" and text.startswith(cls.quote, index + 1):
                index += 2
                continue
            if char == cls.quote:
                cursor.offset = index + 1
                return cls(text[start + 1 : index])
            index += 1
        cursor.offset = start
        raise MalformedConstructError(
            f"unterminated {cls.construct}",
            construct=cls.construct,
            position=cursor.position(start),
            remainder=text[start:],
        )


@dataclass(frozen=True, slots=True)
class DoubleQuoted(QuotedValue):
    quote: ClassVar[str] = '"'
    construct: ClassVar[str] = "double-quoted value"


@dataclass(frozen=True, slots=True)
class SingleQuoted(QuotedValue):
    quote: ClassVar[str] = "'"
    construct: ClassVar[str] = "single-quoted value"


@dataclass(frozen=True, slots=True)
class Unquoted(Value):
    @classmethod
    def recognize(cls, cursor: Cursor) -> Value | None:
        found = cursor.match(UNQUOTED_RE)
        if found is None:
            return None
        return cls(found.group())


VALUE_TYPES: tuple[type[Value], ...] = (DoubleQuoted, SingleQuoted, Unquoted)


__all__ = ["DoubleQuoted", "SingleQuoted", "Unquoted", "Value"]
