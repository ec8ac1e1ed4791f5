from __future__ import annotations

from dataclasses import dataclass

from pkgbuild_parser.cursor import Cursor
from pkgbuild_parser.exceptions import MalformedConstructError
from pkgbuild_parser.tokens.token import Token


@dataclass(frozen=True, slots=True)
class Comment(Token):
    """``#`` comment; ``text`` is everything after the hash, untrimmed."""

    text: str

    def __str__(self) -> str:
        return f"#{self.text}"

    def rebuild(self) -> str:
        return f"{self.before}#{self.text}\n"

    @classmethod
    def parse(cls, cursor: Cursor) -> Comment | None:
        position = cursor.position()
        if not cursor.consume("#"):
            return None
        text = cursor.take_line_until("\n")
        if text is None:
            cursor.offset = position.offset
            raise MalformedConstructError(
                "comment is not terminated by a newline",
                construct="comment",
                position=position,
                remainder=cursor.remainder,
            )
        cursor.consume("\n")
        return cls(text, position=position)


__all__ = ["Comment"]
