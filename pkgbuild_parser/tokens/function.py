from __future__ import annotations

import re
from dataclasses import dataclass, field

from pkgbuild_parser.cursor import Cursor
from pkgbuild_parser.exceptions import MalformedConstructError
from pkgbuild_parser.tokens.token import Token

FUNCTION_KEYWORD = "function "
ARGS_RE = re.compile(r"\(([^)\n]*)\)")


@dataclass(frozen=True, slots=True)
class Function(Token):
    """Header of a ``function name (args)`` definition.

    Only the header line is read; the body is left to whatever follows.
    ``parenthesized`` and ``rest`` (the unparsed tail of the header line)
    exist so the line can be rebuilt verbatim.
    """

    name: str
    args: str = ""
    parenthesized: bool = field(default=True, compare=False)
    rest: str = field(default="", compare=False)

    def __str__(self) -> str:
        return f"function {self.name} ({self.args})"

    def rebuild(self) -> str:
        args = f"({self.args})" if self.parenthesized else ""
        return f"{self.before}{FUNCTION_KEYWORD}{self.name} {args}{self.rest}\n"


def _malformed_function(message: str, cursor: Cursor) -> MalformedConstructError:
    return MalformedConstructError(
        message,
        construct="function",
        position=cursor.position(),
        remainder=cursor.remainder,
    )


def parse_function(cursor: Cursor) -> Function | None:
    """Read a header introduced by the ``function`` keyword.

    The short ``name()`` form is not recognized.
    """
    position = cursor.position()
    if not cursor.consume(FUNCTION_KEYWORD):
        return None

    name = cursor.take_line_until(" ")
    if name is None:
        raise _malformed_function("expected a space after the function name", cursor)
    cursor.consume(" ")

    args = cursor.match(ARGS_RE)
    rest = cursor.take_line_until("\n")
    if rest is None:
        raise _malformed_function("function header is not terminated by a newline", cursor)
    cursor.consume("\n")

    return Function(
        name,
        args.group(1) if args else "",
        parenthesized=args is not None,
        rest=rest,
        position=position,
    )


__all__ = ["Function", "parse_function"]
