from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pkgbuild_parser.cursor import Position


class PkgbuildSyntaxError(SyntaxError):
    """Parsing stopped at ``position``; ``remainder`` is the unconsumed input."""

    def __init__(
        self, message: str, position: Position | None = None, remainder: str = ""
    ):
        SyntaxError.__init__(self, message)
        self.position = position
        self.remainder = remainder
        if position is not None:
            self.lineno = position.line
            self.offset = position.column
            self.text = remainder.split("\n", 1)[0]

    def __str__(self) -> str:
        if self.position is None:
            return str(self.msg)
        return f"{self.msg} (line {self.position.line}, column {self.position.column})"


class UnrecognizedTokenError(PkgbuildSyntaxError):
    """No comment, assignment or function starts at the current position."""

    pass


class MalformedConstructError(PkgbuildSyntaxError):
    """A construct was recognized by its prefix but is broken further on."""

    def __init__(
        self,
        message: str,
        construct: str,
        position: Position | None = None,
        remainder: str = "",
    ):
        PkgbuildSyntaxError.__init__(self, message, position, remainder)
        self.construct = construct


class MissingFieldError(KeyError):
    """A mandatory PKGBUILD field has no assignment."""

    pass


__all__ = [
    "MalformedConstructError",
    "MissingFieldError",
    "PkgbuildSyntaxError",
    "UnrecognizedTokenError",
]
