from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterator

from pkgbuild_parser.cursor import Cursor
from pkgbuild_parser.exceptions import UnrecognizedTokenError
from pkgbuild_parser.tokens.assignment import Array, Assignment, AssignmentValue, Literal
from pkgbuild_parser.tokens.comment import Comment
from pkgbuild_parser.tokens.function import Function
from pkgbuild_parser.tokens.token import Token
from pkgbuild_parser.tokens.value import Value

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PkgbuildSource:
    """A whole PKGBUILD as its top-level tokens in source order."""

    tokens: tuple[Token, ...] = ()

    @classmethod
    def parse_prefix(cls, source: str) -> tuple[PkgbuildSource, Cursor]:
        """Collect tokens until the input ends or no alternative matches."""
        cursor = Cursor(source)
        tokens: list[Token] = []
        while not cursor.at_end:
            token = Token.parse(cursor)
            if token is None:
                logger.debug(f"No token recognized at {cursor.position()}")
                break
            tokens.append(token)
        return cls(tuple(tokens)), cursor

    @classmethod
    def parse(cls, source: str) -> PkgbuildSource:
        """Parse the full source, failing if anything is left over."""
        document, cursor = cls.parse_prefix(source)
        if not cursor.at_end:
            line = cursor.remainder.split("\n", 1)[0]
            raise UnrecognizedTokenError(
                f"unrecognized input {line!r}",
                position=cursor.position(),
                remainder=cursor.remainder,
            )
        return document

    def rebuild(self) -> str:
        """Reproduce the parsed text exactly."""
        return "".join(token.rebuild() for token in self.tokens)

    def format(self) -> str:
        """Canonical text: one token per line, whitespace normalized."""
        return "".join(f"{token}\n" for token in self.tokens)

    def __str__(self) -> str:
        return self.rebuild()

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    @property
    def comments(self) -> list[Comment]:
        return [token for token in self.tokens if isinstance(token, Comment)]

    @property
    def assignments(self) -> list[Assignment]:
        return [token for token in self.tokens if isinstance(token, Assignment)]

    @property
    def functions(self) -> list[Function]:
        return [token for token in self.tokens if isinstance(token, Function)]

    def get(self, key: str) -> Assignment | None:
        """Return the assignment in effect for ``key``; later ones win."""
        for assignment in reversed(self.assignments):
            if assignment.key == key:
                return assignment
        return None

    def replace_value(
        self, key: str, value: AssignmentValue | Value
    ) -> PkgbuildSource:
        """Return a new document with every ``key`` assignment set to ``value``."""
        if isinstance(value, Value):
            value = Literal(value)
        if self.get(key) is None:
            raise KeyError(key)

        def update(token: Token, following: Token | None) -> Token:
            if not isinstance(token, Assignment) or token.key != key:
                return token
            trailing = token.trailing
            # arrays are always closed by exactly one newline
            if isinstance(value, Array) or isinstance(token.value, Array):
                trailing = "\n"
            elif (
                not trailing
                and following is not None
                and not isinstance(following, Comment)
            ):
                # an unquoted value would run into the next assignment
                trailing = " "
            return replace(token, value=value, trailing=trailing)

        neighbours = self.tokens[1:] + (None,)
        return PkgbuildSource(
            tuple(update(token, after) for token, after in zip(self.tokens, neighbours))
        )


__all__ = ["PkgbuildSource"]
