from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from pkgbuild_parser.cursor import Cursor, Position

if TYPE_CHECKING:
    Recognizer = Callable[[Cursor], "Token | None"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class Token:
    """Base class for the top-level constructs of a PKGBUILD.

    ``before`` holds whitespace read ahead of the construct and ``position``
    points at its first significant character. Neither takes part in
    equality, which compares the syntax tree only.
    """

    before: str = field(default="", compare=False)
    position: Position | None = field(default=None, compare=False)

    def rebuild(self) -> str:
        """Reconstruct the exact source text this token was read from."""
        raise NotImplementedError

    @staticmethod
    def recognizers() -> tuple[Recognizer, ...]:
        """Alternatives tried at each position, highest priority first."""
        from pkgbuild_parser.tokens.assignment import parse_assignment
        from pkgbuild_parser.tokens.comment import Comment
        from pkgbuild_parser.tokens.function import parse_function

        return (Comment.parse, parse_assignment, parse_function)

    @staticmethod
    def parse(cursor: Cursor) -> Token | None:
        """Return the first alternative that recognizes the input, if any.

        Malformed constructs raise instead of falling through, so a broken
        array is never reported as unknown syntax.
        """
        for recognizer in Token.recognizers():
            token = recognizer(cursor)
            if token is not None:
                logger.debug(f"Recognized {type(token).__name__} at {token.position}")
                return token
        return None


__all__ = ["Token"]
