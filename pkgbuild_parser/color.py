from __future__ import annotations

import os
import sys
from typing import TextIO

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import BashLexer


def _wants_color(stream: TextIO) -> bool:
    """Colour interactive output only, and never when NO_COLOR is set."""
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def colorize_pkgbuild(code: str, stream: TextIO | None = None) -> str:
    """Highlight PKGBUILD text with bash rules for ``stream`` (stdout by default)."""
    if not code or not _wants_color(stream or sys.stdout):
        return code
    return highlight(code, BashLexer(), TerminalFormatter())


__all__ = ["colorize_pkgbuild"]
