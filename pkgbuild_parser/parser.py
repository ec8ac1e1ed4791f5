import logging
from pathlib import Path

from pkgbuild_parser.tokens.source_code import PkgbuildSource

logger = logging.getLogger(__name__)


def _read_source(source_code: bytes | str | Path) -> str:
    """Accept the same kinds of input everywhere a PKGBUILD is parsed."""
    if isinstance(source_code, Path):
        return source_code.read_text(encoding="utf-8")
    if isinstance(source_code, bytes):
        return source_code.decode("utf-8")
    return source_code


def parse(source_code: bytes | str | Path) -> PkgbuildSource:
    """Parse PKGBUILD source code into its tokens."""
    source = PkgbuildSource.parse(_read_source(source_code))
    logger.debug(f"Parsed {len(source)} tokens")
    return source


def parse_file(path: str | Path) -> PkgbuildSource:
    """Parse the PKGBUILD at ``path``."""
    logger.debug(f"Processing file: {path}")
    return parse(Path(path))


def parse_prefix(source_code: bytes | str | Path) -> tuple[PkgbuildSource, str]:
    """Parse as far as possible and return the tokens plus the unparsed rest.

    Malformed constructs still raise; only input that no alternative
    recognizes ends up in the returned remainder.
    """
    source, cursor = PkgbuildSource.parse_prefix(_read_source(source_code))
    if not cursor.at_end:
        logger.debug(f"Stopped at {cursor.position()} after {len(source)} tokens")
    return source, cursor.remainder
