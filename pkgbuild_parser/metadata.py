from __future__ import annotations

from dataclasses import dataclass

from pkgbuild_parser.exceptions import MissingFieldError
from pkgbuild_parser.tokens import Array, Assignment, Literal, PkgbuildSource


@dataclass(frozen=True, slots=True)
class PkgbuildMetadata:
    """Mandatory PKGBUILD fields, as written (no expansion or validation)."""

    pkgname: str
    pkgver: str
    pkgrel: str
    arch: tuple[str, ...]

    def to_dict(self) -> dict[str, str | list[str]]:
        return {
            "pkgname": self.pkgname,
            "pkgver": self.pkgver,
            "pkgrel": self.pkgrel,
            "arch": list(self.arch),
        }


def _require(source: PkgbuildSource, key: str) -> Assignment:
    assignment = source.get(key)
    if assignment is None:
        raise MissingFieldError(key)
    return assignment


def _scalar(assignment: Assignment) -> str:
    match assignment.value:
        case Literal(value=value):
            return value.text
        case _:
            raise ValueError(f"{assignment.key} must be a single value, not an array")


def _values(assignment: Assignment) -> tuple[str, ...]:
    match assignment.value:
        case Array(values=values):
            return tuple(value.text for value in values)
        case Literal(value=value):
            return (value.text,)
        case _:
            raise ValueError(f"Unsupported value for {assignment.key}")


def extract_metadata(source: PkgbuildSource) -> PkgbuildMetadata:
    """Pull the mandatory fields out of a parsed PKGBUILD."""
    return PkgbuildMetadata(
        pkgname=_scalar(_require(source, "pkgname")),
        pkgver=_scalar(_require(source, "pkgver")),
        pkgrel=_scalar(_require(source, "pkgrel")),
        arch=_values(_require(source, "arch")),
    )


__all__ = ["PkgbuildMetadata", "extract_metadata"]
