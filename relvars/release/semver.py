from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

from relvars.core.result import Err, Ok, Result
from relvars.release.errors import InvalidVersionError


_SEMVER_RE = re.compile(
    r"(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>.+))?",
    re.ASCII,
)

# Numeric identifiers sort before alphanumeric ones.
_NUMERIC = 0
_ALPHANUMERIC = 1


def _identifier_key(token: str) -> tuple[int, int, str]:
    if token.isdigit():
        return (_NUMERIC, int(token), "")
    return (_ALPHANUMERIC, 0, token)


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class SemVer:
    """A parsed semantic version.

    Equality and ordering follow semver precedence: build metadata is
    carried along but never compared.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: str | None = None

    @property
    def core(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def suffix(self) -> str | None:
        if not self.prerelease:
            return None
        return ".".join(self.prerelease)

    def _precedence(self) -> tuple[int, int, int, int, tuple[tuple[int, int, str], ...]]:
        # A release ranks above any of its pre-releases.
        rank = 0 if self.prerelease else 1
        tokens = tuple(_identifier_key(t) for t in self.prerelease)
        return (self.major, self.minor, self.patch, rank, tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return (self.major, self.minor, self.patch, self.prerelease) == (
            other.major,
            other.minor,
            other.patch,
            other.prerelease,
        )

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __str__(self) -> str:
        text = self.core
        if self.prerelease:
            text += f"-{self.suffix}"
        if self.build is not None:
            text += f"+{self.build}"
        return text

    def next_major(self) -> SemVer:
        return SemVer(self.major + 1, 0, 0)

    def next_minor(self) -> SemVer:
        return SemVer(self.major, self.minor + 1, 0)

    def next_patch(self) -> SemVer:
        return SemVer(self.major, self.minor, self.patch + 1)

    def with_suffix(self, suffix: str) -> SemVer:
        return SemVer(self.major, self.minor, self.patch, (suffix,))


def strip_v_prefix(text: str) -> str:
    """Drop a single leading 'v' or 'V' (v1.2.3 -> 1.2.3)."""
    if text[:1] in ("v", "V"):
        return text[1:]
    return text


def parse_semver(text: str) -> Result[SemVer, InvalidVersionError]:
    """Parse `major.minor.patch[-prerelease][+build]`.

    The input is taken as-is: prefix stripping and lowercasing happen
    upstream, where the raw value comes from.
    """
    m = _SEMVER_RE.fullmatch(text)
    if m is None:
        return Err(InvalidVersionError(value=text))

    prerelease: tuple[str, ...] = ()
    if m.group("prerelease") is not None:
        prerelease = tuple(m.group("prerelease").split("."))
        for token in prerelease:
            if token.isdigit() and len(token) > 1 and token.startswith("0"):
                return Err(
                    InvalidVersionError(
                        value=text,
                        reason=f"numeric pre-release identifier has a leading zero: {token}",
                    )
                )

    return Ok(
        SemVer(
            major=int(m.group("major")),
            minor=int(m.group("minor")),
            patch=int(m.group("patch")),
            prerelease=prerelease,
            build=m.group("build"),
        )
    )
