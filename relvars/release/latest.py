"""Decide whether a release is the latest within its version line.

A release gets the floating tags v<major>, v<major>.<minor> and
v<major>.<minor>.<patch> only when nothing already tagged in that line
ranks above it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from relvars.core.result import Err, Ok, Result
from relvars.release.errors import InvalidVersionError
from relvars.release.model import LatestScopes
from relvars.release.semver import SemVer, parse_semver

ScopeKey = Callable[[SemVer], tuple[int, ...]]


def major_scope(v: SemVer) -> tuple[int, ...]:
    return (v.major,)


def minor_scope(v: SemVer) -> tuple[int, ...]:
    return (v.major, v.minor)


def patch_scope(v: SemVer) -> tuple[int, ...]:
    return (v.major, v.minor, v.patch)


def is_latest_in_scope(
    candidate: SemVer,
    known_versions: Iterable[str],
    scope: ScopeKey,
) -> Result[bool, InvalidVersionError]:
    """Return True if candidate ranks highest among known versions in its scope.

    known_versions must already be valid semver strings (see normalize_tags);
    anything else is reported as an InvalidVersionError.
    """
    key = scope(candidate)
    same_scope: list[SemVer] = [candidate]
    for text in known_versions:
        parsed = parse_semver(text)
        if isinstance(parsed, Err):
            return parsed
        if scope(parsed.value) == key:
            same_scope.append(parsed.value)

    return Ok(max(same_scope) == candidate)


def is_latest_major(
    candidate: SemVer, known_versions: Iterable[str]
) -> Result[bool, InvalidVersionError]:
    return is_latest_in_scope(candidate, known_versions, major_scope)


def is_latest_minor(
    candidate: SemVer, known_versions: Iterable[str]
) -> Result[bool, InvalidVersionError]:
    return is_latest_in_scope(candidate, known_versions, minor_scope)


def is_latest_patch(
    candidate: SemVer, known_versions: Iterable[str]
) -> Result[bool, InvalidVersionError]:
    return is_latest_in_scope(candidate, known_versions, patch_scope)


def evaluate_latest_scopes(
    candidate: SemVer, known_versions: Iterable[str]
) -> Result[LatestScopes, InvalidVersionError]:
    known = list(known_versions)

    major = is_latest_major(candidate, known)
    if isinstance(major, Err):
        return major
    minor = is_latest_minor(candidate, known)
    if isinstance(minor, Err):
        return minor
    patch = is_latest_patch(candidate, known)
    if isinstance(patch, Err):
        return patch

    return Ok(LatestScopes(major=major.value, minor=minor.value, patch=patch.value))
