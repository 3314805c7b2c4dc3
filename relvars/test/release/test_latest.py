from __future__ import annotations

from relvars.core.result import Err, Ok
from relvars.release.errors import InvalidVersionError
from relvars.release.latest import (
    evaluate_latest_scopes,
    is_latest_in_scope,
    is_latest_major,
    is_latest_minor,
    is_latest_patch,
    major_scope,
    minor_scope,
    patch_scope,
)
from relvars.release.model import LatestScopes
from relvars.release.semver import SemVer, parse_semver


def _v(text: str) -> SemVer:
    result = parse_semver(text)
    assert isinstance(result, Ok)
    return result.value


def test_latest_major() -> None:
    assert is_latest_major(_v("1.3.0"), []) == Ok(True)
    assert is_latest_major(_v("1.3.0"), ["1.0.0", "1.2.0", "2.0.0"]) == Ok(True)
    assert is_latest_major(_v("1.3.0"), ["1.0.0", "1.4.0", "2.0.0"]) == Ok(False)


def test_latest_minor() -> None:
    assert is_latest_minor(_v("1.3.3"), []) == Ok(True)
    assert is_latest_minor(_v("1.3.3"), ["1.0.0", "1.2.0", "1.3.0", "1.4.0", "2.0.0"]) == Ok(True)
    known = ["1.0.0", "1.2.0", "1.3.0", "1.3.4", "1.4.0", "2.0.0"]
    assert is_latest_minor(_v("1.3.3"), known) == Ok(False)


def test_latest_patch_with_prereleases() -> None:
    assert is_latest_patch(_v("1.3.3-rc.1"), []) == Ok(True)
    known = ["1.0.0", "1.2.0", "1.3.3-rc.0", "1.4.0", "2.0.0"]
    assert is_latest_patch(_v("1.3.3-rc.1"), known) == Ok(True)
    known = ["1.0.0", "1.2.0", "1.3.0", "1.3.3-rc.2", "1.3.4", "1.4.0", "2.0.0"]
    assert is_latest_patch(_v("1.3.3-rc.1"), known) == Ok(False)


def test_prerelease_is_not_latest_over_its_release() -> None:
    assert is_latest_patch(_v("1.0.0-rc.1"), ["1.0.0"]) == Ok(False)
    assert is_latest_major(_v("1.0.0-rc.1"), ["1.0.0"]) == Ok(False)


def test_empty_known_set_is_latest_in_every_scope() -> None:
    for scope in (major_scope, minor_scope, patch_scope):
        assert is_latest_in_scope(_v("0.1.0-alpha"), [], scope) == Ok(True)


def test_equal_version_counts_as_latest() -> None:
    assert is_latest_patch(_v("1.0.0+build.2"), ["1.0.0"]) == Ok(True)


def test_higher_version_in_scope_blocks_candidate() -> None:
    candidate = _v("2.1.0")
    assert is_latest_in_scope(candidate, ["2.5.0"], major_scope) == Ok(False)
    assert is_latest_in_scope(candidate, ["2.5.0"], minor_scope) == Ok(True)
    assert is_latest_in_scope(candidate, ["2.1.7"], minor_scope) == Ok(False)
    assert is_latest_in_scope(candidate, ["2.1.7"], patch_scope) == Ok(True)


def test_invalid_known_version_is_an_error() -> None:
    result = is_latest_major(_v("1.0.0"), ["1.0.0", "not-a-version"])
    assert isinstance(result, Err)
    assert result.error.value == "not-a-version"
    assert isinstance(result.error, InvalidVersionError)


def test_evaluate_latest_scopes() -> None:
    result = evaluate_latest_scopes(_v("1.1.0-rc.1+abcdef"), ["1.0.0"])
    assert result == Ok(LatestScopes(major=True, minor=True, patch=True))

    result = evaluate_latest_scopes(_v("1.1.0-rc.1+abcdef"), ["1.1.1"])
    assert result == Ok(LatestScopes(major=False, minor=False, patch=True))


def test_evaluate_latest_scopes_accepts_one_shot_iterables() -> None:
    result = evaluate_latest_scopes(_v("1.1.0"), iter(["1.2.0"]))
    assert result == Ok(LatestScopes(major=False, minor=True, patch=True))
