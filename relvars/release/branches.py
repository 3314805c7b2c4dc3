from __future__ import annotations

import re
from collections.abc import Iterable

from relvars.core.result import Err, Ok, Result
from relvars.release.errors import InvalidBranchError, MissingVersionError
from relvars.release.semver import SemVer


TRIGGER_BRANCH = "releases/trigger"

_TRIGGER_RE = re.compile(r"releases/trigger(-v?(?P<version>\d+\.\d+\.\d+[\w.+-]*))?", re.ASCII)
_MAINTENANCE_RE = re.compile(r"maintenances/(?P<major>\d+)\.((?P<minor>\d+)\.)?x", re.ASCII)


def branch_ref(branch: str) -> str:
    return f"refs/heads/{branch}"


def run_branch_name(run_id: str, *, prefix: str = "releases/run-") -> str:
    return f"{prefix}{run_id}"


def extract_release_version(
    branch: str, package_version: str | None
) -> Result[str, InvalidBranchError | MissingVersionError]:
    """Return the release version carried by a trigger branch.

    A version embedded in the branch name (releases/trigger-1.2.3 or
    releases/trigger-v1.2.3) wins over package_version.
    """
    m = _TRIGGER_RE.fullmatch(branch)
    if m is None:
        return Err(
            InvalidBranchError(
                ref=branch,
                reason=f"branch should match {TRIGGER_BRANCH}(-<version>)? format",
            )
        )

    embedded = m.group("version")
    if embedded is not None:
        return Ok(embedded)
    if package_version:
        return Ok(package_version)
    return Err(MissingVersionError(branch=branch))


def find_maintenance_branch(version: SemVer, branch_names: Iterable[str]) -> str | None:
    """Return the first maintenances/<major>[.<minor>].x branch serving version.

    Branch order is whatever the caller iterates in; when both a major and a
    major.minor branch match, the first one seen wins.
    """
    for name in branch_names:
        m = _MAINTENANCE_RE.fullmatch(name)
        if m is None:
            continue
        if int(m.group("major")) != version.major:
            continue
        minor = m.group("minor")
        if minor is not None and int(minor) != version.minor:
            continue
        return name
    return None
