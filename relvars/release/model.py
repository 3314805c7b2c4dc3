from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ReleaseInput:
    """Raw values the run was triggered with."""

    package_version: str | None
    trigger_branch: str
    run_id: str


@dataclass(frozen=True, slots=True)
class TagRef:
    """A repository tag as listed by the provider."""

    name: str
    sha: str | None = None


@dataclass(frozen=True, slots=True)
class LatestScopes:
    major: bool
    minor: bool
    patch: bool


@dataclass(frozen=True, slots=True)
class ReleaseVars:
    """Everything a release step needs to tag, build and branch."""

    version: str
    version_major: str
    version_minor: str
    version_patch: str
    version_suffix: str | None
    version_build: str | None

    latest: LatestScopes

    git_tag: str
    git_tag_major: str | None
    git_tag_minor: str | None
    git_tag_patch: str | None

    docker_tag: str
    docker_tag_major: str | None
    docker_tag_minor: str | None
    docker_tag_patch: str | None

    next_major_version: str
    next_minor_version: str
    next_patch_version: str
    next_major_snapshot_version: str
    next_minor_snapshot_version: str
    next_patch_snapshot_version: str

    trigger_branch: str
    trigger_branch_ref: str
    run_branch: str
    run_branch_ref: str
    target_branch: str
    target_branch_ref: str
