"""Step output names and emission.

Downstream workflow steps read these names, so they are a fixed contract.
"""

from __future__ import annotations

from typing import Final

from relvars.release.model import ReleaseVars
from relvars.release.ports import CIContext

VERSION: Final = "version"
VERSION_MAJOR: Final = "version_major"
VERSION_MINOR: Final = "version_minor"
VERSION_PATCH: Final = "version_patch"
VERSION_SUFFIX: Final = "version_suffix"
VERSION_BUILD: Final = "version_build"
GIT_TAG: Final = "git_tag"
GIT_TAG_MAJOR: Final = "git_tag_major"
GIT_TAG_MINOR: Final = "git_tag_minor"
GIT_TAG_PATCH: Final = "git_tag_patch"
DOCKER_TAG: Final = "docker_tag"
DOCKER_TAG_MAJOR: Final = "docker_tag_major"
DOCKER_TAG_MINOR: Final = "docker_tag_minor"
DOCKER_TAG_PATCH: Final = "docker_tag_patch"
NEXT_MAJOR_VERSION: Final = "next_major_version"
NEXT_MINOR_VERSION: Final = "next_minor_version"
NEXT_PATCH_VERSION: Final = "next_patch_version"
NEXT_MAJOR_SNAPSHOT_VERSION: Final = "next_major_snapshot_version"
NEXT_MINOR_SNAPSHOT_VERSION: Final = "next_minor_snapshot_version"
NEXT_PATCH_SNAPSHOT_VERSION: Final = "next_patch_snapshot_version"
TRIGGER_BRANCH: Final = "trigger_branch"
TRIGGER_BRANCH_REF: Final = "trigger_branch_ref"
RUN_BRANCH: Final = "run_branch"
RUN_BRANCH_REF: Final = "run_branch_ref"
TARGET_BRANCH: Final = "target_branch"
TARGET_BRANCH_REF: Final = "target_branch_ref"

# Outputs that may be absent (no suffix, no build, not latest in scope).
OPTIONAL_OUTPUTS: Final = frozenset(
    {
        VERSION_SUFFIX,
        VERSION_BUILD,
        GIT_TAG_MAJOR,
        GIT_TAG_MINOR,
        GIT_TAG_PATCH,
        DOCKER_TAG_MAJOR,
        DOCKER_TAG_MINOR,
        DOCKER_TAG_PATCH,
    }
)

# Output name -> ReleaseVars attribute; emission order.
OUTPUT_FIELDS: Final[dict[str, str]] = {
    VERSION: "version",
    VERSION_MAJOR: "version_major",
    VERSION_MINOR: "version_minor",
    VERSION_PATCH: "version_patch",
    VERSION_SUFFIX: "version_suffix",
    VERSION_BUILD: "version_build",
    GIT_TAG: "git_tag",
    GIT_TAG_MAJOR: "git_tag_major",
    GIT_TAG_MINOR: "git_tag_minor",
    GIT_TAG_PATCH: "git_tag_patch",
    DOCKER_TAG: "docker_tag",
    DOCKER_TAG_MAJOR: "docker_tag_major",
    DOCKER_TAG_MINOR: "docker_tag_minor",
    DOCKER_TAG_PATCH: "docker_tag_patch",
    NEXT_MAJOR_VERSION: "next_major_version",
    NEXT_MINOR_VERSION: "next_minor_version",
    NEXT_PATCH_VERSION: "next_patch_version",
    NEXT_MAJOR_SNAPSHOT_VERSION: "next_major_snapshot_version",
    NEXT_MINOR_SNAPSHOT_VERSION: "next_minor_snapshot_version",
    NEXT_PATCH_SNAPSHOT_VERSION: "next_patch_snapshot_version",
    TRIGGER_BRANCH: "trigger_branch",
    TRIGGER_BRANCH_REF: "trigger_branch_ref",
    RUN_BRANCH: "run_branch",
    RUN_BRANCH_REF: "run_branch_ref",
    TARGET_BRANCH: "target_branch",
    TARGET_BRANCH_REF: "target_branch_ref",
}


def output_values(release: ReleaseVars) -> dict[str, str | None]:
    """Map every output name to its value (None for absent optional outputs)."""
    return {name: getattr(release, attr) for name, attr in OUTPUT_FIELDS.items()}


def emit_release_vars(context: CIContext, release: ReleaseVars) -> None:
    for name, value in output_values(release).items():
        if name in OPTIONAL_OUTPUTS:
            context.set_optional_output(name, value)
        elif value is not None:
            context.set_output(name, value)
