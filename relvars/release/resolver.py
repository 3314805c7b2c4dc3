"""Release resolution: from trigger branch to release variables.

The sequence is single pass and fails fast; the first error is returned
as-is and nothing is emitted. Emission is left to the caller so a failed
run never leaves half of its outputs behind.
"""

from __future__ import annotations

from relvars.core.config import DEFAULT_TOKEN_ENV, ReleaseConfig
from relvars.core.result import Err, Ok, Result
from relvars.release.branches import (
    branch_ref,
    extract_release_version,
    find_maintenance_branch,
    run_branch_name,
)
from relvars.release.errors import (
    DuplicateVersionError,
    InvalidBranchError,
    NotFoundError,
    ReleaseVarsError,
)
from relvars.release.latest import evaluate_latest_scopes
from relvars.release.model import LatestScopes, ReleaseInput, ReleaseVars
from relvars.release.ports import CIContext, RepositoryHandle, RepositoryProvider
from relvars.release.semver import SemVer, parse_semver, strip_v_prefix
from relvars.release.tags import normalize_tags

PACKAGE_VERSION_INPUT = "package_version"


def git_tag(version: str) -> str:
    return f"v{version}"


def read_release_input(
    context: CIContext, *, run_branch_prefix: str = "releases/run-"
) -> Result[tuple[ReleaseInput, str], InvalidBranchError]:
    """Read the trigger inputs; returns (input, run branch name)."""
    package_version = context.get_input(PACKAGE_VERSION_INPUT)
    if package_version is not None:
        package_version = strip_v_prefix(package_version)

    if not context.is_ref_type_branch():
        return Err(
            InvalidBranchError(ref=context.get_ref_name(), reason="GITHUB_REF should be a branch")
        )

    release_input = ReleaseInput(
        package_version=package_version,
        trigger_branch=context.get_ref_name(),
        run_id=context.get_run_id(),
    )
    return Ok((release_input, run_branch_name(release_input.run_id, prefix=run_branch_prefix)))


def build_release_vars(
    version: SemVer,
    latest: LatestScopes,
    *,
    trigger_branch: str,
    run_branch: str,
    target_branch: str,
    snapshot_suffix: str = "SNAPSHOT",
) -> ReleaseVars:
    value = str(version)
    major = str(version.major)
    major_minor = f"{version.major}.{version.minor}"
    major_minor_patch = version.core

    docker_major = major if latest.major else None
    docker_minor = major_minor if latest.minor else None
    docker_patch = major_minor_patch if latest.patch else None

    return ReleaseVars(
        version=value,
        version_major=major,
        version_minor=str(version.minor),
        version_patch=str(version.patch),
        version_suffix=version.suffix,
        version_build=version.build,
        latest=latest,
        git_tag=git_tag(value),
        git_tag_major=git_tag(docker_major) if docker_major else None,
        git_tag_minor=git_tag(docker_minor) if docker_minor else None,
        git_tag_patch=git_tag(docker_patch) if docker_patch else None,
        docker_tag=value,
        docker_tag_major=docker_major,
        docker_tag_minor=docker_minor,
        docker_tag_patch=docker_patch,
        next_major_version=str(version.next_major()),
        next_minor_version=str(version.next_minor()),
        next_patch_version=str(version.next_patch()),
        next_major_snapshot_version=str(version.next_major().with_suffix(snapshot_suffix)),
        next_minor_snapshot_version=str(version.next_minor().with_suffix(snapshot_suffix)),
        next_patch_snapshot_version=str(version.next_patch().with_suffix(snapshot_suffix)),
        trigger_branch=trigger_branch,
        trigger_branch_ref=branch_ref(trigger_branch),
        run_branch=run_branch,
        run_branch_ref=branch_ref(run_branch),
        target_branch=target_branch,
        target_branch_ref=branch_ref(target_branch),
    )


def _connect(
    context: CIContext,
    provider: RepositoryProvider,
    *,
    token_env: str,
    api_url: str | None,
) -> Result[RepositoryHandle, ReleaseVarsError]:
    context.debug("github api url connection: check.")
    token = context.get_required_env(token_env)
    if isinstance(token, Err):
        return token

    connected = provider.connect(api_url or context.get_api_url(), token.value)
    if isinstance(connected, Err):
        return connected
    context.debug("github api url connection: ok.")

    return provider.get_repository(context.get_repository_slug())


def resolve_target_branch(
    version: SemVer, repository: RepositoryHandle
) -> Result[str, ReleaseVarsError]:
    """Maintenance branch for this version line, else the default branch."""
    branches = repository.list_branch_names()
    if isinstance(branches, Err):
        return branches

    maintenance = find_maintenance_branch(version, branches.value)
    if maintenance is not None:
        return Ok(maintenance)

    default = repository.get_default_branch()
    if isinstance(default, Err):
        return default
    if default.value is None:
        return Err(NotFoundError(what="default branch"))
    return Ok(default.value)


def resolve_release(
    context: CIContext,
    provider: RepositoryProvider,
    *,
    token_env: str = DEFAULT_TOKEN_ENV,
    api_url: str | None = None,
    config: ReleaseConfig | None = None,
) -> Result[ReleaseVars, ReleaseVarsError]:
    cfg = config or ReleaseConfig()

    read = read_release_input(context, run_branch_prefix=cfg.run_branch_prefix)
    if isinstance(read, Err):
        return read
    release_input, run_branch = read.value

    context.debug(f"parameters: [package_version: {release_input.package_version}]")

    release_version = extract_release_version(
        release_input.trigger_branch, release_input.package_version
    )
    if isinstance(release_version, Err):
        return release_version

    version = parse_semver(release_version.value)
    if isinstance(version, Err):
        return version

    repository = _connect(context, provider, token_env=token_env, api_url=api_url)
    if isinstance(repository, Err):
        return repository
    repo = repository.value

    tags = repo.list_tags()
    if isinstance(tags, Err):
        return tags
    tags_by_version = normalize_tags(tags.value)

    if release_version.value.lower() in tags_by_version:
        return Err(DuplicateVersionError(version=release_version.value))

    latest = evaluate_latest_scopes(version.value, tags_by_version.keys())
    if isinstance(latest, Err):
        return latest

    target = resolve_target_branch(version.value, repo)
    if isinstance(target, Err):
        return target

    return Ok(
        build_release_vars(
            version.value,
            latest.value,
            trigger_branch=release_input.trigger_branch,
            run_branch=run_branch,
            target_branch=target.value,
            snapshot_suffix=cfg.snapshot_suffix,
        )
    )
