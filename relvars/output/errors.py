"""Error presentation utilities.

Centralized error messages and exit code mapping for a failed resolution.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relvars.core.errors import ErrorCode
from relvars.output.console import Style
from relvars.release.errors import (
    ApiError,
    DuplicateVersionError,
    InvalidBranchError,
    InvalidVersionError,
    MissingEnvError,
    MissingVersionError,
    NotFoundError,
    OutputWriteError,
    ReleaseVarsError,
)

if TYPE_CHECKING:
    from relvars.output.console import ConsoleProtocol

__all__ = ["release_error_message", "print_release_error", "release_error_exit_code"]


def release_error_message(error: ReleaseVarsError) -> str:
    match error:
        case InvalidVersionError(value=value, reason=reason):
            return f"invalid version '{value}': {reason}"
        case InvalidBranchError(ref=ref, reason=reason):
            return f"invalid ref '{ref}': {reason}"
        case MissingVersionError(branch=branch):
            return f"no release version: branch '{branch}' carries none and package_version is not set"
        case DuplicateVersionError(version=version):
            return f"a tag for version {version} already exists in the repository"
        case NotFoundError(what=what):
            return f"{what} not found"
        case MissingEnvError(name=name):
            return f"required environment variable {name} is not set"
        case ApiError():
            return f"GitHub API error: {error}"
        case OutputWriteError(path=path, message=message):
            return f"cannot write step outputs to {path}: {message}"


def print_release_error(error: ReleaseVarsError, console: ConsoleProtocol) -> None:
    console.error(release_error_message(error))
    match error:
        case MissingVersionError(hint=hint):
            console.print(f"hint: {hint}", Style.DIM)
        case MissingEnvError(name="GITHUB_OUTPUT"):
            console.print("hint: run inside a GitHub Actions step, the runner sets GITHUB_OUTPUT", Style.DIM)
        case MissingEnvError(name=name):
            console.print(f"hint: pass it to the step with env: {name}: ${{{{ secrets.{name} }}}}", Style.DIM)
        case _:
            pass


def release_error_exit_code(error: ReleaseVarsError) -> int:
    match error:
        case InvalidVersionError() | InvalidBranchError() | MissingVersionError():
            return int(ErrorCode.USER_ERROR)
        case DuplicateVersionError():
            return int(ErrorCode.USER_ERROR)
        case NotFoundError() | MissingEnvError() | OutputWriteError():
            return int(ErrorCode.ENV_ERROR)
        case ApiError():
            return int(ErrorCode.NETWORK_ERROR)
