"""Error payloads for release resolution.

Each failure is its own frozen dataclass; ReleaseVarsError is the union the
resolver returns and the presentation layer matches on.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InvalidVersionError:
    value: str
    reason: str = "not a semantic version (major.minor.patch[-prerelease][+build])"


@dataclass(frozen=True, slots=True)
class InvalidBranchError:
    ref: str
    reason: str


@dataclass(frozen=True, slots=True)
class MissingVersionError:
    branch: str
    hint: str = "Push to releases/trigger-<version> or set the package_version input"


@dataclass(frozen=True, slots=True)
class DuplicateVersionError:
    version: str


@dataclass(frozen=True, slots=True)
class NotFoundError:
    what: str


@dataclass(frozen=True, slots=True)
class MissingEnvError:
    name: str


@dataclass(frozen=True, slots=True)
class ApiError:
    url: str
    status: int
    message: str

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@dataclass(frozen=True, slots=True)
class OutputWriteError:
    path: str
    message: str


ReleaseVarsError = (
    InvalidVersionError
    | InvalidBranchError
    | MissingVersionError
    | DuplicateVersionError
    | NotFoundError
    | MissingEnvError
    | ApiError
    | OutputWriteError
)
