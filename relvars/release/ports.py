"""Interfaces the resolver needs from the outside world.

The release package never talks to GitHub or the runner directly; the CLI
wires in relvars.github implementations, tests wire in fakes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from relvars.core.result import Result
from relvars.release.errors import ApiError, MissingEnvError
from relvars.release.model import TagRef


@runtime_checkable
class CIContext(Protocol):
    """Read run metadata from the CI system and write step outputs back."""

    def get_input(self, name: str) -> str | None:
        """Return a step input, or None when unset or blank."""
        ...

    def is_ref_type_branch(self) -> bool: ...

    def get_ref_name(self) -> str: ...

    def get_run_id(self) -> str: ...

    def get_repository_slug(self) -> str:
        """Return the repository as owner/name."""
        ...

    def get_api_url(self) -> str: ...

    def get_required_env(self, name: str) -> Result[str, MissingEnvError]: ...

    def set_output(self, name: str, value: str) -> None: ...

    def set_optional_output(self, name: str, value: str | None) -> None:
        """Set an output only when value is not None."""
        ...

    def debug(self, message: str) -> None: ...


@runtime_checkable
class RepositoryHandle(Protocol):
    def list_tags(self) -> Result[list[TagRef], ApiError]: ...

    def list_branch_names(self) -> Result[list[str], ApiError]:
        """Return branch names in the order the provider lists them."""
        ...

    def get_default_branch(self) -> Result[str | None, ApiError]: ...


@runtime_checkable
class RepositoryProvider(Protocol):
    def connect(self, api_url: str, token: str) -> Result[None, ApiError]: ...

    def get_repository(self, slug: str) -> Result[RepositoryHandle, ApiError]: ...
