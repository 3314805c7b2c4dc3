"""GitHub Actions runner context.

Reads the run metadata the runner exports as environment variables and
queues step outputs, appending them to the file named by GITHUB_OUTPUT in
one write once the run has succeeded. Workflow commands
(::debug::, ::error::) go straight to stdout, unstyled, since the runner
parses them line by line.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Callable, Mapping
from pathlib import Path

import typer

from relvars.core.result import Err, Ok, Result
from relvars.release.errors import MissingEnvError, OutputWriteError

__all__ = ["GitHubActionsContext", "DEFAULT_API_URL"]

DEFAULT_API_URL = "https://api.github.com"


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _render_output(name: str, value: str) -> str:
    if "\n" in value:
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"
    return f"{name}={value}\n"


class GitHubActionsContext:
    def __init__(
        self,
        env: Mapping[str, str] | None = None,
        *,
        echo: Callable[[str], None] = typer.echo,
    ) -> None:
        self._env: Mapping[str, str] = os.environ if env is None else env
        self._echo = echo
        self._pending: list[str] = []

    def _get(self, name: str) -> str:
        return self._env.get(name, "").strip()

    def get_input(self, name: str) -> str | None:
        value = self._get(f"INPUT_{name.replace(' ', '_').upper()}")
        return value or None

    def is_ref_type_branch(self) -> bool:
        return self._get("GITHUB_REF_TYPE") == "branch"

    def get_ref_name(self) -> str:
        return self._get("GITHUB_REF_NAME")

    def get_run_id(self) -> str:
        return self._get("GITHUB_RUN_ID")

    def get_repository_slug(self) -> str:
        return self._get("GITHUB_REPOSITORY")

    def get_api_url(self) -> str:
        return self._get("GITHUB_API_URL") or DEFAULT_API_URL

    def get_required_env(self, name: str) -> Result[str, MissingEnvError]:
        value = self._get(name)
        if not value:
            return Err(MissingEnvError(name=name))
        return Ok(value)

    @property
    def output_file(self) -> Path | None:
        path = self._get("GITHUB_OUTPUT")
        return Path(path) if path else None

    def set_output(self, name: str, value: str) -> None:
        """Queue an output; nothing reaches GITHUB_OUTPUT before flush_outputs()."""
        self._pending.append(_render_output(name, value))

    def set_optional_output(self, name: str, value: str | None) -> None:
        if value is not None:
            self.set_output(name, value)

    def flush_outputs(self) -> Result[None, MissingEnvError | OutputWriteError]:
        """Append every queued output to GITHUB_OUTPUT in a single write."""
        path = self.output_file
        if path is None:
            return Err(MissingEnvError(name="GITHUB_OUTPUT"))

        text = "".join(self._pending)
        try:
            with path.open("a", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            return Err(OutputWriteError(path=str(path), message=e.strerror or str(e)))

        self._pending.clear()
        return Ok(None)

    def debug(self, message: str) -> None:
        self._echo(f"::debug::{_escape_data(message)}")

    def error(self, message: str) -> None:
        self._echo(f"::error::{_escape_data(message)}")
