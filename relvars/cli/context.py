from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

import typer

from relvars.core.config import CONFIG_FILE_NAME, Config, load_config, load_config_or_default
from relvars.core.errors import ErrorCode
from relvars.core.result import Err
from relvars.github.actions import GitHubActionsContext
from relvars.github.repository import GitHubProvider
from relvars.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    actions: GitHubActionsContext
    provider: GitHubProvider


def _load(config_path: Path | None) -> Config:
    if config_path is None:
        result = load_config_or_default(Path.cwd() / CONFIG_FILE_NAME)
    else:
        result = load_config(config_path)

    if isinstance(result, Err):
        typer.echo(f"error: {result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    return result.value


def build_context(
    *,
    config_path: Path | None = None,
    token_env: str | None = None,
    timeout: float | None = None,
) -> CLIContext:
    config = _load(config_path)

    github = config.github
    if token_env:
        github = replace(github, token_env=token_env)
    if timeout is not None:
        if timeout <= 0:
            typer.echo("error: --timeout must be positive", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        github = replace(github, timeout=timeout)
    config = replace(config, github=github)

    return CLIContext(
        config=config,
        console=RichConsole(),
        actions=GitHubActionsContext(),
        provider=GitHubProvider(timeout=github.timeout, user_agent=github.user_agent),
    )
