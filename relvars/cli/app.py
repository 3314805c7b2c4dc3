from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from relvars import __version__
from relvars.cli.context import CLIContext, build_context
from relvars.core.result import Err
from relvars.output.console import Style
from relvars.output.errors import (
    print_release_error,
    release_error_exit_code,
    release_error_message,
)
from relvars.release.errors import ReleaseVarsError
from relvars.release.outputs import emit_release_vars, output_values
from relvars.release.resolver import resolve_release


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


def _fail(ctx: CLIContext, error: ReleaseVarsError) -> NoReturn:
    ctx.actions.error(release_error_message(error))
    print_release_error(error, ctx.console)
    raise typer.Exit(code=release_error_exit_code(error))


@app.command()
def resolve(
    config: Path | None = typer.Option(
        None,
        "--config",
        help="TOML config file (default: ./.relvars.toml if present)",
    ),
    token_env: str | None = typer.Option(
        None,
        "--token-env",
        help="Environment variable holding the GitHub token (default: GITHUB_TOKEN)",
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        help="GitHub API request timeout in seconds",
    ),
    print_outputs: bool = typer.Option(
        False,
        "--print",
        help="Also print outputs as name=value lines on stdout.",
    ),
) -> None:
    """Compute release variables for the triggering branch and set step outputs."""
    ctx = build_context(config_path=config, token_env=token_env, timeout=timeout)
    github = ctx.config.github

    result = resolve_release(
        ctx.actions,
        ctx.provider,
        token_env=github.token_env,
        api_url=github.api_url,
        config=ctx.config.release,
    )
    if isinstance(result, Err):
        _fail(ctx, result.error)

    release = result.value
    emit_release_vars(ctx.actions, release)
    flushed = ctx.actions.flush_outputs()
    if isinstance(flushed, Err):
        _fail(ctx, flushed.error)

    if print_outputs:
        for name, value in output_values(release).items():
            if value is not None:
                typer.echo(f"{name}={value}")

    ctx.console.success(f"release {release.version} -> {release.target_branch}")
    tags = [t for t in (release.git_tag_major, release.git_tag_minor, release.git_tag_patch) if t]
    if tags:
        ctx.console.print(f"floating tags: {', '.join(tags)}", Style.DIM)


def main() -> None:
    app()
