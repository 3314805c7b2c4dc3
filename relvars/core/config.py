"""Typed configuration loading.

Configuration is optional: every field has a default matching what a
GitHub Actions runner provides. A `.relvars.toml` file (or one passed with
`--config`) can override them:

    [github]
    token_env = "GH_RELEASE_TOKEN"
    api_url = "https://ghe.example.com/api/v3"
    timeout = 10

    [release]
    snapshot_suffix = "SNAPSHOT"
    run_branch_prefix = "releases/run-"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from relvars import __version__

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "GitHubConfig",
    "ReleaseConfig",
    "CONFIG_FILE_NAME",
    "DEFAULT_TOKEN_ENV",
    "DEFAULT_TIMEOUT_SECONDS",
    "SNAPSHOT_SUFFIX",
    "RUN_BRANCH_PREFIX",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILE_NAME = ".relvars.toml"

DEFAULT_TOKEN_ENV = "GITHUB_TOKEN"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = f"semver-release-vars/{__version__}"

SNAPSHOT_SUFFIX = "SNAPSHOT"
RUN_BRANCH_PREFIX = "releases/run-"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """GitHub API access.

    api_url overrides GITHUB_API_URL when set.
    """

    token_env: str = DEFAULT_TOKEN_ENV
    api_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    snapshot_suffix: str = SNAPSHOT_SUFFIX
    run_branch_prefix: str = RUN_BRANCH_PREFIX


@dataclass(frozen=True, slots=True)
class Config:
    github: GitHubConfig = field(default_factory=GitHubConfig)
    release: ReleaseConfig = field(default_factory=ReleaseConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        github: StrDict = get_table(data, "github") or {}
        release: StrDict = get_table(data, "release") or {}

        timeout = get_float(github, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"github.timeout must be positive, got {timeout}")

        return cls(
            github=GitHubConfig(
                token_env=get_str(github, "token_env") or DEFAULT_TOKEN_ENV,
                api_url=get_str(github, "api_url"),
                timeout=timeout or DEFAULT_TIMEOUT_SECONDS,
                user_agent=get_str(github, "user_agent") or DEFAULT_USER_AGENT,
            ),
            release=ReleaseConfig(
                snapshot_suffix=get_str(release, "snapshot_suffix") or SNAPSHOT_SUFFIX,
                run_branch_prefix=get_str(release, "run_branch_prefix") or RUN_BRANCH_PREFIX,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config from file, or return defaults if the file doesn't exist.

    A file that exists but is invalid is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
