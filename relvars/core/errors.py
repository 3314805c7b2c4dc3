"""Exit codes for the CLI.

The CI runner only looks at the process exit status, so these values are
the whole contract between a failed resolution and the workflow step:
- 0: Success
- 1: User error (bad branch name, bad version, tag already released)
- 2: Environment error (missing token, no default branch, step outputs not writable)
- 4: Network error (GitHub API unreachable or rejecting the request)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands. Values must remain stable."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4

