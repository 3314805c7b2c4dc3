"""GitHub adapters: runner context, REST API client, repository provider."""

from .actions import GitHubActionsContext
from .http import HttpClient, MockHttpClient, RealHttpClient
from .repository import GitHubProvider, GitHubRepository

__all__ = [
    "GitHubActionsContext",
    "GitHubProvider",
    "GitHubRepository",
    "HttpClient",
    "MockHttpClient",
    "RealHttpClient",
]
