"""Repository provider backed by the GitHub REST API."""

from __future__ import annotations

from collections.abc import Callable

from relvars.core.config import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from relvars.core.result import Err, Ok, Result
from relvars.core.structured import as_obj_list, as_str_dict, get_str, get_table
from relvars.github.http import HttpClient, RealHttpClient
from relvars.release.errors import ApiError
from relvars.release.model import TagRef

__all__ = ["GitHubProvider", "GitHubRepository", "PER_PAGE"]

PER_PAGE = 100

ClientFactory = Callable[[str], HttpClient]


def _paginate(http: HttpClient, url: str) -> Result[list[object], ApiError]:
    """Fetch every page of a list endpoint.

    Stops at the first page shorter than PER_PAGE.
    """
    items: list[object] = []
    page = 1
    while True:
        page_url = f"{url}?per_page={PER_PAGE}&page={page}"
        result = http.get_json(page_url)
        if isinstance(result, Err):
            return result

        raw = as_obj_list(result.value)
        if raw is None:
            return Err(ApiError(url=page_url, status=0, message="Expected JSON array"))

        items.extend(raw)
        if len(raw) < PER_PAGE:
            return Ok(items)
        page += 1


class GitHubRepository:
    def __init__(
        self,
        http: HttpClient,
        api_url: str,
        slug: str,
        default_branch: str | None,
    ) -> None:
        self._http = http
        self._base = f"{api_url}/repos/{slug}"
        self.slug = slug
        self._default_branch = default_branch

    def list_tags(self) -> Result[list[TagRef], ApiError]:
        raw = _paginate(self._http, f"{self._base}/tags")
        if isinstance(raw, Err):
            return raw

        tags: list[TagRef] = []
        for item in raw.value:
            d = as_str_dict(item)
            if d is None:
                continue
            name = get_str(d, "name")
            if name is None:
                continue
            commit = get_table(d, "commit") or {}
            tags.append(TagRef(name=name, sha=get_str(commit, "sha")))
        return Ok(tags)

    def list_branch_names(self) -> Result[list[str], ApiError]:
        raw = _paginate(self._http, f"{self._base}/branches")
        if isinstance(raw, Err):
            return raw

        names: list[str] = []
        for item in raw.value:
            d = as_str_dict(item)
            if d is None:
                continue
            name = get_str(d, "name")
            if name is not None:
                names.append(name)
        return Ok(names)

    def get_default_branch(self) -> Result[str | None, ApiError]:
        return Ok(self._default_branch)


class GitHubProvider:
    """Connects to a GitHub (or GitHub Enterprise) API endpoint.

    Usage:
        provider = GitHubProvider()
        provider.connect("https://api.github.com", token)
        repo = provider.get_repository("octocat/Hello-World")
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._client_factory = client_factory or (
            lambda token: RealHttpClient(timeout=timeout, user_agent=user_agent, token=token)
        )
        self._http: HttpClient | None = None
        self._api_url: str | None = None

    def connect(self, api_url: str, token: str) -> Result[None, ApiError]:
        """Create the API client and check the endpoint answers."""
        api_url = api_url.rstrip("/")
        http = self._client_factory(token)

        result = http.get_json(api_url)
        if isinstance(result, Err):
            return Err(
                ApiError(
                    url=api_url,
                    status=result.error.status,
                    message=f"invalid GitHub API url: {result.error.message}",
                )
            )

        self._http = http
        self._api_url = api_url
        return Ok(None)

    def get_repository(self, slug: str) -> Result[GitHubRepository, ApiError]:
        if self._http is None or self._api_url is None:
            return Err(ApiError(url=slug, status=0, message="not connected"))

        url = f"{self._api_url}/repos/{slug}"
        result = self._http.get_json(url)
        if isinstance(result, Err):
            return result

        data = as_str_dict(result.value)
        if data is None:
            return Err(ApiError(url=url, status=0, message="unexpected repository payload"))

        return Ok(
            GitHubRepository(
                self._http,
                self._api_url,
                slug,
                default_branch=get_str(data, "default_branch"),
            )
        )
