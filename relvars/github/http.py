"""HTTP client abstraction for the GitHub REST API.

This module provides:
- HttpClient: Protocol for HTTP operations (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from typing import Protocol, runtime_checkable

from relvars.core.config import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from relvars.core.result import Err, Ok, Result
from relvars.release.errors import ApiError

__all__ = [
    "HttpClient",
    "RealHttpClient",
    "MockHttpClient",
]

GITHUB_API_VERSION = "2022-11-28"


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    Lets tests inject canned responses instead of reaching the network.
    """

    def get_json(self, url: str) -> Result[object, ApiError]:
        """Fetch URL and parse the body as JSON.

        Args:
            url: URL to fetch

        Returns:
            Ok with the decoded JSON value, or Err with ApiError
        """
        ...


class RealHttpClient:
    """HTTP client using urllib.

    Sends the GitHub API headers and, once a token is set, a bearer
    Authorization header. No retries: a failed call fails the run.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        token: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self.token = token
        self._ssl_context = ssl.create_default_context()

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self.user_agent,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _request(self, url: str) -> Result[bytes, ApiError]:
        try:
            req = urllib.request.Request(url, headers=self._headers())
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(response.read())
        except urllib.error.HTTPError as e:
            return Err(ApiError(url=url, status=e.code, message=str(e.reason)))
        except urllib.error.URLError as e:
            return Err(ApiError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(ApiError(url=url, status=0, message="Request timed out"))
        except ValueError as e:
            return Err(ApiError(url=url, status=0, message=str(e)))
        except OSError as e:
            return Err(ApiError(url=url, status=0, message=str(e)))

    def get_json(self, url: str) -> Result[object, ApiError]:
        result = self._request(url)
        if isinstance(result, Err):
            return result

        try:
            data: object = json.loads(result.value.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Err(ApiError(url=url, status=0, message=f"JSON parse error: {e}"))
        return Ok(data)


class MockHttpClient:
    """Mock HTTP client for testing.

    Usage:
        client = MockHttpClient()
        client.set_json("https://api.github.com/repos/o/r", {"default_branch": "main"})
        result = client.get_json("https://api.github.com/repos/o/r")
    """

    def __init__(self) -> None:
        self._responses: dict[str, object | ApiError] = {}
        self.calls: list[str] = []
        self.token: str | None = None

    def set_json(self, url: str, response: object | ApiError) -> None:
        self._responses[url] = response

    def get_json(self, url: str) -> Result[object, ApiError]:
        self.calls.append(url)

        if url not in self._responses:
            return Err(ApiError(url=url, status=404, message="Not found (mock)"))

        response = self._responses[url]
        if isinstance(response, ApiError):
            return Err(response)
        return Ok(response)
