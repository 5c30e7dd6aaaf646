"""Async client for the hosted gluestack-ui repository."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from utils.logging import get_logger

from .errors import AuthenticationError, RateLimitError, RemoteError, RemoteNotFoundError

LOGGER = get_logger(__name__)

REPO_OWNER = "gluestack"
REPO_NAME = "gluestack-ui"
REPO_BRANCH = "main"
API_BASE_URL = "https://api.github.com"
RAW_BASE_URL = f"https://raw.githubusercontent.com/{REPO_OWNER}/{REPO_NAME}/{REPO_BRANCH}"
USER_AGENT = "Mozilla/5.0 (compatible; GluestackUiCatalog/1.0.0)"
REQUEST_TIMEOUT = 30.0


def _response_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase or "Unknown error"
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.reason_phrase or "Unknown error"


def classify_response(response: httpx.Response, path: str) -> RemoteError:
    """Map a failed repository response to the matching :class:`RemoteError`."""

    status = response.status_code
    message = _response_message(response)
    if status in (403, 429) and "rate limit" in message.lower():
        return RateLimitError(
            f"GitHub API rate limit exceeded. Please set GITHUB_TOKEN environment variable. Error: {message}",
            status,
        )
    if status == 404:
        return RemoteNotFoundError(f"Path not found: {path}", status)
    if status == 401:
        return AuthenticationError("Authentication failed. Please check your GITHUB_TOKEN.", status)
    return RemoteError(f"GitHub API error ({status}): {message}", status)


class GitHubClient:
    """Directory listings through the contents API and raw file content by path."""

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        api_headers = {"Accept": "application/vnd.github+json", "User-Agent": USER_AGENT}
        if token:
            api_headers["Authorization"] = f"Bearer {token}"
        self._api = httpx.AsyncClient(
            base_url=API_BASE_URL, headers=api_headers, timeout=timeout, transport=transport
        )
        self._raw = httpx.AsyncClient(
            base_url=RAW_BASE_URL, headers={"User-Agent": USER_AGENT}, timeout=timeout, transport=transport
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._api.aclose()
        await self._raw.aclose()

    async def _get(self, client: httpx.AsyncClient, url: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await client.get(url, **kwargs)
        except httpx.HTTPError as exc:
            raise RemoteError(f"Request for {path or '/'} failed: {exc}") from exc
        if response.status_code != 200:
            raise classify_response(response, path)
        return response

    async def list_directory(self, path: str) -> List[Dict[str, Any]]:
        """Return ``{"name", "type", ...}`` entries for a repository directory."""

        url = f"/repos/{REPO_OWNER}/{REPO_NAME}/contents/{path.strip('/')}"
        response = await self._get(self._api, url, path, params={"ref": REPO_BRANCH})
        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteError(f"Invalid directory listing for {path}", response.status_code) from exc
        if not isinstance(payload, list):
            raise RemoteError(f"Expected a directory listing for {path}")
        return [item for item in payload if isinstance(item, dict)]

    async def fetch_raw(self, path: str) -> str:
        response = await self._get(self._raw, f"/{path.lstrip('/')}", path)
        return response.text

    async def exists(self, path: str) -> bool:
        """Return ``True`` if ``path`` can be fetched; never raises."""

        try:
            response = await self._raw.head(f"/{path.lstrip('/')}")
        except httpx.HTTPError as exc:
            LOGGER.debug("Existence probe for %s failed: %s", path, exc)
            return False
        return response.status_code == 200

    async def rate_limit(self) -> Dict[str, Any]:
        response = await self._get(self._api, "/rate_limit", "rate_limit")
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteError("Invalid rate limit response", response.status_code) from exc
