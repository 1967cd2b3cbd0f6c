"""
Async HTTP client for the GitHub Gist REST API.

Uses aiohttp with token auth. Each method issues exactly one request;
nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from .. import __version__
from ..config import API_BASE_URL

log = logging.getLogger("gists_mcp.client")

METHODS = frozenset({"GET", "POST", "PATCH", "PUT", "DELETE"})


class GistApiError(Exception):
  """Non-2xx response from the GitHub API."""

  def __init__(self, status: int, message: str):
    self.status = status
    self.message = message
    super().__init__(f"GitHub API error {status}: {message}")


class GistClient:
  """Async HTTP client bound to one API base URL and one token."""

  def __init__(self, token: str, base_url: str = API_BASE_URL) -> None:
    self._token = token
    self._base_url = base_url
    self._session: aiohttp.ClientSession | None = None

  @property
  def is_connected(self) -> bool:
    return self._session is not None and not self._session.closed

  async def connect(self) -> None:
    """Create the aiohttp session."""
    if self._session and not self._session.closed:
      return
    self._session = aiohttp.ClientSession(
      base_url=self._base_url,
      headers={
        "Authorization": f"token {self._token}",
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": f"gists-mcp/{__version__}",
      },
    )

  async def close(self) -> None:
    """Close the aiohttp session."""
    if self._session and not self._session.closed:
      await self._session.close()
    self._session = None

  async def request(
    self,
    method: str,
    path: str,
    *,
    params: dict[str, Any] | None = None,
    json: Any = None,
  ) -> Any:
    """Issue one API request and return the decoded JSON body (None when empty)."""
    method = method.upper()
    if method not in METHODS:
      raise ValueError(f"Unsupported HTTP method: {method}")
    if not self._session:
      raise RuntimeError("GistClient not connected. Call connect() first.")

    query = {k: str(v) for k, v in (params or {}).items() if v is not None}
    kwargs: dict[str, Any] = {"params": query}
    if json is not None:
      kwargs["json"] = json

    async with self._session.request(method, path, **kwargs) as resp:
      log.debug("%s %s -> %d", method, path, resp.status)
      if resp.status >= 400:
        raise GistApiError(resp.status, await _error_message(resp))
      if resp.status == 204:
        return None
      text = await resp.text()
      if not text.strip():
        return None
      try:
        return await resp.json(content_type=None)
      except ValueError:
        raise GistApiError(resp.status, "Invalid JSON response")

  # ------------------------------------------------------------------
  # Gist endpoints
  # ------------------------------------------------------------------

  async def list_gists(
    self,
    username: str | None = None,
    since: str | None = None,
    per_page: int | None = None,
    page: int | None = None,
  ) -> list[dict[str, Any]]:
    """List the authenticated user's gists, or a given user's public gists."""
    path = f"/users/{username}/gists" if username else "/gists"
    return await self.request(
      "GET", path, params={"since": since, "per_page": per_page, "page": page}
    )

  async def list_public_gists(
    self, since: str | None = None, per_page: int | None = None, page: int | None = None
  ) -> list[dict[str, Any]]:
    return await self.request(
      "GET", "/gists/public", params={"since": since, "per_page": per_page, "page": page}
    )

  async def list_starred_gists(
    self, since: str | None = None, per_page: int | None = None, page: int | None = None
  ) -> list[dict[str, Any]]:
    return await self.request(
      "GET", "/gists/starred", params={"since": since, "per_page": per_page, "page": page}
    )

  async def get_gist(self, gist_id: str) -> dict[str, Any]:
    return await self.request("GET", f"/gists/{gist_id}")

  async def create_gist(
    self, files: dict[str, str], description: str | None = None, public: bool = False
  ) -> dict[str, Any]:
    """Create a gist. `files` maps filename to content."""
    body: dict[str, Any] = {
      "public": public,
      "files": {name: {"content": content} for name, content in files.items()},
    }
    if description is not None:
      body["description"] = description
    return await self.request("POST", "/gists", json=body)

  async def update_gist(
    self,
    gist_id: str,
    description: str | None = None,
    files: dict[str, str | None] | None = None,
  ) -> dict[str, Any]:
    """Partially update a gist. A file mapped to None is deleted."""
    body: dict[str, Any] = {}
    if description is not None:
      body["description"] = description
    if files is not None:
      body["files"] = {
        name: None if content is None else {"content": content}
        for name, content in files.items()
      }
    return await self.request("PATCH", f"/gists/{gist_id}", json=body)

  async def delete_gist(self, gist_id: str) -> None:
    await self.request("DELETE", f"/gists/{gist_id}")

  async def star_gist(self, gist_id: str) -> None:
    await self.request("PUT", f"/gists/{gist_id}/star")

  async def unstar_gist(self, gist_id: str) -> None:
    await self.request("DELETE", f"/gists/{gist_id}/star")

  async def fork_gist(self, gist_id: str) -> dict[str, Any]:
    return await self.request("POST", f"/gists/{gist_id}/forks")


async def _error_message(resp: aiohttp.ClientResponse) -> str:
  try:
    data = await resp.json(content_type=None)
  except (ValueError, aiohttp.ContentTypeError):
    data = None
  if isinstance(data, dict) and data.get("message"):
    return str(data["message"])
  return "Unknown GitHub API error"


# ---------------------------------------------------------------------------
# Singleton
# ---------------------------------------------------------------------------

_client_instance: GistClient | None = None


def create_client(token: str, base_url: str = API_BASE_URL) -> GistClient:
  """Create and return the singleton GistClient."""
  global _client_instance
  _client_instance = GistClient(token, base_url=base_url)
  return _client_instance


def get_client() -> GistClient:
  """Return the singleton GistClient. Raises if not initialized."""
  if _client_instance is None:
    raise RuntimeError("GistClient not initialized. Call create_client() first.")
  return _client_instance


async def close_client() -> None:
  """Close and forget the singleton GistClient."""
  global _client_instance
  if _client_instance is not None:
    await _client_instance.close()
    _client_instance = None
