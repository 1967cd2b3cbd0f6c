"""Shared fixtures: an in-process fake of the GitHub Gist API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from gists_mcp.client.gist_client import GistClient, close_client, create_client

TOKEN = "test-token"
VIEWER = "octocat"


@dataclass
class RecordedRequest:
  method: str
  path: str
  query: dict[str, str]
  body: Any
  authorization: str | None


class FakeGitHub:
  """Minimal stateful stand-in for api.github.com gist routes."""

  def __init__(self) -> None:
    self.url = ""
    self.requests: list[RecordedRequest] = []
    self.gists: dict[str, dict[str, Any]] = {}
    self.starred: set[str] = set()
    self.failure: tuple[int, Any] | None = None
    self._forks = 0

  # -- fixtures helpers ---------------------------------------------------

  def add_gist(
    self,
    gist_id: str,
    files: dict[str, dict[str, Any]],
    description: str | None = "",
    owner: str | None = VIEWER,
    public: bool = True,
    forks: int = 0,
    comments: int = 0,
  ) -> dict[str, Any]:
    gist = {
      "id": gist_id,
      "description": description,
      "public": public,
      "owner": {"login": owner} if owner else None,
      "files": {name: {"filename": name, **f} for name, f in files.items()},
      "created_at": "2024-01-01T00:00:00Z",
      "updated_at": "2024-01-02T00:00:00Z",
      "html_url": f"https://gist.github.com/{gist_id}",
      "forks": [{"id": f"{gist_id}-f{i}"} for i in range(forks)],
      "comments": comments,
    }
    self.gists[gist_id] = gist
    return gist

  def fail_with(self, status: int, body: Any = None) -> None:
    """Answer every following request with this status."""
    self.failure = (status, body)

  # -- app ------------------------------------------------------------------

  def app(self) -> web.Application:
    @web.middleware
    async def record(request: web.Request, handler: Any) -> web.StreamResponse:
      body = None
      if request.can_read_body:
        text = await request.text()
        body = await request.json() if text else None
      self.requests.append(
        RecordedRequest(
          method=request.method,
          path=request.path,
          query=dict(request.query),
          body=body,
          authorization=request.headers.get("Authorization"),
        )
      )
      if request.headers.get("Authorization") != f"token {TOKEN}":
        return web.json_response({"message": "Bad credentials"}, status=401)
      if self.failure is not None:
        status, payload = self.failure
        if payload is None:
          return web.Response(status=status)
        if isinstance(payload, str):
          return web.Response(status=status, text=payload, content_type="text/html")
        return web.json_response(payload, status=status)
      return await handler(request)

    app = web.Application(middlewares=[record])
    app.router.add_get("/gists", self._list_own)
    app.router.add_post("/gists", self._create)
    app.router.add_get("/gists/public", self._list_public)
    app.router.add_get("/gists/starred", self._list_starred)
    app.router.add_get("/users/{username}/gists", self._list_user)
    app.router.add_get("/gists/{gist_id}", self._get)
    app.router.add_patch("/gists/{gist_id}", self._update)
    app.router.add_delete("/gists/{gist_id}", self._delete)
    app.router.add_put("/gists/{gist_id}/star", self._star)
    app.router.add_delete("/gists/{gist_id}/star", self._unstar)
    app.router.add_post("/gists/{gist_id}/forks", self._fork)
    return app

  def _lookup(self, request: web.Request) -> dict[str, Any]:
    gist = self.gists.get(request.match_info["gist_id"])
    if gist is None:
      raise web.HTTPNotFound(
        text='{"message": "Not Found"}', content_type="application/json"
      )
    return gist

  @staticmethod
  def _owner(gist: dict[str, Any]) -> str | None:
    return (gist.get("owner") or {}).get("login")

  async def _list_own(self, request: web.Request) -> web.Response:
    return web.json_response([g for g in self.gists.values() if self._owner(g) == VIEWER])

  async def _list_user(self, request: web.Request) -> web.Response:
    username = request.match_info["username"]
    return web.json_response(
      [g for g in self.gists.values() if self._owner(g) == username and g["public"]]
    )

  async def _list_public(self, request: web.Request) -> web.Response:
    return web.json_response([g for g in self.gists.values() if g["public"]])

  async def _list_starred(self, request: web.Request) -> web.Response:
    return web.json_response([self.gists[i] for i in sorted(self.starred) if i in self.gists])

  async def _get(self, request: web.Request) -> web.Response:
    return web.json_response(self._lookup(request))

  async def _create(self, request: web.Request) -> web.Response:
    body = await request.json()
    gist_id = f"new{len(self.gists) + 1}"
    files = {
      name: {"content": f["content"], "size": len(f["content"]), "language": None}
      for name, f in body["files"].items()
    }
    gist = self.add_gist(
      gist_id, files, description=body.get("description"), public=body.get("public", False)
    )
    return web.json_response(gist, status=201)

  async def _update(self, request: web.Request) -> web.Response:
    gist = self._lookup(request)
    body = await request.json()
    if "description" in body:
      gist["description"] = body["description"]
    for name, f in (body.get("files") or {}).items():
      if f is None:
        gist["files"].pop(name, None)
      else:
        gist["files"][name] = {"filename": name, "content": f["content"]}
    return web.json_response(gist)

  async def _delete(self, request: web.Request) -> web.Response:
    self._lookup(request)
    del self.gists[request.match_info["gist_id"]]
    return web.Response(status=204)

  async def _star(self, request: web.Request) -> web.Response:
    self._lookup(request)
    self.starred.add(request.match_info["gist_id"])
    return web.Response(status=204)

  async def _unstar(self, request: web.Request) -> web.Response:
    self._lookup(request)
    self.starred.discard(request.match_info["gist_id"])
    return web.Response(status=204)

  async def _fork(self, request: web.Request) -> web.Response:
    source = self._lookup(request)
    self._forks += 1
    fork_id = f"fork{self._forks}"
    fork = self.add_gist(
      fork_id,
      {name: dict(f) for name, f in source["files"].items()},
      description=source["description"],
      owner=VIEWER,
    )
    return web.json_response(fork, status=201)


@pytest_asyncio.fixture
async def github():
  fake = FakeGitHub()
  server = TestServer(fake.app())
  await server.start_server()
  fake.url = f"http://{server.host}:{server.port}"
  yield fake
  await server.close()


@pytest_asyncio.fixture
async def client(github: FakeGitHub):
  """The module-level GistClient, connected to the fake API."""
  c: GistClient = create_client(TOKEN, base_url=github.url)
  await c.connect()
  yield c
  await close_client()
