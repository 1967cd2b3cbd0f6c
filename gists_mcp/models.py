"""
Output shapes returned by the gist tools.

These are projections of GitHub API responses. Field order here is the
order callers see in the JSON payload.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

NO_DESCRIPTION = "No description"
ANONYMOUS = "anonymous"


class GistSummary(BaseModel):
  id: str
  description: str
  public: bool | None = None
  files: str
  created_at: str | None = None
  updated_at: str | None = None
  url: str | None = None


class OwnedGistSummary(BaseModel):
  id: str
  owner: str
  description: str
  files: str
  created_at: str | None = None
  updated_at: str | None = None
  url: str | None = None


class GistFile(BaseModel):
  filename: str
  language: str | None = None
  size: int | None = None
  content: str | None = None


class GistDetail(BaseModel):
  id: str
  description: str
  public: bool | None = None
  owner: str
  files: list[GistFile]
  created_at: str | None = None
  updated_at: str | None = None
  url: str | None = None
  forks: int = 0
  comments: int = 0


class CreatedGist(BaseModel):
  id: str
  url: str | None = None
  description: str | None = None
  message: str


class UpdatedGist(BaseModel):
  id: str
  url: str | None = None
  message: str


class ForkedGist(BaseModel):
  id: str
  url: str | None = None
  owner: str | None = None
  message: str


class GistAction(BaseModel):
  message: str
  gist_id: str


# ---------------------------------------------------------------------------
# Projection helpers
# ---------------------------------------------------------------------------


def owner_login(gist: dict[str, Any]) -> str | None:
  owner = gist.get("owner")
  if isinstance(owner, dict):
    return owner.get("login") or None
  return None


def file_names(gist: dict[str, Any]) -> str:
  return ", ".join((gist.get("files") or {}).keys())


def to_summary(gist: dict[str, Any]) -> GistSummary:
  return GistSummary(
    id=gist["id"],
    description=gist.get("description") or NO_DESCRIPTION,
    public=gist.get("public"),
    files=file_names(gist),
    created_at=gist.get("created_at"),
    updated_at=gist.get("updated_at"),
    url=gist.get("html_url"),
  )


def to_owned_summary(gist: dict[str, Any]) -> OwnedGistSummary:
  return OwnedGistSummary(
    id=gist["id"],
    owner=owner_login(gist) or ANONYMOUS,
    description=gist.get("description") or NO_DESCRIPTION,
    files=file_names(gist),
    created_at=gist.get("created_at"),
    updated_at=gist.get("updated_at"),
    url=gist.get("html_url"),
  )


def to_detail(gist: dict[str, Any]) -> GistDetail:
  files = [
    GistFile(
      filename=name,
      language=f.get("language"),
      size=f.get("size"),
      content=f.get("content"),
    )
    for name, f in (gist.get("files") or {}).items()
  ]
  return GistDetail(
    id=gist["id"],
    description=gist.get("description") or NO_DESCRIPTION,
    public=gist.get("public"),
    owner=owner_login(gist) or ANONYMOUS,
    files=files,
    created_at=gist.get("created_at"),
    updated_at=gist.get("updated_at"),
    url=gist.get("html_url"),
    forks=len(gist.get("forks") or []),
    comments=gist.get("comments") or 0,
  )
