"""Gist domain tool handlers."""

from __future__ import annotations

from typing import Any

from ..client.gist_client import get_client
from ..models import (
  CreatedGist,
  ForkedGist,
  GistAction,
  GistDetail,
  GistSummary,
  OwnedGistSummary,
  UpdatedGist,
  owner_login,
  to_detail,
  to_owned_summary,
  to_summary,
)
from ..validation import (
  ValidationError,
  listing_params,
  opt_boolean,
  opt_file_updates,
  opt_text,
  req_file_contents,
  validate_gist_id,
  validate_username,
)


async def list_gists(args: dict[str, Any]) -> list[GistSummary]:
  username = opt_text(args, "username")
  if username is not None and username.strip():
    username = validate_username(username)
  else:
    username = None
  params = listing_params(args)

  gists = await get_client().list_gists(username, **params)
  return [to_summary(g) for g in gists or []]


async def list_public_gists(args: dict[str, Any]) -> list[OwnedGistSummary]:
  params = listing_params(args)
  gists = await get_client().list_public_gists(**params)
  return [to_owned_summary(g) for g in gists or []]


async def list_starred_gists(args: dict[str, Any]) -> list[OwnedGistSummary]:
  params = listing_params(args)
  gists = await get_client().list_starred_gists(**params)
  return [to_owned_summary(g) for g in gists or []]


async def get_gist(args: dict[str, Any]) -> GistDetail:
  gist_id = validate_gist_id(args)
  gist = await get_client().get_gist(gist_id)
  return to_detail(gist)


async def create_gist(args: dict[str, Any]) -> CreatedGist:
  files = req_file_contents(args)
  description = opt_text(args, "description")
  public = opt_boolean(args, "public", False)

  gist = await get_client().create_gist(files, description=description, public=public)
  return CreatedGist(
    id=gist["id"],
    url=gist.get("html_url"),
    description=gist.get("description"),
    message="Gist created successfully",
  )


async def update_gist(args: dict[str, Any]) -> UpdatedGist:
  gist_id = validate_gist_id(args)
  description = opt_text(args, "description")
  files = opt_file_updates(args)
  if description is None and files is None:
    raise ValidationError("Provide description or files to update.")

  gist = await get_client().update_gist(gist_id, description=description, files=files)
  return UpdatedGist(
    id=gist["id"],
    url=gist.get("html_url"),
    message="Gist updated successfully",
  )


async def delete_gist(args: dict[str, Any]) -> GistAction:
  gist_id = validate_gist_id(args)
  await get_client().delete_gist(gist_id)
  return GistAction(message="Gist deleted successfully", gist_id=gist_id)


async def star_gist(args: dict[str, Any]) -> GistAction:
  gist_id = validate_gist_id(args)
  await get_client().star_gist(gist_id)
  return GistAction(message="Gist starred successfully", gist_id=gist_id)


async def unstar_gist(args: dict[str, Any]) -> GistAction:
  gist_id = validate_gist_id(args)
  await get_client().unstar_gist(gist_id)
  return GistAction(message="Gist unstarred successfully", gist_id=gist_id)


async def fork_gist(args: dict[str, Any]) -> ForkedGist:
  gist_id = validate_gist_id(args)
  fork = await get_client().fork_gist(gist_id)
  return ForkedGist(
    id=fork["id"],
    url=fork.get("html_url"),
    owner=owner_login(fork),
    message="Gist forked successfully",
  )
