"""
Gist tools (10 tools).
"""

from __future__ import annotations

from typing import Any

from mcp.types import Tool

_SINCE = {
  "type": "string",
  "description": "Only show gists updated after this time (ISO 8601 format)",
}
_PER_PAGE = {
  "type": "number",
  "description": "Number of results per page (max 100)",
  "default": 30,
}
_PAGE = {
  "type": "number",
  "description": "Page number to retrieve",
  "default": 1,
}


def _gist_id_schema(action: str) -> dict[str, Any]:
  return {
    "type": "object",
    "properties": {
      "gist_id": {"type": "string", "description": f"The ID of the gist to {action}"},
    },
    "required": ["gist_id"],
  }


gist_tools: list[Tool] = [
  Tool(
    name="list_gists",
    description="List all gists for the authenticated user or a specific user",
    inputSchema={
      "type": "object",
      "properties": {
        "username": {
          "type": "string",
          "description": "Username to list gists for (optional, defaults to authenticated user)",
        },
        "since": _SINCE,
        "per_page": _PER_PAGE,
        "page": _PAGE,
      },
    },
  ),
  Tool(
    name="list_public_gists",
    description="List all public gists",
    inputSchema={
      "type": "object",
      "properties": {"since": _SINCE, "per_page": _PER_PAGE, "page": _PAGE},
    },
  ),
  Tool(
    name="list_starred_gists",
    description="List all starred gists for the authenticated user",
    inputSchema={
      "type": "object",
      "properties": {"since": _SINCE, "per_page": _PER_PAGE, "page": _PAGE},
    },
  ),
  Tool(
    name="get_gist",
    description="Get a single gist by ID, including its files and content",
    inputSchema=_gist_id_schema("retrieve"),
  ),
  Tool(
    name="create_gist",
    description="Create a new gist with one or more files",
    inputSchema={
      "type": "object",
      "properties": {
        "description": {"type": "string", "description": "Description of the gist"},
        "files": {
          "type": "object",
          "description": "Files to include in the gist (object with filename as key and content as value)",
          "additionalProperties": {"type": "string"},
        },
        "public": {
          "type": "boolean",
          "description": "Whether the gist should be public",
          "default": False,
        },
      },
      "required": ["files"],
    },
  ),
  Tool(
    name="update_gist",
    description="Update an existing gist's description or files",
    inputSchema={
      "type": "object",
      "properties": {
        "gist_id": {"type": "string", "description": "The ID of the gist to update"},
        "description": {"type": "string", "description": "New description for the gist"},
        "files": {
          "type": "object",
          "description": "Files to update (object with filename as key and content as value, or null to delete)",
          "additionalProperties": {"type": ["string", "null"]},
        },
      },
      "required": ["gist_id"],
    },
  ),
  Tool(
    name="delete_gist",
    description="Permanently delete a gist",
    inputSchema=_gist_id_schema("delete"),
  ),
  Tool(
    name="star_gist",
    description="Star a gist",
    inputSchema=_gist_id_schema("star"),
  ),
  Tool(
    name="unstar_gist",
    description="Unstar a gist",
    inputSchema=_gist_id_schema("unstar"),
  ),
  Tool(
    name="fork_gist",
    description="Fork a gist",
    inputSchema=_gist_id_schema("fork"),
  ),
]
