"""
Input validation helpers for gist tool arguments.

Every helper raises ValidationError, so a handler's argument checks finish
before it issues its upstream request.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from .helpers import ErrorKind, GistToolError

MAX_PER_PAGE = 100


class ValidationError(GistToolError):
  def __init__(self, message: str):
    super().__init__(ErrorKind.INVALID_ARGUMENTS, message)


_GIST_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")
_USERNAME_RE = re.compile(r"^[a-zA-Z0-9](?:[a-zA-Z0-9._-]*[a-zA-Z0-9])?$")


def req_string(args: dict[str, Any], key: str) -> str:
  """Read a required string from args."""
  v = args.get(key)
  if not isinstance(v, str) or not v.strip():
    raise ValidationError(f"Missing required parameter: {key}")
  return v.strip()


def opt_string(args: dict[str, Any], key: str) -> str | None:
  """Read an optional string from args."""
  v = args.get(key)
  if isinstance(v, str) and v.strip():
    return v.strip()
  return None


def opt_text(args: dict[str, Any], key: str) -> str | None:
  """Read an optional free-text value verbatim. Empty strings are kept."""
  v = args.get(key)
  if v is None:
    return None
  if not isinstance(v, str):
    raise ValidationError(f"Invalid {key}: must be a string.")
  return v


def opt_boolean(args: dict[str, Any], key: str, fallback: bool = False) -> bool:
  """Read an optional boolean from args."""
  v = args.get(key)
  if v is None:
    return fallback
  if not isinstance(v, bool):
    raise ValidationError(f"Invalid {key}: must be true or false.")
  return v


def validate_gist_id(args: dict[str, Any]) -> str:
  gist_id = req_string(args, "gist_id")
  if not _GIST_ID_RE.match(gist_id):
    raise ValidationError(f"Invalid gist_id: '{gist_id}'")
  return gist_id


def validate_username(value: str) -> str:
  """Validate a GitHub username."""
  value = value.strip().lstrip("@")
  if not value or not _USERNAME_RE.match(value):
    raise ValidationError(f"Invalid GitHub username: '{value}'")
  return value


def validate_positive_int(value: Any, param_name: str) -> int:
  """Validate a positive integer parameter."""
  if isinstance(value, bool):
    raise ValidationError(f"Invalid {param_name}: must be a positive integer.")
  if isinstance(value, float) and not value.is_integer():
    raise ValidationError(f"Invalid {param_name}: must be a positive integer.")
  if isinstance(value, (int, float)):
    iv = int(value)
    if iv <= 0:
      raise ValidationError(f"Invalid {param_name}: must be a positive integer.")
    return iv
  if isinstance(value, str):
    try:
      iv = int(value)
    except ValueError:
      raise ValidationError(f"Invalid {param_name}: must be a positive integer.")
    if iv <= 0:
      raise ValidationError(f"Invalid {param_name}: must be a positive integer.")
    return iv
  raise ValidationError(f"Invalid {param_name}: must be a positive integer.")


def opt_positive_int(args: dict[str, Any], key: str, maximum: int | None = None) -> int | None:
  """Read an optional positive integer. Absent means None, not a default."""
  v = args.get(key)
  if v is None:
    return None
  iv = validate_positive_int(v, key)
  if maximum is not None and iv > maximum:
    raise ValidationError(f"Invalid {key}: must be at most {maximum}.")
  return iv


def validate_timestamp(value: Any, param_name: str) -> str:
  """Check an ISO 8601 timestamp and return it unchanged."""
  if not isinstance(value, str) or not value.strip():
    raise ValidationError(f"Invalid {param_name}: must be an ISO 8601 timestamp.")
  text = value.strip()
  try:
    datetime.fromisoformat(text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text)
  except ValueError:
    raise ValidationError(f"Invalid {param_name}: must be an ISO 8601 timestamp.")
  return text


def opt_timestamp(args: dict[str, Any], key: str) -> str | None:
  v = args.get(key)
  if v is None:
    return None
  return validate_timestamp(v, key)


def listing_params(args: dict[str, Any]) -> dict[str, Any]:
  """Validate the since/per_page/page arguments shared by the list tools."""
  return {
    "since": opt_timestamp(args, "since"),
    "per_page": opt_positive_int(args, "per_page", MAX_PER_PAGE),
    "page": opt_positive_int(args, "page"),
  }


def req_file_contents(args: dict[str, Any], key: str = "files") -> dict[str, str]:
  """Read a non-empty {filename: content} map."""
  v = args.get(key)
  if not isinstance(v, dict) or not v:
    raise ValidationError("At least one file is required")
  files: dict[str, str] = {}
  for name, content in v.items():
    if not isinstance(name, str) or not name.strip():
      raise ValidationError("File names must be non-empty strings.")
    if not isinstance(content, str):
      raise ValidationError(f"Invalid content for file '{name}': must be a string.")
    files[name] = content
  return files


def opt_file_updates(args: dict[str, Any], key: str = "files") -> dict[str, str | None] | None:
  """Read an optional {filename: content-or-null} map. A null value deletes the file."""
  v = args.get(key)
  if v is None:
    return None
  if not isinstance(v, dict):
    raise ValidationError(f"Invalid {key}: must be an object of filename to content.")
  files: dict[str, str | None] = {}
  for name, content in v.items():
    if not isinstance(name, str) or not name.strip():
      raise ValidationError("File names must be non-empty strings.")
    if content is not None and not isinstance(content, str):
      raise ValidationError(f"Invalid content for file '{name}': must be a string or null.")
    files[name] = content
  return files
