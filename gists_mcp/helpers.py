"""
Shared result type and error handling helpers for the gist tools.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import aiohttp
from mcp.types import (
  INTERNAL_ERROR,
  INVALID_PARAMS,
  INVALID_REQUEST,
  METHOD_NOT_FOUND,
  ErrorData,
)
from pydantic import BaseModel

from .client.gist_client import GistApiError

log = logging.getLogger("gists_mcp.helpers")


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass
class ToolResult:
  payload: Any

  @property
  def content(self) -> str:
    """Pretty-printed JSON text returned to the caller."""
    return json.dumps(_to_jsonable(self.payload), indent=2, ensure_ascii=False)


def _to_jsonable(value: Any) -> Any:
  if isinstance(value, BaseModel):
    return value.model_dump(mode="json")
  if isinstance(value, list):
    return [_to_jsonable(v) for v in value]
  return value


# ---------------------------------------------------------------------------
# Error taxonomy
# ---------------------------------------------------------------------------


class ErrorKind(str, Enum):
  INVALID_ARGUMENTS = "invalid_arguments"
  UNKNOWN_OPERATION = "unknown_operation"
  INVALID_CREDENTIAL = "invalid_credential"
  NOT_FOUND = "not_found"
  FORBIDDEN = "forbidden"
  UPSTREAM_ERROR = "upstream_error"
  NETWORK_ERROR = "network_error"


_JSONRPC_CODES: dict[ErrorKind, int] = {
  ErrorKind.INVALID_ARGUMENTS: INVALID_PARAMS,
  ErrorKind.UNKNOWN_OPERATION: METHOD_NOT_FOUND,
  ErrorKind.INVALID_CREDENTIAL: INVALID_REQUEST,
  ErrorKind.NOT_FOUND: INVALID_REQUEST,
  ErrorKind.FORBIDDEN: INVALID_REQUEST,
  ErrorKind.UPSTREAM_ERROR: INTERNAL_ERROR,
  ErrorKind.NETWORK_ERROR: INTERNAL_ERROR,
}


class GistToolError(Exception):
  """A caller-facing failure with a kind and a human-readable message."""

  def __init__(self, kind: ErrorKind, message: str):
    self.kind = kind
    self.message = message
    super().__init__(f"{kind.value}: {message}")

  @property
  def code(self) -> int:
    return _JSONRPC_CODES[self.kind]

  def to_error_data(self) -> ErrorData:
    return ErrorData(code=self.code, message=str(self), data={"kind": self.kind.value})


class UnknownToolError(GistToolError):
  def __init__(self, name: str):
    super().__init__(ErrorKind.UNKNOWN_OPERATION, f"Unknown tool: {name}")


# Failures the error mapper knows how to translate.
UPSTREAM_FAILURES = (GistApiError, aiohttp.ClientError, TimeoutError)


def map_upstream_error(error: Exception) -> GistToolError:
  """Translate an upstream or network failure into a GistToolError."""
  if isinstance(error, GistToolError):
    return error
  if isinstance(error, GistApiError):
    if error.status == 401:
      return GistToolError(ErrorKind.INVALID_CREDENTIAL, "Invalid GitHub token")
    if error.status == 404:
      return GistToolError(ErrorKind.NOT_FOUND, "Resource not found")
    if error.status == 403:
      return GistToolError(ErrorKind.FORBIDDEN, f"GitHub API error: {error.message}")
    return GistToolError(ErrorKind.UPSTREAM_ERROR, f"GitHub API error: {error.message}")
  return GistToolError(ErrorKind.NETWORK_ERROR, "Network error while connecting to GitHub")


def log_tool_error(function_name: str, error: GistToolError) -> None:
  """Log a failed invocation once, at a level matching who caused it."""
  caller_side = error.kind in (ErrorKind.INVALID_ARGUMENTS, ErrorKind.UNKNOWN_OPERATION)
  log.log(
    logging.WARNING if caller_side else logging.ERROR,
    "[GISTS] Error in %s - Kind: %s - %s",
    function_name,
    error.kind.value,
    error.message,
  )
