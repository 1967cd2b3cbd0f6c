"""Handler dispatch table: maps tool names to handler functions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from ..helpers import (
  UPSTREAM_FAILURES,
  GistToolError,
  ToolResult,
  UnknownToolError,
  log_tool_error,
  map_upstream_error,
)
from ..tools import ALL_TOOLS
from . import gist

Handler = Callable[[dict[str, Any]], Awaitable[Any]]

# One handler per registered tool, looked up by the tool's name.
DISPATCH: dict[str, Handler] = {tool.name: getattr(gist, tool.name) for tool in ALL_TOOLS}


async def dispatch_tool(name: str, arguments: dict[str, Any]) -> ToolResult:
  """Look up and execute a tool handler by name.

  Raises GistToolError for unknown tools, invalid arguments and upstream
  failures. Upstream and network errors are translated by map_upstream_error.
  """
  handler = DISPATCH.get(name)
  if handler is None:
    error: GistToolError = UnknownToolError(name)
    log_tool_error(name, error)
    raise error

  try:
    payload = await handler(arguments)
  except GistToolError as e:
    log_tool_error(name, e)
    raise
  except UPSTREAM_FAILURES as e:
    error = map_upstream_error(e)
    log_tool_error(name, error)
    raise error from e
  return ToolResult(payload=payload)
