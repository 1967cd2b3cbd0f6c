"""
MCP server wiring.

Handles tools/list and tools/call, and owns the GistClient lifecycle for
the stdio run loop.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import TextContent, Tool

from . import __version__
from .client.gist_client import close_client, create_client
from .config import Settings
from .handlers import dispatch_tool
from .helpers import GistToolError
from .tools import ALL_TOOLS

log = logging.getLogger("gists_mcp.server")

SERVER_NAME = "gists-mcp"


def create_mcp_server() -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server = Server(SERVER_NAME, version=__version__)

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return ALL_TOOLS

  @server.call_tool(validate_input=False)
  async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    args = arguments or {}
    try:
      result = await dispatch_tool(name, args)
    except GistToolError as e:
      raise McpError(e.to_error_data()) from e
    return [TextContent(type="text", text=result.content)]

  return server


async def run_server(settings: Settings) -> None:
  """Run the MCP server on stdio until the host closes the stream."""
  client = create_client(settings.token, base_url=settings.base_url)
  await client.connect()
  server = create_mcp_server()
  try:
    async with stdio_server() as (read_stream, write_stream):
      log.info("Gists MCP server running on stdio")
      await server.run(read_stream, write_stream, server.create_initialization_options())
  finally:
    await close_client()
    log.info("Gists MCP server stopped")
