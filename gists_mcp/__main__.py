"""
Entry point for the gists MCP server.

Run with: python -m gists_mcp          (MCP over stdio)
"""

from __future__ import annotations

import asyncio
import logging
import sys

log = logging.getLogger("gists_mcp")


def main() -> None:
  logging.basicConfig(
    level=logging.INFO,
    format="[%(name)s] %(levelname)s: %(message)s",
    stream=sys.stderr,
  )

  from .config import ConfigError, load_settings
  from .server import run_server

  try:
    settings = load_settings()
  except ConfigError as e:
    log.error("Error: %s", e)
    sys.exit(1)

  asyncio.run(run_server(settings))


if __name__ == "__main__":
  main()
