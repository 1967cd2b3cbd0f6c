"""
GitHub Gists MCP server.

Exposes list, get, create, update, delete, star, unstar and fork operations
on GitHub gists as MCP tools.
"""

__version__ = "1.0.0"
