"""
palettesmith MCP Server

Model Context Protocol server exposing palette generation, accessibility
auditing, and color inference as MCP tools.
"""

from .server import run_server, server

__all__ = ["run_server", "server"]
