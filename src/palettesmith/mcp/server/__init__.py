"""
palettesmith MCP Server implementation.

Implements the Model Context Protocol using the official MCP SDK, exposing
palette generation, project color extension, accessibility checks, CSS
import, previews, and description-based color inference as tools.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from palettesmith.core.config import PalettesmithConfig, load_config

from .handlers.accessibility import validate_accessibility_handler
from .handlers.palette import (
    extend_palette_handler,
    generate_color_scale_handler,
    generate_dynamic_colors_handler,
    generate_palette_handler,
    import_existing_colors_handler,
    preview_palette_handler,
    suggest_secondary_color_handler,
)
from .state import get_config, set_config
from .tools import get_all_tools

logger = logging.getLogger("palettesmith.mcp")

# Create the MCP server instance
server = Server("palettesmith")

TOOL_HANDLERS: dict[str, Callable[[dict[str, Any]], str]] = {
    "generate_palette": generate_palette_handler,
    "extend_palette_for_project": extend_palette_handler,
    "validate_accessibility": validate_accessibility_handler,
    "import_existing_colors": import_existing_colors_handler,
    "preview_palette": preview_palette_handler,
    "generate_dynamic_colors": generate_dynamic_colors_handler,
    "suggest_secondary_color": suggest_secondary_color_handler,
    "generate_color_scale": generate_color_scale_handler,
}


# ============================================================================
# Tool Handler
# ============================================================================


@server.list_tools()  # type: ignore[no-untyped-call]
async def list_tools_handler() -> list[Tool]:
    """List available palettesmith tools."""
    return get_all_tools()


def dispatch_tool(name: str, arguments: dict[str, Any] | None) -> str:
    """Run the handler for ``name`` and return its JSON text."""
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        logger.warning("Unknown tool requested: %s", name)
        return json.dumps(
            {"error": f"Unknown tool: {name}", "available_tools": list(TOOL_HANDLERS)}
        )

    logger.debug("Calling tool %s", name)
    return handler(arguments or {})


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Execute a palettesmith tool."""
    return [TextContent(type="text", text=dispatch_tool(name, arguments))]


# ============================================================================
# Server Entry Point
# ============================================================================


async def run_server(
    config: PalettesmithConfig | None = None, config_path: Path | None = None
) -> None:
    """Run the palettesmith MCP server over stdio."""
    set_config(config or load_config(config_path))
    active = get_config()
    server.name = active.server.name

    logger.info(
        "Starting %s MCP server (default style=%s, format=%s)",
        active.server.name,
        active.palette.default_style,
        active.palette.default_format,
    )
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("stdio transport established, running server...")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    except Exception as e:
        logger.exception(f"Server error: {e}")
        raise


__all__ = [
    "server",
    "run_server",
    "call_tool",
    "dispatch_tool",
    "list_tools_handler",
    "TOOL_HANDLERS",
]
