"""
MCP server entry point for palettesmith.

Run with: python -m palettesmith.mcp [path/to/palettesmith.toml]
"""

import asyncio
import logging
import sys
from pathlib import Path

from palettesmith.core.config import load_config
from palettesmith.core.errors import ConfigError
from palettesmith.mcp.server import run_server

# Log to stderr to avoid interfering with JSON-RPC on stdout
logging.basicConfig(
    level=logging.INFO,
    stream=sys.stderr,
    format="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def main() -> None:
    """Run the palettesmith MCP server."""
    config_path = Path(sys.argv[1]).resolve() if len(sys.argv) > 1 else None

    try:
        config = load_config(config_path)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)

    try:
        await run_server(config)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
