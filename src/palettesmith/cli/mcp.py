"""
MCP (Model Context Protocol) CLI commands.

Commands for running and registering the palettesmith MCP server.
"""

import asyncio
import logging
import sys
from pathlib import Path

import typer

mcp_app = typer.Typer(
    help="MCP (Model Context Protocol) server commands.",
    no_args_is_help=True,
)


@mcp_app.command("run")
def mcp_run(
    config: Path = typer.Option(  # noqa: B008
        None,
        "--config",
        help="Path to palettesmith.toml (default: ./palettesmith.toml if present)",
    ),
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Override the configured log level (DEBUG, INFO, WARNING, ...)",
    ),
) -> None:
    """
    Run the palettesmith MCP server.

    Serves the palette tools over stdio. Logs go to stderr so stdout stays
    reserved for JSON-RPC.
    """
    from palettesmith.core.config import load_config
    from palettesmith.core.errors import ConfigError
    from palettesmith.mcp.server import run_server

    try:
        settings = load_config(config.resolve() if config else None)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=(log_level or settings.server.log_level).upper(),
        stream=sys.stderr,
        format="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
    )

    try:
        asyncio.run(run_server(settings))
    except KeyboardInterrupt:
        typer.echo("\nMCP server stopped.", err=True)
    except Exception as e:
        typer.echo(f"Error running MCP server: {e}", err=True)
        raise typer.Exit(code=1)


@mcp_app.command("setup")
def mcp_setup(
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite existing MCP server config",
    ),
    config: Path = typer.Option(  # noqa: B008
        None,
        "--config",
        help="palettesmith.toml the registered server should load",
    ),
) -> None:
    """
    Register the palettesmith MCP server with Claude Code.
    """
    from palettesmith.mcp.setup import get_claude_config_path, register_mcp_server

    if config is not None and not config.is_file():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(code=1)

    config_path = get_claude_config_path()
    typer.echo(f"Registering MCP server at: {config_path}")

    if register_mcp_server(force=force, config_path=config_path, palette_config=config):
        typer.echo("palettesmith MCP server registered")
        typer.echo("")
        typer.echo("Next steps:")
        typer.echo("  1. Restart Claude Code")
        typer.echo('  2. Ask Claude: "Generate a modern palette for #3b82f6"')
    else:
        typer.echo("Failed to register MCP server", err=True)
        raise typer.Exit(code=1)


@mcp_app.command("check")
def mcp_check() -> None:
    """
    Check palettesmith MCP server registration and list its tools.
    """
    from palettesmith.mcp.setup import RegistrationState, check_mcp_server

    status = check_mcp_server()

    typer.echo("palettesmith MCP Server Status")
    typer.echo("=" * 50)
    typer.echo(f"Status:        {status.state.value}")
    typer.echo(f"Registered:    {'Yes' if status.registered else 'No'}")
    typer.echo(f"Config:        {status.config_path}")

    if status.server_command:
        typer.echo(f"Command:       {status.server_command}")
    if status.error:
        typer.echo(f"Error:         {status.error}")

    typer.echo("")
    typer.echo(f"Available Tools ({len(status.tools)}):")
    for tool in sorted(status.tools):
        typer.echo(f"  • {tool}")

    if status.state is RegistrationState.STALE:
        typer.echo("")
        typer.echo("The entry points at another interpreter; run: palettesmith mcp setup --force")
    elif not status.registered:
        typer.echo("")
        typer.echo("To register the MCP server, run: palettesmith mcp setup")
        raise typer.Exit(code=1)
