"""
palettesmith CLI Package.

- palette.py: palette generation and contrast checks
- mcp.py: MCP server commands
"""

import platform

import typer

from palettesmith._version import get_version
from palettesmith.cli.mcp import mcp_app
from palettesmith.cli.palette import palette_app

__version__ = get_version()


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"palettesmith {__version__}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


app = typer.Typer(
    help="""palettesmith - brand palettes with WCAG contrast checks

  • palette generate / contrast
    → Work with colors directly from the terminal

  • mcp run / setup / check
    → Serve the palette tools over the Model Context Protocol
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """palettesmith CLI main callback for global options."""
    pass


app.add_typer(palette_app, name="palette")
app.add_typer(mcp_app, name="mcp")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "__version__",
    "app",
    "main",
    "palette_app",
    "mcp_app",
    "version_callback",
]
