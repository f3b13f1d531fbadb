"""
Palette commands for the palettesmith CLI.

Generate a palette from a brand color or check a single color pair
without starting the MCP server.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from palettesmith.core.accessibility import validate_accessibility
from palettesmith.core.color_utils import optimal_text_color
from palettesmith.core.errors import PalettesmithError
from palettesmith.core.exporters import export_palette
from palettesmith.core.ir import SCALE_STEPS, BasePalette, ContrastLevel, OutputFormat, PaletteStyle
from palettesmith.core.palette import generate_base_palette

palette_app = typer.Typer(
    help="Generate palettes and check color contrast",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _swatch(color: str) -> Text:
    return Text(f" {color} ", style=f"{optimal_text_color(color)} on {color}")


def _scale_table(palette: BasePalette) -> Table:
    table = Table(title="Palette")
    table.add_column("Scale", style="bold")
    for step in SCALE_STEPS:
        table.add_column(str(step), justify="center")

    for name, scale in palette.scales().items():
        table.add_row(name, *(_swatch(scale[step]) for step in SCALE_STEPS))
    return table


@palette_app.command(name="generate")
def generate_command(
    color: Annotated[str, typer.Argument(help="Brand color, e.g. '#3b82f6'")],
    style: Annotated[PaletteStyle, typer.Option("--style", "-s", help="Palette style")] = (
        PaletteStyle.MODERN
    ),
    fmt: Annotated[OutputFormat, typer.Option("--format", "-f", help="Export format")] = (
        OutputFormat.CSS
    ),
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write the export to this file")
    ] = None,
) -> None:
    """Generate a palette from a brand color and print its export."""
    try:
        palette = generate_base_palette(color, style)
        exported = export_palette(palette, fmt)
    except PalettesmithError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1)

    if output:
        output.write_text(exported + "\n")
        console.print(_scale_table(palette))
        console.print(f"[green]Wrote {fmt.value} export to {output}[/green]")
        return

    console.print(_scale_table(palette))
    console.print(exported, markup=False, highlight=False, soft_wrap=True)


@palette_app.command(name="contrast")
def contrast_command(
    foreground: Annotated[str, typer.Argument(help="Text color")],
    background: Annotated[str, typer.Argument(help="Background color")],
    level: Annotated[ContrastLevel, typer.Option("--level", "-l", help="WCAG level")] = (
        ContrastLevel.AA
    ),
    large_text: Annotated[
        bool, typer.Option("--large-text", help="Use the large-text threshold")
    ] = False,
) -> None:
    """Check a foreground/background pair against WCAG contrast thresholds.

    Exits with code 1 when the pair does not meet the requested level.
    """
    try:
        check = validate_accessibility(foreground, background, level, large_text)
    except PalettesmithError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1)

    verdict = "[green]PASS[/green]" if check.passes else "[red]FAIL[/red]"
    console.print(
        f"Contrast ratio: [bold]{check.contrast_ratio}:1[/bold] "
        f"({check.level.value}{' large text' if check.is_large_text else ''}, "
        f"needs {check.threshold}:1) {verdict}"
    )
    aa = "yes" if check.wcag_aa else "no"
    aaa = "yes" if check.wcag_aaa else "no"
    console.print(f"AA: {aa}  AAA: {aaa}")

    if not check.passes:
        console.print(f"Suggested text color: {check.suggested_color}")
        raise typer.Exit(code=1)
