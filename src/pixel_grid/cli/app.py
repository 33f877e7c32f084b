"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pixel_grid.core.config import EditorConfig
from pixel_grid.core.constants import DEFAULT_EXPORT_NAME
from pixel_grid.core.errors import PixelGridError
from pixel_grid.edit.editor import PixelEditor
from pixel_grid.render.terminal import TerminalRenderer


def setup_logging(verbose: bool) -> None:
    """Route pixel_grid log records through rich."""
    logger = logging.getLogger("pixel_grid")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="pixel-grid",
        help="Import images into pixel grids, preview them and export PNGs.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def load_editor(image: Path, size: Optional[int]) -> PixelEditor:
        try:
            editor = PixelEditor(size, config=EditorConfig.from_env())
            editor.import_file(image)
        except (PixelGridError, ValueError) as exc:
            err_console.print(f"[red]Error:[/] {exc}")
            raise typer.Exit(1)
        return editor

    @app.callback()
    def root(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        setup_logging(verbose)

    @app.command()
    def convert(
        image: Annotated[Path, typer.Argument(help="Source image")],
        output: Annotated[Optional[Path], typer.Argument(help="Output PNG")] = None,
        size: Annotated[Optional[int], typer.Option("--size", "-n", help="Grid cells per side")] = None,
        scale: Annotated[Optional[int], typer.Option("--scale", "-s", help="Output pixels per cell")] = None,
    ) -> None:
        """Rasterize an image into a pixel grid and export it as PNG."""
        editor = load_editor(image, size)
        dest = output or Path(DEFAULT_EXPORT_NAME)
        try:
            editor.save_png(dest, scale)
        except (PixelGridError, OSError) as exc:
            err_console.print(f"[red]Error:[/] {exc}")
            raise typer.Exit(1)
        console.print(
            f"[green]Saved[/] {dest} "
            f"({editor.grid_size}x{editor.grid_size} grid, {len(editor.palette)} colors)"
        )

    @app.command()
    def palette(
        image: Annotated[Path, typer.Argument(help="Source image")],
        size: Annotated[Optional[int], typer.Option("--size", "-n", help="Grid cells per side")] = None,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """List the colors used after importing an image."""
        editor = load_editor(image, size)

        if json_output:
            print(json.dumps(editor.palette_hex, indent=2))
            return

        table = Table(title=f"{image.name} ({editor.grid_size}x{editor.grid_size})")
        table.add_column("#", justify="right")
        table.add_column("Swatch")
        table.add_column("Color")
        for index, color in enumerate(editor.palette, start=1):
            r, g, b = color.rgb
            table.add_row(str(index), f"[on rgb({r},{g},{b})]    [/]", color.hex)
        console.print(table)

    @app.command()
    def view(
        image: Annotated[Path, typer.Argument(help="Source image")],
        size: Annotated[Optional[int], typer.Option("--size", "-n", help="Grid cells per side")] = None,
    ) -> None:
        """Preview an imported image as a grid in the terminal."""
        editor = load_editor(image, size)
        print(TerminalRenderer().render(editor.buffer))

    return app
