"""coltable CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from coltable.config import DEFAULT_LAYOUT_FILE, load_config
from coltable.errors import ColTableError


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from coltable import __version__

        print(f"coltable {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="coltable",
    help="Render column-aligned text tables",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def _app_callback(
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option("--version", "-V", help="Show version and exit", callback=version_callback),
    ] = False,
) -> None:
    """Render column-aligned text tables."""
    pass


console = Console()
error_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


@app.command()
def render(
    path: Annotated[
        Path,
        typer.Argument(help="Layout file to render"),
    ] = Path(DEFAULT_LAYOUT_FILE),
    no_headers: Annotated[
        bool,
        typer.Option("--no-headers", help="Omit the header and separator lines"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """Render the table described by a layout file."""
    configure_logging(verbose)

    try:
        layout = load_config(path)
        table = layout.build_table()
    except ColTableError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e

    show_headers = layout.show_headers and not no_headers
    for line in table.render(show_headers):
        console.out(line, highlight=False)


@app.command()
def init(
    path: Annotated[
        Path,
        typer.Argument(help="Layout file to create"),
    ] = Path(DEFAULT_LAYOUT_FILE),
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Write a sample layout file."""
    from coltable.cli.commands.init import init_layout

    try:
        init_layout(path, force=force)
    except ColTableError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e

    console.print(f"[green]Created {escape(str(path))}[/green]")
    console.print(f"Run [bold]coltable render {path}[/bold] to see it.")


def main() -> None:
    app()
