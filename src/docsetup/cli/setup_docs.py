#!/usr/bin/env python3
"""Command-line entry point, typically run from an npm postinstall script."""

import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console

from docsetup import config
from docsetup.scaffold.manager import setup_docs
from docsetup.scaffold.paths import Layout

app = typer.Typer(help="Set up ember-cli-addon-docs in an addon's test app", add_completion=False)


def configure_logging(verbose: bool) -> None:
    """Route loguru to stderr; the console already shows progress, so only errors by default."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "ERROR")


@app.command()
def run(
    test_app: Optional[Path] = typer.Option(
        None,
        "--test-app",
        help=f"Test-app directory (default: ${config.ANCHOR_ENV_VAR} or the current directory)",
    ),
    layout: Optional[Layout] = typer.Option(
        None,
        "--layout",
        case_sensitive=False,
        help=f"Addon layout (default: ${config.LAYOUT_ENV_VAR} or 'split')",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be written without touching any file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Write the docs router, templates and index page."""
    configure_logging(verbose)
    console = Console()

    base_dir = test_app if test_app is not None else config.get_anchor_dir()
    if layout is None:
        try:
            layout = config.get_default_layout()
        except ValueError as e:
            console.print(f"[red]❌ {e}[/red]")
            raise typer.Exit(code=2)

    setup_docs(base_dir, layout=layout, dry_run=dry_run, console=console)


def main():
    """Main entry point for the docs setup CLI."""
    app()


if __name__ == "__main__":
    main()
