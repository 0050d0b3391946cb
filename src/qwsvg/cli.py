"""qwsvg CLI

Render YAML scene files to SVG/HTML markup.

Usage:
    qwsvg render scene.yaml             # Print markup to stdout
    qwsvg render scene.yaml -o out.svg  # Write markup to file
    qwsvg --version                     # Show version
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from qwsvg._version import __version__
from qwsvg.config import load_scene
from qwsvg.exceptions import QwsvgError
from qwsvg.export import save
from qwsvg.scene import build_document

console = Console(stderr=True)

app = typer.Typer(no_args_is_help=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the qwsvg package.

    Log levels:
    - Normal: only warnings/errors shown
    - Verbose (-v): INFO level
    - Debug (QWSVG_DEBUG=1): DEBUG level, shows every tag opened
    """
    debug = bool(os.environ.get("QWSVG_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("qwsvg")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"qwsvg {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Chainable SVG/HTML markup builder."""


@app.command()
def render(
    scene: Path = typer.Argument(..., help="Path to a scene YAML file."),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write markup to file instead of stdout."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
) -> None:
    """Render a scene file to markup."""
    setup_logging(verbose)

    try:
        doc = build_document(load_scene(scene))
        if output is None:
            typer.echo(doc.markup())
        else:
            written = save(doc, output)
            typer.echo(f"Wrote {written}", err=True)
    except QwsvgError as e:
        exit_with_error(str(e))


if __name__ == "__main__":
    app()
