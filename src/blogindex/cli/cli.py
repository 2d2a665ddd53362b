"""CLI entrypoint: Typer app definition, logging setup, and command registration"""

import logging
from typing import Annotated

import typer

from blogindex.cli.commands import build_cmd, list_cmd


class _EchoHandler(logging.Handler):
    """Route log records through typer.echo so they land on the current stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            typer.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(level: str) -> None:
    """Attach a single stderr handler to the package logger at the given level."""
    logger = logging.getLogger("blogindex")
    logger.setLevel(level)
    if not any(isinstance(h, _EchoHandler) for h in logger.handlers):
        handler = _EchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)


app = typer.Typer(name="blogindex", no_args_is_help=True, help="Generate the blog post index from markdown front matter")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    ):
    """Blog index builder."""
    configure_logging("DEBUG" if verbose else "INFO")


app.command(name="build")(build_cmd)
app.command(name="list")(list_cmd)
