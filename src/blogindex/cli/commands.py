"""CLI command implementations"""

import logging
from typing import Annotated, Optional

import typer

from blogindex.config import Settings, load_config
from blogindex.core.listing import format_listing
from blogindex.core.pipeline import run_build, run_index


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling; applies the configured log level unless -v raised it."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logger = logging.getLogger("blogindex")
    if logger.level != logging.DEBUG:
        logger.setLevel(settings.log_level)
    return settings


def build_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Posts file or directory (default: posts_dir)")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Root directory for generated files")] = None,
    package: Annotated[Optional[str], typer.Option("--package", help="Dotted package of the generated module")] = None,
    module: Annotated[Optional[str], typer.Option("--module-name", help="Generated module name")] = None,
    prefix: Annotated[Optional[str], typer.Option("--route-prefix", help="Route prefix for posts")] = None,
    author: Annotated[Optional[str], typer.Option("--default-author", help="Author when front matter has none")] = None,
    ):
    """Build the post index and write the generated module + sidecar JSON."""
    settings = _settings(overrides={
        "output_dir": out, "package": package, "module_name": module,
        "route_prefix": prefix, "default_author": author,
    })
    try:
        result = run_build(path or settings.posts_dir, settings)
    except FileNotFoundError as e:
        _fail(str(e))
    except OSError as e:
        _fail("Build failed", e)

    for status, out_file in result.written:
        typer.echo(f"  {status}: {out_file}")
    typer.echo(f"Indexed {len(result.entries)} post(s), skipped {result.skipped}")


def list_cmd(
    path: Annotated[Optional[str], typer.Argument(help="Posts file or directory (default: posts_dir)")] = None,
    prefix: Annotated[Optional[str], typer.Option("--route-prefix", help="Route prefix for posts")] = None,
    author: Annotated[Optional[str], typer.Option("--default-author", help="Author when front matter has none")] = None,
    ):
    """Print the post index, newest first, without writing anything."""
    settings = _settings(overrides={"route_prefix": prefix, "default_author": author})
    try:
        entries, _ = run_index(path or settings.posts_dir, settings)
    except FileNotFoundError as e:
        _fail(str(e))
    except OSError as e:
        _fail("Could not read posts", e)
    for line in format_listing(entries):
        typer.echo(line)
