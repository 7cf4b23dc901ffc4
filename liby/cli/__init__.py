"""
liby CLI entry point.

Commands are defined in :mod:`liby.cli.commands` and registered on the
``liby`` group here.
"""

from pathlib import Path
from typing import Optional, Sequence

import click

from liby import __version__
from liby.config import load_settings
from liby.lang import LANGUAGE_VERSION
from liby.observability import configure_logging

from .commands import check, show, tree


@click.group(name="liby")
@click.version_option(__version__, prog_name="liby", message=f"%(prog)s %(version)s (language {LANGUAGE_VERSION})")
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path), help="Settings file (default: ./liby.toml)")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help="Logging level (default from settings)",
)
@click.pass_context
def cli(ctx, config_path, log_level):
    """Inspect Y configuration files."""
    settings = load_settings(Path.cwd(), config_path)
    configure_logging(log_level or settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


cli.add_command(show)
cli.add_command(check)
cli.add_command(tree)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Console script entry point."""
    cli.main(args=list(argv) if argv is not None else None, prog_name="liby")


__all__ = ["cli", "main"]
