"""
CLI commands for inspecting Y documents.

Commands:
    - show: Print the nodes at one or more paths
    - check: Parse files and report the first error in each
    - tree: Print the whole forest
"""

from pathlib import Path
from typing import Sequence

import click
from rich.console import Console
from rich.text import Text

from liby.config import LibySettings
from liby.context import Context
from liby.errors import YError
from liby.lang.diagnostics import abort
from liby.query import has

from .output import build_tree, describe_node

console = Console()

FILE_ARGUMENT = click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)


def _settings(ctx: click.Context) -> LibySettings:
    return ctx.obj["settings"]


def _load_context(files: Sequence[Path], settings: LibySettings) -> Context:
    """Load every file into one context, aborting on the first error."""
    context = Context(settings)
    for path in files:
        try:
            context.load(path)
        except YError as exc:
            abort(exc, settings=settings)
    return context


@click.command()
@FILE_ARGUMENT
@click.option("-p", "--path", "paths", multiple=True, help="Node path, e.g. 'settings graphics vsync'")
@click.option("--has", "note", help="Report whether the first document root carries this annotation")
@click.pass_context
def show(ctx, files, paths, note):
    """Load FILES into one context and print nodes."""
    settings = _settings(ctx)
    context = _load_context(files, settings)

    if note:
        root = context.head
        state = "has" if has(root, note) else "does not have"
        console.print(Text(f"{root.name} {state} @{note}"), soft_wrap=True)

    if not paths:
        for root in context:
            console.print(Text(describe_node(root)), soft_wrap=True)
        return

    for query in paths:
        try:
            node = context.find(query)
        except YError as exc:
            abort(exc, settings=settings)
        console.print(Text(describe_node(node)), soft_wrap=True)


@click.command()
@FILE_ARGUMENT
@click.pass_context
def check(ctx, files):
    """Parse FILES and stop at the first error."""
    settings = _settings(ctx)
    for path in files:
        with Context(settings) as context:
            try:
                context.load(path)
            except YError as exc:
                abort(exc, settings=settings)
        console.print(Text(f"ok {path}"), soft_wrap=True)


@click.command()
@FILE_ARGUMENT
@click.pass_context
def tree(ctx, files):
    """Print every node of FILES as a tree."""
    settings = _settings(ctx)
    context = _load_context(files, settings)
    console.print(build_tree(context))
