"""
Commands of the ``miniyaml`` CLI.

Commands:
    - dump: Print the debug rendering of a document
    - tree: Print a document as a tree
    - json: Print a document as JSON
    - check: Validate a document
"""

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from miniyaml import __version__
from miniyaml.block import Block
from miniyaml.config import ParserOptions, load_options
from miniyaml.errors import MiniYamlError
from miniyaml.loader import load

from .output import build_tree, console, print_error

logger = logging.getLogger(__name__)

_FILE_ARGUMENT = click.Path(exists=True, dir_okay=False, path_type=Path)


def _resolve_options(config_path: Optional[Path], preserve_blank_lines: bool) -> ParserOptions:
    options = load_options(config_path) if config_path else ParserOptions()
    options = options.with_env()
    if preserve_blank_lines:
        options = replace(options, preserve_literal_blank_lines=True)
    return options


def _load_document(ctx: click.Context, path: Path) -> Block:
    try:
        return load(path, encoding=ctx.obj["encoding"], options=ctx.obj["options"])
    except (MiniYamlError, OSError, UnicodeDecodeError, LookupError) as e:
        print_error(e)
        sys.exit(1)


@click.group(name="miniyaml")
@click.version_option(__version__, prog_name="miniyaml")
@click.option(
    "--config",
    "config_path",
    type=_FILE_ARGUMENT,
    help="Parser options file (.toml with [tool.miniyaml] or .json)",
)
@click.option(
    "--preserve-blank-lines",
    is_flag=True,
    help="Keep blank lines inside '|' literal blocks",
)
@click.option("--encoding", default="utf-8", show_default=True, help="Input file encoding")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, preserve_blank_lines, encoding, verbose):
    """Read mini YAML documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.obj is None:
        ctx.obj = {}

    try:
        ctx.obj["options"] = _resolve_options(config_path, preserve_blank_lines)
    except (OSError, ValueError) as e:
        print_error(e)
        sys.exit(1)
    ctx.obj["encoding"] = encoding
    logger.debug("Parser options: %s", ctx.obj["options"])


@cli.command()
@click.argument("path", type=_FILE_ARGUMENT)
@click.pass_context
def dump(ctx, path):
    """Print the debug rendering of a document."""
    block = _load_document(ctx, path)
    click.echo(block.render())


@cli.command()
@click.argument("path", type=_FILE_ARGUMENT)
@click.pass_context
def tree(ctx, path):
    """Print a document as a tree."""
    block = _load_document(ctx, path)
    console.print(build_tree(block, label=path.name))


@cli.command(name="json")
@click.argument("path", type=_FILE_ARGUMENT)
@click.pass_context
def json_command(ctx, path):
    """Print a document as JSON."""
    block = _load_document(ctx, path)
    console.print_json(data=block.to_python())


@cli.command()
@click.argument("path", type=_FILE_ARGUMENT)
@click.pass_context
def check(ctx, path):
    """Validate a document."""
    block = _load_document(ctx, path)
    click.echo(f"OK: {path} ({block.kind.value})")
