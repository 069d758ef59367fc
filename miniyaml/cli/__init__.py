"""
miniyaml CLI entry point.

Provides the ``miniyaml`` console command, which parses a document and
prints it as its debug rendering, a tree or JSON.
"""

from .commands import cli


def main() -> None:
    """Run the ``miniyaml`` command."""
    cli(obj={})


__all__ = ["cli", "main"]
