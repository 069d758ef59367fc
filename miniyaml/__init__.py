"""
Mini YAML-like configuration reader.

``miniyaml`` reads a deliberately small, indentation-sensitive subset of
YAML into a tree of :class:`Block` nodes. Each node is exactly one of
empty, literal, mapping or sequence, and never changes kind once set.

* ``block`` – the :class:`Block` tree and its typed accessors.
* ``parser`` – the line classifier and recursive descent over indentation.
* ``input`` – the line source wrapper with one line of pushback.
* ``errors`` – the error hierarchy; messages read ``[line N] ...``.
* ``config`` – :class:`ParserOptions` and option loading.
* ``loader`` – file helpers.
* ``cli`` – the ``miniyaml`` command.

It is not a YAML-compliant parser: flow collections, anchors, tags and
folded or quoted scalars are not supported.
"""

from miniyaml.block import Block, BlockKind
from miniyaml.config import ParserOptions, load_options
from miniyaml.errors import (
    FramingError,
    InternalParserError,
    MiniYamlError,
    NumberFormatError,
    TypeAccessError,
    TypeConflictError,
    YamlIndentationError,
    YamlSyntaxError,
)
from miniyaml.loader import load, loads
from miniyaml.parser import Parser, parse

__version__ = "0.1.0"

__all__ = [
    "Block",
    "BlockKind",
    "Parser",
    "ParserOptions",
    "parse",
    "load",
    "loads",
    "load_options",
    "MiniYamlError",
    "TypeConflictError",
    "YamlSyntaxError",
    "YamlIndentationError",
    "FramingError",
    "NumberFormatError",
    "TypeAccessError",
    "InternalParserError",
    "__version__",
]
