"""Utilities for loading documents from files."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Optional

from miniyaml.block import Block
from miniyaml.config import ParserOptions
from miniyaml.parser import Parser

logger = logging.getLogger(__name__)


def load(
    path: str | PathLike[str],
    *,
    encoding: str = "utf-8",
    options: Optional[ParserOptions] = None,
) -> Block:
    """Parse the document stored at ``path``.

    The file is opened with universal newlines, so LF, CR and CR+LF line
    breaks are all accepted. Errors carry the file path as well as the line.
    """
    source_path = Path(path)
    logger.debug("Loading %s", source_path)
    with source_path.open("r", encoding=encoding, newline=None) as handle:
        return Parser(handle, options=options, path=str(source_path)).parse()


def loads(text: str, *, options: Optional[ParserOptions] = None) -> Block:
    """Parse a document held in a string."""
    return Parser(text, options=options).parse()


__all__ = ["load", "loads"]
