"""Mini YAML-like parser.

This is NOT a YAML-compliant parser. It reads the following subset::

    ---           start of document (mandatory)
    # comment     ignored, like blank lines (except inside literal blocks)
    key:          a key in the enclosing mapping, typed by the lines below it
    key: literal  an untyped literal, kept as a string
    key: |        a multi-line literal running until a line at the key's
                  indentation or lesser
    - [entry]     an item of the enclosing sequence
    - key: value  an item holding a mapping whose first key is ``key``
    ...           end of document (mandatory)

Anything before the start marker or after the end marker is ignored. A key is
any run of characters other than whitespace and ``:``. Flow style, anchors,
tags, folded scalars, sequences of sequences and mappings of mappings are not
supported. Mixing keys and sequence items in one block is an error.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from miniyaml.block import Block
from miniyaml.config import ParserOptions
from miniyaml.errors import FramingError, MiniYamlError, YamlIndentationError, YamlSyntaxError
from miniyaml.input import LineInput, LineSource

logger = logging.getLogger(__name__)

LITERAL_BLOCK_MARKER = "|"
_ASCII_WHITESPACE = " \t\n\r\f\v"

#                      1=indent
_INDENT = re.compile(r"(\s*)\S.*", re.ASCII)
#                          1=indent 2=seq 3=map key        4=literal (optional)
_SEQ_OR_KEY = re.compile(r"(\s*)(?:(-)|([^\s:]+)\s*:)\s*(.*)", re.ASCII)
_SEQ_AND_KEY = re.compile(r"(\s*)(-)\s*([^\s:]+)\s*:\s*(.*)", re.ASCII)


def indent_of(line: str) -> int:
    """Length of the leading whitespace. Tabs count as one character."""
    match = _INDENT.fullmatch(line)
    return len(match.group(1)) if match else len(line)


class Parser:
    """Parses one document from a line source into a :class:`Block` tree."""

    def __init__(
        self,
        source: LineSource,
        *,
        options: Optional[ParserOptions] = None,
        path: str = "",
    ) -> None:
        self.options = options or ParserOptions()
        self.source_path = path
        self._input = LineInput(source)

    @property
    def line_count(self) -> int:
        return self._input.line_count

    def parse(self) -> Block:
        try:
            while True:
                line = self._input.read_line()
                if line is None:
                    break
                if line == self.options.start_marker:
                    logger.debug("Document start marker found at line %d", self.line_count)
                    return self._parse_document()
            raise FramingError(
                "Document marker not found (aka c-directives-end). "
                f"Tip: start your document with '{self.options.start_marker}'.",
                line=self.line_count,
            )
        except MiniYamlError as exc:
            exc.stamp(self.line_count, self.source_path or None)
            raise

    def _end_marker_error(self) -> FramingError:
        return FramingError(
            "Document end marker not found (aka c-document-end). "
            f"Tip: end your document with '{self.options.end_marker}' or check indentation levels.",
            line=self.line_count,
        )

    def _parse_document(self) -> Block:
        doc = Block()
        first = self._input.peek_line()
        if first is None:
            raise self._end_marker_error()

        self._parse_into(doc, indent_of(first))

        if self._input.read_line() != self.options.end_marker:
            raise self._end_marker_error()
        logger.debug("Document end marker found at line %d (root is %s)", self.line_count, doc.kind.value)
        return doc

    def _parse_into(self, container: Block, indent: int) -> None:
        """Add every line at ``indent`` to ``container`` until a dedent or the end marker."""
        try:
            while True:
                line = self._input.read_line()
                if line is None:
                    return
                if line == self.options.end_marker:
                    self._input.unread_line(line)
                    return

                match = _SEQ_AND_KEY.fullmatch(line) or _SEQ_OR_KEY.fullmatch(line)
                if match is None:
                    raise YamlSyntaxError(
                        f"'key:' or '- sequence' expected, found: {line}",
                        line=self.line_count,
                    )

                line_indent = len(match.group(1))
                if line_indent > indent:
                    raise YamlIndentationError(
                        f"Mismatched map indentation, expected {indent} but was {line_indent}",
                        line=self.line_count,
                    )
                if line_indent < indent:
                    self._input.unread_line(line)
                    return

                child = Block()
                if match.group(2) is not None:
                    container.append_to_sequence(child)
                    if match.group(3) is not None:
                        # Blank out the dash and re-read the line as the first
                        # key of a mapping nested in the new item.
                        self._input.unread_line(f"{line[:line_indent]} {line[line_indent + 1:]}")
                    else:
                        self._read_value(child, match.group(4), indent)
                else:
                    container.set_key_value(match.group(3), child)
                    self._read_value(child, match.group(4), indent)

                if child.is_empty():
                    self._parse_nested(child, indent)
        except MiniYamlError as exc:
            exc.stamp(self.line_count)
            raise

    def _read_value(self, child: Block, remainder: str, indent: int) -> None:
        value = remainder.strip(_ASCII_WHITESPACE)
        if value == LITERAL_BLOCK_MARKER:
            child.set_literal(self._read_literal_block(indent))
        elif value:
            child.set_literal(value)

    def _read_literal_block(self, indent: int) -> str:
        """Capture lines verbatim until one sits at ``indent`` or lesser."""
        preserve_blank = self.options.preserve_literal_blank_lines
        read = self._input.read_literal_line if preserve_blank else self._input.read_line
        parts = []
        while True:
            line = read()
            if line is None:
                break
            if line == self.options.end_marker:
                self._input.unread_line(line)
                break
            if preserve_blank and not line.strip(_ASCII_WHITESPACE):
                parts.append(line + "\n")
                continue
            if indent_of(line) <= indent:
                self._input.unread_line(line)
                break
            parts.append(line + "\n")
        logger.debug("Captured %d literal line(s) ending before line %d", len(parts), self.line_count)
        return "".join(parts)

    def _parse_nested(self, child: Block, indent: int) -> None:
        line = self._input.peek_line()
        if line is None:
            return
        child_indent = indent_of(line)
        if child_indent > indent:
            self._parse_into(child, child_indent)


def parse(
    source: LineSource,
    *,
    options: Optional[ParserOptions] = None,
    path: str = "",
) -> Block:
    """Parse a document from text or an iterable of lines."""
    return Parser(source, options=options, path=path).parse()


__all__ = ["Parser", "parse", "indent_of", "LITERAL_BLOCK_MARKER"]
