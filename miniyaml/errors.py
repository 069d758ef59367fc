"""Unified error model for miniyaml."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorLocation:
    path: Optional[str] = None
    line: Optional[int] = None

    def describe(self) -> str:
        if self.path and self.line is not None:
            return f"{self.path}:{self.line}"
        if self.path:
            return self.path
        if self.line is not None:
            return f"line {self.line}"
        return "unknown location"


class MiniYamlError(Exception):
    """Base class for all errors raised while building or reading a block tree.

    ``str(error)`` is ``"[line N] message"`` once a line number is known and
    the bare message otherwise. Errors raised by :class:`~miniyaml.block.Block`
    carry no line; the parser stamps them on the way out.
    """

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        path: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.path = path
        if hint is not None:
            self.hint = hint

    @property
    def location(self) -> ErrorLocation:
        return ErrorLocation(path=self.path, line=self.line)

    def stamp(self, line: int, path: Optional[str] = None) -> "MiniYamlError":
        """Fill in the line (and path) if the raiser did not know them."""
        if self.line is None:
            self.line = line
        if self.path is None and path:
            self.path = path
        return self

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"[line {self.line}] {self.message}"

    def format(self) -> str:
        components = [self.message]
        meta_parts = []
        location_desc = self.location.describe()
        if location_desc != "unknown location":
            meta_parts.append(location_desc)
        if self.code:
            meta_parts.append(self.code)
        if meta_parts:
            components[-1] = f"{components[-1]} ({'; '.join(meta_parts)})"
        if self.hint:
            components.append(f"Hint: {self.hint}")
        return " ".join(part for part in components if part)


class TypeConflictError(MiniYamlError):
    """Raised when a block already committed to one kind receives another."""

    code = "TYPE_CONFLICT"


class YamlSyntaxError(MiniYamlError):
    """Raised when a line is neither a ``key:`` nor a ``- item`` line."""

    code = "SYNTAX"


class YamlIndentationError(MiniYamlError):
    """Raised when a line is indented deeper than its scope allows."""

    code = "INDENTATION"
    hint = "Nested blocks must follow a 'key:' or '-' line with an empty value."


class FramingError(MiniYamlError):
    """Raised when the start or end document marker is missing."""

    code = "FRAMING"


class NumberFormatError(MiniYamlError, ValueError):
    """Raised when a literal is not a number of the requested type."""

    code = "NUMBER_FORMAT"


class TypeAccessError(MiniYamlError, TypeError):
    """Raised when a typed accessor is used on a block of another kind."""

    code = "TYPE_ACCESS"


class InternalParserError(MiniYamlError, RuntimeError):
    """Raised on parser invariant violations. Never expected from valid input."""

    code = "INTERNAL"


__all__ = [
    "ErrorLocation",
    "MiniYamlError",
    "TypeConflictError",
    "YamlSyntaxError",
    "YamlIndentationError",
    "FramingError",
    "NumberFormatError",
    "TypeAccessError",
    "InternalParserError",
]
