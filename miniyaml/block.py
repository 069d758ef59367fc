"""Block tree produced by the parser.

A :class:`Block` is exactly one of empty, literal, mapping or sequence. It
starts empty and is committed to a kind by the first mutation; any later
mutation of another kind raises :class:`~miniyaml.errors.TypeConflictError`.
"""

from __future__ import annotations

import re
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from miniyaml.errors import NumberFormatError, TypeAccessError, TypeConflictError

EMPTY_RENDERING = "<empty container>"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_DOUBLE_PATTERN = re.compile(
    r"[+-]?(?:nan|infinity|inf|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


class BlockKind(str, Enum):
    EMPTY = "empty"
    LITERAL = "literal"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


class Block:
    """A node in the parsed document tree."""

    __slots__ = ("_kind", "_value")

    def __init__(self) -> None:
        self._kind: BlockKind = BlockKind.EMPTY
        self._value: Union[None, str, Dict[str, Block], List[Block]] = None

    # ------------------------------------------------------------------
    # Kind
    # ------------------------------------------------------------------
    @property
    def kind(self) -> BlockKind:
        return self._kind

    def is_empty(self) -> bool:
        return self._kind is BlockKind.EMPTY

    def is_literal(self) -> bool:
        return self._kind is BlockKind.LITERAL

    def is_mapping(self) -> bool:
        return self._kind is BlockKind.MAPPING

    def is_sequence(self) -> bool:
        return self._kind is BlockKind.SEQUENCE

    def _commit(self, kind: BlockKind) -> None:
        if self._kind is BlockKind.EMPTY:
            self._kind = kind
            if kind is BlockKind.MAPPING:
                self._value = {}
            elif kind is BlockKind.SEQUENCE:
                self._value = []
        elif self._kind is not kind:
            raise TypeConflictError(
                f"Block of type '{self._kind.value}' can't be converted to type '{kind.value}'"
            )

    def _require(self, kind: BlockKind) -> Any:
        if self._kind is not kind:
            raise TypeAccessError(f"Block of type '{self._kind.value}' is not a {kind.value}")
        return self._value

    # ------------------------------------------------------------------
    # Literal
    # ------------------------------------------------------------------
    def set_literal(self, text: str) -> "Block":
        if self._kind is BlockKind.LITERAL:
            raise TypeConflictError("Block of type 'literal' already holds a value")
        self._commit(BlockKind.LITERAL)
        self._value = text
        return self

    def as_string(self) -> str:
        return self._require(BlockKind.LITERAL)

    def as_double(self) -> float:
        text = self._require(BlockKind.LITERAL)
        if not _DOUBLE_PATTERN.fullmatch(text.strip()):
            raise NumberFormatError(f"Literal '{text}' is not a valid double")
        return float(text)

    def as_int(self) -> int:
        text = self._require(BlockKind.LITERAL)
        if not _INT_PATTERN.fullmatch(text):
            raise NumberFormatError(f"Literal '{text}' is not a valid int")
        return int(text)

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------
    def set_key_value(self, key: str, value: "Block") -> "Block":
        self._commit(BlockKind.MAPPING)
        entries = self._value
        is_new = key not in entries
        entries[key] = value
        if is_new:
            # Entries stay in key order so views and rendering never re-sort.
            ordered = sorted(entries.items())
            entries.clear()
            entries.update(ordered)
        return self

    def mapping_view(self) -> Mapping[str, "Block"]:
        """Read-only live view of the entries, in key order."""
        return MappingProxyType(self._require(BlockKind.MAPPING))

    def keys(self) -> List[str]:
        return list(self._require(BlockKind.MAPPING))

    def get(self, key: str) -> Optional["Block"]:
        return self._require(BlockKind.MAPPING).get(key)

    def _get_literal_key(self, key: str) -> Optional["Block"]:
        value = self.get(key)
        if value is not None and not value.is_literal():
            raise TypeConflictError(f"Key '{key}' is of type '{value.kind.value}', not literal")
        return value

    def get_key_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Shortcut for ``get(key).as_string()`` returning ``default`` for a missing key."""
        value = self._get_literal_key(key)
        return default if value is None else value.as_string()

    def get_key_double(self, key: str, default: float) -> float:
        value = self._get_literal_key(key)
        return default if value is None else value.as_double()

    def get_key_int(self, key: str, default: int) -> int:
        value = self._get_literal_key(key)
        return default if value is None else value.as_int()

    # ------------------------------------------------------------------
    # Sequence
    # ------------------------------------------------------------------
    def append_to_sequence(self, value: "Block") -> "Block":
        self._commit(BlockKind.SEQUENCE)
        self._value.append(value)
        return self

    def sequence_view(self) -> Tuple["Block", ...]:
        return tuple(self._require(BlockKind.SEQUENCE))

    # ------------------------------------------------------------------
    # Conversion and rendering
    # ------------------------------------------------------------------
    def to_python(self) -> Any:
        """Convert the tree to ``None``, ``str``, ``dict`` and ``list`` values."""
        if self._kind is BlockKind.LITERAL:
            return self._value
        if self._kind is BlockKind.MAPPING:
            return {key: value.to_python() for key, value in self._value.items()}
        if self._kind is BlockKind.SEQUENCE:
            return [item.to_python() for item in self._value]
        return None

    def render(self) -> str:
        """Return a representation suitable for debugging."""
        if self._kind is BlockKind.LITERAL:
            return f"'{self._value}'"
        if self._kind is BlockKind.MAPPING:
            inner = ", ".join(f"{key}={value.render()}" for key, value in self._value.items())
            return "{" + inner + "}"
        if self._kind is BlockKind.SEQUENCE:
            return "[" + ", ".join(item.render() for item in self._value) + "]"
        return EMPTY_RENDERING

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Block(kind={self._kind.value!r}, value={self.render()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Block):
            return NotImplemented
        return self._kind is other._kind and self._value == other._value

    __hash__ = None  # type: ignore[assignment]


__all__ = ["Block", "BlockKind", "EMPTY_RENDERING"]
