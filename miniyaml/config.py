"""Parser options and their loading from files and the environment."""

from __future__ import annotations

import json
import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "MINIYAML_"
CONFIG_SECTION = "miniyaml"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ParserOptions:
    """Knobs for :class:`~miniyaml.parser.Parser`."""

    start_marker: str = "---"
    end_marker: str = "..."
    # Keep whitespace-only lines inside '|' blocks instead of skipping them.
    preserve_literal_blank_lines: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ParserOptions":
        known = {item.name for item in fields(cls)}
        values: Dict[str, Any] = {}
        for key, raw in data.items():
            name = key.replace("-", "_")
            if name not in known:
                logger.debug("Ignoring unknown parser option %r", key)
                continue
            values[name] = _coerce(name, raw)
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ParserOptions":
        return cls().with_env(environ)

    def with_env(self, environ: Optional[Mapping[str, str]] = None) -> "ParserOptions":
        """Return a copy overridden by ``MINIYAML_*`` environment variables."""
        env = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}
        for item in fields(self):
            raw = env.get(ENV_PREFIX + item.name.upper())
            if raw is not None:
                overrides[item.name] = _coerce(item.name, raw)
        return replace(self, **overrides) if overrides else self


def _coerce(name: str, raw: Any) -> Any:
    if name == "preserve_literal_blank_lines":
        if isinstance(raw, bool):
            return raw
        lowered = str(raw).strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"Option '{name}' expects a boolean, got {raw!r}")
    value = str(raw)
    if not value or value != value.strip():
        raise ValueError(f"Option '{name}' must be a non-empty marker without surrounding whitespace")
    return value


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def load_options(path: os.PathLike[str] | str) -> ParserOptions:
    """Load options from a ``.toml`` or ``.json`` file.

    TOML files may use a ``[tool.miniyaml]`` table (pyproject style) or a
    top-level ``[miniyaml]`` table. JSON files may nest the options under a
    ``"miniyaml"`` key or hold them at the top level.
    """
    config_path = Path(path)
    suffix = config_path.suffix.lower()
    if suffix == ".toml":
        data = _read_toml_config(config_path)
        section = data.get("tool", {}).get(CONFIG_SECTION) or data.get(CONFIG_SECTION) or {}
    elif suffix == ".json":
        data = _read_json_config(config_path)
        section = data.get(CONFIG_SECTION, data) if isinstance(data, dict) else {}
    else:
        raise ValueError(f"Unsupported config file type: {config_path.name}")
    if not isinstance(section, dict):
        raise ValueError(f"'{CONFIG_SECTION}' section in {config_path.name} must be a table")
    logger.debug("Loaded parser options from %s", config_path)
    return ParserOptions.from_mapping(section)


__all__ = ["ParserOptions", "load_options", "ENV_PREFIX"]
