"""
models/configuration.py
-----------------------
Read-only view over a hierarchical job configuration (parsed JSON).

Values are addressed by dotted paths with optional list indexes, the same
notation DataX-style job files use::

    conf = Configuration.from_json(text)
    conf.get_string("connection[0].table[0]")
    conf.get_bool("autoCreateTable", False)

Lookups never mutate the wrapped data. A path that walks off the tree
(missing key, index out of range, wrong container type) yields the default.
"""
from __future__ import annotations

import copy
import json
import re
from pathlib import Path
from typing import Any

from errors import ConfigurationError

_SEGMENT_RE = re.compile(r"([^.\[\]]+)|\[(\d+)\]")
_MISSING = object()


def _split_path(path: str) -> list[str | int]:
    """Turn ``a.b[0].c`` into ``["a", "b", 0, "c"]``."""
    segments: list[str | int] = []
    for match in _SEGMENT_RE.finditer(path):
        key, index = match.groups()
        segments.append(int(index) if index is not None else key)
    return segments


class Configuration:
    """Hierarchical key/value tree with path-based accessors."""

    def __init__(self, data: Any) -> None:
        self._data = data

    # ------------------------------------------------------------------
    # Factory helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Configuration":
        return cls(copy.deepcopy(data))

    @classmethod
    def from_json(cls, text: str) -> "Configuration":
        """
        Parse a JSON document.

        Raises:
            ConfigurationError: If *text* is not valid JSON.
        """
        try:
            return cls(json.loads(text))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Configuration is not valid JSON: {exc}") from exc

    @classmethod
    def from_file(cls, file_path: str | Path) -> "Configuration":
        """
        Load a JSON job file.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        path = Path(file_path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(f"Cannot read configuration file '{path}': {exc}") from exc
        return cls.from_json(text)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def _lookup(self, path: str) -> Any:
        node = self._data
        for segment in _split_path(path):
            if isinstance(segment, int):
                if not isinstance(node, list) or segment >= len(node):
                    return _MISSING
            elif not isinstance(node, dict) or segment not in node:
                return _MISSING
            node = node[segment]
        return node

    def get(self, path: str, default: Any = None) -> Any:
        value = self._lookup(path)
        if value is _MISSING or value is None:
            return default
        return value

    def get_string(self, path: str, default: str | None = None) -> str | None:
        value = self.get(path)
        if value is None:
            return default
        if isinstance(value, (dict, list)):
            return json.dumps(value, ensure_ascii=False)
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def get_bool(self, path: str, default: bool = False) -> bool:
        """
        Read a boolean flag.

        Accepts JSON booleans and the strings ``"true"`` / ``"false"``
        (any case).

        Raises:
            ConfigurationError: For any other value.
        """
        value = self.get(path)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        raise ConfigurationError(
            f"Configuration value '{path}' must be true or false, got {value!r}."
        )

    def get_list(self, path: str, default: list | None = None) -> list | None:
        """Read a list; a scalar is returned as a one-element list."""
        value = self.get(path)
        if value is None:
            return default
        if isinstance(value, list):
            return list(value)
        return [value]

    def get_configuration(self, path: str) -> "Configuration | None":
        value = self.get(path)
        return None if value is None else Configuration(value)

    def get_configuration_list(self, path: str) -> list["Configuration"]:
        return [Configuration(item) for item in self.get_list(path, [])]

    def __repr__(self) -> str:
        return f"Configuration({self._data!r})"
