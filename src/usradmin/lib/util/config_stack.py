"""Layered config resolution.

Terminology
-----------
- **Scope**: a single config file layer (e.g. "system", "prefix", "user").
- **Stack**: an ordered list of scopes, lowest-priority first.
- **deep_merge**: recursive dict merge with ``_inherit`` support.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

_INHERIT = "_inherit"


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base*, returning a **new** dict.

    Rules
    -----
    * Dicts are merged recursively.
    * A ``None`` value in *override* **deletes** the corresponding key.
    * Lists in *override* replace the base list unless they contain the
      sentinel ``"_inherit"``, which is replaced by the base elements.
    """
    merged: dict = {}
    for key in set(base) | set(override):
        if key not in override:
            merged[key] = base[key]
            continue
        value = override[key]
        if value is None:
            continue
        current = base.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = deep_merge(current, value)
        elif isinstance(value, list) and isinstance(current, list):
            merged[key] = _splice(current, value)
        else:
            merged[key] = value
    return merged


def _splice(base: list, override: list) -> list:
    if _INHERIT not in override:
        return list(override)
    result: list = []
    for item in override:
        if item == _INHERIT:
            result.extend(base)
        else:
            result.append(item)
    return result


@dataclass(frozen=True)
class ConfigScope:
    """A single layer in the config stack."""

    level: str
    source: Path | None
    data: dict


class ConfigStack:
    """Ordered collection of config scopes, lowest-priority first."""

    def __init__(self) -> None:
        self._scopes: list[ConfigScope] = []

    def push(self, scope: ConfigScope) -> None:
        """Append a scope (higher priority than all previous)."""
        self._scopes.append(scope)

    def resolve(self) -> dict:
        """Deep-merge all scopes in order and return the result."""
        result: dict = {}
        for scope in self._scopes:
            result = deep_merge(result, scope.data)
        return result

    @property
    def scopes(self) -> list[ConfigScope]:
        return list(self._scopes)


def load_yaml_scope(level: str, path: Path) -> ConfigScope:
    """Load a YAML file into a ConfigScope.  Returns empty data if missing.

    A file whose top level is not a mapping is treated as empty.
    """
    data: object = {}
    if path.is_file():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        data = {}
    return ConfigScope(level=level, source=path, data=data)
