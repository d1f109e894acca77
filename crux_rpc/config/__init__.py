"""Unified configuration layer for the method registry.

Goals
-----
* Centralize defaults (suggestion mode, namespace separator).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by CRUX_RPC_CONFIG_FILE
    3. Environment variables (CRUX_RPC_SUGGEST_METHODS, CRUX_RPC_NAMESPACE_SEPARATOR)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_registry_config()``.

External Config File (Optional)
-------------------------------
JSON is tried first, then YAML. Only the ``registry`` section is read:

```
registry:
  suggest_methods: false
  namespace_separator: "::"
```

Public API
----------
* RegistryConfig
* get_registry_config(overrides: dict | None = None) -> RegistryConfig
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    CONFIG_FILE_ENV,
    DEFAULT_NAMESPACE_SEPARATOR,
    DEFAULT_SUGGEST_METHODS,
    NAMESPACE_SEPARATOR_ENV,
    SUGGEST_METHODS_ENV,
)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class RegistryConfig:
    """Registry behaviour switches.

    Attributes:
        suggest_methods: Compute suggestions for unknown method names.
        namespace_separator: Joins namespace segments when composing qualified
            names at registration time. Never used during lookup.
    """

    suggest_methods: bool = DEFAULT_SUGGEST_METHODS
    namespace_separator: str = DEFAULT_NAMESPACE_SEPARATOR

    def __post_init__(self) -> None:
        if not self.namespace_separator:
            raise ValueError("namespace_separator must be a non-empty string")


def _parse_bool(raw: Any, default: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return default
    v = str(raw).strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    return default


def _load_external_config() -> Dict[str, Any]:
    """Return the ``registry`` section of the external config file, if any."""
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path)
    if not p.is_file():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        return {}
    section = data.get("registry")
    return section if isinstance(section, dict) else {}


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    suggest = os.getenv(SUGGEST_METHODS_ENV)
    if suggest is not None:
        out["suggest_methods"] = suggest
    separator = os.getenv(NAMESPACE_SEPARATOR_ENV)
    if separator:
        out["namespace_separator"] = separator
    return out


def get_registry_config(overrides: Optional[Dict[str, Any]] = None) -> RegistryConfig:
    """Return the merged registry configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    cfg: Dict[str, Any] = {
        "suggest_methods": DEFAULT_SUGGEST_METHODS,
        "namespace_separator": DEFAULT_NAMESPACE_SEPARATOR,
    }
    cfg |= {k: v for k, v in _load_external_config().items() if k in cfg}
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if k in cfg and v is not None}

    return RegistryConfig(
        suggest_methods=_parse_bool(cfg["suggest_methods"], DEFAULT_SUGGEST_METHODS),
        namespace_separator=str(cfg["namespace_separator"]),
    )


__all__ = [
    "RegistryConfig",
    "get_registry_config",
]
