"""Unified configuration layer for the content model.

Goals
-----
* Centralize defaults (decode strictness, logging preferences).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       GENAI_CONTENT_CONFIG_FILE
    3. Environment variables (GENAI_CONTENT_STRICT_BLOBS, ...)
    4. In-code overrides passed to helper
* Provide a single call site: ``get_content_config()``.

External Config File (Optional)
-------------------------------
JSON is tried first, then YAML. Structure example:

```
strict_blobs: false
log_level: DEBUG
log_json: true
```

Public API
----------
* get_content_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from .defaults import (
    ENV_CONFIG_FILE,
    ENV_LOG_JSON,
    ENV_LOG_LEVEL,
    ENV_STRICT_BLOBS,
    LOG_JSON_DEFAULT,
    LOG_LEVEL_DEFAULT,
    MODEL_ROLE,
    STRICT_BLOBS_DEFAULT,
    USER_ROLE,
)


# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Any] = {
    "strict_blobs": STRICT_BLOBS_DEFAULT,
    "log_level": LOG_LEVEL_DEFAULT,
    "log_json": LOG_JSON_DEFAULT,
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def parse_bool(value: Any) -> Optional[bool]:
    """Interpret a boolean-ish value; return ``None`` when unrecognized."""
    if isinstance(value, bool):
        return value
    if value is None:
        return None
    v = str(value).strip().lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    return None


ENV_FIELD_MAP: Dict[str, tuple[str, Callable[[str], Any]]] = {
    "strict_blobs": (ENV_STRICT_BLOBS, parse_bool),
    "log_level": (ENV_LOG_LEVEL, str.strip),
    "log_json": (ENV_LOG_JSON, parse_bool),
}


_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(ENV_CONFIG_FILE)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    data: Any
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, (env_name, convert) in ENV_FIELD_MAP.items():
        raw = os.getenv(env_name)
        if raw is None:
            continue
        val = convert(raw)
        if val is not None and val != "":
            out[key] = val
    return out


def get_content_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged content model configuration.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    file_cfg = _load_external_config()
    cfg |= {k: v for k, v in file_cfg.items() if k in DEFAULTS}
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def reset_config_cache() -> None:
    """Forget the cached external config file so the next lookup re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


__all__ = [
    "get_content_config",
    "reset_config_cache",
    "parse_bool",
    "DEFAULTS",
    "USER_ROLE",
    "MODEL_ROLE",
]
