"""Base structured logging utilities for the content model.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid sprinkling ad-hoc logger setup across modules.

Every logger handed out by :func:`get_logger` is a child of the shared
``genai_content`` logger, which owns a single stderr handler. Level and output
mode come from :func:`genai_content.config.get_content_config`, so
``GENAI_CONTENT_LOG_LEVEL`` and ``GENAI_CONTENT_LOG_JSON`` apply.
"""
from __future__ import annotations

import contextlib
import json
import logging
import sys
from typing import Any

from ..config import get_content_config, parse_bool
from .log_support import JsonFormatter, LogContext


BASE_LOGGER_NAME = "genai_content"

_BASE_LOGGER_ATTR = "_genai_content_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_genai_content_console_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (DEBUG, INFO, WARNING, ERROR, CRITICAL) case-insensitively.
    Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger() -> logging.Logger:
    """Initialize (or refresh) and return the shared ``genai_content`` logger."""
    cfg = get_content_config()
    level = _parse_level(str(cfg.get("log_level") or ""), default=logging.INFO)
    json_mode = parse_bool(cfg.get("log_json"))
    json_mode = True if json_mode is None else json_mode

    logger = logging.getLogger(BASE_LOGGER_NAME)
    logger.setLevel(level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is not sys.stderr or getattr(stream_obj, "closed", False):
                # stderr was swapped (e.g. by pytest capture); rebind to the live one
                logger.removeHandler(existing)
                with contextlib.suppress(Exception):
                    existing.close()
                continue
            existing.setLevel(level)
            if json_mode != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_formatter(json_mode))
        if any(getattr(h, _CONSOLE_HANDLER_ATTR, False) for h in logger.handlers):
            return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [h for h in logger.handlers if not getattr(h, _CONSOLE_HANDLER_ATTR, False)]
    logger.addHandler(handler)
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME) -> logging.Logger:
    """Return a logger wired to the shared ``genai_content`` handler.

    Names outside the ``genai_content`` hierarchy are nested under it so that
    every event goes through the same formatter.
    """
    base_logger = _ensure_base_logger()
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (normally obtained from ``get_logger``).
    event: str
        Event name (e.g. ``content.decode.error``).
    ctx: LogContext | None
        Component/operation context; merged shallowly.
    level: int
        Logging level the event is emitted at.
    **fields: Any
        Arbitrary serializable key/value pairs. ``None`` values are dropped.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=repr))


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "log_event",
]
