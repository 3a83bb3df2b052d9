"""Structured log emission for content decode failures.

Decoders nest (history → turn → part → blob) and outer layers attach the
``index``/``turn`` position to errors raised below them. Each public decoder
runs inside :func:`decode_scope`; only the outermost scope logs, so the single
``content.decode.error`` event carries the fully located error.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator

from ..errors import ContentError
from ..logging import LogContext, get_logger, log_event


_DEPTH: ContextVar[int] = ContextVar("genai_content_decode_depth", default=0)


def report_decode_error(err: ContentError, component: str) -> None:
    """Log ``err`` as a ``content.decode.error`` event."""
    log_event(
        get_logger(__name__),
        "content.decode.error",
        LogContext(component=component, operation="from_json"),
        level=logging.WARNING,
        error_code=err.code.value,
        field=err.field,
        index=err.index,
        turn=err.turn,
        error=err.message,
    )


@contextmanager
def decode_scope(component: str) -> Iterator[None]:
    """Run a decoder; report a ``ContentError`` once it leaves the outermost scope."""
    token = _DEPTH.set(_DEPTH.get() + 1)
    try:
        yield
    except ContentError as err:
        if _DEPTH.get() == 1:
            report_decode_error(err, component)
        raise
    finally:
        _DEPTH.reset(token)


def report_lenient_decode(component: str, **fields: Any) -> None:
    """Log that a malformed object was accepted because strict decoding is off."""
    log_event(
        get_logger(__name__),
        "content.decode.lenient",
        LogContext(component=component, operation="from_json"),
        level=logging.WARNING,
        **fields,
    )
