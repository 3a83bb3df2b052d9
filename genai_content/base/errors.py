"""Unified content error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``genai_content.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.content_error import (
    ContentError,
    InvalidBlobError,
    InvalidContentError,
    InvalidPartError,
)

__all__ = [
    "ErrorCode",
    "ContentError",
    "InvalidPartError",
    "InvalidBlobError",
    "InvalidContentError",
]
