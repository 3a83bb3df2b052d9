"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `genai_content.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .content_error import (
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
