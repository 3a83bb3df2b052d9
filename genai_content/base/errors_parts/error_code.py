"""
Normalized content decoding error codes (taxonomy).

Defines the `ErrorCode` enumeration raised by the content model when wire
payloads cannot be decoded. Values are lowercase snake_case and are considered
a stable public contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing decode failure categories."""

    INVALID_PART = "invalid_part"
    INVALID_BLOB = "invalid_blob"
    INVALID_CONTENT = "invalid_content"


__all__ = ["ErrorCode"]
