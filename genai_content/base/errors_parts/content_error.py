"""
Structured content decoding exception types.

`ContentError` wraps a normalized `ErrorCode` together with the wire key and
position at fault so callers can report exactly which part of a payload was
rejected. The concrete subclasses preset the code for each failure kind.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .error_code import ErrorCode


@dataclass
class ContentError(ValueError):
    """Represents a structured decode failure with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        field: Wire key at fault (e.g., ``"inlineData"``), when known.
        index: Position of the failing part within its turn.
        turn: Position of the failing turn within a conversation history.
        raw: Offending input value for diagnostics.
    """

    code: ErrorCode
    message: str
    field: Optional[str] = None
    index: Optional[int] = None
    raw: Any = None
    turn: Optional[int] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining code, location, and message."""
        where = self.field or "-"
        if self.index is not None:
            where = f"{where}[{self.index}]"
        if self.turn is not None:
            where = f"turn {self.turn} {where}"
        return f"{self.code.value} at {where}: {self.message}"


class InvalidPartError(ContentError):
    """A part object carries neither a usable ``text`` nor ``inlineData``."""

    def __init__(
        self,
        message: str = "part has neither text nor inlineData",
        *,
        field: Optional[str] = None,
        index: Optional[int] = None,
        raw: Any = None,
        turn: Optional[int] = None,
    ) -> None:
        super().__init__(ErrorCode.INVALID_PART, message, field, index, raw, turn)


class InvalidBlobError(ContentError):
    """An inline data object is missing ``mimeType`` or ``data``."""

    def __init__(
        self,
        message: str = "blob requires mimeType and data",
        *,
        field: Optional[str] = None,
        index: Optional[int] = None,
        raw: Any = None,
        turn: Optional[int] = None,
    ) -> None:
        super().__init__(ErrorCode.INVALID_BLOB, message, field, index, raw, turn)


class InvalidContentError(ContentError):
    """A turn object (or its ``parts`` field) has an unsupported shape."""

    def __init__(
        self,
        message: str = "content has an unsupported shape",
        *,
        field: Optional[str] = None,
        index: Optional[int] = None,
        raw: Any = None,
        turn: Optional[int] = None,
    ) -> None:
        super().__init__(ErrorCode.INVALID_CONTENT, message, field, index, raw, turn)


__all__ = [
    "ContentError",
    "InvalidPartError",
    "InvalidBlobError",
    "InvalidContentError",
]
