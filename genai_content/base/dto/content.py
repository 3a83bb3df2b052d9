"""
Pydantic DTOs and validators for inbound content payloads.

Purpose
-------
Validate untrusted wire payloads (for example an HTTP request body) before they
are turned into the immutable models of ``genai_content.base.models``. Field
names follow Python conventions; the camelCase wire keys are accepted as
aliases and emitted by ``model_dump(by_alias=True)``.

Fallback semantics: Not applicable. Validation either succeeds or raises a
``pydantic.ValidationError``. Callers should handle this at the controller edge
and return an appropriate 4xx response when used in an HTTP server context.

Design
------
- ``PartDTO`` applies the same variant selection as ``part_from_json``: a
  non-null ``text`` wins and ``inlineData`` is dropped before it is validated;
  a part with neither payload is rejected.
- ``ContentDTO`` accepts the bare-string ``parts`` shorthand.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models import Content, ContentBlob, InlineDataPart, Part, TextPart


_INLINE_DATA_NAMES = ("inlineData", "inline_data")


class ContentBlobDTO(BaseModel):
    """MIME-typed payload. ``mime_type`` must be non-empty; ``data`` is opaque."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    mime_type: str = Field(..., alias="mimeType", min_length=1)
    data: str

    def to_blob(self) -> ContentBlob:
        return ContentBlob(mime_type=self.mime_type, data=self.data)


class PartDTO(BaseModel):
    """A part carrying exactly one of ``text`` or ``inline_data``.

    Failure Modes:
        Raises ``ValidationError`` when neither payload is present.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    text: Optional[str] = None
    inline_data: Optional[ContentBlobDTO] = Field(default=None, alias="inlineData")

    @model_validator(mode="before")
    @classmethod
    def _prefer_text(cls, data: Any) -> Any:
        """Drop the inline payload when ``text`` is present so it is never validated."""
        if isinstance(data, Mapping) and data.get("text") is not None:
            return {k: v for k, v in data.items() if k not in _INLINE_DATA_NAMES}
        return data

    @model_validator(mode="after")
    def _require_payload(self) -> "PartDTO":
        if self.text is None and self.inline_data is None:
            raise ValueError("part requires text or inlineData")
        return self

    def to_part(self) -> Part:
        if self.text is not None:
            return TextPart(self.text)
        return InlineDataPart(self.inline_data.to_blob())


class ContentDTO(BaseModel):
    """One turn. ``parts`` may be a bare string, a list of parts, or omitted."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    parts: Optional[Union[str, List[PartDTO]]] = None
    role: Optional[str] = None

    def to_content(self) -> Content:
        if self.parts is None:
            parts: tuple = ()
        elif isinstance(self.parts, str):
            parts = (TextPart(self.parts),)
        else:
            parts = tuple(p.to_part() for p in self.parts)
        return Content(parts=parts, role=self.role)


def validate_content(payload: Any) -> Content:
    """Validate ``payload`` with :class:`ContentDTO` and convert it to a :class:`Content`.

    Raises:
        pydantic.ValidationError: The payload does not match the wire shape.
    """
    return ContentDTO.model_validate(payload).to_content()


__all__ = [
    "ContentBlobDTO",
    "PartDTO",
    "ContentDTO",
    "validate_content",
]
