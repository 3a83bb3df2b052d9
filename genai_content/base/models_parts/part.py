"""
Part model: the closed union of payload kinds a turn can carry.

A part is exactly one of:

- :class:`TextPart` wrapping a string (wire shape ``{"text": ...}``)
- :class:`InlineDataPart` wrapping a :class:`ContentBlob`
  (wire shape ``{"inlineData": {...}}``)

``Part`` is a ``Union`` of the two frozen dataclasses rather than a class
hierarchy, so type checkers can verify exhaustive handling (see
:func:`part_to_json`). Each variant holds its payload as a required field, so a
part with neither payload cannot be constructed and the accessor of a given
variant is never ``None``.

Decoding selects the variant by which wire key is present. ``text`` wins when
both are present; ``inlineData`` is then ignored.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Union

from ..errors import InvalidBlobError, InvalidPartError
from ._decode_log import decode_scope
from .content_blob import ContentBlob


TEXT_KEY = "text"
INLINE_DATA_KEY = "inlineData"


class PartKind(str, Enum):
    """Discriminator for the payload kind carried by a part."""

    TEXT = "text"
    INLINE_DATA = "inline_data"


@dataclass(frozen=True)
class TextPart:
    """A span of plain text within a turn."""

    kind: ClassVar[PartKind] = PartKind.TEXT

    text: str

    def to_json(self) -> Dict[str, Any]:
        return {TEXT_KEY: self.text}


@dataclass(frozen=True)
class InlineDataPart:
    """A MIME-typed payload embedded directly in the turn."""

    kind: ClassVar[PartKind] = PartKind.INLINE_DATA

    inline_data: ContentBlob

    @classmethod
    def of(cls, mime_type: str, data: str) -> "InlineDataPart":
        """Shortcut for ``InlineDataPart(ContentBlob(mime_type, data))``."""
        return cls(ContentBlob(mime_type=mime_type, data=data))

    def to_json(self) -> Dict[str, Any]:
        return {INLINE_DATA_KEY: self.inline_data.to_json()}


Part = Union[TextPart, InlineDataPart]


def part_from_json(payload: Any, *, index: Optional[int] = None) -> Part:
    """Decode one wire part into its variant.

    Args:
        payload: The wire object.
        index: Position of the part within its turn, attached to errors.

    Raises:
        InvalidPartError: ``payload`` is not an object, carries neither a
            non-null ``text`` nor a non-null ``inlineData``, or its ``text``
            is not a string.
        InvalidBlobError: The ``inlineData`` object is malformed.
    """
    with decode_scope("part"):
        if not isinstance(payload, Mapping):
            raise InvalidPartError(
                f"expected an object, got {type(payload).__name__}",
                index=index,
                raw=payload,
            )

        text = payload.get(TEXT_KEY)
        if text is not None:
            if not isinstance(text, str):
                raise InvalidPartError(
                    f"text must be a string, got {type(text).__name__}",
                    field=TEXT_KEY,
                    index=index,
                    raw=dict(payload),
                )
            return TextPart(text)

        inline_data = payload.get(INLINE_DATA_KEY)
        if inline_data is not None:
            try:
                blob = ContentBlob.from_json(inline_data)
            except InvalidBlobError as err:
                err.field = err.field or INLINE_DATA_KEY
                err.index = index
                raise
            return InlineDataPart(blob)

        raise InvalidPartError(index=index, raw=dict(payload))


def part_to_json(part: Part) -> Dict[str, Any]:
    """Encode a part; exactly one payload key is emitted."""
    if isinstance(part, (TextPart, InlineDataPart)):
        return part.to_json()
    raise TypeError(f"not a Part variant: {type(part).__name__}")


__all__ = [
    "Part",
    "PartKind",
    "TextPart",
    "InlineDataPart",
    "part_from_json",
    "part_to_json",
    "TEXT_KEY",
    "INLINE_DATA_KEY",
]
