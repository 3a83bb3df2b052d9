"""
Content model: one role-tagged turn of a conversation.

Defines the `Content` dataclass, an ordered tuple of parts plus an optional
speaker role (``"user"`` / ``"model"``; ``None`` for system-style content). The
wire ``parts`` field may be a bare string as shorthand for a single text part;
encoding always emits the array form and omits ``role`` when it is absent.

Conversation histories (lists of turns) are handled by
:func:`contents_from_json` / :func:`contents_to_json`.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ...config.defaults import MODEL_ROLE, USER_ROLE
from ..errors import ContentError, InvalidContentError
from ._decode_log import decode_scope
from .content_blob import ContentBlob
from .part import InlineDataPart, Part, TextPart, part_from_json, part_to_json


PARTS_KEY = "parts"
ROLE_KEY = "role"


def _decode_parts(raw: Any) -> Tuple[Part, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        return (TextPart(raw),)
    if isinstance(raw, (Mapping, bytes, bytearray)) or not isinstance(raw, Iterable):
        raise InvalidContentError(
            f"parts must be a string or a list of part objects, got {type(raw).__name__}",
            field=PARTS_KEY,
            raw=raw,
        )
    return tuple(part_from_json(item, index=i) for i, item in enumerate(raw))


@dataclass(frozen=True)
class Content:
    """A single turn: ordered parts attributed to an optional role.

    Attributes:
        parts: Parts in reading order. May be empty.
        role: Speaker tag, or ``None`` when the turn has no speaker.

    Raises:
        TypeError: ``parts`` is a string/bytes or holds a value that is not a
            ``TextPart`` or ``InlineDataPart``.
    """

    parts: Tuple[Part, ...]
    role: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.parts, (str, bytes, bytearray)):
            raise TypeError(
                f"parts must be a sequence of Part values, got {type(self.parts).__name__}; "
                "use Content.text() for a single text part"
            )
        parts = tuple(self.parts)
        for i, p in enumerate(parts):
            if not isinstance(p, (TextPart, InlineDataPart)):
                raise TypeError(f"parts[{i}] is not a Part variant: {type(p).__name__}")
        object.__setattr__(self, "parts", parts)

    @classmethod
    def from_json(cls, payload: Any) -> "Content":
        """Decode a ``{"parts": ..., "role"?: ...}`` object.

        Raises:
            InvalidContentError: ``payload`` is not an object, ``parts`` has an
                unsupported shape, or ``role`` is not a string.
            InvalidPartError: A part carries no usable payload; ``index`` is
                its position.
            InvalidBlobError: An inline data object is malformed.
        """
        with decode_scope("content"):
            if not isinstance(payload, Mapping):
                raise InvalidContentError(
                    f"expected an object, got {type(payload).__name__}", raw=payload
                )
            parts = _decode_parts(payload.get(PARTS_KEY))
            role = payload.get(ROLE_KEY)
            if role is not None and not isinstance(role, str):
                raise InvalidContentError(
                    f"role must be a string, got {type(role).__name__}",
                    field=ROLE_KEY,
                    raw=role,
                )
            return cls(parts=parts, role=role)

    @classmethod
    def for_user(cls, parts: Sequence[Part]) -> "Content":
        """Turn spoken by the user (role ``"user"``)."""
        return cls(parts=parts, role=USER_ROLE)

    @classmethod
    def for_model(cls, parts: Sequence[Part]) -> "Content":
        """Turn produced by the model (role ``"model"``)."""
        return cls(parts=parts, role=MODEL_ROLE)

    @classmethod
    def text(cls, text: str, role: Optional[str] = USER_ROLE) -> "Content":
        """Single text part turn."""
        return cls(parts=(TextPart(text),), role=role)

    @classmethod
    def data(cls, mime_type: str, data: str, role: Optional[str] = USER_ROLE) -> "Content":
        """Single inline-data part turn."""
        return cls(parts=(InlineDataPart(ContentBlob(mime_type=mime_type, data=data)),), role=role)

    def to_json(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {PARTS_KEY: [part_to_json(p) for p in self.parts]}
        if self.role is not None:
            out[ROLE_KEY] = self.role
        return out

    def has_inline_data(self) -> bool:
        return any(isinstance(p, InlineDataPart) for p in self.parts)

    def joined_text(self) -> str:
        """Return a flattened string view of the turn.

        Text parts are joined with newlines; inline data parts are represented
        by bracketed MIME type tokens for compact logging.
        """
        out: List[str] = []
        for p in self.parts:
            if isinstance(p, TextPart):
                out.append(p.text)
            else:
                out.append(f"[{p.inline_data.mime_type}]")
        return "\n".join(out)


def contents_from_json(items: Any) -> List[Content]:
    """Decode a conversation history, preserving turn order.

    Raises:
        InvalidContentError: ``items`` is not a list of turn objects.
        ContentError: Any turn fails to decode; ``turn`` is its position.
    """
    with decode_scope("conversation"):
        if isinstance(items, (str, bytes, bytearray, Mapping)) or not isinstance(items, Iterable):
            raise InvalidContentError(
                f"expected a list of turns, got {type(items).__name__}", raw=items
            )
        contents: List[Content] = []
        for turn, item in enumerate(items):
            try:
                contents.append(Content.from_json(item))
            except ContentError as err:
                err.turn = turn
                raise
        return contents


def contents_to_json(contents: Iterable[Content]) -> List[Dict[str, Any]]:
    return [c.to_json() for c in contents]


__all__ = [
    "Content",
    "contents_from_json",
    "contents_to_json",
    "PARTS_KEY",
    "ROLE_KEY",
]
