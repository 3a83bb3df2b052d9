"""
MIME-typed inline payload carried by inline-data parts.

Defines the `ContentBlob` dataclass: a MIME type (``"image/png"``,
``"text/plain"``, ...) and the payload as an already-encoded string (typically
base64 text). The payload is opaque here; it is never decoded or size-checked.
"""
from __future__ import annotations

import base64
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...config import get_content_config, parse_bool
from ..errors import InvalidBlobError
from ._decode_log import decode_scope, report_lenient_decode


MIME_TYPE_KEY = "mimeType"
DATA_KEY = "data"


@dataclass(frozen=True)
class ContentBlob:
    """An opaque payload tagged with its MIME type.

    Attributes:
        mime_type: MIME type of the payload (wire key ``mimeType``).
        data: Encoded payload text (wire key ``data``).
    """

    mime_type: str
    data: str

    @classmethod
    def from_json(cls, payload: Any, *, strict: Optional[bool] = None) -> "ContentBlob":
        """Decode a ``{"mimeType": ..., "data": ...}`` object.

        Args:
            payload: The wire object.
            strict: Whether missing keys raise. ``None`` defers to the
                ``strict_blobs`` configuration flag.

        Raises:
            InvalidBlobError: ``payload`` is not a mapping, or (in strict mode)
                ``mimeType`` is missing, null or empty, or ``data`` is missing
                or null.
        """
        with decode_scope("blob"):
            if not isinstance(payload, Mapping):
                raise InvalidBlobError(
                    f"expected an object, got {type(payload).__name__}", raw=payload
                )
            mime_type = payload.get(MIME_TYPE_KEY)
            data = payload.get(DATA_KEY)
            missing = []
            if mime_type is None or mime_type == "":
                missing.append(MIME_TYPE_KEY)
            if data is None:
                missing.append(DATA_KEY)
            if missing:
                if strict is None:
                    strict = parse_bool(get_content_config().get("strict_blobs")) is not False
                if strict:
                    raise InvalidBlobError(
                        f"missing required key(s): {', '.join(missing)}",
                        field=missing[0],
                        raw=dict(payload),
                    )
                report_lenient_decode("blob", missing=missing)
            return cls(mime_type=mime_type, data=data)

    @classmethod
    def from_bytes(cls, mime_type: str, raw: bytes) -> "ContentBlob":
        """Build a blob whose payload is the standard base64 encoding of ``raw``."""
        return cls(mime_type=mime_type, data=base64.b64encode(raw).decode("ascii"))

    def to_json(self) -> Dict[str, Any]:
        """Return the wire object; both keys are always present."""
        return {MIME_TYPE_KEY: self.mime_type, DATA_KEY: self.data}


__all__ = ["ContentBlob", "MIME_TYPE_KEY", "DATA_KEY"]
