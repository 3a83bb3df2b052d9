"""genai_content package

Wire-level data model for multimodal content exchanged with a generative AI
request/response API.

Public API (re-exported):
    - Version: ``__version__``
    - Models: :class:`Content`, :class:`ContentBlob`, :class:`TextPart`,
      :class:`InlineDataPart`, ``Part``, :class:`PartKind`
    - Conversation helpers: :func:`contents_from_json`, :func:`contents_to_json`
    - Exceptions: :class:`ContentError`, :class:`InvalidPartError`,
      :class:`InvalidBlobError`, :class:`InvalidContentError`, :class:`ErrorCode`
    - Role constants: ``USER_ROLE``, ``MODEL_ROLE``

Transport, authentication and generation settings live with the callers that
build requests from these values.
"""

from .base.errors import (
    ContentError,
    ErrorCode,
    InvalidBlobError,
    InvalidContentError,
    InvalidPartError,
)
from .base.models import (
    Content,
    ContentBlob,
    InlineDataPart,
    Part,
    PartKind,
    TextPart,
    contents_from_json,
    contents_to_json,
    part_from_json,
    part_to_json,
)
from .config.defaults import MODEL_ROLE, USER_ROLE

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Models
    "Content",
    "ContentBlob",
    "Part",
    "PartKind",
    "TextPart",
    "InlineDataPart",
    "part_from_json",
    "part_to_json",
    "contents_from_json",
    "contents_to_json",
    # Exceptions
    "ContentError",
    "ErrorCode",
    "InvalidPartError",
    "InvalidBlobError",
    "InvalidContentError",
    # Roles
    "USER_ROLE",
    "MODEL_ROLE",
]
