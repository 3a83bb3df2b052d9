"""Models parts package public surface.

Re-exports individual models so callers can import from
`genai_content.base.models_parts` if needed, while `genai_content.base.models`
remains the primary stable import path.
"""

from .content_blob import ContentBlob
from .part import InlineDataPart, Part, PartKind, TextPart, part_from_json, part_to_json
from .content import Content, contents_from_json, contents_to_json

__all__ = [
    "ContentBlob",
    "Part",
    "PartKind",
    "TextPart",
    "InlineDataPart",
    "part_from_json",
    "part_to_json",
    "Content",
    "contents_from_json",
    "contents_to_json",
]
