"""
Content wire models public surface.

This module re-exports the one-class-per-file implementations under
``genai_content.base.models_parts`` so callers have a single stable import path.
"""

from .models_parts.content_blob import ContentBlob
from .models_parts.part import (
    InlineDataPart,
    Part,
    PartKind,
    TextPart,
    part_from_json,
    part_to_json,
)
from .models_parts.content import Content, contents_from_json, contents_to_json

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
