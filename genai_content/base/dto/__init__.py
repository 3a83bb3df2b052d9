"""DTO validation package for content payloads."""

from .content import ContentBlobDTO, ContentDTO, PartDTO, validate_content

__all__ = [
    "ContentBlobDTO",
    "PartDTO",
    "ContentDTO",
    "validate_content",
]
