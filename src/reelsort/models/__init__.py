"""Domain models for the reelsort application."""

from reelsort.models.core import (
    QUALITY_TAGS,
    FileStatus,
    MediaDescriptor,
    MediaKind,
    OperationMode,
)

__all__ = [
    "QUALITY_TAGS",
    "FileStatus",
    "MediaDescriptor",
    "MediaKind",
    "OperationMode",
]
