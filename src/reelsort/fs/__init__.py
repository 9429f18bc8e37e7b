"""Filesystem operations for reelsort."""

from reelsort.fs.operations import (
    FileSystem,
    LocalFileSystem,
    apply_operation,
    describe_operation,
)

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "apply_operation",
    "describe_operation",
]
