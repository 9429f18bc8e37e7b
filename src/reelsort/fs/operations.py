"""Filesystem operations for relocating classified files.

Provides the FileSystem collaborator used by the executor, its real
implementation, and apply_operation which performs (or, in dry-run mode, only
reports) a move, copy or symlink of one file to its computed target path.
"""

import logging
import os
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

import rich
from rich.console import Console

from reelsort.errors import OperationError
from reelsort.models.core import MediaDescriptor, OperationMode

logger = logging.getLogger(__name__)

COPY_CHUNK_SIZE = 1024 * 1024


class FileSystem(ABC):
    """Filesystem primitives used by apply_operation.

    Tests substitute their own implementation to observe or fake mutations.
    """

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create *path* and any missing parents."""

    @abstractmethod
    def rename(self, src: Path, dst: Path) -> None:
        """Rename *src* to *dst*."""

    @abstractmethod
    def copy(self, src: Path, dst: Path) -> None:
        """Copy the content of *src* to *dst*."""

    @abstractmethod
    def symlink(self, src: Path, dst: Path) -> None:
        """Create a symlink at *dst* pointing at *src*."""


class LocalFileSystem(FileSystem):
    """FileSystem backed by the real local filesystem."""

    def make_dirs(self, path: Path) -> None:
        """Create *path* and any missing parents."""
        path.mkdir(parents=True, exist_ok=True)

    def rename(self, src: Path, dst: Path) -> None:
        """Rename *src* to *dst* (fails across devices)."""
        os.rename(src, dst)

    def copy(self, src: Path, dst: Path) -> None:
        """Stream the bytes of *src* into a newly created *dst*.

        A partially written *dst* is removed if the copy fails.
        """
        with open(src, "rb") as source, open(dst, "wb") as destination:
            try:
                shutil.copyfileobj(source, destination, COPY_CHUNK_SIZE)
            except OSError:
                destination.close()
                dst.unlink(missing_ok=True)
                raise

    def symlink(self, src: Path, dst: Path) -> None:
        """Create a symlink at *dst* pointing at *src* exactly as given."""
        os.symlink(src, dst)


def describe_operation(mode: OperationMode, src: Path, dst: Path) -> str:
    """Return the human-readable dry-run record for an operation."""
    return f"[dry run] Would {mode.value} {src} -> {dst}"


def apply_operation(
    descriptor: MediaDescriptor,
    mode: Union[OperationMode, str],
    *,
    dry_run: bool = False,
    filesystem: FileSystem | None = None,
    console: Console | None = None,
) -> None:
    """Relocate the descriptor's source file to its target path.

    Args:
        descriptor: A descriptor whose ``target_path`` has been computed.
        mode: move, copy or symlink.
        dry_run: If True, print the intended action and touch nothing.
        filesystem: Filesystem collaborator; defaults to the local filesystem.
        console: Console for dry-run output; defaults to the global Rich console.

    Raises:
        OperationError: If the mode is unknown, no target path is set, or
            directory creation or the action itself fails.

    Example:
        >>> apply_operation(descriptor, OperationMode.COPY, dry_run=True)
        [dry run] Would copy Inception.2010.mkv -> /lib/Movies/Inception (2010).mkv
    """
    src = descriptor.source_path
    dst = descriptor.target_path
    try:
        op = OperationMode(mode)
    except ValueError:
        raise OperationError(src, f"unknown operation: {mode}") from None
    if dst is None:
        raise OperationError(src, "no target path computed")

    if dry_run:
        msg = describe_operation(op, src, dst)
        (console or rich.get_console()).print(
            msg, markup=False, highlight=False, soft_wrap=True
        )
        logger.debug(msg)
        return

    fs = filesystem or LocalFileSystem()
    try:
        fs.make_dirs(dst.parent)
    except OSError as e:
        raise OperationError(src, f"error creating directory {dst.parent}: {e}") from e

    logger.debug("Processing file with operation: %s", op.value)
    try:
        if op == OperationMode.MOVE:
            fs.rename(src, dst)
        elif op == OperationMode.COPY:
            fs.copy(src, dst)
        else:
            fs.symlink(src, dst)
    except OSError as e:
        raise OperationError(src, f"{op.value} to {dst} failed: {e}") from e
    logger.info("%s: %s -> %s", op.value, src, dst)
