"""Classification and relocation pipeline.

This module drives each video file through the four stages:
classify -> enrich -> compute target path -> apply operation.
- Files are handled one at a time, strictly in order; the next file starts only
  after the previous one reached a terminal status.
- Per-file failures are isolated: an unparseable name is SKIPPED, a failed
  filesystem action is FAILED, and neither stops the run.
- Metadata failures are absorbed by the resolver and never change the status.
"""

import logging
import time as time_mod
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from reelsort.core.classifier import classify
from reelsort.errors import ClassificationError, OperationError
from reelsort.fs.operations import FileSystem, LocalFileSystem, apply_operation
from reelsort.metadata.base import NullMetadataClient
from reelsort.metadata.resolver import MetadataResolver
from reelsort.models.core import FileStatus, MediaDescriptor, OperationMode
from reelsort.rules.base import RuleSet
from reelsort.rules.plex import PlexRuleSet, compute_target_path

logger = logging.getLogger(__name__)


@dataclass
class FileResult:
    """Outcome of processing a single file."""

    source: Path
    status: FileStatus
    mode: OperationMode
    target: Optional[Path] = None
    descriptor: Optional[MediaDescriptor] = None
    enriched: bool = False
    dry_run: bool = False
    reason: Optional[str] = None


@dataclass
class PipelineSummary:
    """Result of running the pipeline over a sequence of files."""

    results: List[FileResult] = field(default_factory=list)
    duration: float = 0.0

    def _count(self, status: FileStatus) -> int:
        return sum(1 for result in self.results if result.status == status)

    @property
    def applied(self) -> int:
        return self._count(FileStatus.APPLIED)

    @property
    def skipped(self) -> int:
        return self._count(FileStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(FileStatus.FAILED)

    @property
    def success(self) -> bool:
        """True when no file ended in FAILED."""
        return self.failed == 0


@dataclass
class Pipeline:
    """Per-run context shared by every file of one invocation."""

    destination: Path
    mode: OperationMode = OperationMode.MOVE
    dry_run: bool = False
    resolver: MetadataResolver = field(
        default_factory=lambda: MetadataResolver(NullMetadataClient())
    )
    rule_set: RuleSet = field(default_factory=PlexRuleSet)
    filesystem: FileSystem = field(default_factory=LocalFileSystem)
    console: Optional[Console] = None

    async def process_file(self, path: Path) -> FileResult:
        """Run one file through every stage and return its outcome.

        Args:
            path: The video file to process.

        Returns:
            A FileResult whose status is APPLIED, SKIPPED or FAILED.
        """
        result = FileResult(
            source=path,
            status=FileStatus.UNCLASSIFIED,
            mode=self.mode,
            dry_run=self.dry_run,
        )
        try:
            descriptor = classify(path)
        except ClassificationError as e:
            logger.warning("%s", e)
            result.status = FileStatus.SKIPPED
            result.reason = str(e)
            return result
        result.descriptor = descriptor
        result.status = FileStatus.CLASSIFIED

        if await self.resolver.enrich(descriptor):
            result.enriched = True
            result.status = FileStatus.ENRICHED

        descriptor.target_path = compute_target_path(
            descriptor, self.destination, self.rule_set
        )
        result.target = descriptor.target_path
        result.status = FileStatus.TARGETED
        logger.debug("Target path: %s", result.target)

        try:
            apply_operation(
                descriptor,
                self.mode,
                dry_run=self.dry_run,
                filesystem=self.filesystem,
                console=self.console,
            )
        except OperationError as e:
            logger.error("Error processing %s: %s", path, e)
            result.status = FileStatus.FAILED
            result.reason = str(e)
            return result
        result.status = FileStatus.APPLIED
        return result

    async def run(
        self,
        paths: Iterable[Path],
        on_result: Optional[Callable[[FileResult], None]] = None,
    ) -> PipelineSummary:
        """Process *paths* sequentially.

        Args:
            paths: Files to process, in the order they should be handled.
            on_result: Optional callback invoked after each file completes.

        Returns:
            PipelineSummary with one result per input path.
        """
        start = time_mod.time()
        summary = PipelineSummary()
        for path in paths:
            result = await self.process_file(path)
            summary.results.append(result)
            if on_result is not None:
                on_result(result)
        summary.duration = time_mod.time() - start
        return summary


__all__ = ["FileResult", "Pipeline", "PipelineSummary"]
