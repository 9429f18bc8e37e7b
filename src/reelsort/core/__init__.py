"""Core functionality for reelsort.

This package exposes the classifier, the directory scanner and the per-file
pipeline for use by the CLI and other callers.
- classify: parse a filename into a MediaDescriptor.
- iter_video_files: recursively yield video files from a source tree.
- Pipeline: run classify -> enrich -> target -> apply for each file.
"""

from reelsort.core.classifier import classify, clean_title
from reelsort.core.pipeline import FileResult, Pipeline, PipelineSummary
from reelsort.core.scanner import iter_video_files

__all__ = [
    "FileResult",
    "Pipeline",
    "PipelineSummary",
    "classify",
    "clean_title",
    "iter_video_files",
]
