"""Core domain models for reelsort.

This module defines the foundational data structures for classifying and
relocating video files.
- MediaDescriptor is created once per input file by the classifier, optionally
  enriched in place by the metadata resolver, and consumed by the path builder
  and the operation executor.
- Validation guards the descriptor invariants on construction and on every
  assignment, so an enrichment step can never leave it half-valid.

Design:
- MediaKind, OperationMode and FileStatus enums give type-safe values for the
  classification result, the relocation action and the per-file lifecycle.
- Season and episode are kept as the digit strings parsed from the filename so
  the season directory can reuse the original width.
"""

import re
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

QUALITY_TAGS = ("720p", "1080p", "2160p", "BRRip", "BluRay", "WEBRip", "HDRip")
"""Recognised quality tags, in their canonical spelling."""

YEAR_PATTERN = re.compile(r"^(?:19|20)\d{2}$")


class MediaKind(str, Enum):
    """Kind of media a filename was classified as."""

    MOVIE = "movie"
    SERIES = "series"


class OperationMode(str, Enum):
    """Relocation action applied to a classified file."""

    MOVE = "move"
    COPY = "copy"
    SYMLINK = "symlink"


class FileStatus(str, Enum):
    """Lifecycle state of one file as it passes through the pipeline.

    APPLIED, SKIPPED and FAILED are terminal; APPLIED is the only success.
    """

    UNCLASSIFIED = "unclassified"
    CLASSIFIED = "classified"
    ENRICHED = "enriched"
    TARGETED = "targeted"
    APPLIED = "applied"
    SKIPPED = "skipped"
    FAILED = "failed"


class MediaDescriptor(BaseModel):
    """Structured identity inferred for one video file.

    Used as the single unit of work passed between pipeline stages. Never
    shared across files.
    """

    model_config = ConfigDict(validate_assignment=True)

    kind: MediaKind
    """Whether the file is a movie or a series episode."""

    title: str
    """Normalized title (parsed locally or confirmed by a provider)."""

    year: str = ""
    """Four-digit release/first-aired year, or empty when unknown."""

    season: Optional[str] = None
    """Season number as parsed (series only)."""

    episode: Optional[str] = None
    """Episode number as parsed (series only)."""

    quality: str = ""
    """Quality tag from QUALITY_TAGS, or empty."""

    extension: str = ""
    """Original file extension including the leading dot, unchanged."""

    source_path: Path
    """Path of the file as handed to the pipeline."""

    target_path: Optional[Path] = None
    """Computed destination path; set once by the path builder."""

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        """Reject empty or whitespace-only titles."""
        if not value.strip():
            raise ValueError("title must not be empty")
        return value

    @field_validator("year")
    @classmethod
    def validate_year(cls, value: str) -> str:
        """Allow an empty year or a 19xx/20xx numeral."""
        if value and not YEAR_PATTERN.match(value):
            raise ValueError(f"year must be 19xx or 20xx: {value!r}")
        return value

    @field_validator("quality")
    @classmethod
    def validate_quality(cls, value: str) -> str:
        """Allow an empty quality or one of the recognised tags."""
        if value and value not in QUALITY_TAGS:
            raise ValueError(f"unknown quality tag: {value!r}")
        return value

    @model_validator(mode="after")
    def validate_episode_fields(self: "MediaDescriptor") -> "MediaDescriptor":
        """Ensure season/episode are present for series and absent for movies.

        Raises:
            ValueError: If the season/episode fields disagree with the kind.
        """
        if self.kind == MediaKind.SERIES:
            for name in ("season", "episode"):
                value = getattr(self, name)
                if not value or not value.isdigit():
                    raise ValueError(f"series requires a numeric {name}")
        elif self.season is not None or self.episode is not None:
            raise ValueError("movies must not carry season or episode numbers")
        return self
