"""Plex-style library layout.

Movie format:
    <root>/Movies/Title (Year) [Quality].ext
Series format:
    <root>/TV Shows/Title/Season N/Title SxxEyy [Quality].ext

The quality bracket is left out when no quality tag was parsed. Season and
episode are zero-padded to two digits in the filename, while the season
directory keeps the season number exactly as parsed ("Season 1" for s1e1,
"Season 01" for S01E01).
"""

from pathlib import Path
from typing import Self

from reelsort.models.core import MediaDescriptor, MediaKind
from reelsort.rules.base import RuleSet, sanitize_component

MOVIES_DIR = "Movies"
TV_SHOWS_DIR = "TV Shows"


class PlexRuleSet(RuleSet):
    """Rule set producing the Movies/ and TV Shows/ library layout."""

    def __init__(self: Self) -> None:
        """Initialize the PlexRuleSet."""
        super().__init__("plex")

    @property
    def supported_kinds(self: Self) -> list[MediaKind]:
        """Get the media kinds this rule set can place."""
        return [MediaKind.MOVIE, MediaKind.SERIES]

    def library_dirs(self: Self, base_dir: Path) -> list[Path]:
        """Return the Movies/ and TV Shows/ folders under *base_dir*."""
        return [base_dir / MOVIES_DIR, base_dir / TV_SHOWS_DIR]

    def target_path(self: Self, descriptor: MediaDescriptor, base_dir: Path) -> Path:
        """Generate a target path following the Plex layout.

        Args:
            descriptor: The descriptor to place.
            base_dir: Destination root directory.

        Returns:
            The target path under *base_dir*.

        Raises:
            ValueError: If the descriptor kind is not supported.
        """
        if not self.supports_kind(descriptor.kind):
            raise ValueError(f"Unsupported media kind: {descriptor.kind}")
        if descriptor.kind == MediaKind.SERIES:
            return self._series_path(descriptor, base_dir)
        return self._movie_path(descriptor, base_dir)

    @staticmethod
    def _quality_suffix(descriptor: MediaDescriptor) -> str:
        return f" [{descriptor.quality}]" if descriptor.quality else ""

    def _movie_path(self: Self, descriptor: MediaDescriptor, base_dir: Path) -> Path:
        title = sanitize_component(descriptor.title)
        year = f" ({descriptor.year})" if descriptor.year else ""
        quality = self._quality_suffix(descriptor)
        filename = f"{title}{year}{quality}{descriptor.extension}"
        return base_dir / MOVIES_DIR / filename

    def _series_path(self: Self, descriptor: MediaDescriptor, base_dir: Path) -> Path:
        title = sanitize_component(descriptor.title)
        season = descriptor.season or ""
        episode = descriptor.episode or ""
        filename = (
            f"{title} S{season.zfill(2)}E{episode.zfill(2)}"
            f"{self._quality_suffix(descriptor)}{descriptor.extension}"
        )
        return base_dir / TV_SHOWS_DIR / title / f"Season {season}" / filename


def compute_target_path(
    descriptor: MediaDescriptor, destination_root: Path, rule_set: RuleSet | None = None
) -> Path:
    """Compute the target path for *descriptor* without touching the filesystem.

    Args:
        descriptor: The descriptor to place.
        destination_root: Destination root directory.
        rule_set: Layout to use; defaults to PlexRuleSet.

    Returns:
        The computed target path.
    """
    return (rule_set or PlexRuleSet()).target_path(descriptor, Path(destination_root))
