"""Base abstract class for library layout rule sets.

A RuleSet maps an enriched MediaDescriptor and a destination root to the path
the file should occupy. Implementations must be pure: identical inputs give an
identical path and no filesystem access happens while computing it.

No uniqueness is guaranteed. Two descriptors that normalize to the same title,
year and quality get the same target path.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Self

from reelsort.models.core import MediaDescriptor, MediaKind


def sanitize_component(name: str) -> str:
    """Make a title safe to use as a single path component."""
    cleaned = name.replace("/", "-").replace("\\", "-").replace("\0", "")
    if cleaned in {".", ".."}:
        return cleaned.replace(".", "-")
    return cleaned


class RuleSet(ABC):
    """Abstract base class for library layout rule sets."""

    def __init__(self: Self, platform_name: str) -> None:
        """Initialize a rule set.

        Args:
            platform_name: The name of the layout this rule set implements.
        """
        self.platform_name = platform_name

    @abstractmethod
    def target_path(self: Self, descriptor: MediaDescriptor, base_dir: Path) -> Path:
        """Generate the target path for a descriptor under *base_dir*.

        Args:
            descriptor: The classified (and optionally enriched) descriptor.
            base_dir: Destination root; the result is always inside it.

        Returns:
            The target path.

        Raises:
            ValueError: If the descriptor kind is not supported.
        """

    @abstractmethod
    def library_dirs(self: Self, base_dir: Path) -> list[Path]:
        """Return the top-level folders this layout writes into under *base_dir*."""

    def supports_kind(self: Self, kind: MediaKind) -> bool:
        """Return True if this rule set can place the given kind of media."""
        return kind in self.supported_kinds

    @property
    @abstractmethod
    def supported_kinds(self: Self) -> list[MediaKind]:
        """Get the media kinds this rule set can place."""
