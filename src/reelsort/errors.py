"""Error taxonomy for reelsort.

Two kinds of errors are fatal and abort a run before any file is touched
(ConfigError, AuthError). The remaining kinds are scoped to a single file and
never propagate past the pipeline stage that handles them.
"""

from pathlib import Path


class ReelsortError(Exception):
    """Base class for all reelsort errors."""


class ConfigError(ReelsortError):
    """Raised when the config file is unreadable or malformed."""


class AuthError(ReelsortError):
    """Raised when a provider credential exchange fails."""


class ClassificationError(ReelsortError):
    """Raised when a filename matches neither the series nor the movie pattern."""

    def __init__(self, filename: str) -> None:
        """Initialize the error with the raw filename that failed to parse."""
        super().__init__(f"unable to parse filename: {filename}")
        self.filename = filename


class MetadataError(ReelsortError):
    """Raised by metadata clients on network, HTTP or payload failures."""


class OperationError(ReelsortError):
    """Raised when directory creation or a move/copy/symlink action fails."""

    def __init__(self, source: Path, message: str) -> None:
        """Initialize the error with the source file and a description."""
        super().__init__(f"error processing {source}: {message}")
        self.source = source
