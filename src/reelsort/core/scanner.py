"""Directory scanner for video files.

Walks the source tree recursively and yields the files whose extension marks
them as video. Everything else is skipped with a debug message.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

# Matched against the lower-cased extension.
VIDEO_EXTENSIONS = {".mp4", ".mkv", ".avi", ".mov", ".wmv", ".m4v", ".flv"}


def is_video_file(path: Path) -> bool:
    """Return True if *path* has a recognised video extension."""
    return path.suffix.lower() in VIDEO_EXTENSIONS


def _is_within(path: Path, parent: Path) -> bool:
    try:
        path.relative_to(parent)
    except ValueError:
        return False
    return True


def iter_video_files(root_dir: Path, exclude: Iterable[Path] = ()) -> Iterator[Path]:
    """Yield video files under *root_dir* in sorted, depth-first order.

    Args:
        root_dir: The directory to scan.
        exclude: Directories whose contents are never yielded, typically the
            library folders under the destination root.

    Yields:
        Paths of video files, rooted at *root_dir* as given.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
        NotADirectoryError: If the path is not a directory.
    """
    if not root_dir.exists():
        raise FileNotFoundError(f"Directory does not exist: {root_dir}")
    if not root_dir.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {root_dir}")
    excluded = tuple(path.absolute() for path in exclude)

    for item in sorted(root_dir.iterdir()):
        if any(_is_within(item.absolute(), path) for path in excluded):
            logger.debug("Skipping library tree: %s", item)
            continue
        if item.is_dir() and not item.is_symlink():
            yield from iter_video_files(item, excluded)
        elif item.is_file():
            if is_video_file(item):
                yield item
            else:
                logger.debug("Skipping non-video file: %s", item)
