"""FileSystem double that records calls instead of touching the disk."""

from pathlib import Path
from typing import List, Optional, Tuple

from reelsort.fs.operations import FileSystem


class RecordingFileSystem(FileSystem):
    """Record every mutating call; optionally fail one of them."""

    def __init__(self, fail_on: Optional[str] = None) -> None:
        self.calls: List[Tuple[str, Tuple[Path, ...]]] = []
        self.fail_on = fail_on

    def _record(self, name: str, *args: Path) -> None:
        self.calls.append((name, args))
        if name == self.fail_on:
            raise OSError(f"simulated {name} failure")

    def make_dirs(self, path: Path) -> None:
        self._record("make_dirs", path)

    def rename(self, src: Path, dst: Path) -> None:
        self._record("rename", src, dst)

    def copy(self, src: Path, dst: Path) -> None:
        self._record("copy", src, dst)

    def symlink(self, src: Path, dst: Path) -> None:
        self._record("symlink", src, dst)
