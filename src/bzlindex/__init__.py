"""In-memory index over build target and artifact metadata."""

from bzlindex.errors import BzlIndexError, DuplicateLabelError, SnapshotError, SourceRootError
from bzlindex.paths import SourcePath, split_namespaced_path

__all__ = [
    "BzlIndexError",
    "DuplicateLabelError",
    "SnapshotError",
    "SourcePath",
    "SourceRootError",
    "split_namespaced_path",
]
