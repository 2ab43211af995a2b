"""Build target descriptors and their multi-key index."""

from bzlindex.targets.index import TargetIndex, common_source_root
from bzlindex.targets.projects import downstream_labels, package_last_segment, unique_project_name
from bzlindex.targets.types import TargetDescriptor, TargetKind

__all__ = [
    "TargetDescriptor",
    "TargetIndex",
    "TargetKind",
    "common_source_root",
    "downstream_labels",
    "package_last_segment",
    "unique_project_name",
]
