"""Artifact location index and reports."""

from bzlindex.artifacts.entry import EntryState, LocationEntry
from bzlindex.artifacts.index import ArtifactIndex
from bzlindex.artifacts.reporter import AgeHistogram, ArtifactReporter, ReportOptions
from bzlindex.artifacts.types import UNKNOWN_AGE, IndexOptions, LocationDescriptor

__all__ = [
    "UNKNOWN_AGE",
    "AgeHistogram",
    "ArtifactIndex",
    "ArtifactReporter",
    "EntryState",
    "IndexOptions",
    "LocationDescriptor",
    "LocationEntry",
    "ReportOptions",
]
