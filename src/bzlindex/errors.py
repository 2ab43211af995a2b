"""bzlindex exception hierarchy.

All bzlindex-specific exceptions inherit from BzlIndexError,
enabling structured error handling and cleaner catch clauses.
"""

from __future__ import annotations

from collections.abc import Sequence


class BzlIndexError(Exception):
    """Base exception for all bzlindex errors."""

    def __init__(self, message: str = "", *, retryable: bool = False) -> None:
        super().__init__(message)
        self.retryable = retryable


class SourceRootError(BzlIndexError):
    """A target's source files do not share the root a query depends on.

    This points at upstream extraction producing inconsistent data, so it is
    never retryable and never downgraded to an empty result.
    """

    def __init__(self, label: str, source_paths: Sequence[str], prefix: str | None = None) -> None:
        if prefix is None:
            message = f"target {label} has no common source root: {', '.join(source_paths)}"
        else:
            message = (
                f"target {label} has source files outside of queried root {prefix!r}: "
                f"{', '.join(source_paths)}"
            )
        super().__init__(message)
        self.label = label
        self.source_paths = tuple(source_paths)
        self.prefix = prefix


class DuplicateLabelError(BzlIndexError):
    """Two target descriptors with the same label were handed to one index."""

    def __init__(self, label: str) -> None:
        super().__init__(f"duplicate target label: {label}")
        self.label = label


class SnapshotError(BzlIndexError):
    """Malformed build-graph snapshot input."""


class ConfigError(BzlIndexError):
    """Invalid or missing configuration."""
