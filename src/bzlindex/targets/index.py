"""Lookup of target descriptors by label, kind and source root."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator

from bzlindex.errors import DuplicateLabelError, SourceRootError
from bzlindex.paths import path_segments
from bzlindex.targets.types import TargetDescriptor, TargetKind

logger = logging.getLogger(__name__)


def common_source_root(descriptor: TargetDescriptor) -> str:
    """Return the deepest directory holding every source file of *descriptor*.

    Sources sitting directly in the workspace root give ``""``. Raises
    SourceRootError when the source directories share no leading segment.
    """
    directories = [path_segments(path)[:-1] for path in descriptor.source_paths]
    if not directories:
        return ""

    common = directories[0]
    for directory in directories[1:]:
        shared = 0
        limit = min(len(common), len(directory))
        while shared < limit and common[shared] == directory[shared]:
            shared += 1
        common = common[:shared]

    if not common and any(directories):
        raise SourceRootError(descriptor.label, descriptor.source_paths)
    return os.sep.join(common)


def _normalize_root(path: str) -> str:
    return os.sep.join(path_segments(path))


def _registration_keys(source_path: str) -> Iterator[str]:
    # every ancestor directory plus the file itself
    segments = path_segments(source_path)
    for depth in range(1, len(segments) + 1):
        yield os.sep.join(segments[:depth])


class TargetIndex:
    """Read-only view over a fixed set of target descriptors.

    All lookup structures are built here; there is no incremental update.
    Build a new index from a fresh snapshot instead.
    """

    def __init__(self, descriptors: Iterable[TargetDescriptor]) -> None:
        self._by_label: dict[str, TargetDescriptor] = {}
        self._by_kind: dict[TargetKind, list[TargetDescriptor]] = {}
        # inner dicts keyed by label act as insertion-ordered sets
        self._by_root_source_path: dict[str, dict[str, TargetDescriptor]] = {}

        for descriptor in descriptors:
            if descriptor.label in self._by_label:
                raise DuplicateLabelError(descriptor.label)
            self._by_label[descriptor.label] = descriptor
            self._by_kind.setdefault(descriptor.kind, []).append(descriptor)
            for source_path in descriptor.source_paths:
                for key in _registration_keys(source_path):
                    self._by_root_source_path.setdefault(key, {})[descriptor.label] = descriptor

        logger.debug(
            "Indexed %d targets across %d kinds and %d source roots",
            len(self._by_label),
            len(self._by_kind),
            len(self._by_root_source_path),
        )

    def __len__(self) -> int:
        return len(self._by_label)

    def __iter__(self) -> Iterator[TargetDescriptor]:
        return iter(self._by_label.values())

    def __contains__(self, label: object) -> bool:
        return label in self._by_label

    def labels(self) -> list[str]:
        return list(self._by_label)

    def lookup_by_label(self, label: str) -> TargetDescriptor | None:
        return self._by_label.get(label)

    def lookup_by_kind(self, kinds: Iterable[TargetKind]) -> list[TargetDescriptor]:
        found: list[TargetDescriptor] = []
        for kind in set(kinds):
            found.extend(self._by_kind.get(kind, ()))
        return found

    def lookup_by_root_source_path(self, prefix: str) -> list[TargetDescriptor]:
        """Targets with sources under *prefix*, matched on whole path segments.

        Every matched target must keep all of its sources under *prefix*;
        a target that straddles the prefix raises SourceRootError.
        """
        key = _normalize_root(prefix)
        registered = self._by_root_source_path.get(key)
        if not registered:
            return []

        prefix_segments = key.split(os.sep)
        depth = len(prefix_segments)
        for descriptor in registered.values():
            try:
                common_source_root(descriptor)
                for source_path in descriptor.source_paths:
                    if path_segments(source_path)[:depth] != prefix_segments:
                        raise SourceRootError(descriptor.label, descriptor.source_paths, key)
            except SourceRootError as exc:
                logger.warning("Inconsistent source root for %s: %s", descriptor.label, exc)
                raise
        return list(registered.values())
