"""Split source file paths into a source directory and a namespaced file path.

``src/main/java/com/salesforce/foo/Foo.java`` with namespace ``com/salesforce/foo``
splits into ``src/main/java`` + ``com/salesforce/foo/Foo.java``. The namespace
has to come from somewhere else, typically the package line of the file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourcePath:
    directory: str
    file_component: str


def os_seps(path: str) -> str:
    """Rewrite either separator style to the host separator."""
    return path.replace("\\", os.sep).replace("/", os.sep)


def path_segments(path: str) -> list[str]:
    """Split a path into non-empty segments, accepting either separator style."""
    return [segment for segment in os_seps(path).split(os.sep) if segment]


def split_namespaced_path(file_path: str | None, namespace: str | None) -> SourcePath | None:
    """Split *file_path* at the trailing occurrence of *namespace*.

    The namespace segments must be immediately followed by the file name, and
    at least one directory segment must precede them. An empty namespace is the
    default package. Returns ``None`` when the path does not fit the namespace.
    """
    if file_path is None or namespace is None:
        return None

    segments = os_seps(file_path).split(os.sep)
    file_name = segments[-1]
    if not file_name:
        # trailing separator, the file itself is missing
        return None

    stripped = os_seps(namespace).strip(os.sep)
    namespace_segments = stripped.split(os.sep) if stripped else []

    # Anchoring at the file name makes this the last occurrence, which matters
    # when the namespace directories repeat earlier in the path.
    start = len(segments) - 1 - len(namespace_segments)
    if start < 1:
        return None
    if segments[start : len(segments) - 1] != namespace_segments:
        return None

    directory = os.sep.join(segments[:start])
    if not directory.strip(os.sep):
        return None
    return SourcePath(directory=directory, file_component=os.sep.join(segments[start:]))
