"""Helpers for turning indexed targets into importable projects."""

from __future__ import annotations

from collections.abc import Iterable

from bzlindex.targets.index import TargetIndex


def package_last_segment(label: str) -> str:
    """``//projects/libs/apple-api:lib`` -> ``apple-api``.

    Labels in the root package fall back to the target name.
    """
    _, _, remainder = label.rpartition("//")
    package, _, target = remainder.partition(":")
    package = package.strip("/")
    if package:
        return package.rsplit("/", 1)[-1]
    return target


def unique_project_name(label: str, existing_names: Iterable[str]) -> str:
    """Name a project after its package, appending 2, 3, ... on conflict."""
    taken = set(existing_names)
    base = package_last_segment(label)
    name = base
    suffix = 2
    while name in taken:
        name = f"{base}{suffix}"
        suffix += 1
    return name


def downstream_labels(index: TargetIndex, label: str) -> list[str]:
    """Labels of every target that depends on *label*, directly or transitively.

    Ordered depth-first in dependency discovery order.
    """
    dependents: dict[str, list[str]] = {}
    for descriptor in index:
        for dependency in descriptor.dependency_labels:
            dependents.setdefault(dependency, []).append(descriptor.label)

    found: dict[str, None] = {}
    stack = list(reversed(dependents.get(label, [])))
    while stack:
        current = stack.pop()
        if current == label or current in found:
            continue
        found[current] = None
        stack.extend(reversed(dependents.get(current, [])))
    return list(found)
