"""Artifact location data models."""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN_AGE = -1


@dataclass(frozen=True, slots=True)
class LocationDescriptor:
    location_identifier: str
    label: str
    version: str = ""
    age_in_days: int = UNKNOWN_AGE


@dataclass(frozen=True, slots=True)
class IndexOptions:
    compute_artifact_ages: bool = True

    @classmethod
    def from_settings(cls) -> IndexOptions:
        from bzlindex.config import get_settings

        return cls(compute_artifact_ages=bool(int(get_settings().compute_artifact_ages)))
