"""In-memory dictionaries of discovered artifacts, files and types."""

from __future__ import annotations

from dataclasses import dataclass, field

from bzlindex.artifacts.entry import LocationEntry
from bzlindex.artifacts.types import IndexOptions, LocationDescriptor


def _add(dictionary: dict[str, LocationEntry], key: str, location: LocationDescriptor) -> None:
    entry = dictionary.get(key)
    if entry is None:
        dictionary[key] = LocationEntry(location)
    else:
        entry.add_location(location)


@dataclass(slots=True)
class ArtifactIndex:
    """Built once from a discovery pass, read-only afterwards."""

    options: IndexOptions = field(default_factory=IndexOptions)
    artifact_dictionary: dict[str, LocationEntry] = field(default_factory=dict)
    file_dictionary: dict[str, LocationEntry] = field(default_factory=dict)
    type_dictionary: dict[str, LocationEntry] = field(default_factory=dict)

    def add_artifact_location(self, artifact_name: str, location: LocationDescriptor) -> None:
        _add(self.artifact_dictionary, artifact_name, location)

    def add_file_location(self, file_name: str, location: LocationDescriptor) -> None:
        _add(self.file_dictionary, file_name, location)

    def add_type_location(self, type_name: str, location: LocationDescriptor) -> None:
        _add(self.type_dictionary, type_name, location)
