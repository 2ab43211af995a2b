"""Compact holder for the discovered locations of one artifact."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from bzlindex.artifacts.types import LocationDescriptor


class EntryState(str, Enum):
    EMPTY = "empty"
    SINGLE = "single"
    MULTIPLE = "multiple"


class LocationEntry:
    """Locations found for one artifact, keyed by location identifier.

    Indexes hold tens of thousands of these and nearly all have a single
    location, so a list is only allocated once a second location shows up.
    """

    __slots__ = ("single_location", "multiple_locations")

    def __init__(self, location: LocationDescriptor | None = None) -> None:
        self.single_location: LocationDescriptor | None = location
        self.multiple_locations: list[LocationDescriptor] | None = None

    @property
    def state(self) -> EntryState:
        if self.multiple_locations is not None:
            return EntryState.MULTIPLE
        if self.single_location is not None:
            return EntryState.SINGLE
        return EntryState.EMPTY

    def add_location(self, location: LocationDescriptor) -> None:
        identifier = location.location_identifier
        if self.multiple_locations is not None:
            for existing in self.multiple_locations:
                if existing.location_identifier == identifier:
                    # same artifact seen twice, e.g. through a symlink
                    return
            self.multiple_locations.append(location)
        elif self.single_location is not None:
            if self.single_location.location_identifier == identifier:
                return
            self.multiple_locations = [self.single_location, location]
            self.single_location = None
        else:
            self.single_location = location

    def primary_location(self) -> LocationDescriptor | None:
        """The first location added. Nothing more canonical than that."""
        if self.multiple_locations is not None:
            return self.multiple_locations[0]
        return self.single_location

    def __iter__(self) -> Iterator[LocationDescriptor]:
        if self.multiple_locations is not None:
            yield from self.multiple_locations
        elif self.single_location is not None:
            yield self.single_location

    def __len__(self) -> int:
        if self.multiple_locations is not None:
            return len(self.multiple_locations)
        return 0 if self.single_location is None else 1

    def __repr__(self) -> str:
        identifiers = [location.location_identifier for location in self]
        return f"LocationEntry({identifiers!r})"
