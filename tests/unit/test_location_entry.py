from bzlindex.artifacts.entry import EntryState, LocationEntry
from bzlindex.artifacts.types import LocationDescriptor


def _location(identifier: str, label: str = "@maven//:guava") -> LocationDescriptor:
    return LocationDescriptor(
        location_identifier=identifier, label=label, version="31.1", age_in_days=100
    )


def test_empty_entry_has_no_primary_location() -> None:
    entry = LocationEntry()
    assert entry.state is EntryState.EMPTY
    assert entry.primary_location() is None
    assert len(entry) == 0
    assert list(entry) == []


def test_single_location_is_stored_without_a_list() -> None:
    first = _location("/repo/guava-31.1.jar")
    entry = LocationEntry()
    entry.add_location(first)
    assert entry.state is EntryState.SINGLE
    assert entry.multiple_locations is None
    assert entry.primary_location() is first


def test_adding_same_identifier_is_idempotent() -> None:
    first = _location("/repo/guava-31.1.jar")
    entry = LocationEntry(first)
    entry.add_location(_location("/repo/guava-31.1.jar", label="@other//:guava"))
    assert len(entry) == 1
    assert entry.primary_location() is first

    entry.add_location(_location("/cache/guava-31.1.jar"))
    entry.add_location(_location("/cache/guava-31.1.jar"))
    entry.add_location(_location("/repo/guava-31.1.jar"))
    assert len(entry) == 2


def test_second_location_switches_to_multiple_storage() -> None:
    first = _location("/repo/guava-31.1.jar")
    second = _location("/cache/guava-31.1.jar")
    entry = LocationEntry(first)
    entry.add_location(second)

    assert entry.state is EntryState.MULTIPLE
    assert entry.single_location is None
    assert entry.primary_location() is first
    assert list(entry) == [first, second]

    third = _location("/other/guava-31.1.jar")
    entry.add_location(third)
    assert entry.primary_location() is first
    assert [location.location_identifier for location in entry] == [
        "/repo/guava-31.1.jar",
        "/cache/guava-31.1.jar",
        "/other/guava-31.1.jar",
    ]
