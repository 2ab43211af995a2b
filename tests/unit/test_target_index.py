import pytest

from bzlindex.errors import DuplicateLabelError, SourceRootError
from bzlindex.targets.index import TargetIndex, common_source_root
from bzlindex.targets.types import TargetDescriptor, TargetKind


def _target(
    label: str, *source_paths: str, kind: TargetKind = TargetKind.JAVA_LIBRARY
) -> TargetDescriptor:
    return TargetDescriptor(
        label=label,
        kind=kind,
        source_paths=tuple(source_paths),
        workspace_root="some/path",
        main_class="main-class",
    )


@pytest.fixture
def kinds_index() -> tuple[TargetIndex, dict[str, TargetDescriptor]]:
    targets = {
        "lib": _target("foo1", "a/b/c/d/Foo.java", kind=TargetKind.JAVA_LIBRARY),
        "test": _target("foo2", "a/b/c/d/Foo.java", kind=TargetKind.JAVA_TEST),
        "bin": _target("foo3", "a/b/c/d/Foo.java", kind=TargetKind.JAVA_BINARY),
        "web": _target("foo4", "a/b/c/d/Foo.java", kind=TargetKind.JAVA_WEB_TEST_SUITE),
    }
    return TargetIndex(targets.values()), targets


def test_lookup_by_label(kinds_index) -> None:
    index, targets = kinds_index
    assert index.lookup_by_label("foo1") is targets["lib"]
    assert index.lookup_by_label("foo2") is targets["test"]
    assert index.lookup_by_label("foo3") is targets["bin"]
    assert index.lookup_by_label("foo4") is targets["web"]
    assert index.lookup_by_label("blah") is None
    assert "foo1" in index
    assert "blah" not in index
    assert len(index) == 4
    assert index.labels() == ["foo1", "foo2", "foo3", "foo4"]


def test_lookup_by_single_kind(kinds_index) -> None:
    index, targets = kinds_index
    assert index.lookup_by_kind({TargetKind.JAVA_TEST}) == [targets["test"]]
    assert index.lookup_by_kind({TargetKind.JAVA_WEB_TEST_SUITE}) == [targets["web"]]
    assert index.lookup_by_kind({TargetKind.SPRINGBOOT}) == []


def test_lookup_by_multiple_kinds(kinds_index) -> None:
    index, targets = kinds_index
    found = index.lookup_by_kind([TargetKind.JAVA_TEST, TargetKind.JAVA_BINARY])
    assert len(found) == 2
    assert targets["test"] in found
    assert targets["bin"] in found


def test_duplicate_labels_fail_construction() -> None:
    with pytest.raises(DuplicateLabelError) as excinfo:
        TargetIndex([_target("foo", "a/Foo.java"), _target("foo", "b/Foo.java")])
    assert excinfo.value.label == "foo"


def test_lookup_by_root_source_path_matches_every_ancestor() -> None:
    target = _target("foo", "a/b/c/d/Foo.java")
    index = TargetIndex([target])

    for prefix in ("a/b/c/d/Foo.java", "a/b/c/d", "a/b/c/", "a/b", "a/", "a"):
        assert index.lookup_by_root_source_path(prefix) == [target]
    assert index.lookup_by_root_source_path("f") == []
    assert index.lookup_by_root_source_path("a/b/c/d/Fo") == []
    assert index.lookup_by_root_source_path("") == []


def test_lookup_by_root_source_path_no_substring_match() -> None:
    target = _target("myclass", "projects/services/scone/MyClass.java")
    index = TargetIndex([target])

    assert index.lookup_by_root_source_path("projects/services/scone") == [target]
    assert index.lookup_by_root_source_path("projects/services/scon") == []


def test_lookup_by_root_source_path_multiple_matching() -> None:
    foo = _target("foo", "a/b/c/aaa/Foo.java")
    blah = _target("blah", "a/b/c/zzz/Blah.java")
    index = TargetIndex([foo, blah])

    found = index.lookup_by_root_source_path("a/b/c")
    assert len(found) == 2
    assert foo in found
    assert blah in found
    assert index.lookup_by_root_source_path("a/b/c/aaa") == [foo]
    assert index.lookup_by_root_source_path("a/b/c/zzz") == [blah]


def test_sources_with_common_root_match_at_and_above_it() -> None:
    foo = _target("foo", "a/b/c/aaa/ccc/Foo.java", "a/b/c/aaa/ddd/Blah.java")
    index = TargetIndex([foo])

    assert index.lookup_by_root_source_path("a/b/c") == [foo]
    assert index.lookup_by_root_source_path("a/b/c/aaa") == [foo]
    assert common_source_root(foo) == "a/b/c/aaa"


def test_partial_common_root_raises_below_it() -> None:
    foo = _target("foo", "a/b/c/aaa/Foo.java", "a/b/c/zzz/Blah.java")
    index = TargetIndex([foo])

    with pytest.raises(SourceRootError) as excinfo:
        index.lookup_by_root_source_path("a/b/c/aaa")
    assert excinfo.value.label == "foo"
    assert excinfo.value.prefix == "a/b/c/aaa"
    assert excinfo.value.retryable is False


def test_no_common_root_raises() -> None:
    foo = _target("foo", "a/b/c/aaa/Foo.java", "x/y/z/aaa/Blah.java")
    index = TargetIndex([foo])

    with pytest.raises(SourceRootError):
        index.lookup_by_root_source_path("a/b/c")
    with pytest.raises(SourceRootError):
        common_source_root(foo)


def test_malformed_target_does_not_affect_unrelated_queries() -> None:
    broken = _target("broken", "a/Foo.java", "x/Blah.java")
    fine = _target("fine", "q/r/Fine.java")
    index = TargetIndex([broken, fine])

    assert index.lookup_by_root_source_path("q/r") == [fine]
    assert index.lookup_by_label("broken") is broken


def test_common_source_root_edge_cases() -> None:
    assert common_source_root(_target("single", "a/b/c/d/Foo.java")) == "a/b/c/d"
    assert common_source_root(_target("top", "Foo.java", "Bar.java")) == ""
    assert common_source_root(_target("none")) == ""


def test_target_kind_parse_and_predicates() -> None:
    assert TargetKind.parse(" Java_Test ") is TargetKind.JAVA_TEST
    with pytest.raises(ValueError):
        TargetKind.parse("cc_library")
    assert TargetKind.JAVA_WEB_TEST_SUITE.is_test()
    assert not TargetKind.JAVA_LIBRARY.is_test()
    assert TargetKind.SPRINGBOOT.is_runnable()
    assert TargetKind.JAVA_TEST.is_runnable()
    assert not TargetKind.JAVA_IMPORT.is_runnable()
