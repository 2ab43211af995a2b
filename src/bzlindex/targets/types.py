"""Build target descriptor models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TargetKind(str, Enum):
    JAVA_LIBRARY = "java_library"
    JAVA_TEST = "java_test"
    JAVA_BINARY = "java_binary"
    JAVA_IMPORT = "java_import"
    JAVA_PROTO_LIBRARY = "java_proto_library"
    JAVA_LITE_PROTO_LIBRARY = "java_lite_proto_library"
    JAVA_GRPC_LIBRARY = "java_grpc_library"
    JAVA_WEB_TEST_SUITE = "java_web_test_suite"
    SELENIUM_TEST = "selenium_test"
    SPRINGBOOT = "springboot"
    PROTO_LIBRARY = "proto_library"

    @classmethod
    def parse(cls, value: str) -> TargetKind:
        normalized = value.strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind
        raise ValueError(f"unknown target kind: {value}")

    def is_test(self) -> bool:
        return self in _TEST_KINDS

    def is_runnable(self) -> bool:
        return self in _TEST_KINDS or self in (TargetKind.JAVA_BINARY, TargetKind.SPRINGBOOT)


_TEST_KINDS = frozenset(
    {TargetKind.JAVA_TEST, TargetKind.JAVA_WEB_TEST_SUITE, TargetKind.SELENIUM_TEST}
)


@dataclass(frozen=True, slots=True)
class TargetDescriptor:
    label: str
    kind: TargetKind
    source_paths: tuple[str, ...] = ()
    workspace_root: str = ""
    dependency_labels: tuple[str, ...] = ()
    main_class: str | None = None
