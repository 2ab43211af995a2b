"""Read build-graph snapshots produced by the extraction step.

The snapshot is a JSON object with ``targets``, ``artifacts``, ``files`` and
``types`` arrays plus an optional ``options`` object. It is only an input
format; indexes are rebuilt from it on every load and never written back.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from bzlindex.artifacts.index import ArtifactIndex
from bzlindex.artifacts.types import UNKNOWN_AGE, IndexOptions, LocationDescriptor
from bzlindex.errors import SnapshotError
from bzlindex.targets.types import TargetDescriptor, TargetKind

logger = logging.getLogger(__name__)


class TargetRecord(BaseModel):
    label: str = Field(min_length=1)
    kind: str
    source_paths: list[str] = Field(default_factory=list)
    workspace_root: str = ""
    dependency_labels: list[str] = Field(default_factory=list)
    main_class: str | None = None


class LocationRecord(BaseModel):
    name: str = Field(min_length=1)
    location_identifier: str = Field(min_length=1)
    label: str = ""
    version: str = ""
    age_in_days: int = UNKNOWN_AGE


class OptionsRecord(BaseModel):
    compute_artifact_ages: bool = True


def read_snapshot(path: Path) -> dict[str, Any]:
    try:
        decoded = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SnapshotError(f"cannot read snapshot {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"snapshot {path} is not valid JSON: {exc}") from exc
    if not isinstance(decoded, dict):
        raise SnapshotError(f"snapshot {path} must contain a JSON object")
    return decoded


def _records(payload: dict[str, Any], key: str) -> list[Any]:
    raw = payload.get(key, [])
    if not isinstance(raw, list):
        raise SnapshotError(f"snapshot section '{key}' must be a list")
    return raw


def load_targets(payload: dict[str, Any]) -> list[TargetDescriptor]:
    descriptors: list[TargetDescriptor] = []
    for position, raw in enumerate(_records(payload, "targets")):
        try:
            record = TargetRecord.model_validate(raw)
            kind = TargetKind.parse(record.kind)
        except (ValidationError, ValueError) as exc:
            raise SnapshotError(f"invalid target record #{position}: {exc}") from exc
        descriptors.append(
            TargetDescriptor(
                label=record.label,
                kind=kind,
                source_paths=tuple(record.source_paths),
                workspace_root=record.workspace_root,
                dependency_labels=tuple(record.dependency_labels),
                main_class=record.main_class,
            )
        )
    logger.info("Loaded %d target descriptors", len(descriptors))
    return descriptors


def _index_options(payload: dict[str, Any]) -> IndexOptions:
    raw = payload.get("options")
    if raw is None:
        return IndexOptions.from_settings()
    try:
        record = OptionsRecord.model_validate(raw)
    except ValidationError as exc:
        raise SnapshotError(f"invalid snapshot options: {exc}") from exc
    return IndexOptions(compute_artifact_ages=record.compute_artifact_ages)


def load_artifact_index(
    payload: dict[str, Any], options: IndexOptions | None = None
) -> ArtifactIndex:
    """Build an ArtifactIndex; explicit *options* win over the snapshot's own."""
    index = ArtifactIndex(options=options or _index_options(payload))
    sections = (
        ("artifacts", index.add_artifact_location),
        ("files", index.add_file_location),
        ("types", index.add_type_location),
    )
    for key, add in sections:
        for position, raw in enumerate(_records(payload, key)):
            try:
                record = LocationRecord.model_validate(raw)
            except ValidationError as exc:
                raise SnapshotError(f"invalid {key} record #{position}: {exc}") from exc
            add(
                record.name,
                LocationDescriptor(
                    location_identifier=record.location_identifier,
                    label=record.label,
                    version=record.version,
                    age_in_days=record.age_in_days,
                ),
            )
    logger.info(
        "Loaded artifact index: %d artifacts, %d files, %d types",
        len(index.artifact_dictionary),
        len(index.file_dictionary),
        len(index.type_dictionary),
    )
    return index
