"""Text, CSV and age-histogram reports over an ArtifactIndex.

Renderers return lists of lines; writing them anywhere is the caller's job.
Subclass ArtifactReporter and override ``accept`` for custom filtering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bzlindex.artifacts.entry import LocationEntry
from bzlindex.artifacts.index import ArtifactIndex
from bzlindex.artifacts.types import UNKNOWN_AGE, LocationDescriptor

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365
DEFAULT_MAX_YEAR_AGE = 40
SECTION_RULE = "-" * 40
AGES_DISABLED_MESSAGE = (
    "Dependency age histogram could not be computed because age computation "
    "for dependencies is disabled."
)


@dataclass(frozen=True, slots=True)
class ReportOptions:
    suppress_deprecated: bool = False
    deprecated_prefix: str = "@deprecated"

    @classmethod
    def from_settings(cls, *, suppress_deprecated: bool = False) -> ReportOptions:
        from bzlindex.config import get_settings

        return cls(
            suppress_deprecated=suppress_deprecated,
            deprecated_prefix=get_settings().deprecated_label_prefix,
        )


@dataclass(slots=True)
class AgeHistogram:
    """Artifact counts bucketed by whole years of age."""

    max_year_age: int = DEFAULT_MAX_YEAR_AGE
    counts_per_year: list[int] = field(default_factory=list)
    undetermined_count: int = 0

    def __post_init__(self) -> None:
        if not self.counts_per_year:
            self.counts_per_year = [0] * self.max_year_age

    def record_age(self, age_in_days: int) -> None:
        if age_in_days == UNKNOWN_AGE or age_in_days < 0:
            self.undetermined_count += 1
            return
        age_in_years = age_in_days // DAYS_PER_YEAR  # leap years ignored
        if age_in_years >= self.max_year_age:
            # bogus future timestamp upstream
            self.undetermined_count += 1
            return
        self.counts_per_year[age_in_years] += 1

    @property
    def total(self) -> int:
        return sum(self.counts_per_year) + self.undetermined_count


class ArtifactReporter:
    def __init__(self, index: ArtifactIndex, *, max_year_age: int = DEFAULT_MAX_YEAR_AGE) -> None:
        self.index = index
        self.max_year_age = max_year_age

    def accept(self, options: ReportOptions, entry: LocationEntry) -> bool:
        """Decide whether *entry* belongs in a filtered report."""
        if options.suppress_deprecated:
            location = entry.primary_location()
            if location is not None and location.label.startswith(options.deprecated_prefix):
                return False
        return True

    # text

    def render_text(self, options: ReportOptions | None = None) -> list[str]:
        options = options or ReportOptions()
        lines: list[str] = [""]
        sections = (
            ("ARTIFACT INDEX", self.index.artifact_dictionary),
            ("FILE INDEX", self.index.file_dictionary),
            ("TYPE INDEX", self.index.type_dictionary),
        )
        for title, dictionary in sections:
            lines.append(f"{title} ({len(dictionary)} entries)")
            lines.append(SECTION_RULE)
            for name, entry in dictionary.items():
                if self.accept(options, entry):
                    lines.append(f"  {name}")
                    lines.extend(f"    {location.location_identifier}" for location in entry)
            lines.append("")
        return lines

    # csv

    def _ages_enabled(self) -> bool:
        return self.index.options.compute_artifact_ages

    def _csv_row(self, artifact_name: str, location: LocationDescriptor) -> str:
        columns = [artifact_name, location.label, location.version]
        if self._ages_enabled():
            columns.append(str(location.age_in_days))
        return ", ".join(columns)

    def render_artifacts_csv(self, options: ReportOptions | None = None) -> list[str]:
        options = options or ReportOptions()
        if self._ages_enabled():
            rows = ["Artifact Name, Bazel Label, Version, Age (in days)"]
        else:
            rows = ["Artifact Name, Bazel Label, Version"]

        dictionary = self.index.artifact_dictionary
        for artifact_name in sorted(dictionary):
            entry = dictionary[artifact_name]
            if self.accept(options, entry):
                rows.extend(self._csv_row(artifact_name, location) for location in entry)
        logger.debug("Rendered artifact csv with %d rows", len(rows) - 1)
        return rows

    # histogram

    def build_age_histogram(self) -> AgeHistogram:
        histogram = AgeHistogram(max_year_age=self.max_year_age)
        for entry in self.index.artifact_dictionary.values():
            for location in entry:
                histogram.record_age(location.age_in_days)
        return histogram

    def render_age_histogram_csv(self) -> list[str]:
        if not self._ages_enabled():
            return [AGES_DISABLED_MESSAGE]

        histogram = self.build_age_histogram()
        rows = ["Age (in Years), Number of Dependencies"]
        rows.extend(f"{year}, {count}" for year, count in enumerate(histogram.counts_per_year))
        rows.append(f"{UNKNOWN_AGE}, {histogram.undetermined_count}")
        return rows
