"""Click CLI group: split-path, targets and report commands."""

from __future__ import annotations

import json
from pathlib import Path

import click

from bzlindex.artifacts.reporter import ArtifactReporter, ReportOptions
from bzlindex.config import get_settings, validate_settings
from bzlindex.errors import BzlIndexError, ConfigError, SourceRootError
from bzlindex.logging import bind_context, configure_logging
from bzlindex.paths import split_namespaced_path
from bzlindex.snapshot import load_artifact_index, load_targets, read_snapshot
from bzlindex.targets.index import TargetIndex
from bzlindex.targets.types import TargetKind

_KIND_CHOICES = [kind.value for kind in TargetKind]


class SourceRootFailure(click.ClickException):
    exit_code = 2


def _load_snapshot(path: str) -> dict[str, object]:
    try:
        return read_snapshot(Path(path))
    except BzlIndexError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.option("--log-level", type=str, default=None, help="Override LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Query and report on build target and artifact snapshots."""
    settings = get_settings()
    try:
        validate_settings(settings)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    configure_logging(log_level or settings.log_level)


@cli.command("split-path")
@click.argument("file_path")
@click.argument("namespace", default="")
def split_path(file_path: str, namespace: str) -> None:
    """Split FILE_PATH into its source directory and NAMESPACE-relative file."""
    source_path = split_namespaced_path(file_path, namespace)
    if source_path is None:
        raise click.ClickException(f"{file_path} does not end in namespace {namespace!r}")
    click.echo(f"directory: {source_path.directory}")
    click.echo(f"file: {source_path.file_component}")


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=str))
@click.option("--label", type=str, default=None, help="Exact target label.")
@click.option(
    "--kind",
    "kinds",
    type=click.Choice(_KIND_CHOICES, case_sensitive=False),
    multiple=True,
    help="Target kind; repeat for a union.",
)
@click.option("--root", type=str, default=None, help="Source root directory prefix.")
@click.option("--json", "json_output", is_flag=True, help="Print matches as JSON.")
def targets(
    snapshot: str,
    label: str | None,
    kinds: tuple[str, ...],
    root: str | None,
    json_output: bool,
) -> None:
    """Look up targets in SNAPSHOT by label, kind or source root."""
    chosen = [option for option in (label, kinds, root) if option]
    if len(chosen) != 1:
        raise click.ClickException("pass exactly one of --label, --kind or --root")

    bind_context(snapshot=snapshot)
    try:
        index = TargetIndex(load_targets(_load_snapshot(snapshot)))
        if label:
            found = index.lookup_by_label(label)
            matches = [found] if found is not None else []
        elif kinds:
            matches = index.lookup_by_kind(TargetKind.parse(kind) for kind in kinds)
        else:
            matches = index.lookup_by_root_source_path(root or "")
    except SourceRootError as exc:
        raise SourceRootFailure(str(exc)) from exc
    except BzlIndexError as exc:
        raise click.ClickException(str(exc)) from exc

    matches.sort(key=lambda descriptor: descriptor.label)
    if json_output:
        payload = [
            {
                "label": descriptor.label,
                "kind": descriptor.kind.value,
                "source_paths": list(descriptor.source_paths),
            }
            for descriptor in matches
        ]
        click.echo(json.dumps(payload, indent=2))
        return
    for descriptor in matches:
        click.echo(f"{descriptor.label}\t{descriptor.kind.value}")


@cli.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=str))
@click.option(
    "--format",
    "report_format",
    type=click.Choice(["text", "csv", "histogram"]),
    default="text",
    show_default=True,
)
@click.option("--suppress-deprecated", is_flag=True, help="Hide deprecated artifacts.")
def report(snapshot: str, report_format: str, suppress_deprecated: bool) -> None:
    """Render an artifact report for SNAPSHOT."""
    settings = get_settings()
    bind_context(snapshot=snapshot)
    try:
        index = load_artifact_index(_load_snapshot(snapshot))
    except BzlIndexError as exc:
        raise click.ClickException(str(exc)) from exc

    reporter = ArtifactReporter(index, max_year_age=settings.histogram_max_year_age)
    options = ReportOptions.from_settings(suppress_deprecated=suppress_deprecated)
    if report_format == "csv":
        lines = reporter.render_artifacts_csv(options)
    elif report_format == "histogram":
        lines = reporter.render_age_histogram_csv()
    else:
        lines = reporter.render_text(options)
    for line in lines:
        click.echo(line)


if __name__ == "__main__":
    cli()
