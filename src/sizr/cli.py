"""CLI interface for sizr."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from sizr import __version__
from sizr.core.engine import analyze
from sizr.core.report import render_report, report_to_dict
from sizr.core.scanner import SymlinkPolicy
from sizr.errors import ConfigError, RootAccessError
from sizr.models.report import DEFAULT_LIMIT, DEFAULT_PATH_WIDTH, KindFilter, ReportOptions
from sizr.settings import Settings
from sizr.utils import parse_size

log = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _parse_min_size(ctx: click.Context, param: click.Parameter, value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return parse_size(value)
    except ValueError:
        raise click.BadParameter(
            f"{value!r} is not a size (expected e.g. 500, 1.5KB, 2GB)", ctx=ctx, param=param
        ) from None


def _kind_filter(dirs_only: bool, files_only: bool) -> KindFilter:
    if dirs_only and files_only:
        raise click.UsageError("--dirs-only and --files-only are mutually exclusive")
    if dirs_only:
        return KindFilter.DIRS_ONLY
    if files_only:
        return KindFilter.FILES_ONLY
    return KindFilter.BOTH


def _build_options(
    settings: Settings,
    limit: int | None,
    min_size: int | None,
    kind_filter: KindFilter,
    full_paths: bool,
) -> ReportOptions:
    """Merge command-line values over settings-file defaults."""
    return ReportOptions(
        limit=limit if limit is not None else settings.get_int("report.limit", DEFAULT_LIMIT),
        min_size=min_size if min_size is not None else settings.get_size("report.min_size", 0),
        kind_filter=kind_filter,
        full_paths=full_paths or settings.get_bool("report.full_paths", False),
        path_width=settings.get_int("report.path_width", DEFAULT_PATH_WIDTH),
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--path", "-p", "root", default=".", show_default=True,
    type=click.Path(path_type=Path), help="Directory to analyze",
)
@click.option("--limit", "-l", type=click.IntRange(min=1), default=None, help="Number of items to display [default: 10]")
@click.option(
    "--min-size", "-m", callback=_parse_min_size, default=None,
    help="Only show items at least this large, e.g. 500, 1KB, 2GB",
)
@click.option("--dirs-only", "-d", is_flag=True, help="Show only directories")
@click.option("--files-only", "-f", is_flag=True, help="Show only files")
@click.option("--full-paths", "-P", is_flag=True, help="Do not shorten long paths")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.version_option(__version__, "-V", "--version", prog_name="sizr")
def main(
    root: Path,
    limit: int | None,
    min_size: int | None,
    dirs_only: bool,
    files_only: bool,
    full_paths: bool,
    as_json: bool,
    verbose: int,
) -> None:
    """List the largest files and directories under a path."""
    _setup_logging(verbose)
    kind_filter = _kind_filter(dirs_only, files_only)

    settings = Settings()
    try:
        options = _build_options(settings, limit, min_size, kind_filter, full_paths)
        record_symlinks = settings.get_bool("scan.record_symlinks", False)
    except ConfigError as e:
        raise click.UsageError(str(e)) from e
    symlinks = SymlinkPolicy.RECORD if record_symlinks else SymlinkPolicy.SKIP
    log.debug("Options: %s, symlinks=%s", options, symlinks.value)

    try:
        report = analyze(root, options, symlinks=symlinks)
    except RootAccessError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(report_to_dict(report), indent=2))
        return

    click.echo(f"Analyzing path: {click.style(str(root), bold=True)}\n")
    for line in render_report(report, options):
        click.echo(line)
