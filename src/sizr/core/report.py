"""Ranking and rendering of scan results."""

from __future__ import annotations

from typing import Any

from sizr.models.entry import Entry, ScanResult
from sizr.models.report import Report, ReportOptions, ReportRow
from sizr.utils import bytes_to_human, format_elapsed_ms, truncate_path

_SIZE_COLUMN = 12


def _rank_key(entry: Entry) -> tuple[int, str]:
    # Largest first; equal sizes ordered by path for reproducible output.
    return (-entry.size_bytes, str(entry.path))


def build_report(scan: ScanResult, options: ReportOptions, elapsed_ms: float = 0.0) -> Report:
    """Filter, rank and cut down a scan according to ``options``.

    ``total_bytes`` covers every entry that passed the filters, not only the
    rows that survive the limit.
    """
    matched = [
        entry
        for entry in scan.entries
        if options.kind_filter.matches(entry.kind) and entry.size_bytes >= options.min_size
    ]
    matched.sort(key=_rank_key)

    rows = [ReportRow(rank=i, entry=entry) for i, entry in enumerate(matched[: options.limit], 1)]
    return Report(
        root=scan.root,
        rows=rows,
        total_bytes=sum(entry.size_bytes for entry in matched),
        matched_count=len(matched),
        scanned_count=len(scan.entries),
        skipped_count=scan.skipped,
        elapsed_ms=elapsed_ms,
    )


def format_row(row: ReportRow, options: ReportOptions) -> str:
    """Render one ranked row."""
    path = row.entry.display_path
    if not options.full_paths:
        path = truncate_path(path, options.path_width)
    size = bytes_to_human(row.entry.size_bytes)
    return f"{row.rank:2}. {path:<{options.path_width}} {size:>{_SIZE_COLUMN}} {row.entry.kind.label}"


def render_report(report: Report, options: ReportOptions) -> list[str]:
    """Render the report as plain text lines."""
    lines: list[str] = []
    if report.rows:
        lines.append(f"Top {len(report.rows)} largest items:")
        lines.append(f"    {'Path':<{options.path_width}} {'Size':>{_SIZE_COLUMN}} Type")
        lines.append("-" * (options.path_width + _SIZE_COLUMN + 10))
        lines.extend(format_row(row, options) for row in report.rows)
        if report.hidden_count > 0:
            lines.append("")
            lines.append(f"... and {report.hidden_count} more items")
    else:
        lines.append("No items found matching the criteria.")

    lines.append("")
    lines.append(f"Total size analyzed: {bytes_to_human(report.total_bytes)}")
    lines.append(f"Elapsed: {format_elapsed_ms(report.elapsed_ms)}")
    return lines


def report_to_dict(report: Report) -> dict[str, Any]:
    """Return a JSON-serialisable view of the report."""
    return {
        "root": str(report.root),
        "total_bytes": report.total_bytes,
        "matched_count": report.matched_count,
        "scanned_count": report.scanned_count,
        "skipped_count": report.skipped_count,
        "elapsed_ms": round(report.elapsed_ms, 2),
        "items": [
            {
                "rank": row.rank,
                "path": row.entry.display_path,
                "size_bytes": row.entry.size_bytes,
                "type": row.entry.kind.label,
            }
            for row in report.rows
        ],
    }
