"""Scan-and-report pipeline."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable

from sizr.core.report import build_report
from sizr.core.scanner import SymlinkPolicy, TreeScanner
from sizr.models.report import Report, ReportOptions

log = logging.getLogger(__name__)

Clock = Callable[[], float]  # seconds


def analyze(
    root: Path | str,
    options: ReportOptions,
    symlinks: SymlinkPolicy = SymlinkPolicy.SKIP,
    clock: Clock = time.perf_counter,
) -> Report:
    """Scan ``root`` and build the ranked report.

    The elapsed time covers both the scan and the report build.

    Raises:
        RootAccessError: if the root cannot be scanned.
    """
    started = clock()
    scan = TreeScanner(root, symlinks=symlinks).scan()
    report = build_report(scan, options)
    report.elapsed_ms = (clock() - started) * 1000

    log.info(
        "Analyzed %s: %d entries, %d matched, %d skipped in %.2f ms",
        root,
        report.scanned_count,
        report.matched_count,
        report.skipped_count,
        report.elapsed_ms,
    )
    return report
