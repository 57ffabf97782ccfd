"""sizr data models."""

from sizr.models.entry import Entry, EntryKind, ScanResult
from sizr.models.report import KindFilter, Report, ReportOptions, ReportRow

__all__ = [
    "Entry",
    "EntryKind",
    "KindFilter",
    "Report",
    "ReportOptions",
    "ReportRow",
    "ScanResult",
]
