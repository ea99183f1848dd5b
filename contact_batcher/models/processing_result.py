from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .annotation import AnnotationOutcome
from .range_selection import RangeStatus

"""Aggregated result of one export run (feeds the SUMMARY line)."""

__all__ = [
    "ExportResult",
]


@dataclass(frozen=True)
class ExportResult:
    source_file: Path
    sheet_name: str
    total_records: int  # Non-blank records loaded from the sheet
    range_status: RangeStatus
    excel_row_start: int = 0
    excel_row_end: int = 0
    ok_rows: int = 0
    warn_rows: int = 0
    bad_rows: int = 0
    exported_rows: int = 0
    written_files: list[Path] = field(default_factory=list)
    annotation: AnnotationOutcome | None = None

    @property
    def selected_rows(self) -> int:
        return self.ok_rows + self.warn_rows + self.bad_rows
