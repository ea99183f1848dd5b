from __future__ import annotations

from dataclasses import dataclass
from datetime import date

"""Export-side domain models."""

__all__ = [
    "ExportRow",
    "ExportChunk",
    "ExportPlan",
]


@dataclass(frozen=True)
class ExportRow:
    name: str
    phone: str
    email: str = ""

    def as_list(self) -> list[str]:
        return [self.name, self.phone, self.email]


@dataclass(frozen=True)
class ExportChunk:
    """A bounded batch of export rows written to one output file."""
    sequence: int  # 1-based position within the export run
    rows: tuple[ExportRow, ...]

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class ExportPlan:
    """Chunks of one export run plus everything needed to name their files."""
    base_name: str  # Source file name without extension
    export_date: date
    excel_row_start: int  # Inclusive range covered by the whole run
    excel_row_end: int
    chunks: tuple[ExportChunk, ...]

    @property
    def total_rows(self) -> int:
        return sum(len(c) for c in self.chunks)
