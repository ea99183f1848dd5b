from __future__ import annotations

from dataclasses import dataclass

"""Source-side domain models: detected columns and source records.

A SourceRecord keeps the physical worksheet row it came from, so every later
stage (range selection, export naming, back-annotation) can address the
original row without re-reading the file.
"""

__all__ = [
    "ColumnMatch",
    "DetectedColumns",
    "SourceRecord",
]


@dataclass(frozen=True)
class ColumnMatch:
    """A header column chosen by the detector."""
    index: int  # 0-based position in the header row
    reason: str  # Which heuristic tier matched (human readable)


@dataclass(frozen=True)
class DetectedColumns:
    """Name and phone columns detected from one header row."""
    name: ColumnMatch
    phone: ColumnMatch

    @property
    def marked_columns(self) -> tuple[int, int]:
        """1-based worksheet columns that receive annotation fills."""
        return (self.name.index + 1, self.phone.index + 1)


@dataclass(frozen=True)
class SourceRecord:
    """One non-blank data row of the source sheet."""
    name: str
    phone_raw: str
    source_row_number: int  # Worksheet row number (row 1 = header, data from row 2)
