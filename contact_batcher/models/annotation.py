from __future__ import annotations

from dataclasses import dataclass

from .classification import Classification

"""Back-annotation models.

An AnnotationPlan says what a row *should* receive. Whether a cell is actually
touched is decided when the plan is applied, by looking at the cell's current
state in the original workbook.
"""

__all__ = [
    "RowAnnotation",
    "AnnotationPlan",
    "AnnotationOutcome",
]


@dataclass(frozen=True)
class RowAnnotation:
    row_number: int  # Worksheet row (>= 2)
    columns: frozenset[int]  # 1-based columns to fill
    tier: Classification
    status_value: str  # "SI" | "NO"


@dataclass(frozen=True)
class AnnotationPlan:
    rows: tuple[RowAnnotation, ...]  # Ordered OK, then WARN, then BAD

    def __len__(self) -> int:
        return len(self.rows)

    def row_numbers(self, tier: Classification) -> list[int]:
        return [r.row_number for r in self.rows if r.tier is tier]


@dataclass(frozen=True)
class AnnotationOutcome:
    """Counts of what an apply pass changed and what it left alone."""
    status_column: int  # 1-based status column index
    status_column_added: bool
    fills_applied: int = 0
    fills_skipped: int = 0  # Cell already carried a fill
    statuses_written: int = 0
    statuses_skipped: int = 0  # Status cell already had a value

    @property
    def changed(self) -> bool:
        return self.status_column_added or self.fills_applied > 0 or self.statuses_written > 0
