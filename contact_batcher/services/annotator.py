from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Protocol

from ..models.annotation import AnnotationOutcome, AnnotationPlan, RowAnnotation
from ..models.classification import Classification, ClassifiedRecord
from ..models.config_models import FillColors

"""Back-annotation of the source sheet.

Planning is pure: ``plan_annotations`` turns classified rows into an
AnnotationPlan. Applying it goes through a ``SheetEditor`` and is where prior
state is respected:

- a marked cell that already carries a fill keeps it
- a status cell that already holds a value keeps it

so re-running over overlapping ranges never rewrites earlier markers, and
applying the same plan twice leaves the sheet unchanged the second time.
"""

__all__ = [
    "TIER_ORDER",
    "AnnotationError",
    "SheetEditor",
    "plan_annotations",
    "find_status_column",
    "apply_annotations",
]

logger = logging.getLogger(__name__)

TIER_ORDER = (Classification.OK, Classification.WARN, Classification.BAD)


class AnnotationError(Exception):
    """Raised when the original workbook cannot be annotated."""


class SheetEditor(Protocol):
    """Mutation-mode access to one worksheet (1-based rows and columns)."""

    def header_values(self) -> list[Any]: ...

    def append_column(self, header: str) -> int: ...

    def has_fill(self, row: int, col: int) -> bool: ...

    def set_fill(self, row: int, col: int, color: str) -> None: ...

    def get_value(self, row: int, col: int) -> Any: ...

    def set_value(self, row: int, col: int, value: Any) -> None: ...

    def save(self) -> None: ...


def plan_annotations(
    classified: Iterable[ClassifiedRecord], marked_columns: Iterable[int]
) -> AnnotationPlan:
    cols = frozenset(int(c) for c in marked_columns if int(c) >= 1)
    if not cols:
        logger.warning("no valid columns to mark; only the status column will be written")
    by_tier: dict[Classification, list[RowAnnotation]] = {t: [] for t in TIER_ORDER}
    for c in classified:
        if c.row_number < 2:
            continue
        by_tier[c.classification].append(
            RowAnnotation(
                row_number=c.row_number,
                columns=cols,
                tier=c.classification,
                status_value=c.classification.status_value,
            )
        )
    return AnnotationPlan(rows=tuple(a for t in TIER_ORDER for a in by_tier[t]))


def find_status_column(headers: Iterable[Any], status_header: str) -> int | None:
    """1-based index of the status column (case-insensitive), or None."""
    wanted = status_header.strip().upper()
    for idx, value in enumerate(headers, start=1):
        if str(value if value is not None else "").strip().upper() == wanted:
            return idx
    return None


def _fill_color(fills: FillColors, tier: Classification) -> str:
    return {
        Classification.OK: fills.ok,
        Classification.WARN: fills.warn,
        Classification.BAD: fills.bad,
    }[tier]


def apply_annotations(
    editor: SheetEditor,
    plan: AnnotationPlan,
    status_header: str,
    fills: FillColors,
) -> AnnotationOutcome:
    """Apply ``plan`` through ``editor`` without overwriting prior markers.

    The editor is not saved here; the caller decides when to persist.
    """
    status_col = find_status_column(editor.header_values(), status_header)
    added = False
    if status_col is None:
        status_col = editor.append_column(status_header)
        added = True
        logger.info("status column added: %s (column #%d)", status_header, status_col)
    else:
        logger.debug("status column found: %s (column #%d)", status_header, status_col)

    fills_applied = fills_skipped = statuses_written = statuses_skipped = 0
    for ann in plan.rows:
        color = _fill_color(fills, ann.tier)
        for col in sorted(ann.columns):
            if editor.has_fill(ann.row_number, col):
                fills_skipped += 1
                continue
            editor.set_fill(ann.row_number, col, color)
            fills_applied += 1

        current = editor.get_value(ann.row_number, status_col)
        if str(current if current is not None else "").strip():
            statuses_skipped += 1
            continue
        editor.set_value(ann.row_number, status_col, ann.status_value)
        statuses_written += 1

    return AnnotationOutcome(
        status_column=status_col,
        status_column_added=added,
        fills_applied=fills_applied,
        fills_skipped=fills_skipped,
        statuses_written=statuses_written,
        statuses_skipped=statuses_skipped,
    )
