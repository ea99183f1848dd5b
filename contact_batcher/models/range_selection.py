from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .records import SourceRecord

"""Result of mapping a worksheet row range onto the loaded records."""

__all__ = [
    "RangeStatus",
    "RangeSelection",
]


class RangeStatus(Enum):
    """Outcome of a range selection.

    Anything other than SELECTED is a no-op run: nothing is exported and
    nothing is annotated.
    """
    SELECTED = "selected"
    OUT_OF_RANGE = "out_of_range"
    INVERTED = "inverted"
    EMPTY = "empty"


@dataclass(frozen=True)
class RangeSelection:
    records: tuple[SourceRecord, ...]
    status: RangeStatus
    start_index: int  # 0-based index into the record list
    end_exclusive_index: int
    excel_row_start: int  # Start row after coercion
    notices: tuple[str, ...] = field(default_factory=tuple)  # Corrections applied to the input

    @property
    def is_empty(self) -> bool:
        return self.status is not RangeStatus.SELECTED

    @property
    def export_row_range(self) -> tuple[int, int]:
        """Inclusive worksheet row range used in export filenames."""
        return (self.start_index + 2, self.end_exclusive_index + 1)
