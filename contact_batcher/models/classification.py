from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .records import SourceRecord

"""Row classification models."""

__all__ = [
    "Classification",
    "ClassifiedRecord",
]


class Classification(Enum):
    """Data-quality tier of an in-range source row.

    - OK: at least one usable phone number (exported)
    - WARN: phone cell is empty
    - BAD: phone cell has content but no usable phone number
    """
    OK = "OK"
    WARN = "WARN"
    BAD = "BAD"

    @property
    def status_value(self) -> str:
        """Value recorded in the status column for this tier."""
        return "SI" if self is Classification.OK else "NO"


@dataclass(frozen=True)
class ClassifiedRecord:
    record: SourceRecord
    classification: Classification
    phones: tuple[str, ...]  # Extracted phones, first-seen order

    @property
    def row_number(self) -> int:
        return self.record.source_row_number
