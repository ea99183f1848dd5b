from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from ..excel.cells import cell_text
from ..models.records import SourceRecord

"""Build SourceRecords from raw data rows.

Data row ``i`` (0-based, header excluded) is worksheet row ``i + 2``. Rows
whose name and phone cells are both blank carry no information and are
dropped here, so they never show up in a range, an export or an annotation.
"""

__all__ = [
    "FIRST_DATA_ROW",
    "build_records",
]

FIRST_DATA_ROW = 2


def _cell(row: Sequence[Any], idx: int) -> str:
    if idx < 0 or idx >= len(row):
        return ""
    return cell_text(row[idx])


def build_records(
    data_rows: Iterable[Sequence[Any]], idx_name: int, idx_phone: int
) -> list[SourceRecord]:
    records: list[SourceRecord] = []
    for i, row in enumerate(data_rows):
        name = _cell(row, idx_name)
        phone_raw = _cell(row, idx_phone)
        if not name.strip() and not phone_raw.strip():
            continue
        records.append(
            SourceRecord(
                name=name,
                phone_raw=phone_raw,
                source_row_number=i + FIRST_DATA_ROW,
            )
        )
    return records
