from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any

from ..models.range_selection import RangeSelection, RangeStatus
from ..models.records import SourceRecord
from .records import FIRST_DATA_ROW

"""Map an operator-entered worksheet row range onto the loaded records.

Row numbers are converted to record indices with ``index = row - 2``. Note
that the index addresses the *loaded* records (blank rows already dropped),
so on sheets with blank rows the range is relative to the non-blank rows.

Invalid input is corrected where a safe default exists (start -> 2, end ->
last row, end beyond the last row -> clamped); otherwise the selection is
empty and carries the reason in ``status``.
"""

__all__ = [
    "parse_row_number",
    "select_range",
]

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_row_number(value: Any) -> int | None:
    """Parse a row number the lenient way operators type them.

    Leading integer digits are used ("12", " 12 ", "12abc" -> 12); anything
    without them returns None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    m = _LEADING_INT.match(str(value))
    return int(m.group(1)) if m else None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def select_range(
    records: Sequence[SourceRecord],
    excel_row_start: Any,
    excel_row_end: Any = None,
) -> RangeSelection:
    notices: list[str] = []
    total = len(records)
    max_row = total + 1  # Last worksheet row addressable by the records

    start = parse_row_number(excel_row_start)
    if start is None or start < FIRST_DATA_ROW:
        notices.append(
            f"invalid start row ({excel_row_start!r}); using the first data row ({FIRST_DATA_ROW})"
        )
        start = FIRST_DATA_ROW
    start_index = start - FIRST_DATA_ROW

    def _result(status: RangeStatus, end_exclusive: int) -> RangeSelection:
        for n in notices:
            logger.warning(n)
        selected = records[start_index:end_exclusive] if status is RangeStatus.SELECTED else ()
        return RangeSelection(
            records=tuple(selected),
            status=status,
            start_index=start_index,
            end_exclusive_index=end_exclusive,
            excel_row_start=start,
            notices=tuple(notices),
        )

    if start_index >= total:
        logger.warning(
            "start row %d is outside the data range (last row %d); nothing to process",
            start,
            max_row,
        )
        return _result(RangeStatus.OUT_OF_RANGE, start_index)

    if _is_blank(excel_row_end):
        return _result(RangeStatus.SELECTED, total)

    end = parse_row_number(excel_row_end)
    if end is None:
        notices.append(f"invalid end row ({excel_row_end!r}); using the last data row ({max_row})")
        return _result(RangeStatus.SELECTED, total)

    if end < start:
        logger.warning("end row %d is before start row %d; nothing to process", end, start)
        return _result(RangeStatus.INVERTED, start_index)

    if end > max_row:
        notices.append(f"end row {end} exceeds the last data row ({max_row}); clamped")
        end = max_row

    end_exclusive = min(end - 1, total)
    if end_exclusive <= start_index:
        logger.warning("computed range %d-%d is empty; nothing to process", start, end)
        return _result(RangeStatus.EMPTY, start_index)

    return _result(RangeStatus.SELECTED, end_exclusive)
