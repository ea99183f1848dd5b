from __future__ import annotations

import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from .cells import cell_text

"""Spreadsheet reader.

Row 1 of the sheet is the header row, rows 2.. are data rows. Rows are read
positionally with openpyxl so blank rows in the middle of the sheet are kept
(as empty tuples of values) and data row ``i`` always maps to worksheet row
``i + 2``.
"""

__all__ = [
    "InputError",
    "SheetData",
    "read_sheet",
    "preview_frame",
]


class InputError(Exception):
    """Raised when the source workbook is missing, unreadable or empty."""


@dataclass
class SheetData:
    sheet_name: str
    sheet_names: list[str]  # All sheets of the workbook, in order
    headers: list[str]  # Header row, stripped
    rows: list[tuple[Any, ...]]  # Raw data rows (row 2 onwards), positional


def read_sheet(path: Path, sheet_index: int = 0) -> SheetData:
    """Read one worksheet (by position) of an Excel workbook."""
    if not path.exists():
        raise InputError(f"file not found: {path}")
    if path.suffix.lower() == ".xls":
        raise InputError(f"legacy .xls workbooks are not supported, save {path.name} as .xlsx")
    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
        raise InputError(f"cannot read workbook {path.name}: {e}") from e

    try:
        sheet_names = list(wb.sheetnames)
        if not sheet_names:
            raise InputError(f"no sheets found in {path.name}")
        if sheet_index >= len(sheet_names):
            raise InputError(
                f"sheet index {sheet_index} out of range ({len(sheet_names)} sheets) in {path.name}"
            )
        ws = wb[sheet_names[sheet_index]]
        all_rows = [tuple(r) for r in ws.iter_rows(values_only=True)]
    finally:
        wb.close()

    if not all_rows:
        raise InputError(f"sheet '{sheet_names[sheet_index]}' of {path.name} is empty")

    headers = [cell_text(h).strip() for h in all_rows[0]]
    return SheetData(
        sheet_name=sheet_names[sheet_index],
        sheet_names=sheet_names,
        headers=headers,
        rows=all_rows[1:],
    )


def preview_frame(sheet: SheetData, limit: int = 3) -> pd.DataFrame:
    """First ``limit`` data rows as a DataFrame (index = worksheet row)."""
    width = len(sheet.headers)
    sample = [
        [cell_text(v) for v in (list(r) + [None] * width)[:width]]
        for r in sheet.rows[:limit]
    ]
    columns = [h or f"<col {i + 1}>" for i, h in enumerate(sheet.headers)]
    return pd.DataFrame(sample, columns=columns, index=range(2, 2 + len(sample)))
