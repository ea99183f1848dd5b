from __future__ import annotations

import zipfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl import load_workbook
from openpyxl.styles import PatternFill
from openpyxl.utils.exceptions import InvalidFileException

from ..services.annotator import AnnotationError

"""Spreadsheet writers.

- creation mode: ``write_chunk`` writes one export chunk as a new workbook
  (pandas + openpyxl engine)
- mutation mode: ``WorkbookEditor`` opens the original workbook and exposes
  the cell-level operations the annotator needs (SheetEditor protocol)
"""

__all__ = [
    "ExportWriteError",
    "WorksheetNotFoundError",
    "write_chunk",
    "WorkbookEditor",
]


class ExportWriteError(Exception):
    """Raised when an export chunk file cannot be written."""


class WorksheetNotFoundError(AnnotationError):
    """Raised when the target worksheet is missing from the workbook."""


def write_chunk(
    path: Path,
    headers: Sequence[str],
    rows: Sequence[Sequence[Any]],
    sheet_name: str = "Hoja1",
) -> Path:
    """Write ``rows`` under ``headers`` as a new single-sheet workbook."""
    df = pd.DataFrame([list(r) for r in rows], columns=list(headers), dtype=object)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_excel(path, sheet_name=sheet_name, index=False, engine="openpyxl")
    except OSError as e:
        raise ExportWriteError(f"cannot write {path.name}: {e}") from e
    return path


class WorkbookEditor:
    """openpyxl-backed SheetEditor for one worksheet of an existing file.

    Usable as a context manager; nothing is persisted until ``save()``.
    """

    def __init__(self, path: Path, sheet_name: str | None, fallback_index: int = 0) -> None:
        self.path = path
        try:
            self._wb = load_workbook(path, keep_vba=path.suffix.lower() == ".xlsm")
        except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
            raise AnnotationError(f"cannot open {path.name} for annotation: {e}") from e

        if sheet_name and sheet_name in self._wb.sheetnames:
            self._ws = self._wb[sheet_name]
        elif 0 <= fallback_index < len(self._wb.worksheets):
            self._ws = self._wb.worksheets[fallback_index]
        else:
            self._wb.close()
            raise WorksheetNotFoundError(f"worksheet not found: {sheet_name!r} in {path.name}")

    @property
    def sheet_title(self) -> str:
        return self._ws.title

    def header_values(self) -> list[Any]:
        return [c.value for c in self._ws[1]]

    def append_column(self, header: str) -> int:
        col = self._ws.max_column + 1
        self._ws.cell(row=1, column=col).value = header
        return col

    def has_fill(self, row: int, col: int) -> bool:
        fill = self._ws.cell(row=row, column=col).fill
        return fill is not None and fill.fill_type is not None

    def set_fill(self, row: int, col: int, color: str) -> None:
        self._ws.cell(row=row, column=col).fill = PatternFill("solid", fgColor=color)

    def get_value(self, row: int, col: int) -> Any:
        return self._ws.cell(row=row, column=col).value

    def set_value(self, row: int, col: int, value: Any) -> None:
        self._ws.cell(row=row, column=col).value = value

    def save(self) -> None:
        try:
            self._wb.save(self.path)
        except OSError as e:
            raise AnnotationError(
                f"cannot save {self.path.name} (is it open in another program?): {e}"
            ) from e

    def close(self) -> None:
        self._wb.close()

    def __enter__(self) -> WorkbookEditor:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
