from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
from openpyxl import load_workbook

from contact_batcher.excel.writer import WorkbookEditor, WorksheetNotFoundError, write_chunk
from contact_batcher.services.annotator import AnnotationError


def test_write_chunk_creates_single_sheet_workbook(tmp_path: Path):
    target = tmp_path / "nested" / "out.xlsx"
    write_chunk(target, ["nome", "numero", "e-mail"], [["Ana", "5551234567", ""]])

    wb = load_workbook(target)
    assert wb.sheetnames == ["Hoja1"]
    wb.close()
    df = pd.read_excel(target, dtype=str, keep_default_na=False)
    assert list(df.columns) == ["nome", "numero", "e-mail"]
    assert df.iloc[0].tolist() == ["Ana", "5551234567", ""]


def test_write_chunk_keeps_phone_as_text(tmp_path: Path):
    target = tmp_path / "out.xlsx"
    write_chunk(target, ["nome", "numero", "e-mail"], [["Ana", "05551234567", ""]])
    wb = load_workbook(target)
    assert wb.active.cell(row=2, column=2).value == "05551234567"
    wb.close()


class TestWorkbookEditor:
    def test_fill_and_values_are_persisted_on_save(self, contacts_xlsx: Path):
        with WorkbookEditor(contacts_xlsx, "Hoja1") as editor:
            assert editor.header_values() == ["RFC", "Nombre", "Telefono"]
            assert editor.has_fill(2, 2) is False
            col = editor.append_column("C_CONTACTADO")
            assert col == 4
            editor.set_fill(2, 2, "FFC6EFCE")
            editor.set_value(2, col, "SI")
            assert editor.has_fill(2, 2) is True
            assert editor.get_value(2, col) == "SI"
            editor.save()

        wb = load_workbook(contacts_xlsx)
        ws = wb["Hoja1"]
        assert ws.cell(row=1, column=4).value == "C_CONTACTADO"
        assert ws.cell(row=2, column=4).value == "SI"
        assert ws.cell(row=2, column=2).fill.fill_type == "solid"
        assert ws.cell(row=2, column=2).fill.fgColor.rgb == "FFC6EFCE"
        assert ws.cell(row=2, column=3).fill.fill_type is None
        wb.close()

    def test_unknown_sheet_falls_back_to_index(self, contacts_xlsx: Path):
        with WorkbookEditor(contacts_xlsx, "Renamed", fallback_index=0) as editor:
            assert editor.sheet_title == "Hoja1"

    def test_missing_sheet_raises(self, contacts_xlsx: Path):
        with pytest.raises(WorksheetNotFoundError):
            WorkbookEditor(contacts_xlsx, "Renamed", fallback_index=5)

    def test_worksheet_not_found_is_an_annotation_error(self):
        assert issubclass(WorksheetNotFoundError, AnnotationError)

    def test_unreadable_file_raises_annotation_error(self, tmp_path: Path):
        bogus = tmp_path / "bogus.xlsx"
        bogus.write_text("nope", encoding="utf-8")
        with pytest.raises(AnnotationError, match="cannot open"):
            WorkbookEditor(bogus, "Hoja1")
