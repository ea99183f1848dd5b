from __future__ import annotations

from pathlib import Path

from contact_batcher.models.annotation import AnnotationOutcome
from contact_batcher.models.processing_result import ExportResult
from contact_batcher.models.range_selection import RangeStatus
from contact_batcher.services.summary import render_summary_line


def test_summary_for_full_run():
    result = ExportResult(
        source_file=Path("clientes.xlsx"),
        sheet_name="Hoja1",
        total_records=2,
        range_status=RangeStatus.SELECTED,
        excel_row_start=2,
        excel_row_end=3,
        ok_rows=1,
        warn_rows=0,
        bad_rows=1,
        exported_rows=1,
        written_files=[Path("out/clientes_01-01-2024_(2-3)_01.xlsx")],
        annotation=AnnotationOutcome(
            status_column=4,
            status_column_added=True,
            fills_applied=4,
            fills_skipped=0,
            statuses_written=2,
            statuses_skipped=0,
        ),
    )
    assert render_summary_line(result) == (
        "SUMMARY records=2 range=2-3 ok=1 warn=0 bad=1 "
        "exported_rows=1 files=1 fills=4 statuses=2"
    )


def test_summary_for_noop_run():
    result = ExportResult(
        source_file=Path("clientes.xlsx"),
        sheet_name="Hoja1",
        total_records=2,
        range_status=RangeStatus.OUT_OF_RANGE,
    )
    line = render_summary_line(result)
    assert line == (
        "SUMMARY records=2 range=- ok=0 warn=0 bad=0 "
        "exported_rows=0 files=0 fills=0 statuses=0"
    )
