from __future__ import annotations

from ..models.processing_result import ExportResult

"""SUMMARY line rendering."""


def render_summary_line(result: ExportResult) -> str:
    """Render the SUMMARY line of a run.

    Format::

        SUMMARY records={n} range={start}-{end} ok={n} warn={n} bad={n}
        exported_rows={n} files={n} fills={n} statuses={n}

    ``range`` is ``-`` for no-op runs (no rows selected).

    Examples:
        >>> from pathlib import Path
        >>> from contact_batcher.models.range_selection import RangeStatus
        >>> r = ExportResult(
        ...     source_file=Path("c.xlsx"), sheet_name="Hoja1", total_records=3,
        ...     range_status=RangeStatus.SELECTED, excel_row_start=2, excel_row_end=4,
        ...     ok_rows=1, bad_rows=1, exported_rows=1,
        ... )
        >>> render_summary_line(r)
        'SUMMARY records=3 range=2-4 ok=1 warn=0 bad=1 exported_rows=1 files=0 fills=0 statuses=0'
    """
    if result.excel_row_start and result.excel_row_end:
        range_str = f"{result.excel_row_start}-{result.excel_row_end}"
    else:
        range_str = "-"
    fills = result.annotation.fills_applied if result.annotation else 0
    statuses = result.annotation.statuses_written if result.annotation else 0
    return (
        f"SUMMARY records={result.total_records} "
        f"range={range_str} "
        f"ok={result.ok_rows} "
        f"warn={result.warn_rows} "
        f"bad={result.bad_rows} "
        f"exported_rows={result.exported_rows} "
        f"files={len(result.written_files)} "
        f"fills={fills} "
        f"statuses={statuses}"
    )
