from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any

from ..excel.reader import InputError, SheetData, read_sheet
from ..excel.writer import ExportWriteError, WorkbookEditor, write_chunk
from ..models.annotation import AnnotationOutcome
from ..models.classification import Classification, ClassifiedRecord
from ..models.config_models import ExporterConfig
from ..models.export import ExportPlan
from ..models.processing_result import ExportResult
from ..models.records import DetectedColumns, SourceRecord
from .annotator import AnnotationError, apply_annotations, plan_annotations
from .classifier import classify_records, count_by_tier
from .column_detector import detect_columns
from .export_planner import expected_paths, find_collisions, plan_export, resolve_output_paths
from .progress import ProgressTracker
from .range_selector import select_range
from .records import build_records

"""Pipeline orchestration.

Two steps, so the CLI can collect the row range in between:

1. ``load_source``: read the sheet, detect columns, build records
2. ``process``: select range, classify, export chunks, back-annotate

``process`` has a single suspension point, the ``confirm_overwrite``
callback, invoked at most once and only when an expected output file
already exists.

Failure domains: an export write error stops the run before annotation; an
annotation error happens after the export, whose files are kept.
"""

__all__ = [
    "ProcessingError",
    "DetectionError",
    "InputError",
    "ExportWriteError",
    "AnnotationError",
    "LoadedSource",
    "ConfirmOverwrite",
    "load_source",
    "export_chunks",
    "annotate_source",
    "process",
]

logger = logging.getLogger(__name__)

ConfirmOverwrite = Callable[[list[Path]], bool]


class ProcessingError(Exception):
    """Base exception for processing errors."""


class DetectionError(ProcessingError):
    """Raised when the name or phone column cannot be detected."""

    def __init__(self, headers: list[str]) -> None:
        super().__init__(f"could not detect name/phone columns; headers found: {headers}")
        self.headers = headers


@dataclass(frozen=True)
class LoadedSource:
    path: Path
    sheet: SheetData
    columns: DetectedColumns
    records: list[SourceRecord]

    @property
    def base_name(self) -> str:
        return self.path.stem

    @property
    def max_row(self) -> int:
        """Last worksheet row addressable through the loaded records."""
        return len(self.records) + 1


def load_source(path: Path, config: ExporterConfig) -> LoadedSource:
    sheet = read_sheet(path, config.sheet_index)
    logger.debug("headers: %s", sheet.headers)

    columns = detect_columns(sheet.headers)
    if columns is None:
        raise DetectionError(sheet.headers)
    logger.info(
        'name column: "%s" -> %s', sheet.headers[columns.name.index], columns.name.reason
    )
    logger.info(
        'phone column: "%s" -> %s', sheet.headers[columns.phone.index], columns.phone.reason
    )

    records = build_records(sheet.rows, columns.name.index, columns.phone.index)
    if not records:
        raise InputError(f"no data rows to process in {path.name}")
    logger.info("records with data: %d (worksheet rows 2-%d)", len(records), len(records) + 1)
    return LoadedSource(path=path, sheet=sheet, columns=columns, records=records)


def export_chunks(
    plan: ExportPlan,
    config: ExporterConfig,
    output_dir: Path,
    confirm_overwrite: ConfirmOverwrite,
) -> list[Path]:
    """Write every chunk of ``plan`` to ``output_dir``; returns written paths."""
    if not plan.chunks:
        return []

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportWriteError(f"cannot create export directory {output_dir}: {e}") from e
    collisions = find_collisions(expected_paths(plan, output_dir))
    overwrite = False
    if collisions:
        logger.warning(
            "%d output file(s) already exist for this source/date/range", len(collisions)
        )
        overwrite = confirm_overwrite(collisions)
        logger.debug("overwrite existing=%s", overwrite)

    paths = resolve_output_paths(plan, output_dir, overwrite)
    logger.debug("chunks=%d chunk_size=%d", len(plan.chunks), config.chunk_size)

    written: list[Path] = []
    with ProgressTracker(len(paths)) as progress:
        for chunk, path in zip(plan.chunks, paths):
            progress.start_file(path)
            write_chunk(
                path,
                config.export_headers,
                [row.as_list() for row in chunk.rows],
                sheet_name=config.export_sheet_name,
            )
            written.append(path)
            progress.finish_file(rows=len(chunk))
            logger.info("generated: %s (%d rows)", path, len(chunk))
    return written


def annotate_source(
    loaded: LoadedSource, classified: list[ClassifiedRecord], config: ExporterConfig
) -> AnnotationOutcome:
    """Back-annotate the original workbook; saves only if something changed."""
    plan = plan_annotations(classified, loaded.columns.marked_columns)
    logger.debug(
        "annotation plan rows=%d columns=%s", len(plan), list(loaded.columns.marked_columns)
    )
    with WorkbookEditor(loaded.path, loaded.sheet.sheet_name, config.sheet_index) as editor:
        outcome = apply_annotations(editor, plan, config.status_column, config.fills)
        if outcome.changed:
            editor.save()
        else:
            logger.info("annotations already present; original file left untouched")
    return outcome


def process(
    loaded: LoadedSource,
    excel_row_start: Any,
    excel_row_end: Any,
    config: ExporterConfig,
    confirm_overwrite: ConfirmOverwrite,
    *,
    export_date: date | None = None,
    output_dir: Path | None = None,
) -> ExportResult:
    selection = select_range(loaded.records, excel_row_start, excel_row_end)
    if selection.is_empty:
        return ExportResult(
            source_file=loaded.path,
            sheet_name=loaded.sheet.sheet_name,
            total_records=len(loaded.records),
            range_status=selection.status,
        )

    start, end = selection.export_row_range
    logger.info("processing worksheet rows %d to %d", start, end)

    classified = classify_records(selection.records)
    counts = count_by_tier(classified)

    plan = plan_export(
        classified,
        selection,
        base_name=loaded.base_name,
        export_date=export_date or date.today(),
        chunk_size=config.chunk_size,
        placeholder=config.name_placeholder,
    )
    logger.debug(
        "selected=%d expanded=%d ok=%d warn=%d bad=%d",
        len(classified),
        plan.total_rows,
        counts[Classification.OK],
        counts[Classification.WARN],
        counts[Classification.BAD],
    )

    written: list[Path] = []
    if plan.chunks:
        target = output_dir if output_dir is not None else Path(config.export_directory)
        written = export_chunks(plan, config, target, confirm_overwrite)
    else:
        logger.warning("no valid phone numbers to export in this range")

    outcome = annotate_source(loaded, classified, config)
    logger.info(
        "marked OK=%d WARN=%d BAD=%d; %s: SI for OK, NO for WARN/BAD",
        counts[Classification.OK],
        counts[Classification.WARN],
        counts[Classification.BAD],
        config.status_column,
    )

    return ExportResult(
        source_file=loaded.path,
        sheet_name=loaded.sheet.sheet_name,
        total_records=len(loaded.records),
        range_status=selection.status,
        excel_row_start=start,
        excel_row_end=end,
        ok_rows=counts[Classification.OK],
        warn_rows=counts[Classification.WARN],
        bad_rows=counts[Classification.BAD],
        exported_rows=plan.total_rows,
        written_files=written,
        annotation=outcome,
    )
