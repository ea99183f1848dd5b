from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date
from pathlib import Path

from ..models.classification import ClassifiedRecord
from ..models.export import ExportChunk, ExportPlan, ExportRow
from ..models.range_selection import RangeSelection

"""Export planning: expansion, chunking and output file naming.

Output filename grammar::

    <base>_<DD-MM-YYYY>_(<start>-<end>)_<NN>.xlsx

``start``/``end`` is the worksheet row range of the whole run (identical for
every chunk of the run) and ``NN`` the 2-digit, 1-based chunk sequence.
"""

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_NAME_PLACEHOLDER",
    "expand_record",
    "expand_records",
    "chunk_rows",
    "build_filename",
    "plan_export",
    "expected_paths",
    "find_collisions",
    "resolve_output_paths",
]

DEFAULT_CHUNK_SIZE = 50
DEFAULT_NAME_PLACEHOLDER = "Sin nombre"
DATE_FORMAT = "%d-%m-%Y"


def expand_record(
    name: str, phones: Sequence[str], placeholder: str = DEFAULT_NAME_PLACEHOLDER
) -> list[ExportRow]:
    """One export row per phone: "Ana", "Ana (2)", "Ana (3)", ..."""
    base = name.strip() or placeholder
    rows: list[ExportRow] = []
    for k, phone in enumerate(phones):
        suffix = "" if k == 0 else f" ({k + 1})"
        rows.append(ExportRow(name=f"{base}{suffix}", phone=phone))
    return rows


def expand_records(
    classified: Iterable[ClassifiedRecord], placeholder: str = DEFAULT_NAME_PLACEHOLDER
) -> list[ExportRow]:
    out: list[ExportRow] = []
    for c in classified:
        out.extend(expand_record(c.record.name, c.phones, placeholder))
    return out


def chunk_rows(rows: Sequence[ExportRow], chunk_size: int = DEFAULT_CHUNK_SIZE) -> list[ExportChunk]:
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    return [
        ExportChunk(sequence=seq, rows=tuple(rows[i:i + chunk_size]))
        for seq, i in enumerate(range(0, len(rows), chunk_size), start=1)
    ]


def build_filename(
    base_name: str, export_date: date, excel_row_start: int, excel_row_end: int, sequence: int
) -> str:
    """
    >>> build_filename("clientes", date(2024, 3, 7), 2, 51, 1)
    'clientes_07-03-2024_(2-51)_01.xlsx'
    """
    return (
        f"{base_name}_{export_date.strftime(DATE_FORMAT)}_"
        f"({excel_row_start}-{excel_row_end})_{sequence:02d}.xlsx"
    )


def plan_export(
    classified: Sequence[ClassifiedRecord],
    selection: RangeSelection,
    base_name: str,
    export_date: date,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    placeholder: str = DEFAULT_NAME_PLACEHOLDER,
) -> ExportPlan:
    """Plan the chunks of one run.

    ``chunks`` is empty when no record in the range has a usable phone; the
    caller still annotates the range in that case but writes no file.
    """
    rows = expand_records(classified, placeholder)
    start, end = selection.export_row_range
    return ExportPlan(
        base_name=base_name,
        export_date=export_date,
        excel_row_start=start,
        excel_row_end=end,
        chunks=tuple(chunk_rows(rows, chunk_size)),
    )


def _filename(plan: ExportPlan, sequence: int) -> str:
    return build_filename(
        plan.base_name, plan.export_date, plan.excel_row_start, plan.excel_row_end, sequence
    )


def expected_paths(plan: ExportPlan, directory: Path) -> list[Path]:
    """Paths the chunks get when nothing is in the way (sequence j -> NN=j)."""
    return [directory / _filename(plan, chunk.sequence) for chunk in plan.chunks]


def find_collisions(paths: Iterable[Path]) -> list[Path]:
    return [p for p in paths if p.exists()]


def resolve_output_paths(plan: ExportPlan, directory: Path, overwrite: bool) -> list[Path]:
    """Assign one output path per chunk.

    With ``overwrite`` the expected names are used as they are. Otherwise
    each chunk's counter advances past files that already exist (and names
    handed out earlier in this run) so no existing file is clobbered.
    """
    if overwrite:
        return expected_paths(plan, directory)

    assigned: list[Path] = []
    taken: set[Path] = set()
    counter = 1
    for _ in plan.chunks:
        while True:
            candidate = directory / _filename(plan, counter)
            if candidate not in taken and not candidate.exists():
                break
            counter += 1
        assigned.append(candidate)
        taken.add(candidate)
        counter += 1
    return assigned
