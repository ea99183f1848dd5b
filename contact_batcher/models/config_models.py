from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclasses for the contact batch exporter.

The defaults reproduce the historical constants of the tool, so running
without any config file behaves exactly like the hard-coded version did.
"""

__all__ = [
    "FillColors",
    "ExporterConfig",
    "DEFAULT_EXCLUDED_DIRECTORIES",
    "DEFAULT_EXPORT_HEADERS",
]

DEFAULT_EXCLUDED_DIRECTORIES = frozenset({"exportados", "node_modules", ".git"})
DEFAULT_EXPORT_HEADERS = ("nome", "numero", "e-mail")


@dataclass(frozen=True)
class FillColors:
    """ARGB fill colors for the three annotation tiers."""
    ok: str = "FFC6EFCE"  # soft green: exported
    warn: str = "FFFFEB9C"  # soft yellow: in range, empty phone
    bad: str = "FFFFC7CE"  # soft red: in range, unusable phone


@dataclass(frozen=True)
class ExporterConfig:
    """Root configuration object for an export run."""
    chunk_size: int = 50  # Export rows per output file
    sheet_index: int = 0  # Worksheet read from the source workbook
    export_directory: str = "exportados"  # Output folder (relative to the working directory)
    status_column: str = "C_CONTACTADO"  # Status column header in the source sheet
    fills: FillColors = field(default_factory=FillColors)
    excluded_directories: frozenset[str] = DEFAULT_EXCLUDED_DIRECTORIES  # Skipped by the file picker
    export_headers: tuple[str, str, str] = DEFAULT_EXPORT_HEADERS
    export_sheet_name: str = "Hoja1"
    name_placeholder: str = "Sin nombre"  # Export name used when the source name is blank
