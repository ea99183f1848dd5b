"""Domain models for the contact batch exporter."""

from .annotation import AnnotationOutcome, AnnotationPlan, RowAnnotation
from .classification import Classification, ClassifiedRecord
from .config_models import ExporterConfig, FillColors
from .export import ExportChunk, ExportPlan, ExportRow
from .processing_result import ExportResult
from .range_selection import RangeSelection, RangeStatus
from .records import ColumnMatch, DetectedColumns, SourceRecord

__all__ = [
    # Configuration models
    "ExporterConfig",
    "FillColors",
    # Source models
    "ColumnMatch",
    "DetectedColumns",
    "SourceRecord",
    "RangeSelection",
    "RangeStatus",
    # Processing models
    "Classification",
    "ClassifiedRecord",
    "ExportRow",
    "ExportChunk",
    "ExportPlan",
    "RowAnnotation",
    "AnnotationPlan",
    "AnnotationOutcome",
    "ExportResult",
]
