from __future__ import annotations

from collections.abc import Iterable

from ..models.classification import Classification, ClassifiedRecord
from ..models.records import SourceRecord
from .phone_extractor import extract_phone_numbers

"""Row classification by phone-extraction outcome (the name is ignored)."""

__all__ = [
    "classify",
    "classify_records",
    "count_by_tier",
]


def classify(record: SourceRecord) -> ClassifiedRecord:
    phones = tuple(extract_phone_numbers(record.phone_raw))
    if phones:
        tier = Classification.OK
    elif not record.phone_raw.strip():
        tier = Classification.WARN
    else:
        tier = Classification.BAD
    return ClassifiedRecord(record=record, classification=tier, phones=phones)


def classify_records(records: Iterable[SourceRecord]) -> list[ClassifiedRecord]:
    return [classify(r) for r in records]


def count_by_tier(classified: Iterable[ClassifiedRecord]) -> dict[Classification, int]:
    counts = {tier: 0 for tier in Classification}
    for c in classified:
        counts[c.classification] += 1
    return counts
