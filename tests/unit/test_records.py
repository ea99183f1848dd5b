from __future__ import annotations

from contact_batcher.services.records import build_records


def test_row_numbers_follow_worksheet_rows():
    rows = [("Ana", "5551234567"), ("Beto", "5559876543")]
    records = build_records(rows, 0, 1)
    assert [r.source_row_number for r in records] == [2, 3]


def test_fully_blank_rows_are_dropped_without_shifting_numbers():
    rows = [
        ("Ana", "5551234567"),
        (None, None),
        ("  ", ""),
        ("Beto", "notaphone"),
    ]
    records = build_records(rows, 0, 1)
    assert [(r.name, r.source_row_number) for r in records] == [("Ana", 2), ("Beto", 5)]


def test_row_with_only_one_field_is_kept():
    records = build_records([("", "5551234567"), ("Carla", None)], 0, 1)
    assert len(records) == 2
    assert records[0].name == ""
    assert records[1].phone_raw == ""


def test_short_rows_read_missing_cells_as_empty():
    records = build_records([("X", "Ana")], 1, 5)
    assert records[0].name == "Ana"
    assert records[0].phone_raw == ""


def test_numeric_phone_cells_become_text():
    records = build_records([("Ana", 5551234567.0)], 0, 1)
    assert records[0].phone_raw == "5551234567"


def test_other_columns_are_ignored():
    rows = [("RFC1", None, None, "ignored")]
    assert build_records(rows, 1, 2) == []
