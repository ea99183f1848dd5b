from __future__ import annotations

import pytest

from contact_batcher.services.phone_extractor import MIN_PHONE_DIGITS, extract_phone_numbers


@pytest.mark.parametrize("raw", [None, "", "   ", float("nan")])
def test_blank_values_yield_no_phones(raw):
    assert extract_phone_numbers(raw) == []


def test_duplicate_numbers_collapse():
    assert extract_phone_numbers("555-1234, 555-1234") == ["5551234"]


def test_garbage_yields_nothing():
    assert extract_phone_numbers("abc") == []


def test_conjunction_separator_between_named_numbers():
    raw = "Juan 555-123-4567 y Pedro 555-987-6543"
    assert extract_phone_numbers(raw) == ["5551234567", "5559876543"]


def test_o_conjunction_is_case_insensitive():
    assert extract_phone_numbers("5551234567 O 5559876543") == ["5551234567", "5559876543"]


def test_line_breaks_split_numbers():
    assert extract_phone_numbers("5551234567\r\n5559876543\r5550001111") == [
        "5551234567",
        "5559876543",
        "5550001111",
    ]


@pytest.mark.parametrize("sep", [",", ";", "|", "/", "\\", "\t", ",;", " - ", " – ", " — "])
def test_separator_patterns(sep):
    assert extract_phone_numbers(f"5551234567{sep}5559876543") == ["5551234567", "5559876543"]


def test_hyphen_without_spaces_is_part_of_number():
    # "555-1234" is one number, not two fragments
    assert extract_phone_numbers("555-1234") == ["5551234"]


def test_short_parts_are_dropped():
    assert extract_phone_numbers("123456, 5551234") == ["5551234"]


def test_order_is_first_seen():
    raw = "5559876543 / 5551234567 / 5559876543"
    assert extract_phone_numbers(raw) == ["5559876543", "5551234567"]


def test_duplicates_compare_after_digit_normalization():
    assert extract_phone_numbers("(555) 123-4567; 555.123.4567") == ["5551234567"]


def test_numeric_cell_keeps_digits():
    assert extract_phone_numbers(5551234567) == ["5551234567"]
    assert extract_phone_numbers(5551234567.0) == ["5551234567"]


def test_no_upper_bound_on_digits():
    assert extract_phone_numbers("+52 1 555 123 4567 ext 89") == ["521555123456789"]


def test_every_result_is_digits_and_long_enough():
    raw = "tel: 55-12-34-56-78, cel 044 555 111 2222 y 12 / (01) 800 123 4567"
    phones = extract_phone_numbers(raw)
    assert phones
    assert all(p.isdigit() and len(p) >= MIN_PHONE_DIGITS for p in phones)
    assert len(phones) == len(set(phones))
