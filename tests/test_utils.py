# tests/test_utils.py

from __future__ import annotations

from datetime import date

import pytest

from dayplanner.utils import ID_LENGTH, format_date_key, generate_id, parse_date_key, today_key


def test_format_date_key_is_zero_padded() -> None:
    assert format_date_key(date(2024, 3, 9)) == "2024-03-09"
    assert format_date_key(date(987, 12, 31)) == "0987-12-31"


def test_parse_date_key_round_trips_and_rejects_garbage() -> None:
    assert parse_date_key("2024-02-29") == date(2024, 2, 29)
    with pytest.raises(ValueError):
        parse_date_key("2023-02-29")
    with pytest.raises(ValueError):
        parse_date_key("tomorrow")


def test_today_key_uses_given_date() -> None:
    assert today_key(date(2030, 1, 2)) == "2030-01-02"


def test_generated_ids_are_short_alphanumeric_and_unique() -> None:
    ids = [generate_id() for _ in range(2000)]
    assert len(set(ids)) == len(ids)
    for value in ids:
        assert len(value) == ID_LENGTH
        assert value.isalnum()


@pytest.mark.parametrize("key", ["2024-5-14", "2024-05-4", " 2024-05-14", "2024-05-14 ", "24-05-14"])
def test_parse_date_key_only_accepts_canonical_keys(key: str) -> None:
    with pytest.raises(ValueError):
        parse_date_key(key)
