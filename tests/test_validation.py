from __future__ import annotations

import pytest

from app.application.utils.validation import (
    is_valid_date,
    is_valid_guests,
    is_valid_name,
    is_valid_time,
    normalize_time,
    parse_guests,
)
from tests.support import TODAY


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2026-10-19", True),
        ("2026-10-20", True),
        ("2099-01-01", True),
        ("2026-10-18", False),
        ("2000-01-01", False),
        ("2026-02-30", False),
        ("2026-13-01", False),
        ("2026-1-05", False),
        ("26-10-20", False),
        ("2026/10/20", False),
        (" 2026-10-20", False),
        ("", False),
    ],
)
def test_is_valid_date(value, expected):
    assert is_valid_date(value, today=TODAY) is expected


def test_is_valid_date_defaults_to_current_day():
    assert is_valid_date("2099-12-31") is True
    assert is_valid_date("1999-12-31") is False


def test_is_valid_date_rejects_non_strings():
    assert is_valid_date(None, today=TODAY) is False
    assert is_valid_date(20261020, today=TODAY) is False


@pytest.mark.parametrize(
    "value, normalized",
    [
        ("18:30", "18:30"),
        ("9:05", "09:05"),
        ("00:00", "00:00"),
        ("23:59", "23:59"),
        (" 18:30 ", "18:30"),
        ("7pm", "19:00"),
        ("7 PM", "19:00"),
        ("7:30 pm", "19:30"),
        ("12am", "00:00"),
        ("12:15pm", "12:15"),
        ("11:45am", "11:45"),
    ],
)
def test_valid_times_normalize_to_24h(value, normalized):
    assert is_valid_time(value) is True
    assert normalize_time(value) == normalized


@pytest.mark.parametrize("value", ["24:00", "18:60", "1830", "13pm", "0am", "7", "seven", "", "18:3"])
def test_invalid_times(value):
    assert is_valid_time(value) is False
    assert normalize_time(value) is None


@pytest.mark.parametrize("value", [1, 2, 10, 19, 20])
def test_is_valid_guests_accepts_range(value):
    assert is_valid_guests(value) is True


@pytest.mark.parametrize("value", [0, 21, -1, -20, 2.5, 4.0, "4", True, None])
def test_is_valid_guests_rejects(value):
    assert is_valid_guests(value) is False


def test_parse_guests_coerces_request_values():
    assert parse_guests(4) == 4
    assert parse_guests("4") == 4
    assert parse_guests(" 7 ") == 7
    assert parse_guests(6.0) == 6
    assert parse_guests("4.5") is None
    assert parse_guests(2.5) is None
    assert parse_guests("abc") is None
    assert parse_guests("25") is None
    assert parse_guests(0) is None
    assert parse_guests(True) is None
    assert parse_guests(None) is None


def test_is_valid_name():
    assert is_valid_name("Alex") is True
    assert is_valid_name("   ") is False
    assert is_valid_name("x" * 101) is False
    assert is_valid_name(42) is False
