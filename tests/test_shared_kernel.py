"""
Тесты для общего ядра.
"""
from datetime import datetime

import pytest

from gym_membership.shared_kernel import (
    InvalidFieldError,
    format_timestamp,
    parse_int,
    parse_timestamp,
)


def test_parse_timestamp():
    assert parse_timestamp("2024-01-02T09:30") == datetime(2024, 1, 2, 9, 30)


def test_format_timestamp_is_zero_padded():
    assert format_timestamp(datetime(2024, 3, 4, 5, 6)) == "2024-03-04T05:06"


def test_timestamp_round_trip_is_stable():
    assert format_timestamp(parse_timestamp("2024-12-31T23:59")) == "2024-12-31T23:59"


@pytest.mark.parametrize(
    "value",
    ["", "2024-01-02", "2024-01-02T09:30:00", "2024-01-02T25:00", "2024-01-02T09:30Z"],
)
def test_parse_timestamp_rejects(value):
    with pytest.raises(InvalidFieldError):
        parse_timestamp(value)


@pytest.mark.parametrize("value, expected", [("7", 7), ("-3", -3), ("+12", 12), ("007", 7)])
def test_parse_int(value, expected):
    assert parse_int(value) == expected


@pytest.mark.parametrize(
    "value", ["9223372036854775807", "-9223372036854775808"]
)
def test_parse_int_accepts_int64_bounds(value):
    assert parse_int(value) == int(value)


@pytest.mark.parametrize(
    "value", ["9223372036854775808", "-9223372036854775809", "99999999999999999999"]
)
def test_parse_int_rejects_out_of_range(value):
    with pytest.raises(InvalidFieldError, match="вне диапазона"):
        parse_int(value)


@pytest.mark.parametrize("value", ["", "1.0", "1_000", " 1", "abc", "١٢"])
def test_parse_int_rejects(value):
    with pytest.raises(InvalidFieldError):
        parse_int(value)
