from datetime import datetime, timezone

import pytest

from uniformfeed.dates import parse_date


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Tue, 10 Jun 2003 04:00:00 GMT", utc(2003, 6, 10, 4, 0, 0)),
        ("Tue, 10 Jun 2003 04:00:00 EST", utc(2003, 6, 10, 9, 0, 0)),
        ("Tue, 10 Jun 2003 04:00:00 +0100", utc(2003, 6, 10, 3, 0, 0)),
        ("Mon, 05 Jun 2023 10:30 GMT", utc(2023, 6, 5, 10, 30, 0)),
        ("2003-12-13T18:30:02Z", utc(2003, 12, 13, 18, 30, 2)),
        ("2003-12-13T18:30:02+0200", utc(2003, 12, 13, 16, 30, 2)),
        ("2003-12-13T18:30:02.25-05:00", utc(2003, 12, 13, 23, 30, 2, 250000)),
        ("2003-12-13", utc(2003, 12, 13)),
    ],
)
def test_parse_date(value, expected):
    assert parse_date(value) == expected


def test_result_is_utc():
    parsed = parse_date("2010-01-01T12:00:00+05:30")
    assert parsed.tzinfo == timezone.utc
    assert parsed == utc(2010, 1, 1, 6, 30)


def test_feb_29_in_non_leap_year_is_clamped():
    assert parse_date("2023-02-29T10:00:00Z") == utc(2023, 2, 28, 10, 0, 0)
    assert parse_date("2024-02-29T10:00:00Z") == utc(2024, 2, 29, 10, 0, 0)


def test_hour_24_rolls_over_to_next_day():
    assert parse_date("2023-12-31T24:00:00Z") == utc(2024, 1, 1, 0, 0, 0)


def test_whitespace_is_collapsed():
    assert parse_date("  Tue, 10 Jun 2003\n  04:00:00 GMT ") == utc(2003, 6, 10, 4)


@pytest.mark.parametrize("value", [None, "", "   ", "#####"])
def test_unparseable_dates_are_none(value):
    assert parse_date(value) is None


def test_hour_24_on_impossible_day_is_none():
    assert parse_date("2024-02-30T24:00:00Z") is None


def test_hour_24_on_impossible_month_does_not_raise():
    parse_date("2024-13-01T24:00:00Z")
