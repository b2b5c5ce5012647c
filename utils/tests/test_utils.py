from datetime import datetime, timezone

from utils.utils import format_long_date, format_short_date, parse_datetime


def test_parse_datetime_with_z_suffix():
    assert parse_datetime("2024-03-05T10:00:00.000Z") == datetime(
        2024, 3, 5, 10, 0, tzinfo=timezone.utc
    )


def test_parse_datetime_invalid():
    assert parse_datetime("yesterday") is None
    assert parse_datetime(None) is None


def test_format_short_date():
    assert format_short_date("2024-03-05T10:00:00Z") == "Mar 5"


def test_format_long_date():
    assert format_long_date("2024-12-25T00:00:00Z") == "December 25, 2024"


def test_format_invalid_date_is_blank():
    assert format_long_date("") == ""


def test_parse_datetime_out_of_range_is_none():
    assert parse_datetime("2024-13-05T10:00:00Z") is None
