"""Tests for the calendar helpers."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.domain.errors import InvalidDateError
from src.domain.services.dates import (
    add_years,
    fractional_years,
    iter_dates,
    parse_date,
    parse_optional_date,
    whole_days,
)


def test_parse_date_accepts_dates_datetimes_and_iso_strings() -> None:
    """Supported inputs should collapse to a calendar date."""
    assert parse_date(date(2022, 1, 1)) == date(2022, 1, 1)
    assert parse_date(datetime(2022, 1, 1, 18, 30)) == date(2022, 1, 1)
    assert parse_date("2022-01-01") == date(2022, 1, 1)
    assert parse_date(" 2022-01-01 ") == date(2022, 1, 1)


def test_parse_date_drops_time_of_day() -> None:
    """ISO timestamps should keep only their date part."""
    assert parse_date("2022-01-01T23:59:59.000Z") == date(2022, 1, 1)
    assert parse_date("2022-01-01 08:00:00") == date(2022, 1, 1)


@pytest.mark.parametrize("value", ["2022-13-01", "yesterday", "", None, 42])
def test_parse_date_rejects_unparseable_values(value) -> None:
    """Anything that is not a calendar date should raise InvalidDateError."""
    with pytest.raises(InvalidDateError) as exc_info:
        parse_date(value, field="as_of")

    assert exc_info.value.field == "as_of"
    assert exc_info.value.value == value


def test_parse_optional_date_keeps_blanks_as_none() -> None:
    """Blank optional dates should stay unset."""
    assert parse_optional_date(None) is None
    assert parse_optional_date("  ") is None
    assert parse_optional_date("2023-09-30") == date(2023, 9, 30)


def test_whole_days_counts_calendar_days() -> None:
    """Elapsed days should follow the calendar, leap days included."""
    assert whole_days(date(2021, 6, 1), date(2021, 9, 29)) == 120
    assert whole_days(date(2020, 1, 1), date(2021, 1, 1)) == 366


def test_add_years_maps_leap_day_to_february_28() -> None:
    """Anniversaries of Feb 29 should fall on Feb 28 in common years."""
    assert add_years(date(2020, 2, 29), 1) == date(2021, 2, 28)
    assert add_years(date(2020, 2, 29), 4) == date(2024, 2, 29)
    assert add_years(date(2021, 6, 1), -1) == date(2020, 6, 1)


def test_fractional_years_counts_anniversaries_as_whole_years() -> None:
    """Whole anniversaries should give an exact year count."""
    assert fractional_years(date(2020, 1, 1), date(2022, 1, 1)) == 2
    assert fractional_years(date(2020, 2, 29), date(2021, 2, 28)) == 1


def test_fractional_years_divides_leftover_days_by_365_25() -> None:
    """Days past the last anniversary should count in 365.25-day years."""
    result = fractional_years(date(2021, 1, 1), date(2021, 7, 2))
    assert result == Decimal(182) / Decimal("365.25")

    result = fractional_years(date(2020, 1, 1), date(2021, 1, 31))
    assert result == 1 + Decimal(30) / Decimal("365.25")


def test_fractional_years_is_negative_backwards() -> None:
    """Reversed bounds should give the negated duration."""
    assert fractional_years(date(2022, 1, 1), date(2020, 1, 1)) == -2


def test_iter_dates_always_ends_on_the_last_date() -> None:
    """Stepping should include both bounds without duplicates."""
    start = date(2024, 1, 1)

    assert list(iter_dates(start, date(2024, 1, 10), 4)) == [
        date(2024, 1, 1),
        date(2024, 1, 5),
        date(2024, 1, 9),
        date(2024, 1, 10),
    ]
    assert list(iter_dates(start, date(2024, 1, 9), 4)) == [
        date(2024, 1, 1),
        date(2024, 1, 5),
        date(2024, 1, 9),
    ]
    assert list(iter_dates(start, start)) == [start]
