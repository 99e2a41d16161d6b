"""
Calendar helpers shared by the valuation engine and the adapters.

Dates are plain calendar dates: any time-of-day component handed in by an
adapter is dropped before arithmetic.
"""

from collections.abc import Iterator
from datetime import date, datetime, timedelta
from decimal import Decimal

from src.domain.constants import DAYS_PER_YEAR
from src.domain.errors import InvalidDateError


def parse_date(value, field: str | None = None) -> date:
    """Parse a date, datetime or ISO-8601 string into a calendar date.

    Args:
        value: Raw value from a record, a widget or an environment variable.
        field: Optional field name reported in the error.

    Returns:
        date: Parsed calendar date.

    Raises:
        InvalidDateError: If the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(value, field=field)
    candidate = value.strip()
    if "T" in candidate:
        candidate = candidate.split("T", 1)[0]
    elif " " in candidate:
        candidate = candidate.split(" ", 1)[0]
    try:
        return date.fromisoformat(candidate)
    except ValueError as exc:
        raise InvalidDateError(value, field=field) from exc


def parse_optional_date(value, field: str | None = None) -> date | None:
    """Parse a date, keeping None and blank strings as None."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_date(value, field=field)


def whole_days(start: date, end: date) -> int:
    """Return the number of calendar days from start to end."""
    return (end - start).days


def add_years(value: date, years: int) -> date:
    """Return the anniversary of a date, mapping Feb 29 to Feb 28.

    Args:
        value: Base date.
        years: Number of years to add (may be negative).

    Returns:
        date: Same month/day, years later.
    """
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


def fractional_years(start: date, end: date) -> Decimal:
    """Return the elapsed time between two dates in fractional years.

    Whole anniversaries count as exact years; the remaining days are
    divided by the 365.25-day year.

    Args:
        start: First date.
        end: Second date.

    Returns:
        Decimal: Elapsed years, negative when end precedes start.
    """
    if end < start:
        return -fractional_years(end, start)
    years = end.year - start.year
    if add_years(start, years) > end:
        years -= 1
    anniversary = add_years(start, years)
    remainder = Decimal(whole_days(anniversary, end)) / DAYS_PER_YEAR
    return Decimal(years) + remainder


def iter_dates(start: date, end: date, step_days: int = 1) -> Iterator[date]:
    """Yield dates from start to end by step_days, always ending on end."""
    current = start
    step = timedelta(days=step_days)
    while current < end:
        yield current
        current += step
    yield end


__all__ = [
    "parse_date",
    "parse_optional_date",
    "whole_days",
    "add_years",
    "fractional_years",
    "iter_dates",
]
