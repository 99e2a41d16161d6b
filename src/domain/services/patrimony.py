"""Domain services for patrimony aggregates."""

from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal
from logging import Logger
from typing import Any

from src.domain.constants import DEFAULT_CURRENCY_CODE
from src.domain.errors import InvalidRangeError
from src.domain.models import (
    PatrimonyPoint,
    PatrimonyRange,
    PatrimonySeries,
    PatrimonySummary,
    Possession,
    PossessionValuation,
)
from src.domain.policies.activity import is_active
from src.domain.services.dates import iter_dates, parse_date
from src.domain.services.normalization import ensure_possession
from src.domain.services.valuation import compute_value, resolve_valuation_mode
from src.domain.services.validation import validate_possessions

PossessionInput = Possession | Mapping[str, Any]


def total_at(
    possessions: Iterable[PossessionInput],
    as_of,
    logger: Logger | None = None,
) -> Decimal:
    """Sum the values of the possessions active at a reference date.

    Args:
        possessions: Snapshot of the possession collection.
        as_of: Reference date (date, datetime or ISO string).
        logger: Optional logger used for validation warnings.

    Returns:
        Decimal: Patrimony total; possessions closed on or before as_of
        contribute nothing.

    Raises:
        InvalidDateError: If as_of cannot be parsed.
        InvalidPossessionError: If any record is invalid; nothing is summed.
    """
    as_of_date = parse_date(as_of, field="as_of")
    records = _prepare(possessions, logger)
    return _sum_active(records, as_of_date)


def total_over_range(
    possessions: Iterable[PossessionInput],
    start,
    end,
    logger: Logger | None = None,
) -> Decimal:
    """Return the patrimony total for a range request.

    The total is evaluated at the end date only. The start date is parsed
    for error reporting and otherwise ignored.

    Args:
        possessions: Snapshot of the possession collection.
        start: First date of the requested range.
        end: Last date of the requested range.
        logger: Optional logger used for validation warnings.

    Returns:
        Decimal: Same value as total_at(possessions, end).
    """
    parse_date(start, field="start_date")
    end_date = parse_date(end, field="end_date")
    records = _prepare(possessions, logger)
    return _sum_active(records, end_date)


def compute_possession_valuations(
    possessions: Iterable[PossessionInput],
    as_of,
    logger: Logger | None = None,
) -> list[PossessionValuation]:
    """Value every possession at a reference date, in input order.

    Closed possessions are kept with their frozen value and flagged
    inactive so tables can still display them.

    Args:
        possessions: Snapshot of the possession collection.
        as_of: Reference date (date, datetime or ISO string).
        logger: Optional logger used for validation warnings.

    Returns:
        list[PossessionValuation]: One valuation per possession.
    """
    as_of_date = parse_date(as_of, field="as_of")
    records = _prepare(possessions, logger)
    return [_valuation(record, as_of_date) for record in records]


def compute_patrimony_summary(
    possessions: Iterable[PossessionInput],
    as_of,
    *,
    currency_code: str = DEFAULT_CURRENCY_CODE,
    logger: Logger | None = None,
) -> PatrimonySummary:
    """Compute the patrimony total and its per-possession breakdown.

    Args:
        possessions: Snapshot of the possession collection.
        as_of: Reference date.
        currency_code: Currency code attached to the figures.
        logger: Optional logger used for validation warnings.

    Returns:
        PatrimonySummary: Total of the active possessions plus every
        possession's valuation.
    """
    as_of_date = parse_date(as_of, field="as_of")
    valuations = compute_possession_valuations(
        possessions, as_of_date, logger
    )
    total = sum(
        (item.current_value for item in valuations if item.is_active),
        Decimal("0"),
    )
    return PatrimonySummary(
        as_of=as_of_date,
        total=total,
        currency_code=currency_code,
        valuations=valuations,
    )


def compute_patrimony_range(
    possessions: Iterable[PossessionInput],
    start,
    end,
    *,
    currency_code: str = DEFAULT_CURRENCY_CODE,
    logger: Logger | None = None,
) -> PatrimonyRange:
    """Wrap total_over_range with the requested dates for display."""
    start_date = parse_date(start, field="start_date")
    end_date = parse_date(end, field="end_date")
    total = total_over_range(possessions, start_date, end_date, logger)
    return PatrimonyRange(
        start_date=start_date,
        end_date=end_date,
        total=total,
        currency_code=currency_code,
    )


def compute_patrimony_series(
    possessions: Iterable[PossessionInput],
    start,
    end,
    *,
    step_days: int = 1,
    currency_code: str = DEFAULT_CURRENCY_CODE,
    logger: Logger | None = None,
) -> PatrimonySeries:
    """Sample the patrimony total across a date range.

    Args:
        possessions: Snapshot of the possession collection.
        start: First date of the series.
        end: Last date of the series, always sampled.
        step_days: Days between two samples.
        currency_code: Currency code attached to the figures.
        logger: Optional logger used for validation warnings.

    Returns:
        PatrimonySeries: One point per sampled date.

    Raises:
        InvalidRangeError: If start is after end or step_days is below 1.
    """
    start_date = parse_date(start, field="start_date")
    end_date = parse_date(end, field="end_date")
    if start_date > end_date:
        raise InvalidRangeError(
            f"Range start {start_date} is after range end {end_date}",
            start_date=start_date,
            end_date=end_date,
        )
    if step_days < 1:
        raise InvalidRangeError(
            f"step_days must be at least 1, got {step_days}",
            start_date=start_date,
            end_date=end_date,
        )
    records = _prepare(possessions, logger)
    points = [
        PatrimonyPoint(date=point, total=_sum_active(records, point))
        for point in iter_dates(start_date, end_date, step_days)
    ]
    return PatrimonySeries(currency_code=currency_code, points=points)


def _prepare(
    possessions: Iterable[PossessionInput],
    logger: Logger | None,
) -> list[Possession]:
    return validate_possessions(
        (ensure_possession(item) for item in possessions),
        logger,
    )


def _sum_active(records: list[Possession], as_of: date) -> Decimal:
    total = Decimal("0")
    for record in records:
        if is_active(record, as_of):
            total += compute_value(record, as_of)
    return total


def _valuation(record: Possession, as_of: date) -> PossessionValuation:
    return PossessionValuation(
        label=record.label,
        owner=record.owner,
        initial_value=record.initial_value,
        start_date=record.start_date,
        end_date=record.end_date,
        mode=resolve_valuation_mode(record),
        current_value=compute_value(record, as_of),
        is_active=is_active(record, as_of),
    )


__all__ = [
    "total_at",
    "total_over_range",
    "compute_possession_valuations",
    "compute_patrimony_summary",
    "compute_patrimony_range",
    "compute_patrimony_series",
]
