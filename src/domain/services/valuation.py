"""Domain service valuing a single possession at a reference date."""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from logging import Logger
from typing import Any

from src.domain.constants import DAYS_PER_PERIOD, PERCENT
from src.domain.models.possessions import Possession, ValuationMode
from src.domain.policies.activity import effective_valuation_date
from src.domain.services.dates import fractional_years, parse_date, whole_days
from src.domain.services.normalization import ensure_possession
from src.domain.services.validation import validate_possession

ZERO = Decimal("0")


def resolve_valuation_mode(possession: Possession) -> ValuationMode:
    """Return the single valuation mode selected by the possession fields.

    Args:
        possession: Possession to classify.

    Returns:
        ValuationMode: RATE when a positive depreciation rate is set, else
        CONSTANT when a per-period value is set with day counting enabled,
        else STATIC.
    """
    rate = possession.depreciation_rate_percent
    if rate is not None and rate > ZERO:
        return ValuationMode.RATE
    if (
        possession.constant_per_period_value is not None
        and possession.uses_day_count
    ):
        return ValuationMode.CONSTANT
    return ValuationMode.STATIC


def value_at(
    possession: Possession | Mapping[str, Any],
    as_of,
    logger: Logger | None = None,
) -> Decimal:
    """Compute the value of a possession at a reference date.

    Args:
        possession: Possession or plain record to value.
        as_of: Reference date (date, datetime or ISO string).
        logger: Optional logger used for validation warnings.

    Returns:
        Decimal: Non-negative value; 0 before the start date and frozen at
        the close date once the possession is closed.

    Raises:
        InvalidDateError: If as_of cannot be parsed.
        InvalidPossessionError: If the record breaks an invariant.
    """
    as_of_date = parse_date(as_of, field="as_of")
    record = validate_possession(ensure_possession(possession), logger)
    return compute_value(record, as_of_date)


def compute_value(possession: Possession, as_of: date) -> Decimal:
    """Value an already validated possession at a parsed date.

    Args:
        possession: Validated possession.
        as_of: Reference calendar date.

    Returns:
        Decimal: Non-negative value.
    """
    if as_of < possession.start_date:
        return ZERO
    effective = effective_valuation_date(possession, as_of)
    mode = resolve_valuation_mode(possession)

    if mode is ValuationMode.RATE:
        elapsed_years = fractional_years(possession.start_date, effective)
        rate = possession.depreciation_rate_percent / PERCENT
        value = possession.initial_value * (1 - rate * elapsed_years)
    elif mode is ValuationMode.CONSTANT:
        elapsed_days = whole_days(possession.start_date, effective)
        elapsed_periods = elapsed_days // DAYS_PER_PERIOD
        value = possession.constant_per_period_value * elapsed_periods
    else:
        value = possession.initial_value

    return value if value > ZERO else ZERO


__all__ = ["resolve_valuation_mode", "value_at", "compute_value"]
