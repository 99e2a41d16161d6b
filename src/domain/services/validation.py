"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.errors import InvalidPossessionError
from src.domain.models.possessions import Possession


def validate_possession(
    possession: Possession,
    logger: Logger | None = None,
) -> Possession:
    """Check the invariants of a possession record.

    Args:
        possession: Possession to check.
        logger: Optional logger used for non-fatal warnings.

    Returns:
        Possession: The same record, for chaining.

    Raises:
        InvalidPossessionError: If the record breaks an invariant.
    """
    label = possession.label
    if not label or not label.strip():
        raise InvalidPossessionError("label must not be blank", field="label")
    if possession.initial_value < 0:
        raise InvalidPossessionError(
            "initial_value must be non-negative, "
            f"got {possession.initial_value}",
            label=label,
            field="initial_value",
        )
    rate = possession.depreciation_rate_percent
    if rate is not None and rate < 0:
        raise InvalidPossessionError(
            f"depreciation_rate_percent must be non-negative, got {rate}",
            label=label,
            field="depreciation_rate_percent",
        )
    if (
        possession.end_date is not None
        and possession.end_date < possession.start_date
    ):
        raise InvalidPossessionError(
            f"end_date {possession.end_date} precedes "
            f"start_date {possession.start_date}",
            label=label,
            field="end_date",
        )
    if (
        logger is not None
        and rate is not None
        and rate > Decimal("0")
        and possession.uses_day_count
        and possession.constant_per_period_value is not None
    ):
        logger.warning(
            f"Possession '{label}' sets both a depreciation rate and a "
            f"constant per-period value; valuing it in rate mode"
        )
    return possession


def validate_possessions(
    possessions: Iterable[Possession],
    logger: Logger | None = None,
) -> list[Possession]:
    """Check every record of a collection, failing on the first invalid one.

    Args:
        possessions: Records handed to an aggregation call.
        logger: Optional logger used for non-fatal warnings.

    Returns:
        list[Possession]: The records, materialized in input order.

    Raises:
        InvalidPossessionError: If any record breaks an invariant.
    """
    return [validate_possession(item, logger) for item in possessions]


__all__ = ["validate_possession", "validate_possessions"]
