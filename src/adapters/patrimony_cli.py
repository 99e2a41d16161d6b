"""CLI adapter printing the patrimony report for a reference date."""

from datetime import date
import os

from src.application.use_cases.get_patrimony_range import (
    GetPatrimonyRangeUseCase,
)
from src.application.use_cases.get_patrimony_summary import (
    GetPatrimonySummaryUseCase,
)
from src.domain.errors import PatrimonyError
from src.domain.services.dates import parse_date
from src.infrastructure.container import (
    build_possessions_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def _parse_env_date(name: str, default: date | None) -> date | None:
    """Read an ISO date from an environment variable.

    Args:
        name: Environment variable name.
        default: Value used when the variable is unset or blank.

    Returns:
        date | None: Parsed date or the default.

    Raises:
        InvalidDateError: If the variable holds an invalid date.
    """
    raw = os.getenv(name)
    if not raw or not raw.strip():
        return default
    return parse_date(raw, field=name)


def main() -> None:
    """Print the patrimony total and per-possession values."""
    logger = get_app_logger()
    settings = build_settings()
    try:
        as_of = _parse_env_date("PATRIMONY_DATE", date.today())
        start_date = _parse_env_date("PATRIMONY_START_DATE", None)
        repository = build_possessions_repository(settings=settings)
        summary = GetPatrimonySummaryUseCase(
            repository,
            logger=logger,
            currency_code=settings.currency_code,
        ).execute(as_of)
        range_result = (
            GetPatrimonyRangeUseCase(
                repository,
                logger=logger,
                currency_code=settings.currency_code,
            ).execute(start_date, as_of)
            if start_date
            else None
        )
    except PatrimonyError as exc:
        logger.error(str(exc))
        return

    print(
        f"Patrimony as of {summary.as_of}: "
        f"{summary.total:,.2f} {summary.currency_code} "
        f"({summary.active_count}/{len(summary.valuations)} "
        "possessions active)"
    )
    if range_result is not None:
        print(
            f"Range {range_result.start_date} -> {range_result.end_date}: "
            f"{range_result.total:,.2f} {range_result.currency_code}"
        )
    for item in summary.valuations:
        status = "active" if item.is_active else f"closed {item.end_date}"
        print(
            f"- {item.label} [{item.mode.value}, {status}]: "
            f"{item.current_value:,.2f} (initial {item.initial_value:,.2f})"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
