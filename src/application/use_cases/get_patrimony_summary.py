"""Use case to compute the patrimony at a reference date."""

from datetime import date

from src.application.ports.possessions_repository import (
    PossessionsRepositoryPort,
)
from src.domain.constants import DEFAULT_CURRENCY_CODE
from src.domain.models.patrimony import PatrimonySummary
from src.domain.services.patrimony import compute_patrimony_summary
from src.infrastructure.logging.logger import get_app_logger


class GetPatrimonySummaryUseCase:
    """Compute the patrimony total and per-possession values at a date."""

    def __init__(
        self,
        repository: PossessionsRepositoryPort,
        logger=None,
        currency_code: str = DEFAULT_CURRENCY_CODE,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing the possession collection.
            logger: Optional logger compatible with logging.Logger-like API.
            currency_code: Currency code attached to the figures.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._currency_code = currency_code

    def execute(self, as_of: date | str | None = None) -> PatrimonySummary:
        """Return the patrimony summary.

        Args:
            as_of: Reference date; defaults to today.

        Returns:
            PatrimonySummary: Total of the active possessions and the value
            of every possession at the reference date.

        Raises:
            InvalidDateError: If as_of cannot be parsed.
            InvalidPossessionError: If a stored possession is invalid.
        """
        possessions = self._repository.fetch_possessions()
        self._logger.info(f"Fetched {len(possessions)} possessions")
        summary = compute_patrimony_summary(
            possessions,
            as_of or date.today(),
            currency_code=self._currency_code,
            logger=self._logger,
        )
        self._logger.info(
            f"Patrimony computed: as_of={summary.as_of}, "
            f"total={summary.total}, active={summary.active_count}"
        )
        return summary


__all__ = ["GetPatrimonySummaryUseCase", "PatrimonySummary"]
