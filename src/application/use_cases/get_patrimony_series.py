"""Use case to sample the patrimony across a date range for charts."""

from datetime import date

from src.application.ports.possessions_repository import (
    PossessionsRepositoryPort,
)
from src.domain.constants import DEFAULT_CURRENCY_CODE
from src.domain.models.patrimony import PatrimonySeries
from src.domain.services.patrimony import compute_patrimony_series
from src.infrastructure.logging.logger import get_app_logger


class GetPatrimonySeriesUseCase:
    """Compute patrimony totals at regular dates between two bounds."""

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

    def execute(
        self,
        start_date: date | str,
        end_date: date | str,
        step_days: int = 1,
    ) -> PatrimonySeries:
        """Return the sampled series.

        Args:
            start_date: First sampled date.
            end_date: Last sampled date.
            step_days: Days between samples.

        Returns:
            PatrimonySeries: One point per sampled date.

        Raises:
            InvalidRangeError: If the range or step is invalid.
        """
        possessions = self._repository.fetch_possessions()
        series = compute_patrimony_series(
            possessions,
            start_date,
            end_date,
            step_days=step_days,
            currency_code=self._currency_code,
            logger=self._logger,
        )
        self._logger.info(
            f"Patrimony series computed: {len(series.points)} points, "
            f"step={step_days}d"
        )
        return series


__all__ = ["GetPatrimonySeriesUseCase", "PatrimonySeries"]
