"""Use case to compute the patrimony for a date range request."""

from datetime import date

from src.application.ports.possessions_repository import (
    PossessionsRepositoryPort,
)
from src.domain.constants import DEFAULT_CURRENCY_CODE
from src.domain.models.patrimony import PatrimonyRange
from src.domain.services.patrimony import compute_patrimony_range
from src.infrastructure.logging.logger import get_app_logger


class GetPatrimonyRangeUseCase:
    """Compute the patrimony total for a start/end pair."""

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
    ) -> PatrimonyRange:
        """Return the range figure.

        The total is evaluated at end_date; start_date is echoed back.

        Args:
            start_date: First date of the requested range.
            end_date: Last date of the requested range.

        Returns:
            PatrimonyRange: Requested dates and the total at end_date.
        """
        possessions = self._repository.fetch_possessions()
        result = compute_patrimony_range(
            possessions,
            start_date,
            end_date,
            currency_code=self._currency_code,
            logger=self._logger,
        )
        self._logger.info(
            f"Patrimony range computed: start={result.start_date}, "
            f"end={result.end_date}, total={result.total}"
        )
        return result


__all__ = ["GetPatrimonyRangeUseCase", "PatrimonyRange"]
