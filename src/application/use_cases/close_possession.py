"""Use case to close a possession at a given date."""

from datetime import date

from src.application.ports.possessions_repository import (
    PossessionsRepositoryPort,
)
from src.domain.models.possessions import Possession
from src.domain.services.dates import parse_date
from src.domain.services.validation import validate_possession
from src.infrastructure.logging.logger import get_app_logger


class ClosePossessionUseCase:
    """Set or overwrite the end date of a possession."""

    def __init__(
        self,
        repository: PossessionsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port storing possessions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        label: str,
        end_date: date | str | None = None,
    ) -> Possession:
        """Close the possession.

        Closing an already closed possession overwrites its end date.

        Args:
            label: Label of the possession to close.
            end_date: Close date; defaults to today.

        Returns:
            Possession: The updated possession.

        Raises:
            PossessionNotFoundError: If no possession has that label.
            InvalidDateError: If end_date cannot be parsed.
            InvalidPossessionError: If end_date precedes the start date.
        """
        close_date = (
            parse_date(end_date, field="end_date")
            if end_date is not None
            else date.today()
        )
        current = self._repository.fetch_possession(label)
        validate_possession(current.closed(close_date))
        updated = self._repository.update_end_date(label, close_date)
        self._logger.info(f"Closed possession '{label}' on {close_date}")
        return updated


__all__ = ["ClosePossessionUseCase"]
