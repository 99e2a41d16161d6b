"""Use case to register a new possession in the ledger."""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from src.application.ports.possessions_repository import (
    PossessionsRepositoryPort,
)
from src.domain.models.possessions import Possession
from src.domain.services.normalization import ensure_possession
from src.domain.services.validation import validate_possession
from src.infrastructure.logging.logger import get_app_logger


class CreatePossessionUseCase:
    """Validate and store a new, open possession."""

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

    def execute(self, record: Possession | Mapping[str, Any]) -> Possession:
        """Create the possession.

        Args:
            record: Possession or plain record from a form or file.

        Returns:
            Possession: The stored possession, always open; an end_date
            in the record is dropped with a warning.

        Raises:
            InvalidPossessionError: If the record breaks an invariant.
            InvalidDateError: If a date field cannot be parsed.
            DuplicatePossessionError: If the label is already used.
        """
        possession = validate_possession(
            ensure_possession(record),
            self._logger,
        )
        if possession.is_closed:
            self._logger.warning(
                f"Ignoring end_date {possession.end_date} for new possession "
                f"'{possession.label}'; possessions start open"
            )
            possession = replace(possession, end_date=None)
        self._repository.add_possession(possession)
        self._logger.info(
            f"Created possession '{possession.label}' "
            f"valued {possession.initial_value} from {possession.start_date}"
        )
        return possession


__all__ = ["CreatePossessionUseCase"]
