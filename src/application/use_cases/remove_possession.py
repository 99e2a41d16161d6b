"""Use case to delete a possession from the ledger."""

from src.application.ports.possessions_repository import (
    PossessionsRepositoryPort,
)
from src.infrastructure.logging.logger import get_app_logger


class RemovePossessionUseCase:
    """Delete a possession by label."""

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

    def execute(self, label: str) -> None:
        """Remove the possession.

        Raises:
            PossessionNotFoundError: If no possession has that label.
        """
        self._repository.remove_possession(label)
        self._logger.info(f"Removed possession '{label}'")


__all__ = ["RemovePossessionUseCase"]
