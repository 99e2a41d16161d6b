"""Use case to read the possession ledger for presentation layers."""

from src.application.ports.possessions_repository import (
    PossessionsRepositoryPort,
)
from src.domain.models.possessions import Possession


class GetPossessionsUseCase:
    """Fetch every possession from the ledger."""

    def __init__(self, repository: PossessionsRepositoryPort) -> None:
        """Initialize the use case with its required dependencies."""
        self._repository = repository

    def execute(self) -> list[Possession]:
        """Return every possession, closed ones included, in ledger order."""
        return self._repository.fetch_possessions()


__all__ = ["GetPossessionsUseCase", "Possession"]
