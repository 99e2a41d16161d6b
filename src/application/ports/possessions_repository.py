"""Port for reading and maintaining the possession ledger."""

from datetime import date
from typing import Protocol

from src.domain.models.possessions import Possession


class PossessionsRepositoryPort(Protocol):
    """Port exposing the possession collection handed to the engine.

    Implementations guarantee label uniqueness and return snapshots: the
    list returned by fetch_possessions is never mutated afterwards.
    """

    def fetch_possessions(self) -> list[Possession]:
        """Return every possession, closed ones included."""

    def fetch_possession(self, label: str) -> Possession:
        """Return the possession with the given label.

        Raises:
            PossessionNotFoundError: If no possession has that label.
        """

    def add_possession(self, possession: Possession) -> None:
        """Store a new possession.

        Raises:
            DuplicatePossessionError: If the label is already used.
        """

    def update_end_date(self, label: str, end_date: date) -> Possession:
        """Set or overwrite the end date of a possession.

        Raises:
            PossessionNotFoundError: If no possession has that label.
        """

    def remove_possession(self, label: str) -> None:
        """Delete a possession from the ledger.

        Raises:
            PossessionNotFoundError: If no possession has that label.
        """


__all__ = ["PossessionsRepositoryPort"]
