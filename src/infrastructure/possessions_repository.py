"""In-memory possession ledger, optionally seeded from a JSON file."""

from collections.abc import Iterable
from datetime import date
import json
from pathlib import Path
import threading

from src.application.ports.possessions_repository import (
    PossessionsRepositoryPort,
)
from src.domain.errors import (
    DuplicatePossessionError,
    InvalidPossessionError,
    PossessionNotFoundError,
)
from src.domain.models.possessions import Possession
from src.domain.services.normalization import possession_from_record


def load_possessions_file(path: Path | str) -> list[Possession]:
    """Read possession records from a JSON file.

    The file holds either a list of records or an object with a
    ``possessions`` list.

    Args:
        path: Path to the JSON file.

    Returns:
        list[Possession]: Parsed possessions in file order.

    Raises:
        InvalidPossessionError: If the payload or a record is malformed.
    """
    with Path(path).open(encoding="utf-8") as handle:
        payload = json.load(handle)
    if isinstance(payload, dict):
        payload = payload.get("possessions", [])
    if not isinstance(payload, list):
        raise InvalidPossessionError(
            f"expected a list of records in {path}"
        )
    return [possession_from_record(record) for record in payload]


class InMemoryPossessionsRepository(PossessionsRepositoryPort):
    """Possession ledger held in process memory.

    Insertion order is preserved. A lock serializes writers so that
    concurrent sessions always read a consistent snapshot.
    """

    def __init__(self, possessions: Iterable[Possession] = ()) -> None:
        """Initialize the ledger.

        Args:
            possessions: Initial possessions; labels must be unique.
        """
        self._lock = threading.Lock()
        self._possessions: dict[str, Possession] = {}
        for possession in possessions:
            self.add_possession(possession)

    @classmethod
    def from_file(cls, path: Path | str) -> "InMemoryPossessionsRepository":
        """Build a ledger seeded from a JSON file."""
        return cls(load_possessions_file(path))

    def fetch_possessions(self) -> list[Possession]:
        """Return a snapshot of every possession."""
        with self._lock:
            return list(self._possessions.values())

    def fetch_possession(self, label: str) -> Possession:
        """Return the possession with the given label."""
        with self._lock:
            try:
                return self._possessions[label]
            except KeyError:
                raise PossessionNotFoundError(label) from None

    def add_possession(self, possession: Possession) -> None:
        """Store a new possession."""
        with self._lock:
            if possession.label in self._possessions:
                raise DuplicatePossessionError(possession.label)
            self._possessions[possession.label] = possession

    def update_end_date(self, label: str, end_date: date) -> Possession:
        """Set or overwrite the end date of a possession."""
        with self._lock:
            current = self._possessions.get(label)
            if current is None:
                raise PossessionNotFoundError(label)
            updated = current.closed(end_date)
            self._possessions[label] = updated
            return updated

    def remove_possession(self, label: str) -> None:
        """Delete a possession from the ledger."""
        with self._lock:
            if self._possessions.pop(label, None) is None:
                raise PossessionNotFoundError(label)


__all__ = ["InMemoryPossessionsRepository", "load_possessions_file"]
