"""SQLAlchemy-backed repository for the possession ledger."""

from datetime import date

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.possessions_repository import (
    PossessionsRepositoryPort,
)
from src.domain.errors import DuplicatePossessionError, PossessionNotFoundError
from src.domain.models.possessions import Possession
from src.domain.services.normalization import (
    possession_from_record,
    possession_to_record,
)


CREATE_POSSESSIONS_SQL = """
CREATE TABLE IF NOT EXISTS possessions (
    label TEXT PRIMARY KEY,
    owner TEXT,
    initial_value NUMERIC NOT NULL,
    start_date DATE NOT NULL,
    end_date DATE,
    depreciation_rate_percent NUMERIC,
    constant_per_period_value NUMERIC,
    uses_day_count BOOLEAN NOT NULL DEFAULT FALSE
)
"""

SELECT_POSSESSIONS_SQL = text(
    """
    SELECT label, owner, initial_value, start_date, end_date,
           depreciation_rate_percent, constant_per_period_value,
           uses_day_count
    FROM possessions
    ORDER BY start_date, label
    """
)

SELECT_POSSESSION_SQL = text(
    """
    SELECT label, owner, initial_value, start_date, end_date,
           depreciation_rate_percent, constant_per_period_value,
           uses_day_count
    FROM possessions
    WHERE label = :label
    """
)

SELECT_LABEL_SQL = text("SELECT label FROM possessions WHERE label = :label")

INSERT_POSSESSION_SQL = text(
    """
    INSERT INTO possessions (
        label,
        owner,
        initial_value,
        start_date,
        end_date,
        depreciation_rate_percent,
        constant_per_period_value,
        uses_day_count
    )
    VALUES (
        :label,
        :owner,
        :initial_value,
        :start_date,
        :end_date,
        :depreciation_rate_percent,
        :constant_per_period_value,
        :uses_day_count
    )
    """
)

UPDATE_END_DATE_SQL = text(
    "UPDATE possessions SET end_date = :end_date WHERE label = :label"
)

DELETE_POSSESSION_SQL = text("DELETE FROM possessions WHERE label = :label")


class SqlAlchemyPossessionsRepository(PossessionsRepositoryPort):
    """Possession ledger stored in a SQL table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def prepare_storage(self) -> None:
        """Ensure the possessions table exists."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_POSSESSIONS_SQL)

    def fetch_possessions(self) -> list[Possession]:
        """Return every possession stored in the ledger table."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_POSSESSIONS_SQL).all()
        return [possession_from_record(row._mapping) for row in rows]

    def fetch_possession(self, label: str) -> Possession:
        """Return the possession with the given label."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_POSSESSION_SQL, {"label": label}).first()
        if row is None:
            raise PossessionNotFoundError(label)
        return possession_from_record(row._mapping)

    def add_possession(self, possession: Possession) -> None:
        """Insert a new possession row."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            existing = conn.execute(
                SELECT_LABEL_SQL, {"label": possession.label}
            ).first()
            if existing is not None:
                raise DuplicatePossessionError(possession.label)
            conn.execute(
                INSERT_POSSESSION_SQL, possession_to_record(possession)
            )

    def update_end_date(self, label: str, end_date: date) -> Possession:
        """Set or overwrite the end date of a possession."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(
                UPDATE_END_DATE_SQL,
                {"label": label, "end_date": end_date.isoformat()},
            )
            if result.rowcount == 0:
                raise PossessionNotFoundError(label)
        return self.fetch_possession(label)

    def remove_possession(self, label: str) -> None:
        """Delete a possession row."""
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            result = conn.execute(DELETE_POSSESSION_SQL, {"label": label})
            if result.rowcount == 0:
                raise PossessionNotFoundError(label)


__all__ = [
    "SqlAlchemyPossessionsRepository",
    "CREATE_POSSESSIONS_SQL",
    "SELECT_POSSESSIONS_SQL",
    "INSERT_POSSESSION_SQL",
    "UPDATE_END_DATE_SQL",
    "DELETE_POSSESSION_SQL",
]
