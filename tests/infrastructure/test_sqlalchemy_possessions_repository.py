"""Tests for the SQLAlchemy possession ledger."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine

from src.domain.errors import DuplicatePossessionError, PossessionNotFoundError
from src.domain.models import Possession
from src.infrastructure.sqlalchemy_possessions_repository import (
    CREATE_POSSESSIONS_SQL,
    INSERT_POSSESSION_SQL,
    SqlAlchemyPossessionsRepository,
)


def _laptop() -> Possession:
    return Possession(
        label="Laptop",
        owner="John Doe",
        initial_value=Decimal("1000"),
        start_date=date(2020, 1, 1),
        depreciation_rate_percent=Decimal("10"),
    )


def _salary() -> Possession:
    return Possession(
        label="Salary",
        initial_value=Decimal("0"),
        start_date=date(2019, 6, 1),
        constant_per_period_value=Decimal("50.5"),
        uses_day_count=True,
    )


@pytest.fixture
def repository():
    """Repository bound to a private in-memory SQLite database."""
    engine = create_engine("sqlite://")
    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine
    repository = SqlAlchemyPossessionsRepository(db_port)
    repository.prepare_storage()
    yield repository
    engine.dispose()


def test_prepare_storage_creates_the_table() -> None:
    """prepare_storage should run the DDL inside a transaction."""
    engine = MagicMock()
    conn = MagicMock()
    engine.begin.return_value.__enter__.return_value = conn
    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine

    SqlAlchemyPossessionsRepository(db_port).prepare_storage()

    conn.exec_driver_sql.assert_called_once_with(CREATE_POSSESSIONS_SQL)


def test_add_and_fetch_round_trip_every_field(repository) -> None:
    """Stored rows should read back as equal possessions."""
    repository.add_possession(_laptop())
    repository.add_possession(_salary())

    assert repository.fetch_possessions() == [_salary(), _laptop()]
    assert repository.fetch_possession("Salary") == _salary()


def test_add_possession_rejects_duplicates(repository) -> None:
    """Labels are the primary key of the ledger."""
    repository.add_possession(_laptop())

    with pytest.raises(DuplicatePossessionError):
        repository.add_possession(_laptop())


def test_update_end_date_closes_the_row(repository) -> None:
    """The end date should be stored and returned."""
    repository.add_possession(_laptop())

    updated = repository.update_end_date("Laptop", date(2022, 1, 1))

    assert updated.end_date == date(2022, 1, 1)
    assert repository.fetch_possession("Laptop").end_date == date(2022, 1, 1)


def test_remove_possession_deletes_the_row(repository) -> None:
    """Removed rows should no longer be listed."""
    repository.add_possession(_laptop())

    repository.remove_possession("Laptop")

    assert repository.fetch_possessions() == []


def test_unknown_labels_raise_not_found(repository) -> None:
    """Every label-based call should report missing rows."""
    with pytest.raises(PossessionNotFoundError):
        repository.fetch_possession("Laptop")
    with pytest.raises(PossessionNotFoundError):
        repository.update_end_date("Laptop", date(2022, 1, 1))
    with pytest.raises(PossessionNotFoundError):
        repository.remove_possession("Laptop")


def test_add_possession_binds_serialized_record() -> None:
    """Inserts should bind the JSON-friendly record of the possession."""
    engine = MagicMock()
    conn = MagicMock()
    engine.begin.return_value.__enter__.return_value = conn
    conn.execute.return_value.first.return_value = None
    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine

    SqlAlchemyPossessionsRepository(db_port).add_possession(_salary())

    statement, params = conn.execute.call_args.args
    assert statement is INSERT_POSSESSION_SQL
    assert params == {
        "owner": None,
        "label": "Salary",
        "initial_value": "0",
        "start_date": "2019-06-01",
        "end_date": None,
        "depreciation_rate_percent": None,
        "constant_per_period_value": "50.5",
        "uses_day_count": True,
    }
