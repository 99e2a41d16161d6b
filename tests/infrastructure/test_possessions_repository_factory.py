"""Tests for the possession repository factory."""

import json
from unittest.mock import MagicMock

import pytest

from src.infrastructure import possessions_repository_factory as factory
from src.infrastructure.possessions_repository import (
    InMemoryPossessionsRepository,
)
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.sqlalchemy_possessions_repository import (
    SqlAlchemyPossessionsRepository,
)


def test_memory_backend_without_file_starts_empty() -> None:
    """No seed file should produce an empty in-memory ledger."""
    logger = MagicMock()

    repository = factory.create_possessions_repository(
        logger=logger,
        settings=LedgerSettings(backend="memory"),
    )

    assert isinstance(repository, InMemoryPossessionsRepository)
    assert repository.fetch_possessions() == []
    logger.info.assert_called_once_with(
        "Starting with an empty possession ledger"
    )


def test_memory_backend_ignores_missing_file(tmp_path) -> None:
    """A configured file that vanished should not break startup."""
    repository = factory.create_possessions_repository(
        logger=MagicMock(),
        settings=LedgerSettings(possessions_file=tmp_path / "gone.json"),
    )

    assert repository.fetch_possessions() == []


def test_memory_backend_loads_the_seed_file(tmp_path) -> None:
    """Seed files should populate the ledger."""
    path = tmp_path / "possessions.json"
    path.write_text(
        json.dumps(
            [
                {
                    "label": "Laptop",
                    "initial_value": "1000",
                    "start_date": "2020-01-01",
                }
            ]
        ),
        encoding="utf-8",
    )

    repository = factory.create_possessions_repository(
        logger=MagicMock(),
        settings=LedgerSettings(possessions_file=path),
    )

    assert [item.label for item in repository.fetch_possessions()] == [
        "Laptop"
    ]


def test_sqlalchemy_backend_prepares_storage() -> None:
    """The SQL backend should create its table on startup."""
    db_port = MagicMock()
    engine = db_port.get_ledger_engine.return_value
    conn = engine.begin.return_value.__enter__.return_value

    repository = factory.create_possessions_repository(
        db_port,
        logger=MagicMock(),
        settings=LedgerSettings(backend="sqlalchemy"),
    )

    assert isinstance(repository, SqlAlchemyPossessionsRepository)
    conn.exec_driver_sql.assert_called_once()


def test_sqlalchemy_backend_requires_a_database_port() -> None:
    """Selecting the SQL backend without a port should fail."""
    with pytest.raises(RuntimeError):
        factory.create_possessions_repository(
            logger=MagicMock(),
            settings=LedgerSettings(backend="sqlalchemy"),
        )


def test_unknown_backend_raises_value_error() -> None:
    """Unknown backend names should be reported."""
    with pytest.raises(ValueError, match="Unsupported ledger backend: csv"):
        factory.create_possessions_repository(
            logger=MagicMock(),
            settings=LedgerSettings(backend="csv"),
        )
