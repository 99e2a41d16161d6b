"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.possessions_repository import (
    PossessionsRepositoryPort,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.possessions_repository_factory import (
    create_possessions_repository,
)
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_settings() -> LedgerSettings:
    """Return the ledger settings read from the environment."""
    return LedgerSettings.from_env()


def build_possessions_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> PossessionsRepositoryPort:
    """Return the configured possession repository."""
    resolved_settings = settings or build_settings()
    resolved_db = None
    if resolved_settings.backend == "sqlalchemy":
        resolved_db = db_port or build_database_adapter()
    return create_possessions_repository(
        resolved_db,
        logger=get_app_logger(),
        settings=resolved_settings,
    )


__all__ = [
    "build_database_adapter",
    "build_settings",
    "build_possessions_repository",
]
