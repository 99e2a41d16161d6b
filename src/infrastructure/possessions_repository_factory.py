"""Factory helpers to select the possession ledger backend."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.possessions_repository import (
    PossessionsRepositoryPort,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.possessions_repository import (
    InMemoryPossessionsRepository,
)
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.sqlalchemy_possessions_repository import (
    SqlAlchemyPossessionsRepository,
)


def create_possessions_repository(
    db_port: DatabaseEnginePort | None = None,
    logger=None,
    settings: LedgerSettings | None = None,
) -> PossessionsRepositoryPort:
    """Return a possession repository implementation based on configuration.

    Args:
        db_port: Port providing the ledger engine (sqlalchemy backend only).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override; read from the environment
            when omitted.

    Returns:
        PossessionsRepositoryPort: Concrete repository implementation.

    Raises:
        RuntimeError: If the sqlalchemy backend is selected without a port.
        ValueError: If the backend name is unknown.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or LedgerSettings.from_env()
    backend = resolved_settings.backend

    if backend == "memory":
        source = resolved_settings.possessions_file
        if source is None or not source.exists():
            resolved_logger.info("Starting with an empty possession ledger")
            return InMemoryPossessionsRepository()
        repository = InMemoryPossessionsRepository.from_file(source)
        resolved_logger.info(
            f"Loaded {len(repository.fetch_possessions())} possessions "
            f"from {source}"
        )
        return repository

    if backend == "sqlalchemy":
        if db_port is None:
            raise RuntimeError(
                "SQLAlchemy ledger backend requires a database adapter."
            )
        repository = SqlAlchemyPossessionsRepository(db_port)
        repository.prepare_storage()
        return repository

    raise ValueError(
        "Unsupported ledger backend: "
        f"{backend}. Expected memory or sqlalchemy."
    )


__all__ = ["create_possessions_repository"]
