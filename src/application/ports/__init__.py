"""Application ports package."""

from .database import DatabaseEnginePort
from .possessions_repository import PossessionsRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "PossessionsRepositoryPort",
]
