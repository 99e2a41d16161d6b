"""Domain models package."""

from .patrimony import (
    PatrimonyPoint,
    PatrimonyRange,
    PatrimonySeries,
    PatrimonySummary,
    PossessionValuation,
)
from .possessions import Possession, ValuationMode

__all__ = [
    "Possession",
    "ValuationMode",
    "PossessionValuation",
    "PatrimonySummary",
    "PatrimonyRange",
    "PatrimonyPoint",
    "PatrimonySeries",
]
