"""Application use cases package."""

from .close_possession import ClosePossessionUseCase
from .create_possession import CreatePossessionUseCase
from .get_patrimony_range import GetPatrimonyRangeUseCase, PatrimonyRange
from .get_patrimony_series import GetPatrimonySeriesUseCase, PatrimonySeries
from .get_patrimony_summary import (
    GetPatrimonySummaryUseCase,
    PatrimonySummary,
)
from .get_possessions import GetPossessionsUseCase, Possession
from .remove_possession import RemovePossessionUseCase

__all__ = [
    "ClosePossessionUseCase",
    "CreatePossessionUseCase",
    "GetPatrimonyRangeUseCase",
    "PatrimonyRange",
    "GetPatrimonySeriesUseCase",
    "PatrimonySeries",
    "GetPatrimonySummaryUseCase",
    "PatrimonySummary",
    "GetPossessionsUseCase",
    "Possession",
    "RemovePossessionUseCase",
]
