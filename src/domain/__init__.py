"""Domain package for valuation rules and core models."""

from .constants import (
    DAYS_PER_PERIOD,
    DAYS_PER_YEAR,
    DEFAULT_CURRENCY_CODE,
)
from .errors import (
    DuplicatePossessionError,
    InvalidDateError,
    InvalidPossessionError,
    InvalidRangeError,
    LedgerError,
    PatrimonyError,
    PossessionNotFoundError,
    ValidationError,
)
from .models import (
    PatrimonyPoint,
    PatrimonyRange,
    PatrimonySeries,
    PatrimonySummary,
    Possession,
    PossessionValuation,
    ValuationMode,
)
from .policies import effective_valuation_date, is_active
from .services import (
    compute_patrimony_range,
    compute_patrimony_series,
    compute_patrimony_summary,
    compute_possession_valuations,
    possession_from_record,
    possession_to_record,
    resolve_valuation_mode,
    total_at,
    total_over_range,
    validate_possession,
    value_at,
)

__all__ = [
    "DAYS_PER_PERIOD",
    "DAYS_PER_YEAR",
    "DEFAULT_CURRENCY_CODE",
    "PatrimonyError",
    "ValidationError",
    "InvalidDateError",
    "InvalidPossessionError",
    "InvalidRangeError",
    "LedgerError",
    "PossessionNotFoundError",
    "DuplicatePossessionError",
    "Possession",
    "ValuationMode",
    "PossessionValuation",
    "PatrimonySummary",
    "PatrimonyRange",
    "PatrimonyPoint",
    "PatrimonySeries",
    "is_active",
    "effective_valuation_date",
    "compute_patrimony_range",
    "compute_patrimony_series",
    "compute_patrimony_summary",
    "compute_possession_valuations",
    "possession_from_record",
    "possession_to_record",
    "resolve_valuation_mode",
    "total_at",
    "total_over_range",
    "validate_possession",
    "value_at",
]
