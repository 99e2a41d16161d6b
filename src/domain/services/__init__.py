"""Domain services package."""

from .dates import (
    add_years,
    fractional_years,
    iter_dates,
    parse_date,
    parse_optional_date,
    whole_days,
)
from .normalization import (
    ensure_possession,
    normalize_flag,
    normalize_label,
    normalize_owner,
    possession_from_record,
    possession_to_record,
)
from .patrimony import (
    compute_patrimony_range,
    compute_patrimony_series,
    compute_patrimony_summary,
    compute_possession_valuations,
    total_at,
    total_over_range,
)
from .validation import validate_possession, validate_possessions
from .valuation import compute_value, resolve_valuation_mode, value_at

__all__ = [
    "add_years",
    "fractional_years",
    "iter_dates",
    "parse_date",
    "parse_optional_date",
    "whole_days",
    "ensure_possession",
    "normalize_flag",
    "normalize_label",
    "normalize_owner",
    "possession_from_record",
    "possession_to_record",
    "compute_patrimony_range",
    "compute_patrimony_series",
    "compute_patrimony_summary",
    "compute_possession_valuations",
    "total_at",
    "total_over_range",
    "validate_possession",
    "validate_possessions",
    "compute_value",
    "resolve_valuation_mode",
    "value_at",
]
