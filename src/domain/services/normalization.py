"""Domain normalization helpers for plain possession records."""

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from src.domain.errors import InvalidPossessionError
from src.domain.models.possessions import Possession
from src.domain.services.dates import parse_date, parse_optional_date
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal

# Accepted spellings per field: snake_case, wire camelCase, legacy ledger keys.
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "owner": ("owner", "possesseur"),
    "label": ("label", "libelle"),
    "initial_value": ("initial_value", "initialValue", "valeur"),
    "start_date": ("start_date", "startDate", "dateDebut"),
    "end_date": ("end_date", "endDate", "dateFin"),
    "depreciation_rate_percent": (
        "depreciation_rate_percent",
        "depreciationRatePercent",
        "tauxAmortissement",
    ),
    "constant_per_period_value": (
        "constant_per_period_value",
        "constantPerPeriodValue",
        "valeurConstante",
    ),
    "uses_day_count": ("uses_day_count", "usesDayCount", "jour"),
}

_TRUE_STRINGS = {"1", "true", "yes", "y", "on"}


def normalize_label(label: str | None) -> str | None:
    """Normalize possession labels.

    Args:
        label: Raw label value from a record.

    Returns:
        str | None: Stripped label, None when blank.
    """
    if label is None:
        return None
    cleaned = str(label).strip()
    return cleaned or None


def normalize_owner(owner: str | None) -> str | None:
    """Normalize possession owners.

    Args:
        owner: Raw owner value from a record.

    Returns:
        str | None: Stripped owner, None when blank.
    """
    if owner is None:
        return None
    cleaned = str(owner).strip()
    return cleaned or None


def normalize_flag(value: Any) -> bool:
    """Interpret booleans coming from JSON, SQL rows or form fields.

    Legacy records store the day-count flag as a number, so any non-zero
    numeric string counts as true.
    """
    if isinstance(value, str):
        cleaned = value.strip().lower()
        if cleaned in _TRUE_STRINGS:
            return True
        try:
            amount = Decimal(cleaned)
        except InvalidOperation:
            return False
        return amount.is_finite() and amount != 0
    return bool(value)


def possession_from_record(record: Mapping[str, Any]) -> Possession:
    """Build a Possession from a plain record.

    Args:
        record: Mapping using snake_case, camelCase or legacy field names.

    Returns:
        Possession: Frozen domain record.

    Raises:
        InvalidPossessionError: If a required field is missing or a numeric
            field is not a number.
        InvalidDateError: If a date field cannot be parsed.
    """
    values = {
        field: _lookup(record, aliases)
        for field, aliases in _FIELD_ALIASES.items()
    }
    label = normalize_label(values["label"])
    if label is None:
        raise InvalidPossessionError("label is required", field="label")
    if values["start_date"] is None:
        raise InvalidPossessionError(
            "start_date is required", label=label, field="start_date"
        )
    if values["initial_value"] is None:
        raise InvalidPossessionError(
            "initial_value is required", label=label, field="initial_value"
        )

    return Possession(
        label=label,
        owner=normalize_owner(values["owner"]),
        initial_value=_decimal_field(
            values["initial_value"], label, "initial_value"
        ),
        start_date=parse_date(values["start_date"], field="start_date"),
        end_date=parse_optional_date(values["end_date"], field="end_date"),
        depreciation_rate_percent=_optional_decimal_field(
            values["depreciation_rate_percent"],
            label,
            "depreciation_rate_percent",
        ),
        constant_per_period_value=_optional_decimal_field(
            values["constant_per_period_value"],
            label,
            "constant_per_period_value",
        ),
        uses_day_count=normalize_flag(values["uses_day_count"]),
    )


def possession_to_record(possession: Possession) -> dict[str, Any]:
    """Serialize a Possession into a JSON-friendly snake_case record."""
    return {
        "owner": possession.owner,
        "label": possession.label,
        "initial_value": str(possession.initial_value),
        "start_date": possession.start_date.isoformat(),
        "end_date": (
            possession.end_date.isoformat() if possession.end_date else None
        ),
        "depreciation_rate_percent": _optional_str(
            possession.depreciation_rate_percent
        ),
        "constant_per_period_value": _optional_str(
            possession.constant_per_period_value
        ),
        "uses_day_count": possession.uses_day_count,
    }


def ensure_possession(value: Possession | Mapping[str, Any]) -> Possession:
    """Return value as a Possession, converting plain records."""
    if isinstance(value, Possession):
        return value
    if isinstance(value, Mapping):
        return possession_from_record(value)
    raise InvalidPossessionError(
        f"unsupported record type {type(value).__name__}"
    )


def _lookup(record: Mapping[str, Any], aliases: tuple[str, ...]) -> Any:
    for key in aliases:
        if key in record:
            return record[key]
    return None


def _decimal_field(value: Any, label: str, field: str) -> Decimal:
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidPossessionError(
            f"{field} is not a number: {value!r}", label=label, field=field
        ) from exc
    if not amount.is_finite():
        raise InvalidPossessionError(
            f"{field} must be finite: {value!r}", label=label, field=field
        )
    return amount


def _optional_decimal_field(
    value: Any,
    label: str,
    field: str,
) -> Decimal | None:
    try:
        amount = coerce_optional_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidPossessionError(
            f"{field} is not a number: {value!r}", label=label, field=field
        ) from exc
    if amount is not None and not amount.is_finite():
        raise InvalidPossessionError(
            f"{field} must be finite: {value!r}", label=label, field=field
        )
    return amount


def _optional_str(value: Decimal | None) -> str | None:
    return None if value is None else str(value)


__all__ = [
    "normalize_label",
    "normalize_owner",
    "normalize_flag",
    "possession_from_record",
    "possession_to_record",
    "ensure_possession",
]
