"""Tests for possession validation."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.errors import InvalidPossessionError, ValidationError
from src.domain.models import Possession
from src.domain.services.validation import (
    validate_possession,
    validate_possessions,
)


def _possession(**overrides) -> Possession:
    fields = {
        "label": "Laptop",
        "initial_value": Decimal("1000"),
        "start_date": date(2020, 1, 1),
    }
    fields.update(overrides)
    return Possession(**fields)


def test_validate_possession_returns_valid_records() -> None:
    """Valid records should be returned unchanged."""
    possession = _possession(end_date=date(2020, 1, 1))

    assert validate_possession(possession) is possession


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"label": "  "}, "label"),
        ({"initial_value": Decimal("-0.01")}, "initial_value"),
        ({"depreciation_rate_percent": Decimal("-5")}, "depreciation_rate_percent"),
        ({"end_date": date(2019, 12, 31)}, "end_date"),
    ],
)
def test_validate_possession_rejects_broken_invariants(overrides, field) -> None:
    """Each invariant should be reported on its own field."""
    with pytest.raises(InvalidPossessionError) as exc_info:
        validate_possession(_possession(**overrides))

    assert exc_info.value.field == field
    assert isinstance(exc_info.value, ValidationError)


def test_validate_possession_names_the_offending_label() -> None:
    """Error messages should start with the possession label."""
    with pytest.raises(InvalidPossessionError) as exc_info:
        validate_possession(_possession(initial_value=Decimal("-1")))

    assert str(exc_info.value).startswith("Possession 'Laptop': ")


def test_validate_possession_warns_on_overlapping_modes() -> None:
    """Rate plus constant accrual should only log a warning."""
    logger = MagicMock()

    validate_possession(
        _possession(
            depreciation_rate_percent=Decimal("10"),
            constant_per_period_value=Decimal("50"),
            uses_day_count=True,
        ),
        logger,
    )

    logger.warning.assert_called_once()
    assert "rate mode" in logger.warning.call_args.args[0]


def test_validate_possession_is_silent_without_overlap() -> None:
    """A constant value without day counting is not an overlap."""
    logger = MagicMock()

    validate_possession(
        _possession(
            depreciation_rate_percent=Decimal("10"),
            constant_per_period_value=Decimal("50"),
        ),
        logger,
    )

    logger.warning.assert_not_called()


def test_validate_possessions_materializes_iterables() -> None:
    """Generators should be validated and returned as a list."""
    records = (_possession(label=name) for name in ("A", "B"))

    result = validate_possessions(records)

    assert [item.label for item in result] == ["A", "B"]
