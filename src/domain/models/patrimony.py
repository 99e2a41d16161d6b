"""Domain models for patrimony aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .possessions import ValuationMode


@dataclass(frozen=True)
class PossessionValuation:
    """Value of a single possession at a reference date.

    Attributes:
        label: Possession label.
        owner: Optional holder of the possession.
        initial_value: Value at the possession start date.
        start_date: Possession start date.
        end_date: Possession close date, if any.
        mode: Valuation mode resolved for the possession.
        current_value: Value at the reference date (frozen after closure).
        is_active: Whether the possession counts toward the patrimony total.
    """

    label: str
    owner: str | None
    initial_value: Decimal
    start_date: date
    end_date: date | None
    mode: ValuationMode
    current_value: Decimal
    is_active: bool


@dataclass(frozen=True)
class PatrimonySummary:
    """Patrimony total at a reference date with its per-item breakdown."""

    as_of: date
    total: Decimal
    currency_code: str
    valuations: list[PossessionValuation]

    @property
    def active_count(self) -> int:
        """Return how many possessions contribute to the total."""
        return sum(1 for item in self.valuations if item.is_active)


@dataclass(frozen=True)
class PatrimonyRange:
    """Patrimony total requested over a date range.

    Only end_date drives the total; start_date is echoed for display.
    """

    start_date: date
    end_date: date
    total: Decimal
    currency_code: str


@dataclass(frozen=True)
class PatrimonyPoint:
    """Patrimony total at one date of a series."""

    date: date
    total: Decimal


@dataclass(frozen=True)
class PatrimonySeries:
    """Patrimony totals sampled across a date range."""

    currency_code: str
    points: list[PatrimonyPoint]

    @property
    def change(self) -> Decimal:
        """Return the last total minus the first total."""
        if not self.points:
            return Decimal("0")
        return self.points[-1].total - self.points[0].total


__all__ = [
    "PossessionValuation",
    "PatrimonySummary",
    "PatrimonyRange",
    "PatrimonyPoint",
    "PatrimonySeries",
]
