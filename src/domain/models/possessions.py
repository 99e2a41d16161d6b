"""Domain models for ledger possessions."""

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from enum import Enum


class ValuationMode(str, Enum):
    """Valuation rule applied to a possession."""

    RATE = "rate"
    CONSTANT = "constant"
    STATIC = "static"


@dataclass(frozen=True)
class Possession:
    """Owned asset tracked by the ledger.

    Attributes:
        label: Unique key of the possession within the ledger.
        initial_value: Value at start_date.
        start_date: Date from which the possession is valued.
        owner: Optional holder of the possession.
        end_date: Close date, None while the possession is open.
        depreciation_rate_percent: Annual straight-line depreciation rate.
        constant_per_period_value: Amount accrued per 30-day period.
        uses_day_count: Whether the constant accrual mode is enabled.
    """

    label: str
    initial_value: Decimal
    start_date: date
    owner: str | None = None
    end_date: date | None = None
    depreciation_rate_percent: Decimal | None = None
    constant_per_period_value: Decimal | None = None
    uses_day_count: bool = False

    @property
    def is_closed(self) -> bool:
        """Return True once an end date has been recorded."""
        return self.end_date is not None

    def closed(self, end_date: date) -> "Possession":
        """Return a copy closed at end_date, overwriting any earlier close."""
        return replace(self, end_date=end_date)


__all__ = ["Possession", "ValuationMode"]
