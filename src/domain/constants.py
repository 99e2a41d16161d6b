"""Domain constants for possession valuation."""

from decimal import Decimal

DAYS_PER_YEAR = Decimal("365.25")

DAYS_PER_PERIOD = 30

PERCENT = Decimal("100")

DEFAULT_CURRENCY_CODE = "MGA"


__all__ = [
    "DAYS_PER_YEAR",
    "DAYS_PER_PERIOD",
    "PERCENT",
    "DEFAULT_CURRENCY_CODE",
]
