"""Reporting policies deciding which possessions count toward patrimony."""

from datetime import date

from src.domain.models.possessions import Possession


def is_active(possession: Possession, as_of: date) -> bool:
    """Return True when the possession is still held at as_of.

    A possession closed on as_of or earlier is excluded from totals, even
    though its valuation stays frozen at the close date.

    Args:
        possession: Possession to evaluate.
        as_of: Reference date.

    Returns:
        bool: True when end_date is None or strictly after as_of.
    """
    return possession.end_date is None or possession.end_date > as_of


def effective_valuation_date(possession: Possession, as_of: date) -> date:
    """Return the date valuation stops at: as_of, or end_date once passed."""
    if possession.end_date is not None and possession.end_date < as_of:
        return possession.end_date
    return as_of


__all__ = ["is_active", "effective_valuation_date"]
