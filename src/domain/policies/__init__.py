"""Domain policies package."""

from .activity import effective_valuation_date, is_active

__all__ = ["is_active", "effective_valuation_date"]
