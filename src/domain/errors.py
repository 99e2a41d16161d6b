"""
Domain exceptions for the patrimony engine and the possession ledger.

These exceptions carry NO presentation knowledge. Adapters (Streamlit, CLI)
decide how to surface them to the user.

Exception Hierarchy:
    PatrimonyError (base)
    ├── ValidationError
    │   ├── InvalidDateError
    │   ├── InvalidPossessionError
    │   └── InvalidRangeError
    └── LedgerError
        ├── PossessionNotFoundError
        └── DuplicatePossessionError
"""

from datetime import date


class PatrimonyError(Exception):
    """
    Base exception for all patrimony errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(PatrimonyError):
    """
    Raised when an input handed to the engine breaks an invariant.

    Attributes:
        field: The field that failed validation (optional)
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class InvalidDateError(ValidationError):
    """
    Raised when a value cannot be parsed into a calendar date.

    Attributes:
        value: The raw value that failed to parse
    """

    def __init__(self, value: object, field: str | None = None) -> None:
        self.value = value
        target = f" for '{field}'" if field else ""
        super().__init__(
            f"Invalid date{target}: {value!r}. Expected format YYYY-MM-DD.",
            field=field,
        )


class InvalidPossessionError(ValidationError):
    """
    Raised when a possession record fails an invariant.

    Attributes:
        label: Label of the offending possession (when known)
    """

    def __init__(
            self,
            message: str,
            label: str | None = None,
            field: str | None = None,
    ) -> None:
        self.label = label
        prefix = f"Possession '{label}': " if label else "Possession: "
        super().__init__(prefix + message, field=field)


class InvalidRangeError(ValidationError):
    """
    Raised when a date range cannot be stepped through.

    Attributes:
        start_date: First date of the range
        end_date: Last date of the range
    """

    def __init__(
            self,
            message: str,
            start_date: date | None = None,
            end_date: date | None = None,
    ) -> None:
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(message, field="range")


# =============================================================================
# LEDGER ERRORS
# =============================================================================


class LedgerError(PatrimonyError):
    """
    Base exception for possession ledger failures.

    Attributes:
        label: Label the operation targeted
    """

    def __init__(self, message: str, label: str) -> None:
        self.label = label
        super().__init__(message)


class PossessionNotFoundError(LedgerError):
    """Raised when no possession carries the requested label."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Possession '{label}' not found", label=label)


class DuplicatePossessionError(LedgerError):
    """Raised when a possession label is already used in the ledger."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Possession '{label}' already exists", label=label)


__all__ = [
    "PatrimonyError",
    "ValidationError",
    "InvalidDateError",
    "InvalidPossessionError",
    "InvalidRangeError",
    "LedgerError",
    "PossessionNotFoundError",
    "DuplicatePossessionError",
]
