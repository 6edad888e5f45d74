class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ImmutableEntryError(DomainError):
    """Raised when an edit or delete targets a derived labor credit."""


class RecalculationInProgressError(DomainError):
    """Raised when a recalculation is started while another one is running."""
