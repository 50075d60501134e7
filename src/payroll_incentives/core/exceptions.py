class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ShiftTimeError(ValidationError):
    """Raised when a shift is used without a start or an end."""


class NoEligibleRateError(DomainError):
    """Raised when every configured rate option exceeds the requested rate."""
