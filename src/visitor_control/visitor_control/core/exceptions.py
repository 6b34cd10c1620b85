class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "DOMAIN_ERROR"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "VALIDATION_ERROR"


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    code = "AUTHENTICATION_ERROR"


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    code = "FORBIDDEN"


class NotFoundError(DomainError):
    """Raised when a referenced floor, entry or user does not exist."""

    code = "NOT_FOUND"


class InvalidRangeError(ValidationError):
    """Start date after end date, or month/year outside the accepted bounds."""

    code = "INVALID_RANGE"


class InvalidModeError(ValidationError):
    """Export mode other than ``full`` or ``summary``."""

    code = "INVALID_MODE"


class InactiveFloorError(DomainError):
    """Floor exists but is deactivated and cannot receive entries."""

    code = "INACTIVE"
