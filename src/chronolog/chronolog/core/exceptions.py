class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee, event or category does not exist."""


class ConflictError(DomainError):
    """Raised when a change would overlap existing attendance or leave data."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
