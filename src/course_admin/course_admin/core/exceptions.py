class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when the requested path or document holds no data."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class UpstreamError(DomainError):
    """Raised when a call to the hosted database fails."""
