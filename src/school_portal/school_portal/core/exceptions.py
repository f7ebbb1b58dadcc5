from typing import Optional


class DomainError(Exception):
    """Base exception for portal errors."""


class ValidationError(DomainError):
    """Raised when form input is missing or unusable."""


class NotFoundError(DomainError):
    """Raised by page-level lookups when a required record does not exist."""


class SerializationError(DomainError):
    """Raised when a stored collection cannot be decoded or a record cannot be encoded."""

    def __init__(self, message: str, *, collection: Optional[str] = None):
        super().__init__(message)
        self.collection = collection


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or nobody is logged in."""


class AuthorizationError(DomainError):
    """Raised when the logged-in user lacks the role for a page."""
