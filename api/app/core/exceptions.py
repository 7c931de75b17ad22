"""
Custom exceptions for the application.
"""


class SecondBrainException(Exception):
    """Base exception for all Second Brain application exceptions."""
    pass


class ValidationError(SecondBrainException):
    """Raised when validation fails."""
    pass


class NotFoundError(SecondBrainException):
    """Raised when a requested resource is not found."""
    pass


class ConflictError(SecondBrainException):
    """Raised when there's a conflict (e.g., duplicate entry)."""
    pass


class AuthenticationError(SecondBrainException):
    """Raised when authentication fails."""
    pass


class AuthorizationError(SecondBrainException):
    """Raised when authorization fails."""
    pass


class UnsupportedFileError(ValidationError):
    """Raised when an uploaded file has an extension we cannot import."""
    pass


class DocumentReadError(ValidationError):
    """Raised when an uploaded file cannot be decoded or converted."""
    pass


class EmptyDocumentError(ValidationError):
    """Raised when an uploaded file yields no usable paragraphs."""
    pass


class InvalidTransitionError(ConflictError):
    """Raised when an import session action does not fit its current state."""
    pass
