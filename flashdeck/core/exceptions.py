"""
Custom exceptions for the application.
"""


class FlashdeckException(Exception):
    """Base exception for all Flashdeck application exceptions."""
    pass


class ValidationError(FlashdeckException):
    """Raised when validation fails."""
    pass


class NotFoundError(FlashdeckException):
    """Raised when a requested resource is not found."""
    pass


class AuthenticationError(FlashdeckException):
    """Raised when authentication fails."""
    pass


class StorageUnavailable(FlashdeckException):
    """Raised when the record store cannot be read or written."""
    pass


class DeckNotFound(NotFoundError):
    """Raised when a deck does not exist for the requesting user."""
    pass


class EmptyDeck(NotFoundError):
    """Raised when a deck has no cards to review."""
    pass


class PositionOutOfRange(NotFoundError):
    """Raised when a review position lies outside the active order."""
    pass
