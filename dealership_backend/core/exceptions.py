# core/exceptions.py

"""
MARKETPLACE DOMAIN ERRORS

Centralized error taxonomy shared by every lifecycle service.

Rules:
- Every error carries a human-readable message (relayed by the API layer).
- Errors are deterministic business failures: never retried internally.
- Raised BEFORE any write; the surrounding transaction guarantees zero partial state.
"""


class MarketplaceError(Exception):
    """Base exception for all marketplace service failures."""

    default_message = "Marketplace operation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MarketplaceError):
    """A field fails its static bound (range, length, date, enum parse)."""

    default_message = "Invalid input"

    def __init__(self, message: str | None = None, *, field: str | None = None):
        self.field = field
        super().__init__(message)


class NotFoundError(MarketplaceError):
    """A referenced id does not exist."""

    default_message = "Resource not found"


class BusinessRuleViolation(MarketplaceError):
    """A cross-entity precondition fails (inactive actor, unavailable offer, ...)."""

    default_message = "Business rule violated"


class InvalidTransitionError(BusinessRuleViolation):
    """A lifecycle transition is not allowed from the current state."""

    default_message = "Invalid state transition"


class DuplicateOfferError(MarketplaceError):
    """The car is already offered by the same dealership."""

    default_message = "Car is already being offered by this dealership"


class DuplicateFavoriteError(MarketplaceError):
    """The buyer already has the car in favorites."""

    default_message = "Car is already in favorites"


class PersistenceError(MarketplaceError):
    """Underlying storage failure (opaque to callers)."""

    default_message = "Storage failure"
