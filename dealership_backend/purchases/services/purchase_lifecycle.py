"""
PURCHASE LIFECYCLE DOMAIN RULES

This module defines the ONLY allowed lifecycle transitions
for Purchase entities, and what each one does to the CarOffer.

DESIGN PRINCIPLES:
- No database writes
- No offer mutation (purchase_service applies OFFER_EFFECTS)
- Single source of truth
"""

from core.enums import PurchaseStatus
from core.exceptions import InvalidTransitionError

# ============================================================
# STATE DEFINITIONS
# ============================================================

TERMINAL_STATES = {
    PurchaseStatus.DELIVERED,
    PurchaseStatus.CANCELLED,
}

ALLOWED_TRANSITIONS = {
    PurchaseStatus.PENDING: {
        PurchaseStatus.CONFIRMED,
        PurchaseStatus.CANCELLED,
    },
    PurchaseStatus.CONFIRMED: {
        PurchaseStatus.DELIVERED,
        PurchaseStatus.CANCELLED,
        PurchaseStatus.PENDING,
    },
}

# Target status -> required offer availability (None: leave untouched).
OFFER_EFFECTS = {
    PurchaseStatus.PENDING: False,
    PurchaseStatus.CONFIRMED: False,
    PurchaseStatus.CANCELLED: True,
    PurchaseStatus.DELIVERED: None,
}


# ============================================================
# DOMAIN RULES
# ============================================================


def can_transition(*, from_status: str, to_status: str) -> bool:
    if from_status in TERMINAL_STATES:
        return False

    return to_status in ALLOWED_TRANSITIONS.get(from_status, set())


def validate_transition(*, purchase, target_status: str):
    if not can_transition(
        from_status=purchase.status,
        to_status=target_status,
    ):
        raise InvalidTransitionError(
            f"Purchase {purchase.pk} cannot transition from "
            f"'{purchase.status}' to '{target_status}'"
        )


def offer_effect(target_status: str):
    return OFFER_EFFECTS.get(target_status)
