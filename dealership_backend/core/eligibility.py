# core/eligibility.py

"""
ACTOR ELIGIBILITY

One predicate for the `active` flag carried by buyers and dealerships.
Offer creation and purchase creation both consume it, so an inactive actor
is rejected the same way everywhere.
"""

from __future__ import annotations

from core.exceptions import BusinessRuleViolation


def is_eligible(actor) -> bool:
    return actor is not None and bool(getattr(actor, "active", False))


def ensure_eligible(actor, *, message: str) -> None:
    if not is_eligible(actor):
        raise BusinessRuleViolation(message)
