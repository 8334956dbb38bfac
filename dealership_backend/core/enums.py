# core/enums.py

"""
MARKETPLACE ENUMS

Single typed-parse-or-fail helper for every enum received as a raw string
(fuel type, transmission, payment method, purchase status).
Used by both create and update paths so the error message is identical.
"""

from __future__ import annotations

from django.db import models

from core.exceptions import ValidationError


class FuelType(models.TextChoices):
    GASOLINE = "GASOLINE", "Gasoline"
    DIESEL = "DIESEL", "Diesel"
    HYBRID = "HYBRID", "Hybrid"
    ELECTRIC = "ELECTRIC", "Electric"
    GNC = "GNC", "GNC"


class Transmission(models.TextChoices):
    MANUAL = "MANUAL", "Manual"
    AUTOMATIC = "AUTOMATIC", "Automatic"
    SEMI_AUTOMATIC = "SEMI_AUTOMATIC", "Semi-automatic"


class PurchaseStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    CONFIRMED = "CONFIRMED", "Confirmed"
    DELIVERED = "DELIVERED", "Delivered"
    CANCELLED = "CANCELLED", "Cancelled"


class PaymentMethod(models.TextChoices):
    CASH = "CASH", "Cash"
    CREDIT_CARD = "CREDIT_CARD", "Credit card"
    CHECK = "CHECK", "Check"


def parse_choice(choices_cls, raw, *, field: str):
    """
    Parse a raw value into a member of `choices_cls`.

    Accepts a member, or a string matching a value case-insensitively
    (surrounding whitespace ignored). Anything else raises ValidationError
    naming the rejected value and the allowed set.
    """
    if isinstance(raw, choices_cls):
        return raw

    value = str(raw or "").strip().upper()
    try:
        return choices_cls(value)
    except ValueError as exc:
        allowed = ", ".join(choices_cls.values)
        raise ValidationError(
            f"Invalid {field} '{raw}'. Allowed values: {allowed}",
            field=field,
        ) from exc
