# users/services/buyer_service.py

"""
BUYER SERVICE

Plain profile management for buyers. The only cross-entity concern is the
`active` flag, consumed by core.eligibility when a purchase is created.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import IntegrityError, transaction

from core import persistence
from core.exceptions import BusinessRuleViolation, ValidationError
from core.validation import validate_buyer
from users.models import Buyer

logger = logging.getLogger("marketplace.users")


@dataclass(frozen=True)
class BuyerUpdate:
    """Partial update: only fields that are not None are applied."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    dni: str | None = None
    active: bool | None = None


def find_buyer(buyer_id) -> Buyer:
    return persistence.get_or_not_found(Buyer, buyer_id, label="Buyer")


def find_active_buyers():
    return Buyer.objects.filter(active=True)


def _save_unique(buyer: Buyer) -> Buyer:
    try:
        with transaction.atomic():
            return persistence.save(buyer)
    except IntegrityError as exc:
        logger.warning("Buyer uniqueness violated", extra={"email": buyer.email})
        raise ValidationError(
            "A buyer with this email or DNI is already registered"
        ) from exc


@transaction.atomic
def create_buyer(
    *,
    first_name: str,
    last_name: str,
    email: str,
    address: str,
    dni,
    phone: str = "",
    user=None,
) -> Buyer:
    buyer = Buyer(
        user=user,
        first_name=(first_name or "").strip(),
        last_name=(last_name or "").strip(),
        email=(email or "").strip().lower(),
        phone=(phone or "").strip(),
        address=(address or "").strip(),
        dni=str(dni or "").strip(),
        active=True,
    )
    validate_buyer(buyer)

    buyer = _save_unique(buyer)
    logger.info("Buyer created", extra={"buyer_id": buyer.pk})
    return buyer


@transaction.atomic
def update_buyer(buyer_id, changes: BuyerUpdate) -> Buyer:
    buyer = persistence.lock_or_not_found(Buyer, buyer_id, label="Buyer")

    if changes.first_name is not None:
        buyer.first_name = changes.first_name.strip()
    if changes.last_name is not None:
        buyer.last_name = changes.last_name.strip()
    if changes.email is not None:
        buyer.email = changes.email.strip().lower()
    if changes.phone is not None:
        buyer.phone = changes.phone.strip()
    if changes.address is not None:
        buyer.address = changes.address.strip()
    if changes.dni is not None:
        buyer.dni = str(changes.dni).strip()
    if changes.active is not None:
        buyer.active = bool(changes.active)

    validate_buyer(buyer)

    buyer = _save_unique(buyer)
    logger.info("Buyer updated", extra={"buyer_id": buyer.pk})
    return buyer


@transaction.atomic
def set_buyer_active(buyer_id, *, active: bool) -> Buyer:
    buyer = persistence.lock_or_not_found(Buyer, buyer_id, label="Buyer")
    if buyer.active == active:
        state = "active" if active else "deactivated"
        raise BusinessRuleViolation(f"Buyer is already {state}")

    buyer.active = active
    persistence.save(buyer, update_fields=["active"])
    logger.info("Buyer active flag changed", extra={"buyer_id": buyer.pk, "active": active})
    return buyer


@transaction.atomic
def delete_buyer(buyer_id) -> None:
    buyer = persistence.lock_or_not_found(Buyer, buyer_id, label="Buyer")
    if buyer.purchases.exists():
        raise BusinessRuleViolation(
            f"Buyer {buyer.pk} has purchases and cannot be deleted; deactivate instead"
        )
    persistence.delete(buyer)
    logger.info("Buyer deleted", extra={"buyer_id": buyer_id})


def activate_buyer(buyer_id) -> Buyer:
    return set_buyer_active(buyer_id, active=True)


def deactivate_buyer(buyer_id) -> Buyer:
    return set_buyer_active(buyer_id, active=False)
