# users/services/dealership_service.py

"""
DEALERSHIP SERVICE

Profile management + activation for dealerships.

Rules:
- CUIT and email are unique across dealerships.
- activate/deactivate are strict: a redundant call is a BusinessRuleViolation
  ("Dealership is already active" / "Dealership is already deactivated").
- Deactivating a dealership does NOT touch its offers; an inactive
  dealership's offers simply cannot be purchased.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from core import persistence
from core.exceptions import BusinessRuleViolation, ValidationError
from core.validation import require_non_blank, validate_dealership
from users.models import Dealership

logger = logging.getLogger("marketplace.users")


@dataclass(frozen=True)
class DealershipUpdate:
    """Partial update: only fields that are not None are applied."""

    business_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    province: str | None = None
    description: str | None = None


def find_dealership(dealership_id) -> Dealership:
    logger.debug("Fetching dealership", extra={"dealership_id": dealership_id})
    return persistence.get_or_not_found(Dealership, dealership_id, label="Dealership")


def find_active_dealerships():
    return Dealership.objects.filter(active=True)


def find_dealership_by_cuit(cuit: str) -> Dealership | None:
    require_non_blank(cuit, "CUIT cannot be empty", field="cuit")
    return Dealership.objects.filter(cuit=cuit.strip()).first()


def search_dealerships(
    *,
    business_name: str | None = None,
    city: str | None = None,
    province: str | None = None,
    cuit: str | None = None,
):
    """
    Search ACTIVE dealerships. Every supplied filter must be non-blank.
    Newest registrations first.
    """
    qs = Dealership.objects.filter(active=True)

    if business_name is not None:
        require_non_blank(business_name, "Business name filter cannot be empty", field="business_name")
        qs = qs.filter(business_name__icontains=business_name.strip())
    if city is not None:
        require_non_blank(city, "City filter cannot be empty", field="city")
        qs = qs.filter(city__iexact=city.strip())
    if province is not None:
        require_non_blank(province, "Province filter cannot be empty", field="province")
        qs = qs.filter(province__iexact=province.strip())
    if cuit is not None:
        require_non_blank(cuit, "CUIT filter cannot be empty", field="cuit")
        qs = qs.filter(cuit__icontains=cuit.strip())

    results = qs.order_by("-registration_date")
    logger.info("Dealership search completed", extra={"count": results.count()})
    return results


def _ensure_unique_identity(dealership: Dealership) -> None:
    others = Dealership.objects.exclude(pk=dealership.pk)
    if others.filter(cuit=dealership.cuit).exists():
        logger.warning("Duplicate dealership CUIT", extra={"cuit": dealership.cuit})
        raise ValidationError(
            f"Dealership with CUIT {dealership.cuit} already exists", field="cuit"
        )
    if others.filter(email=dealership.email).exists():
        logger.warning("Duplicate dealership email", extra={"email": dealership.email})
        raise ValidationError(
            f"Dealership with email {dealership.email} already exists", field="email"
        )


def _save_unique(dealership: Dealership) -> Dealership:
    try:
        with transaction.atomic():
            return persistence.save(dealership)
    except IntegrityError as exc:
        raise ValidationError(
            "A dealership with this CUIT or email is already registered"
        ) from exc


@transaction.atomic
def create_dealership(
    *,
    business_name: str,
    cuit: str,
    email: str,
    phone: str,
    address: str = "",
    city: str = "",
    province: str = "",
    description: str | None = None,
    user=None,
) -> Dealership:
    logger.info("Creating dealership", extra={"cuit": cuit})

    dealership = Dealership(
        user=user,
        business_name=(business_name or "").strip(),
        cuit=str(cuit or "").strip(),
        email=(email or "").strip().lower(),
        phone=(phone or "").strip(),
        address=(address or "").strip(),
        city=(city or "").strip(),
        province=(province or "").strip(),
        description=description,
        active=True,
    )
    validate_dealership(dealership)
    _ensure_unique_identity(dealership)

    dealership = _save_unique(dealership)
    logger.info("Dealership created", extra={"dealership_id": dealership.pk})
    return dealership


@transaction.atomic
def update_dealership(dealership_id, changes: DealershipUpdate) -> Dealership:
    dealership = persistence.lock_or_not_found(Dealership, dealership_id, label="Dealership")

    if changes.business_name is not None:
        dealership.business_name = changes.business_name.strip()
    if changes.email is not None:
        dealership.email = changes.email.strip().lower()
    if changes.phone is not None and changes.phone.strip():
        dealership.phone = changes.phone.strip()
    if changes.address is not None:
        dealership.address = changes.address.strip()
    if changes.city is not None:
        dealership.city = changes.city.strip()
    if changes.province is not None:
        dealership.province = changes.province.strip()
    if changes.description is not None:
        dealership.description = changes.description.strip() or None

    validate_dealership(dealership)
    _ensure_unique_identity(dealership)

    dealership = _save_unique(dealership)
    logger.info("Dealership updated", extra={"dealership_id": dealership.pk})
    return dealership


@transaction.atomic
def deactivate_dealership(dealership_id) -> Dealership:
    dealership = persistence.lock_or_not_found(Dealership, dealership_id, label="Dealership")

    if not dealership.active:
        logger.warning(
            "Attempt to deactivate already inactive dealership",
            extra={"dealership_id": dealership.pk},
        )
        raise BusinessRuleViolation("Dealership is already deactivated")

    dealership.active = False
    persistence.save(dealership, update_fields=["active"])
    logger.info("Dealership deactivated", extra={"dealership_id": dealership.pk})
    return dealership


@transaction.atomic
def activate_dealership(dealership_id) -> Dealership:
    dealership = persistence.lock_or_not_found(Dealership, dealership_id, label="Dealership")

    if dealership.active:
        logger.warning(
            "Attempt to activate already active dealership",
            extra={"dealership_id": dealership.pk},
        )
        raise BusinessRuleViolation("Dealership is already active")

    dealership.active = True
    persistence.save(dealership, update_fields=["active"])
    logger.info("Dealership activated", extra={"dealership_id": dealership.pk})
    return dealership


@transaction.atomic
def delete_dealership(dealership_id) -> None:
    dealership = persistence.lock_or_not_found(Dealership, dealership_id, label="Dealership")
    try:
        persistence.delete(dealership)
    except ProtectedError as exc:
        raise BusinessRuleViolation(
            f"Dealership {dealership_id} has offers with purchases and cannot be deleted"
        ) from exc
    logger.info("Dealership deleted", extra={"dealership_id": dealership_id})
