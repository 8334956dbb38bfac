# offers/services/offer_service.py

"""
CAR OFFER LIFECYCLE

States: AVAILABLE / UNAVAILABLE (the boolean `available`).

Transitions:
- create            -> AVAILABLE
- mark_unavailable  -> UNAVAILABLE (unconditional; redundant call is a no-op)
- mark_available    -> AVAILABLE   (refused while an active purchase holds the offer)
- set_offer_availability() is the hook the purchase lifecycle calls

GUARANTEES:
- Validate fully, then write (one transaction per operation).
- Every transition persists the offer through the persistence gateway.
- One offer per (car, dealership): guard first, unique constraint as backstop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError
from django.utils import timezone

from cars.models import Car
from core import persistence
from core.enums import PurchaseStatus
from core.exceptions import BusinessRuleViolation, DuplicateOfferError, ValidationError
from core.guards import duplicate_offer_message, ensure_offer_not_duplicated
from core.validation import normalize_optional_text, validate_car_offer, validate_offer_price
from offers.models import CarOffer
from users.models import Dealership

logger = logging.getLogger("marketplace.offers")

ACTIVE_PURCHASE_STATUSES = (PurchaseStatus.PENDING, PurchaseStatus.CONFIRMED)


@dataclass(frozen=True)
class OfferUpdate:
    """Partial update: only fields that are not None are applied."""

    price: object = None
    dealership_notes: str | None = None


# ============================================================
# FINDERS
# ============================================================


def find_offer(offer_id) -> CarOffer:
    logger.debug("Finding car offer", extra={"offer_id": offer_id})
    return persistence.get_or_not_found(
        CarOffer, offer_id, label="Car offer", select_related=("car", "dealership")
    )


def find_all_offers():
    return CarOffer.objects.select_related("car", "dealership")


def find_available_offers():
    offers = CarOffer.objects.select_related("car", "dealership").filter(available=True)
    logger.debug("Listing available car offers")
    return offers


def find_offers_by_dealership(dealership_id):
    return CarOffer.objects.select_related("car", "dealership").filter(
        dealership_id=dealership_id
    )


def find_available_offers_by_dealership(dealership_id):
    return find_offers_by_dealership(dealership_id).filter(available=True)


def find_offer_by_car_and_dealership(car_id, dealership_id) -> CarOffer | None:
    return CarOffer.objects.filter(car_id=car_id, dealership_id=dealership_id).first()


def has_active_purchase(offer: CarOffer) -> bool:
    return offer.purchases.filter(status__in=ACTIVE_PURCHASE_STATUSES).exists()


# ============================================================
# LIFECYCLE
# ============================================================


@transaction.atomic
def create_offer(*, car_id, dealership_id, price, dealership_notes: str | None = None) -> CarOffer:
    logger.info(
        "Creating car offer",
        extra={"car_id": car_id, "dealership_id": dealership_id},
    )

    if car_id is None:
        raise ValidationError("Car must have a valid ID", field="car_id")
    if dealership_id is None:
        raise ValidationError("Dealership must have a valid ID", field="dealership_id")

    car = persistence.get_or_not_found(Car, car_id, label="Car")
    dealership = persistence.get_or_not_found(Dealership, dealership_id, label="Dealership")

    try:
        ensure_offer_not_duplicated(car_id=car.pk, dealership_id=dealership.pk)
    except DuplicateOfferError:
        logger.warning(
            "Car is already being offered by dealership",
            extra={"car_id": car.pk, "dealership_id": dealership.pk},
        )
        raise

    offer = CarOffer(
        car=car,
        dealership=dealership,
        price=validate_offer_price(price),
        offer_date=timezone.now(),
        dealership_notes=normalize_optional_text(dealership_notes),
        available=True,
    )
    validate_car_offer(offer)

    try:
        with transaction.atomic():
            persistence.save(offer)
    except IntegrityError as exc:
        raise DuplicateOfferError(duplicate_offer_message(car.pk, dealership.pk)) from exc

    logger.info("Car offer created", extra={"offer_id": offer.pk})
    return offer


def set_offer_availability(offer: CarOffer, *, available: bool) -> bool:
    """
    Apply an availability transition and persist it when the flag changes.
    Caller owns the transaction (and the row lock).
    """
    changed = offer.mark_available() if available else offer.mark_unavailable()
    if changed:
        persistence.save(offer, update_fields=["available", "updated_at"])
        logger.info(
            "Car offer availability changed",
            extra={"offer_id": offer.pk, "available": offer.available},
        )
    return changed


@transaction.atomic
def mark_unavailable(offer_id) -> CarOffer:
    offer = persistence.lock_or_not_found(CarOffer, offer_id, label="Car offer")
    offer.mark_unavailable()
    persistence.save(offer, update_fields=["available", "updated_at"])
    logger.info("Car offer marked unavailable", extra={"offer_id": offer.pk})
    return offer


@transaction.atomic
def mark_available(offer_id) -> CarOffer:
    offer = persistence.lock_or_not_found(CarOffer, offer_id, label="Car offer")

    if has_active_purchase(offer):
        logger.warning("Car offer is held by an active purchase", extra={"offer_id": offer.pk})
        raise BusinessRuleViolation(
            f"Car offer {offer.pk} is held by an active purchase; "
            "cancel or delete the purchase to release it"
        )

    offer.mark_available()
    persistence.save(offer, update_fields=["available", "updated_at"])
    logger.info("Car offer marked available", extra={"offer_id": offer.pk})
    return offer


@transaction.atomic
def update_price(offer_id, new_price) -> CarOffer:
    offer = persistence.lock_or_not_found(CarOffer, offer_id, label="Car offer")
    offer.price = validate_offer_price(new_price)
    persistence.save(offer, update_fields=["price", "updated_at"])
    logger.info("Car offer price updated", extra={"offer_id": offer.pk, "price": str(offer.price)})
    return offer


@transaction.atomic
def update_offer(offer_id, changes: OfferUpdate) -> CarOffer:
    logger.info("Updating car offer", extra={"offer_id": offer_id})
    offer = persistence.lock_or_not_found(CarOffer, offer_id, label="Car offer")

    if changes.price is not None:
        offer.price = validate_offer_price(changes.price)
    if changes.dealership_notes is not None:
        offer.dealership_notes = normalize_optional_text(changes.dealership_notes)

    validate_car_offer(offer)

    persistence.save(offer)
    logger.info("Car offer updated", extra={"offer_id": offer.pk})
    return offer


@transaction.atomic
def delete_offer(offer_id) -> None:
    logger.info("Deleting car offer", extra={"offer_id": offer_id})
    offer = persistence.lock_or_not_found(CarOffer, offer_id, label="Car offer")

    if has_active_purchase(offer):
        raise BusinessRuleViolation(
            f"Car offer {offer.pk} is held by an active purchase and cannot be deleted"
        )

    try:
        persistence.delete(offer)
    except ProtectedError as exc:
        raise BusinessRuleViolation(
            f"Car offer {offer_id} has purchase history and cannot be deleted"
        ) from exc

    logger.info("Car offer deleted", extra={"offer_id": offer_id})
