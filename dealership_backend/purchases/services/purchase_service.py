# purchases/services/purchase_service.py

"""
PURCHASE SERVICE (OFFER-SYNCHRONIZED)

Purpose:
- Own every Purchase write.
- Keep the CarOffer flag in lockstep with purchase state:
  an offer is available if and only if no PENDING/CONFIRMED purchase holds it.

GUARANTEES:
- One transaction per operation. Validate first, write last.
- Status changes go through purchase_lifecycle (never assigned directly).
- The offer is persisted only when its availability actually changes.

CONCURRENCY (create):
1) Offer row locked (SELECT ... FOR UPDATE)
2) Offer claimed with a conditional UPDATE (available = true -> false)
3) Conditional unique constraint on active purchases as the final backstop
Exactly one of N concurrent buyers wins; the rest get BusinessRuleViolation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import IntegrityError, transaction

from core import persistence
from core.eligibility import ensure_eligible
from core.enums import PaymentMethod, PurchaseStatus, parse_choice
from core.exceptions import BusinessRuleViolation
from core.validation import (
    normalize_optional_text,
    parse_datetime,
    validate_final_price,
    validate_purchase,
)
from offers.models import CarOffer
from offers.services.offer_service import set_offer_availability
from purchases.models import ACTIVE_STATUSES, Purchase
from purchases.services.purchase_lifecycle import offer_effect, validate_transition
from users.models import Buyer

logger = logging.getLogger("marketplace.purchases")

OFFER_NOT_AVAILABLE_MESSAGE = "Car offer is not available for purchase"


@dataclass(frozen=True)
class PurchaseUpdate:
    """Partial update: only fields that are not None are applied."""

    final_price: object = None
    purchase_date: object = None
    status: str | None = None
    payment_method: str | None = None
    observations: str | None = None


# ============================================================
# FINDERS
# ============================================================


def _purchases():
    return Purchase.objects.select_related(
        "buyer", "car_offer", "car_offer__car", "car_offer__dealership"
    )


def find_purchase(purchase_id) -> Purchase:
    return persistence.get_or_not_found(
        Purchase,
        purchase_id,
        label="Purchase",
        select_related=("buyer", "car_offer__car", "car_offer__dealership"),
    )


def find_all_purchases():
    return _purchases()


def find_purchases_by_buyer(buyer_id):
    return _purchases().filter(buyer_id=buyer_id)


def find_purchases_by_dealership(dealership_id):
    return _purchases().filter(car_offer__dealership_id=dealership_id)


def find_purchases_by_offer(car_offer_id):
    return _purchases().filter(car_offer_id=car_offer_id)


def purchase_details(purchase: Purchase) -> dict:
    offer = purchase.car_offer
    return {
        "purchase_id": purchase.pk,
        "car": offer.car.full_name(),
        "dealership": offer.dealership.display_name(),
        "final_price": purchase.final_price,
        "purchase_date": purchase.purchase_date,
        "status": purchase.status,
        "payment_method": purchase.payment_method,
        "observations": purchase.observations,
    }


# ============================================================
# CREATE
# ============================================================


@transaction.atomic
def create_purchase(
    *,
    buyer_id,
    car_offer_id,
    final_price,
    purchase_date,
    payment_method=PaymentMethod.CASH,
    observations: str | None = None,
) -> Purchase:
    logger.info(
        "Creating purchase",
        extra={"buyer_id": buyer_id, "car_offer_id": car_offer_id},
    )

    # --------------------------------------------------
    # 1. LOAD (offer locked for the rest of the transaction)
    # --------------------------------------------------
    offer = persistence.lock_or_not_found(CarOffer, car_offer_id, label="Car offer")
    buyer = persistence.get_or_not_found(Buyer, buyer_id, label="Buyer")

    # --------------------------------------------------
    # 2. BUSINESS PRECONDITIONS
    # --------------------------------------------------
    if not offer.available:
        logger.warning("Car offer not available", extra={"car_offer_id": offer.pk})
        raise BusinessRuleViolation(OFFER_NOT_AVAILABLE_MESSAGE)

    ensure_eligible(buyer, message=f"Buyer {buyer.pk} is not active")
    ensure_eligible(
        offer.dealership,
        message=f"Dealership {offer.dealership_id} is not active",
    )

    # --------------------------------------------------
    # 3. FIELD VALIDATION
    # --------------------------------------------------
    purchase = Purchase(
        buyer=buyer,
        car_offer=offer,
        final_price=validate_final_price(final_price),
        purchase_date=parse_datetime(
            purchase_date, field="purchase_date", label="Purchase date"
        ),
        status=PurchaseStatus.PENDING,
        payment_method=parse_choice(PaymentMethod, payment_method, field="payment_method"),
        observations=normalize_optional_text(observations),
    )
    validate_purchase(purchase)

    # --------------------------------------------------
    # 4. CLAIM OFFER + PERSIST
    # --------------------------------------------------
    if not persistence.claim_available(CarOffer, offer.pk):
        logger.warning("Car offer claimed concurrently", extra={"car_offer_id": offer.pk})
        raise BusinessRuleViolation(OFFER_NOT_AVAILABLE_MESSAGE)
    offer.available = False

    try:
        with transaction.atomic():
            persistence.save(purchase)
    except IntegrityError as exc:
        raise BusinessRuleViolation(OFFER_NOT_AVAILABLE_MESSAGE) from exc

    logger.info(
        "Purchase created",
        extra={"purchase_id": purchase.pk, "car_offer_id": offer.pk},
    )
    return purchase


# ============================================================
# TRANSITIONS
# ============================================================


def _sync_offer(purchase: Purchase, target_status) -> None:
    available = offer_effect(target_status)
    if available is None:
        return
    offer = persistence.lock_or_not_found(CarOffer, purchase.car_offer_id, label="Car offer")
    set_offer_availability(offer, available=available)
    purchase.car_offer = offer


def _transition(purchase_id, target_status) -> Purchase:
    purchase = persistence.lock_or_not_found(Purchase, purchase_id, label="Purchase")
    validate_transition(purchase=purchase, target_status=target_status)

    from_status = purchase.status
    _sync_offer(purchase, target_status)
    purchase.status = target_status
    persistence.save(purchase, update_fields=["status", "updated_at"])

    logger.info(
        "Purchase status changed",
        extra={
            "purchase_id": purchase.pk,
            "from_status": from_status,
            "to_status": target_status,
        },
    )
    return purchase


@transaction.atomic
def confirm_purchase(purchase_id) -> Purchase:
    return _transition(purchase_id, PurchaseStatus.CONFIRMED)


@transaction.atomic
def cancel_purchase(purchase_id) -> Purchase:
    return _transition(purchase_id, PurchaseStatus.CANCELLED)


@transaction.atomic
def deliver_purchase(purchase_id) -> Purchase:
    return _transition(purchase_id, PurchaseStatus.DELIVERED)


@transaction.atomic
def revert_to_pending(purchase_id) -> Purchase:
    """
    CONFIRMED -> PENDING. Already PENDING is a no-op (the offer hold is
    re-asserted). DELIVERED / CANCELLED raise InvalidTransitionError.
    """
    purchase = persistence.lock_or_not_found(Purchase, purchase_id, label="Purchase")

    if purchase.status == PurchaseStatus.PENDING:
        _sync_offer(purchase, PurchaseStatus.PENDING)
        return purchase

    return _transition(purchase.pk, PurchaseStatus.PENDING)


# ============================================================
# UPDATE / DELETE
# ============================================================


@transaction.atomic
def update_purchase(purchase_id, changes: PurchaseUpdate) -> Purchase:
    logger.info("Updating purchase", extra={"purchase_id": purchase_id})
    purchase = persistence.lock_or_not_found(Purchase, purchase_id, label="Purchase")

    if changes.final_price is not None:
        purchase.final_price = validate_final_price(changes.final_price)
    if changes.purchase_date is not None:
        purchase.purchase_date = parse_datetime(
            changes.purchase_date, field="purchase_date", label="Purchase date"
        )
    if changes.payment_method is not None:
        purchase.payment_method = parse_choice(
            PaymentMethod, changes.payment_method, field="payment_method"
        )
    if changes.observations is not None:
        purchase.observations = normalize_optional_text(changes.observations)

    target_status = None
    if changes.status is not None:
        target_status = parse_choice(PurchaseStatus, changes.status, field="status")

    validate_purchase(purchase)

    if target_status is not None and target_status != purchase.status:
        validate_transition(purchase=purchase, target_status=target_status)
        _sync_offer(purchase, target_status)
        purchase.status = target_status

    persistence.save(purchase)
    logger.info("Purchase updated", extra={"purchase_id": purchase.pk})
    return purchase


@transaction.atomic
def delete_purchase(purchase_id) -> None:
    """
    Delete the purchase and release its offer.
    The offer stays unavailable only if another active purchase still holds it.
    """
    purchase = persistence.lock_or_not_found(Purchase, purchase_id, label="Purchase")
    offer = persistence.lock_or_not_found(CarOffer, purchase.car_offer_id, label="Car offer")

    persistence.delete(purchase)

    still_held = offer.purchases.filter(status__in=ACTIVE_STATUSES).exists()
    if not still_held:
        set_offer_availability(offer, available=True)

    logger.info(
        "Purchase deleted",
        extra={"purchase_id": purchase_id, "car_offer_id": offer.pk},
    )
