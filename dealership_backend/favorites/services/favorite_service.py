# favorites/services/favorite_service.py

"""
FAVORITE SERVICE

- One favorite per (buyer, car): guard before insert, constraint as backstop.
- Reviews (rating 0..10, comment <= 1000 chars) are validated after the
  partial update is applied and before anything is written.
- A blank comment is stored as NULL.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import IntegrityError, transaction
from django.utils import timezone

from cars.models import Car
from core import persistence
from core.exceptions import DuplicateFavoriteError
from core.guards import duplicate_favorite_message, ensure_not_favorited
from core.validation import (
    normalize_optional_text,
    parse_datetime,
    parse_int,
    validate_favorite,
)
from favorites.models import FavoriteCar
from users.models import Buyer

logger = logging.getLogger("marketplace.favorites")


@dataclass(frozen=True)
class ReviewUpdate:
    """Partial update: only fields that are not None are applied."""

    rating: int | None = None
    comment: str | None = None


def find_favorite(favorite_id) -> FavoriteCar:
    return persistence.get_or_not_found(
        FavoriteCar, favorite_id, label="Favorite car", select_related=("buyer", "car")
    )


def find_favorites_by_buyer(buyer_id):
    return FavoriteCar.objects.select_related("car").filter(buyer_id=buyer_id)


def find_favorites_by_car(car_id):
    return FavoriteCar.objects.select_related("buyer").filter(car_id=car_id)


def is_reviewed(favorite: FavoriteCar) -> bool:
    return favorite.is_reviewed


@transaction.atomic
def save_favorite(
    *,
    buyer_id,
    car_id,
    rating=None,
    comment: str | None = None,
    date_added=None,
    price_notifications: bool = False,
) -> FavoriteCar:
    logger.info("Saving favorite", extra={"buyer_id": buyer_id, "car_id": car_id})

    car = persistence.get_or_not_found(Car, car_id, label="Car")
    buyer = persistence.get_or_not_found(Buyer, buyer_id, label="Buyer")

    ensure_not_favorited(buyer_id=buyer.pk, car_id=car.pk)

    favorite = FavoriteCar(
        buyer=buyer,
        car=car,
        rating=None if rating is None else parse_int(rating, field="rating", label="Rating"),
        comment=normalize_optional_text(comment),
        date_added=(
            timezone.now()
            if date_added is None
            else parse_datetime(date_added, field="date_added", label="Date added")
        ),
        price_notifications=bool(price_notifications),
    )
    validate_favorite(favorite)

    try:
        with transaction.atomic():
            persistence.save(favorite)
    except IntegrityError as exc:
        raise DuplicateFavoriteError(duplicate_favorite_message(buyer.pk, car.pk)) from exc

    logger.info("Favorite saved", extra={"favorite_id": favorite.pk})
    return favorite


@transaction.atomic
def update_review(favorite_id, changes: ReviewUpdate) -> FavoriteCar:
    favorite = persistence.lock_or_not_found(FavoriteCar, favorite_id, label="Favorite car")

    if changes.rating is not None:
        favorite.rating = parse_int(changes.rating, field="rating", label="Rating")
    if changes.comment is not None:
        favorite.comment = normalize_optional_text(changes.comment)

    validate_favorite(favorite)

    persistence.save(favorite, update_fields=["rating", "comment"])
    logger.info("Favorite review updated", extra={"favorite_id": favorite.pk})
    return favorite


@transaction.atomic
def delete_favorite(favorite_id) -> None:
    favorite = persistence.lock_or_not_found(FavoriteCar, favorite_id, label="Favorite car")
    persistence.delete(favorite)
    logger.info("Favorite deleted", extra={"favorite_id": favorite_id})


def _set_notifications(favorite_id, enabled: bool | None) -> FavoriteCar:
    favorite = persistence.lock_or_not_found(FavoriteCar, favorite_id, label="Favorite car")
    favorite.price_notifications = (
        not favorite.price_notifications if enabled is None else enabled
    )
    persistence.save(favorite, update_fields=["price_notifications"])
    logger.info(
        "Price notifications changed",
        extra={"favorite_id": favorite.pk, "enabled": favorite.price_notifications},
    )
    return favorite


@transaction.atomic
def enable_notifications(favorite_id) -> FavoriteCar:
    return _set_notifications(favorite_id, True)


@transaction.atomic
def disable_notifications(favorite_id) -> FavoriteCar:
    return _set_notifications(favorite_id, False)


@transaction.atomic
def toggle_notifications(favorite_id) -> FavoriteCar:
    return _set_notifications(favorite_id, None)
