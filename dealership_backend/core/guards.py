# core/guards.py

"""
UNIQUENESS GUARDS

Checked BEFORE any write:
- one CarOffer per (car, dealership)
- one FavoriteCar per (buyer, car)

Both pairs are also unique constraints in the schema; services translate an
IntegrityError from a concurrent insert into the same error raised here.
"""

from __future__ import annotations

from core.exceptions import DuplicateFavoriteError, DuplicateOfferError


def duplicate_offer_message(car_id, dealership_id) -> str:
    return (
        f"Car with id {car_id} is already being offered by dealership with id {dealership_id}"
    )


def duplicate_favorite_message(buyer_id, car_id) -> str:
    return f"Car {car_id} is already in favorites for buyer {buyer_id}"


def ensure_offer_not_duplicated(*, car_id, dealership_id) -> None:
    from offers.models import CarOffer

    if CarOffer.objects.filter(car_id=car_id, dealership_id=dealership_id).exists():
        raise DuplicateOfferError(duplicate_offer_message(car_id, dealership_id))


def ensure_not_favorited(*, buyer_id, car_id) -> None:
    from favorites.models import FavoriteCar

    if FavoriteCar.objects.filter(buyer_id=buyer_id, car_id=car_id).exists():
        raise DuplicateFavoriteError(duplicate_favorite_message(buyer_id, car_id))
