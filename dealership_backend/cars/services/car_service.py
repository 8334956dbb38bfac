# cars/services/car_service.py

"""
CAR SERVICE

Catalog management. Cars carry no offer/purchase state, so these operations
are plain validate-then-save; enum strings (fuel type, transmission) go
through core.enums.parse_choice on both create and update.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import transaction
from django.db.models import ProtectedError, Q

from cars.models import Car
from core import persistence
from core.enums import FuelType, Transmission, parse_choice
from core.exceptions import BusinessRuleViolation
from core.validation import normalize_optional_text, parse_int, validate_car

logger = logging.getLogger("marketplace.cars")


@dataclass(frozen=True)
class CarUpdate:
    """Partial update: only fields that are not None are applied."""

    brand: str | None = None
    model: str | None = None
    year: int | None = None
    color: str | None = None
    mileage: int | None = None
    fuel_type: str | None = None
    transmission: str | None = None
    description: str | None = None
    images: list[str] | None = None


def find_car(car_id) -> Car:
    return persistence.get_or_not_found(Car, car_id, label="Car")


def find_all_cars():
    return Car.objects.all()


@transaction.atomic
def create_car(
    *,
    brand: str,
    model: str,
    year,
    color: str,
    fuel_type=FuelType.GASOLINE,
    transmission=Transmission.MANUAL,
    mileage=0,
    description: str | None = None,
    images: list[str] | None = None,
) -> Car:
    logger.info("Creating car", extra={"brand": brand, "model": model})

    car = Car(
        brand=(brand or "").strip(),
        model=(model or "").strip(),
        year=parse_int(year, field="year", label="Year"),
        color=(color or "").strip(),
        mileage=parse_int(mileage or 0, field="mileage", label="Mileage"),
        fuel_type=parse_choice(FuelType, fuel_type, field="fuel_type"),
        transmission=parse_choice(Transmission, transmission, field="transmission"),
        description=normalize_optional_text(description),
        images=list(images or []),
    )
    validate_car(car)

    persistence.save(car)
    logger.info("Car created", extra={"car_id": car.pk})
    return car


@transaction.atomic
def update_car(car_id, changes: CarUpdate) -> Car:
    car = persistence.lock_or_not_found(Car, car_id, label="Car")

    if changes.brand is not None:
        car.brand = changes.brand.strip()
    if changes.model is not None:
        car.model = changes.model.strip()
    if changes.year is not None:
        car.year = parse_int(changes.year, field="year", label="Year")
    if changes.color is not None:
        car.color = changes.color.strip()
    if changes.mileage is not None:
        car.mileage = parse_int(changes.mileage, field="mileage", label="Mileage")
    if changes.fuel_type is not None:
        car.fuel_type = parse_choice(FuelType, changes.fuel_type, field="fuel_type")
    if changes.transmission is not None:
        car.transmission = parse_choice(Transmission, changes.transmission, field="transmission")
    if changes.description is not None:
        car.description = normalize_optional_text(changes.description)
    if changes.images is not None:
        car.images = list(changes.images)

    validate_car(car)

    persistence.save(car)
    logger.info("Car updated", extra={"car_id": car.pk})
    return car


@transaction.atomic
def delete_car(car_id) -> None:
    car = persistence.lock_or_not_found(Car, car_id, label="Car")
    try:
        persistence.delete(car)
    except ProtectedError as exc:
        logger.warning("Car delete blocked by purchases", extra={"car_id": car_id})
        raise BusinessRuleViolation(
            f"Car {car_id} has offers with purchases and cannot be deleted"
        ) from exc
    logger.info("Car deleted", extra={"car_id": car_id})


def search_cars(
    *,
    keyword: str | None = None,
    brand: str | None = None,
    min_year=None,
    max_year=None,
    fuel_type=None,
    transmission=None,
):
    """
    Keyword matches brand, model or description (case-insensitive);
    brand is an exact case-insensitive match; years are inclusive bounds.
    """
    qs = Car.objects.all()

    if keyword:
        kw = keyword.strip()
        qs = qs.filter(
            Q(brand__icontains=kw) | Q(model__icontains=kw) | Q(description__icontains=kw)
        )
    if brand:
        qs = qs.filter(brand__iexact=brand.strip())
    if min_year is not None:
        qs = qs.filter(year__gte=parse_int(min_year, field="min_year", label="Minimum year"))
    if max_year is not None:
        qs = qs.filter(year__lte=parse_int(max_year, field="max_year", label="Maximum year"))
    if fuel_type:
        qs = qs.filter(fuel_type=parse_choice(FuelType, fuel_type, field="fuel_type"))
    if transmission:
        qs = qs.filter(transmission=parse_choice(Transmission, transmission, field="transmission"))

    logger.info("Car search completed", extra={"count": qs.count()})
    return qs
