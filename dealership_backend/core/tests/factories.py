# core/tests/factories.py

"""
Shared test fixtures for marketplace tests.

Rows are created straight through the ORM so each test exercises only the
service it targets.
"""

from __future__ import annotations

import itertools
from datetime import timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.utils import timezone

from cars.models import Car
from core.enums import PaymentMethod, PurchaseStatus
from offers.models import CarOffer
from purchases.models import Purchase
from users.models import Buyer, Dealership

User = get_user_model()

_seq = itertools.count(1)


def yesterday():
    return timezone.now() - timedelta(days=1)


def make_user(**overrides):
    n = next(_seq)
    return User.objects.create_user(
        username=overrides.pop("username", f"user{n}"),
        password=overrides.pop("password", "pass"),
        **overrides,
    )


def make_car(**overrides) -> Car:
    data = {
        "brand": "Toyota",
        "model": "Corolla",
        "year": 2020,
        "color": "White",
        "mileage": 15000,
    }
    data.update(overrides)
    return Car.objects.create(**data)


def make_buyer(**overrides) -> Buyer:
    n = next(_seq)
    data = {
        "first_name": "Ana",
        "last_name": "Gomez",
        "email": f"buyer{n}@example.com",
        "address": "Av. Siempre Viva 742",
        "dni": f"{30000000 + n}",
        "active": True,
    }
    data.update(overrides)
    return Buyer.objects.create(**data)


def make_dealership(**overrides) -> Dealership:
    n = next(_seq)
    data = {
        "business_name": f"Autos {n}",
        "cuit": f"{30700000000 + n}",
        "email": f"dealer{n}@example.com",
        "phone": "1145678900",
        "city": "Buenos Aires",
        "province": "Buenos Aires",
        "active": True,
    }
    data.update(overrides)
    return Dealership.objects.create(**data)


def make_offer(*, car=None, dealership=None, **overrides) -> CarOffer:
    data = {
        "car": car or make_car(),
        "dealership": dealership or make_dealership(),
        "price": Decimal("25000.00"),
        "available": True,
    }
    data.update(overrides)
    return CarOffer.objects.create(**data)


def make_purchase(*, offer, buyer=None, **overrides) -> Purchase:
    """Creates the row AND applies the offer hold, like purchase_service would."""
    data = {
        "buyer": buyer or make_buyer(),
        "car_offer": offer,
        "final_price": Decimal("25000.00"),
        "purchase_date": yesterday(),
        "status": PurchaseStatus.PENDING,
        "payment_method": PaymentMethod.CASH,
    }
    data.update(overrides)
    purchase = Purchase.objects.create(**data)
    if purchase.status in (PurchaseStatus.PENDING, PurchaseStatus.CONFIRMED, PurchaseStatus.DELIVERED):
        CarOffer.objects.filter(pk=offer.pk).update(available=False)
        offer.refresh_from_db()
    return purchase
