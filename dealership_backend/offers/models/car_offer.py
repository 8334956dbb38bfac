# offers/models/car_offer.py

from decimal import Decimal

from django.db import models
from django.utils import timezone

from cars.models import Car
from users.models import Dealership


class CarOffer(models.Model):
    """
    A dealership's listing of one car at one price (the unit of purchase).

    AVAILABILITY (IMPORTANT):
    - `available` is shared between the offer lifecycle and the purchase lifecycle.
    - While a PENDING/CONFIRMED purchase holds the offer it is False, and only
      the purchase lifecycle may flip it back.
    - Mutate it through offers.services.offer_service, never directly.
    """

    car = models.ForeignKey(
        Car,
        on_delete=models.CASCADE,
        related_name="offers",
    )
    dealership = models.ForeignKey(
        Dealership,
        on_delete=models.CASCADE,
        related_name="offers",
    )

    price = models.DecimalField(max_digits=10, decimal_places=2)
    offer_date = models.DateTimeField(default=timezone.now)
    dealership_notes = models.TextField(null=True, blank=True)

    available = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-offer_date"]
        constraints = [
            models.UniqueConstraint(
                fields=["car", "dealership"],
                name="uniq_offer_car_dealership",
            ),
            models.CheckConstraint(
                condition=models.Q(price__gt=Decimal("0.00")),
                name="car_offer_price_positive",
            ),
        ]
        indexes = [
            models.Index(fields=["available"], name="offer_available_idx"),
            models.Index(fields=["dealership", "available"], name="offer_dealership_avail_idx"),
        ]

    def mark_unavailable(self) -> bool:
        """Returns True when the flag actually changed."""
        changed = self.available
        self.available = False
        return changed

    def mark_available(self) -> bool:
        """Returns True when the flag actually changed."""
        changed = not self.available
        self.available = True
        return changed

    def __str__(self):
        return f"Offer #{self.pk} | car={self.car_id} dealership={self.dealership_id} | {self.price}"
