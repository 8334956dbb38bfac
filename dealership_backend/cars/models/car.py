# cars/models/car.py

from django.db import models
from django.utils import timezone

from core.enums import FuelType, Transmission


class Car(models.Model):
    """
    A car in the catalog.

    The car itself never owns offer or purchase state:
    - price + availability live on CarOffer (one per dealership)
    - sale state lives on Purchase
    """

    brand = models.CharField(max_length=100, db_index=True)
    model = models.CharField(max_length=100)
    year = models.PositiveIntegerField()
    color = models.CharField(max_length=50)
    mileage = models.PositiveIntegerField(default=0)

    fuel_type = models.CharField(
        max_length=16,
        choices=FuelType.choices,
        default=FuelType.GASOLINE,
    )
    transmission = models.CharField(
        max_length=16,
        choices=Transmission.choices,
        default=Transmission.MANUAL,
    )

    description = models.TextField(null=True, blank=True)

    # List of absolute http(s) image URLs
    images = models.JSONField(default=list, blank=True)

    publication_date = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-publication_date"]
        indexes = [
            models.Index(fields=["brand", "model"], name="car_brand_model_idx"),
            models.Index(fields=["year"], name="car_year_idx"),
        ]

    def full_name(self) -> str:
        return f"{self.brand} {self.model} {self.year}"

    def __str__(self):
        return self.full_name()
