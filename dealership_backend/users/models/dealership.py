# users/models/dealership.py

from django.conf import settings
from django.db import models
from django.utils import timezone


class Dealership(models.Model):
    """
    A dealership publishing car offers.

    Inactive dealerships cannot publish offers, and their offers cannot be purchased.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="dealership_profile",
    )

    business_name = models.CharField(max_length=200)
    cuit = models.CharField(max_length=11, unique=True)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=32)

    address = models.CharField(max_length=255, blank=True, default="")
    city = models.CharField(max_length=120, blank=True, default="")
    province = models.CharField(max_length=120, blank=True, default="")
    description = models.TextField(null=True, blank=True)

    active = models.BooleanField(default=True)
    registration_date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-registration_date"]
        indexes = [
            models.Index(fields=["active"], name="dealership_active_idx"),
            models.Index(fields=["city"], name="dealership_city_idx"),
            models.Index(fields=["province"], name="dealership_province_idx"),
        ]

    def full_address(self) -> str:
        parts = [p for p in (self.address, self.city, self.province) if p]
        return ", ".join(parts) if parts else "Address not specified"

    def display_name(self) -> str:
        return self.business_name or self.email

    def __str__(self):
        return f"{self.business_name} ({self.cuit})"
