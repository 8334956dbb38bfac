# users/models/buyer.py

from django.conf import settings
from django.db import models
from django.utils import timezone


class Buyer(models.Model):
    """
    A marketplace buyer.

    - `active` gates eligibility for new purchases.
    - `user` links the profile to the authenticated account (optional; the
      identity layer supplies ids, the core trusts them).
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="buyer_profile",
    )

    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=32, blank=True, default="")

    address = models.CharField(max_length=255)
    dni = models.CharField(max_length=8, unique=True)

    active = models.BooleanField(default=True)
    registration_date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["-registration_date"]
        indexes = [
            models.Index(fields=["active"], name="buyer_active_idx"),
        ]

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self):
        return f"{self.full_name} <{self.email}>"
