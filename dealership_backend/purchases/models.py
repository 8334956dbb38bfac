# purchases/models.py

from decimal import Decimal

from django.db import models
from django.utils import timezone

from core.enums import PaymentMethod, PurchaseStatus
from offers.models import CarOffer
from users.models import Buyer

ACTIVE_STATUSES = (PurchaseStatus.PENDING, PurchaseStatus.CONFIRMED)


class Purchase(models.Model):
    """
    A buyer's transaction against one CarOffer.

    Lifecycle is owned by purchases.services:
    - created PENDING (offer claimed: available -> False)
    - PENDING -> CONFIRMED -> DELIVERED
    - PENDING/CONFIRMED -> CANCELLED (offer released)
    - DELIVERED and CANCELLED are terminal

    GUARANTEES:
    - At most one active (PENDING/CONFIRMED) purchase per offer,
      enforced by a conditional unique constraint (persistence boundary).
    - Money is stored with 2 decimal places; the service rejects any other scale
      before it ever reaches the column.
    """

    buyer = models.ForeignKey(
        Buyer,
        on_delete=models.PROTECT,
        related_name="purchases",
    )
    car_offer = models.ForeignKey(
        CarOffer,
        on_delete=models.PROTECT,
        related_name="purchases",
    )

    final_price = models.DecimalField(max_digits=16, decimal_places=2)
    purchase_date = models.DateTimeField()

    status = models.CharField(
        max_length=16,
        choices=PurchaseStatus.choices,
        default=PurchaseStatus.PENDING,
    )
    payment_method = models.CharField(
        max_length=16,
        choices=PaymentMethod.choices,
        default=PaymentMethod.CASH,
    )
    observations = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-purchase_date"]
        constraints = [
            models.UniqueConstraint(
                fields=["car_offer"],
                condition=models.Q(status__in=[s.value for s in ACTIVE_STATUSES]),
                name="uniq_active_purchase_per_offer",
            ),
            models.CheckConstraint(
                condition=models.Q(final_price__gt=Decimal("0.00")),
                name="purchase_final_price_positive",
            ),
        ]
        indexes = [
            models.Index(fields=["status"], name="purchase_status_idx"),
            models.Index(fields=["buyer", "purchase_date"], name="purchase_buyer_date_idx"),
        ]

    @property
    def is_active(self) -> bool:
        return self.status in ACTIVE_STATUSES

    @property
    def dealership(self):
        return self.car_offer.dealership

    def __str__(self):
        return f"Purchase #{self.pk} | offer={self.car_offer_id} | {self.status}"
