# favorites/models.py

from django.db import models
from django.utils import timezone

from cars.models import Car
from users.models import Buyer


class FavoriteCar(models.Model):
    """
    A buyer's bookmark of a car, optionally carrying a review.

    - one favorite per (buyer, car): checked by the service, backed by a constraint
    - comment is NULL when absent (blank comments are normalized away)
    """

    buyer = models.ForeignKey(
        Buyer,
        on_delete=models.CASCADE,
        related_name="favorite_cars",
    )
    car = models.ForeignKey(
        Car,
        on_delete=models.CASCADE,
        related_name="favorited_by",
    )

    date_added = models.DateTimeField(default=timezone.now)
    rating = models.PositiveSmallIntegerField(null=True, blank=True)
    comment = models.TextField(null=True, blank=True)
    price_notifications = models.BooleanField(default=False)

    class Meta:
        ordering = ["-date_added"]
        constraints = [
            models.UniqueConstraint(
                fields=["buyer", "car"],
                name="uniq_favorite_buyer_car",
            ),
        ]

    @property
    def is_reviewed(self) -> bool:
        return self.rating is not None or bool((self.comment or "").strip())

    def __str__(self):
        return f"Favorite #{self.pk} | buyer={self.buyer_id} car={self.car_id}"
