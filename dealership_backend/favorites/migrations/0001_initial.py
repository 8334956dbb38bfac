"""
MIGRATION: CREATE FavoriteCar

Purpose:
- Buyer bookmarks with optional review.
- uniq_favorite_buyer_car: one favorite per (buyer, car).
"""

from __future__ import annotations

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("cars", "0001_initial"),
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="FavoriteCar",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "date_added",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                ("rating", models.PositiveSmallIntegerField(null=True, blank=True)),
                ("comment", models.TextField(null=True, blank=True)),
                ("price_notifications", models.BooleanField(default=False)),
                (
                    "buyer",
                    models.ForeignKey(
                        to="users.buyer",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="favorite_cars",
                    ),
                ),
                (
                    "car",
                    models.ForeignKey(
                        to="cars.car",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="favorited_by",
                    ),
                ),
            ],
            options={
                "ordering": ["-date_added"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("buyer", "car"),
                        name="uniq_favorite_buyer_car",
                    ),
                ],
            },
        ),
    ]
