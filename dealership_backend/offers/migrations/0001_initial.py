"""
MIGRATION: CREATE CarOffer

Purpose:
- One listing per (car, dealership): uniq_offer_car_dealership.
- Positive price at the schema level.
"""

from __future__ import annotations

from decimal import Decimal

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
            name="CarOffer",
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
                ("price", models.DecimalField(max_digits=10, decimal_places=2)),
                (
                    "offer_date",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                ("dealership_notes", models.TextField(null=True, blank=True)),
                ("available", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "car",
                    models.ForeignKey(
                        to="cars.car",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="offers",
                    ),
                ),
                (
                    "dealership",
                    models.ForeignKey(
                        to="users.dealership",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="offers",
                    ),
                ),
            ],
            options={
                "ordering": ["-offer_date"],
                "indexes": [
                    models.Index(fields=["available"], name="offer_available_idx"),
                    models.Index(
                        fields=["dealership", "available"],
                        name="offer_dealership_avail_idx",
                    ),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("car", "dealership"),
                        name="uniq_offer_car_dealership",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(price__gt=Decimal("0.00")),
                        name="car_offer_price_positive",
                    ),
                ],
            },
        ),
    ]
