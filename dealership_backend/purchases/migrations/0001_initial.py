"""
MIGRATION: CREATE Purchase

Purpose:
- Purchase table with lifecycle status.
- uniq_active_purchase_per_offer: at most one PENDING/CONFIRMED purchase
  per offer (backstop for concurrent buyers).
"""

from __future__ import annotations

from decimal import Decimal

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("offers", "0001_initial"),
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Purchase",
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
                ("final_price", models.DecimalField(max_digits=16, decimal_places=2)),
                ("purchase_date", models.DateTimeField()),
                (
                    "status",
                    models.CharField(
                        max_length=16,
                        choices=[
                            ("PENDING", "Pending"),
                            ("CONFIRMED", "Confirmed"),
                            ("DELIVERED", "Delivered"),
                            ("CANCELLED", "Cancelled"),
                        ],
                        default="PENDING",
                    ),
                ),
                (
                    "payment_method",
                    models.CharField(
                        max_length=16,
                        choices=[
                            ("CASH", "Cash"),
                            ("CREDIT_CARD", "Credit card"),
                            ("CHECK", "Check"),
                        ],
                        default="CASH",
                    ),
                ),
                ("observations", models.TextField(null=True, blank=True)),
                (
                    "created_at",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "buyer",
                    models.ForeignKey(
                        to="users.buyer",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="purchases",
                    ),
                ),
                (
                    "car_offer",
                    models.ForeignKey(
                        to="offers.caroffer",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="purchases",
                    ),
                ),
            ],
            options={
                "ordering": ["-purchase_date"],
                "indexes": [
                    models.Index(fields=["status"], name="purchase_status_idx"),
                    models.Index(
                        fields=["buyer", "purchase_date"],
                        name="purchase_buyer_date_idx",
                    ),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("car_offer",),
                        condition=models.Q(status__in=["PENDING", "CONFIRMED"]),
                        name="uniq_active_purchase_per_offer",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(final_price__gt=Decimal("0.00")),
                        name="purchase_final_price_positive",
                    ),
                ],
            },
        ),
    ]
