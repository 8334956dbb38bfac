"""
MIGRATION: CREATE Car

Purpose:
- Car catalog table (brand/model/year indexes for search).
"""

from __future__ import annotations

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Car",
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
                ("brand", models.CharField(max_length=100, db_index=True)),
                ("model", models.CharField(max_length=100)),
                ("year", models.PositiveIntegerField()),
                ("color", models.CharField(max_length=50)),
                ("mileage", models.PositiveIntegerField(default=0)),
                (
                    "fuel_type",
                    models.CharField(
                        max_length=16,
                        choices=[
                            ("GASOLINE", "Gasoline"),
                            ("DIESEL", "Diesel"),
                            ("HYBRID", "Hybrid"),
                            ("ELECTRIC", "Electric"),
                            ("GNC", "GNC"),
                        ],
                        default="GASOLINE",
                    ),
                ),
                (
                    "transmission",
                    models.CharField(
                        max_length=16,
                        choices=[
                            ("MANUAL", "Manual"),
                            ("AUTOMATIC", "Automatic"),
                            ("SEMI_AUTOMATIC", "Semi-automatic"),
                        ],
                        default="MANUAL",
                    ),
                ),
                ("description", models.TextField(null=True, blank=True)),
                ("images", models.JSONField(default=list, blank=True)),
                (
                    "publication_date",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-publication_date"],
                "indexes": [
                    models.Index(fields=["brand", "model"], name="car_brand_model_idx"),
                    models.Index(fields=["year"], name="car_year_idx"),
                ],
            },
        ),
    ]
