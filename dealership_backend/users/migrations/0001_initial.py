"""
MIGRATION: CREATE Buyer + Dealership

Purpose:
- Marketplace actor profiles, optionally linked to an auth user.
- CUIT / DNI / email uniqueness enforced at the schema level.
"""

from __future__ import annotations

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Buyer",
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
                ("first_name", models.CharField(max_length=150)),
                ("last_name", models.CharField(max_length=150)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("phone", models.CharField(max_length=32, blank=True, default="")),
                ("address", models.CharField(max_length=255)),
                ("dni", models.CharField(max_length=8, unique=True)),
                ("active", models.BooleanField(default=True)),
                (
                    "registration_date",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                (
                    "user",
                    models.OneToOneField(
                        to=settings.AUTH_USER_MODEL,
                        null=True,
                        blank=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="buyer_profile",
                    ),
                ),
            ],
            options={
                "ordering": ["-registration_date"],
                "indexes": [
                    models.Index(fields=["active"], name="buyer_active_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Dealership",
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
                ("business_name", models.CharField(max_length=200)),
                ("cuit", models.CharField(max_length=11, unique=True)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("phone", models.CharField(max_length=32)),
                ("address", models.CharField(max_length=255, blank=True, default="")),
                ("city", models.CharField(max_length=120, blank=True, default="")),
                ("province", models.CharField(max_length=120, blank=True, default="")),
                ("description", models.TextField(null=True, blank=True)),
                ("active", models.BooleanField(default=True)),
                (
                    "registration_date",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                (
                    "user",
                    models.OneToOneField(
                        to=settings.AUTH_USER_MODEL,
                        null=True,
                        blank=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="dealership_profile",
                    ),
                ),
            ],
            options={
                "ordering": ["-registration_date"],
                "indexes": [
                    models.Index(fields=["active"], name="dealership_active_idx"),
                    models.Index(fields=["city"], name="dealership_city_idx"),
                    models.Index(fields=["province"], name="dealership_province_idx"),
                ],
            },
        ),
    ]
