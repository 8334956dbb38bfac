# purchases/apps.py

"""
PURCHASES APP CONFIG

Buyer transactions against car offers.
Owns the purchase state machine and the offer-availability synchronization.
"""

from django.apps import AppConfig


class PurchasesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "purchases"
    verbose_name = "Purchases"
