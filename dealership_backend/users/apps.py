# users/apps.py

"""
USERS APP CONFIG

Marketplace actors:
- Buyer (purchases + favorites)
- Dealership (offers)

Both carry the `active` eligibility flag.
"""

from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "users"
    verbose_name = "Marketplace Users"
