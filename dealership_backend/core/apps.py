# core/apps.py

"""
CORE APP CONFIG

Shared marketplace domain layer:
- Error taxonomy
- Validation rules + enum parsing
- Uniqueness guards + eligibility predicate
- Persistence gateway (ORM adapter)
- API error mapping
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
    verbose_name = "Marketplace Core"
