"""
PATH: offers/models/__init__.py

Offers models export surface.
"""

from .car_offer import CarOffer

__all__ = [
    "CarOffer",
]
