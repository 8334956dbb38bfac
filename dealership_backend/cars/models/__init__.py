"""
PATH: cars/models/__init__.py

Cars models export surface.
"""

from .car import Car

__all__ = [
    "Car",
]
