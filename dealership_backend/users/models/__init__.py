"""
PATH: users/models/__init__.py

Users models export surface.
"""

from .buyer import Buyer
from .dealership import Dealership

__all__ = [
    "Buyer",
    "Dealership",
]
