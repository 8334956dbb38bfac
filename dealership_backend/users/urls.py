# users/urls.py

"""
USERS URLS

Mounted under /api/ by backend.urls:
- /api/buyers/...
- /api/dealerships/...
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from users.api.views import BuyerViewSet, DealershipViewSet

router = SimpleRouter()
router.register(r"buyers", BuyerViewSet, basename="buyers")
router.register(r"dealerships", DealershipViewSet, basename="dealerships")

urlpatterns = [
    path("", include(router.urls)),
]
