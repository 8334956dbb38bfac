# cars/urls.py

"""
CARS URLS

Mounted under /api/ by backend.urls:
- /api/cars/
- /api/cars/{id}/
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from cars.api.views import CarViewSet

router = SimpleRouter()
router.register(r"cars", CarViewSet, basename="cars")

urlpatterns = [
    path("", include(router.urls)),
]
