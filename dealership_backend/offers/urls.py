# offers/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from offers.api.views import CarOfferViewSet

router = SimpleRouter()
router.register(r"offers", CarOfferViewSet, basename="offers")

urlpatterns = [
    path("", include(router.urls)),
]
