# purchases/api/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from purchases.api.views import PurchaseViewSet

router = SimpleRouter()
router.register(r"purchases", PurchaseViewSet, basename="purchases")

urlpatterns = [
    path("", include(router.urls)),
]
