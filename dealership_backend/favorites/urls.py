# favorites/urls.py

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from favorites.api.views import FavoriteCarViewSet

router = SimpleRouter()
router.register(r"favorites", FavoriteCarViewSet, basename="favorites")

urlpatterns = [
    path("", include(router.urls)),
]
