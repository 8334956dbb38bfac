# favorites/api/views.py

"""
FAVORITE ENDPOINTS

- GET/POST          /api/favorites/            (filters: buyer, car)
- GET/PATCH/DELETE  /api/favorites/{id}/       (PATCH = review update)
- POST              /api/favorites/{id}/notifications/
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from favorites.api.serializers import (
    FavoriteCarSerializer,
    FavoriteCreateSerializer,
    NotificationsSerializer,
    ReviewUpdateSerializer,
)
from favorites.models import FavoriteCar
from favorites.services import favorite_service


@extend_schema(tags=["favorites"])
class FavoriteCarViewSet(viewsets.GenericViewSet):
    serializer_class = FavoriteCarSerializer
    permission_classes = [IsAuthenticated]
    queryset = FavoriteCar.objects.select_related("buyer", "car")
    filterset_fields = ["buyer", "car"]

    def list(self, request):
        qs = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(qs)
        return self.get_paginated_response(FavoriteCarSerializer(page, many=True).data)

    def retrieve(self, request, pk=None):
        favorite = favorite_service.find_favorite(pk)
        return Response(FavoriteCarSerializer(favorite).data, status=status.HTTP_200_OK)

    @extend_schema(request=FavoriteCreateSerializer, responses={201: FavoriteCarSerializer})
    def create(self, request):
        s = FavoriteCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        favorite = favorite_service.save_favorite(**s.validated_data)
        return Response(FavoriteCarSerializer(favorite).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ReviewUpdateSerializer, responses=FavoriteCarSerializer)
    def partial_update(self, request, pk=None):
        s = ReviewUpdateSerializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        favorite = favorite_service.update_review(
            pk, favorite_service.ReviewUpdate(**s.validated_data)
        )
        return Response(FavoriteCarSerializer(favorite).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        favorite_service.delete_favorite(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=NotificationsSerializer, responses=FavoriteCarSerializer)
    @action(detail=True, methods=["post"])
    def notifications(self, request, pk=None):
        s = NotificationsSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        enabled = s.validated_data.get("enabled")

        if enabled is None:
            favorite = favorite_service.toggle_notifications(pk)
        elif enabled:
            favorite = favorite_service.enable_notifications(pk)
        else:
            favorite = favorite_service.disable_notifications(pk)

        return Response(FavoriteCarSerializer(favorite).data, status=status.HTTP_200_OK)
