# offers/api/views.py

"""
CAR OFFER ENDPOINTS

- GET/POST          /api/offers/                 (filters: available, car, dealership)
- GET/PATCH/DELETE  /api/offers/{id}/
- POST              /api/offers/{id}/mark-available/
- POST              /api/offers/{id}/mark-unavailable/
- POST              /api/offers/{id}/price/
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from offers.api.serializers import (
    CarOfferCreateSerializer,
    CarOfferPriceSerializer,
    CarOfferSerializer,
    CarOfferUpdateSerializer,
)
from offers.services import offer_service


@extend_schema(tags=["offers"])
class CarOfferViewSet(viewsets.GenericViewSet):
    serializer_class = CarOfferSerializer
    permission_classes = [IsAuthenticated]
    filterset_fields = ["available", "car", "dealership"]

    def get_queryset(self):
        return offer_service.find_all_offers()

    def list(self, request):
        qs = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(qs)
        return self.get_paginated_response(CarOfferSerializer(page, many=True).data)

    def retrieve(self, request, pk=None):
        offer = offer_service.find_offer(pk)
        return Response(CarOfferSerializer(offer).data, status=status.HTTP_200_OK)

    @extend_schema(request=CarOfferCreateSerializer, responses={201: CarOfferSerializer})
    def create(self, request):
        s = CarOfferCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        offer = offer_service.create_offer(**s.validated_data)
        return Response(CarOfferSerializer(offer).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=CarOfferUpdateSerializer, responses=CarOfferSerializer)
    def partial_update(self, request, pk=None):
        s = CarOfferUpdateSerializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        offer = offer_service.update_offer(pk, offer_service.OfferUpdate(**s.validated_data))
        return Response(CarOfferSerializer(offer).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        offer_service.delete_offer(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses=CarOfferSerializer)
    @action(detail=True, methods=["post"], url_path="mark-available")
    def mark_available(self, request, pk=None):
        offer = offer_service.mark_available(pk)
        return Response(CarOfferSerializer(offer).data, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses=CarOfferSerializer)
    @action(detail=True, methods=["post"], url_path="mark-unavailable")
    def mark_unavailable(self, request, pk=None):
        offer = offer_service.mark_unavailable(pk)
        return Response(CarOfferSerializer(offer).data, status=status.HTTP_200_OK)

    @extend_schema(request=CarOfferPriceSerializer, responses=CarOfferSerializer)
    @action(detail=True, methods=["post"])
    def price(self, request, pk=None):
        s = CarOfferPriceSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        offer = offer_service.update_price(pk, s.validated_data["price"])
        return Response(CarOfferSerializer(offer).data, status=status.HTTP_200_OK)
