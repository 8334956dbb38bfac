# purchases/api/views.py

"""
PURCHASE ENDPOINTS

- GET/POST          /api/purchases/           (filters: buyer, car_offer, dealership, status)
- GET/PATCH/DELETE  /api/purchases/{id}/
- GET               /api/purchases/{id}/details/
- POST              /api/purchases/{id}/confirm/ | cancel/ | deliver/ | revert/

Lifecycle violations surface as 409 via core.api.exception_handler.
"""

import django_filters
from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.enums import PurchaseStatus
from purchases.api.serializers import (
    PurchaseCreateSerializer,
    PurchaseDetailsSerializer,
    PurchaseSerializer,
    PurchaseUpdateSerializer,
)
from purchases.models import Purchase
from purchases.services import purchase_service


class PurchaseFilter(django_filters.FilterSet):
    dealership = django_filters.NumberFilter(field_name="car_offer__dealership")
    status = django_filters.ChoiceFilter(choices=PurchaseStatus.choices)

    class Meta:
        model = Purchase
        fields = ["buyer", "car_offer"]


@extend_schema(tags=["purchases"])
class PurchaseViewSet(viewsets.GenericViewSet):
    serializer_class = PurchaseSerializer
    permission_classes = [IsAuthenticated]
    filterset_class = PurchaseFilter

    def get_queryset(self):
        return purchase_service.find_all_purchases()

    def list(self, request):
        qs = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(qs)
        return self.get_paginated_response(PurchaseSerializer(page, many=True).data)

    def retrieve(self, request, pk=None):
        purchase = purchase_service.find_purchase(pk)
        return Response(PurchaseSerializer(purchase).data, status=status.HTTP_200_OK)

    @extend_schema(request=PurchaseCreateSerializer, responses={201: PurchaseSerializer})
    def create(self, request):
        s = PurchaseCreateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        purchase = purchase_service.create_purchase(**s.validated_data)
        return Response(PurchaseSerializer(purchase).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=PurchaseUpdateSerializer, responses=PurchaseSerializer)
    def partial_update(self, request, pk=None):
        s = PurchaseUpdateSerializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        purchase = purchase_service.update_purchase(
            pk, purchase_service.PurchaseUpdate(**s.validated_data)
        )
        return Response(PurchaseSerializer(purchase).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        purchase_service.delete_purchase(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses=PurchaseDetailsSerializer)
    @action(detail=True, methods=["get"])
    def details(self, request, pk=None):
        purchase = purchase_service.find_purchase(pk)
        data = PurchaseDetailsSerializer(purchase_service.purchase_details(purchase)).data
        return Response(data, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses=PurchaseSerializer)
    @action(detail=True, methods=["post"])
    def confirm(self, request, pk=None):
        purchase = purchase_service.confirm_purchase(pk)
        return Response(PurchaseSerializer(purchase).data, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses=PurchaseSerializer)
    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):
        purchase = purchase_service.cancel_purchase(pk)
        return Response(PurchaseSerializer(purchase).data, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses=PurchaseSerializer)
    @action(detail=True, methods=["post"])
    def deliver(self, request, pk=None):
        purchase = purchase_service.deliver_purchase(pk)
        return Response(PurchaseSerializer(purchase).data, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses=PurchaseSerializer)
    @action(detail=True, methods=["post"])
    def revert(self, request, pk=None):
        purchase = purchase_service.revert_to_pending(pk)
        return Response(PurchaseSerializer(purchase).data, status=status.HTTP_200_OK)
