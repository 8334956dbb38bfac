# users/api/views.py

"""
BUYER / DEALERSHIP ENDPOINTS

Buyers:
- GET/POST          /api/buyers/
- GET/PATCH/DELETE  /api/buyers/{id}/
- POST              /api/buyers/{id}/activate/   | /deactivate/

Dealerships:
- GET/POST          /api/dealerships/            (GET = active search)
- GET/PATCH/DELETE  /api/dealerships/{id}/
- POST              /api/dealerships/{id}/activate/ | /deactivate/
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from users.api.serializers import (
    BuyerSerializer,
    BuyerWriteSerializer,
    DealershipSerializer,
    DealershipUpdateSerializer,
    DealershipWriteSerializer,
)
from users.models import Buyer
from users.services import buyer_service, dealership_service


@extend_schema(tags=["buyers"])
class BuyerViewSet(viewsets.GenericViewSet):
    serializer_class = BuyerSerializer
    permission_classes = [IsAuthenticated]
    queryset = Buyer.objects.all()
    filterset_fields = ["active"]

    def list(self, request):
        qs = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(qs)
        return self.get_paginated_response(BuyerSerializer(page, many=True).data)

    def retrieve(self, request, pk=None):
        buyer = buyer_service.find_buyer(pk)
        return Response(BuyerSerializer(buyer).data, status=status.HTTP_200_OK)

    @extend_schema(request=BuyerWriteSerializer, responses={201: BuyerSerializer})
    def create(self, request):
        s = BuyerWriteSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        buyer = buyer_service.create_buyer(**s.validated_data)
        return Response(BuyerSerializer(buyer).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=BuyerWriteSerializer, responses=BuyerSerializer)
    def partial_update(self, request, pk=None):
        s = BuyerWriteSerializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        buyer = buyer_service.update_buyer(pk, buyer_service.BuyerUpdate(**s.validated_data))
        return Response(BuyerSerializer(buyer).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        buyer_service.delete_buyer(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses=BuyerSerializer)
    @action(detail=True, methods=["post"])
    def activate(self, request, pk=None):
        buyer = buyer_service.activate_buyer(pk)
        return Response(BuyerSerializer(buyer).data, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses=BuyerSerializer)
    @action(detail=True, methods=["post"])
    def deactivate(self, request, pk=None):
        buyer = buyer_service.deactivate_buyer(pk)
        return Response(BuyerSerializer(buyer).data, status=status.HTTP_200_OK)


@extend_schema(tags=["dealerships"])
class DealershipViewSet(viewsets.GenericViewSet):
    serializer_class = DealershipSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        params = self.request.query_params
        return dealership_service.search_dealerships(
            business_name=params.get("business_name"),
            city=params.get("city"),
            province=params.get("province"),
            cuit=params.get("cuit"),
        )

    @extend_schema(
        parameters=[
            OpenApiParameter("business_name", str),
            OpenApiParameter("city", str),
            OpenApiParameter("province", str),
            OpenApiParameter("cuit", str),
        ],
        responses=DealershipSerializer(many=True),
    )
    def list(self, request):
        page = self.paginate_queryset(self.get_queryset())
        return self.get_paginated_response(DealershipSerializer(page, many=True).data)

    def retrieve(self, request, pk=None):
        dealership = dealership_service.find_dealership(pk)
        return Response(DealershipSerializer(dealership).data, status=status.HTTP_200_OK)

    @extend_schema(request=DealershipWriteSerializer, responses={201: DealershipSerializer})
    def create(self, request):
        s = DealershipWriteSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        dealership = dealership_service.create_dealership(**s.validated_data)
        return Response(DealershipSerializer(dealership).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=DealershipUpdateSerializer, responses=DealershipSerializer)
    def partial_update(self, request, pk=None):
        s = DealershipUpdateSerializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        dealership = dealership_service.update_dealership(
            pk, dealership_service.DealershipUpdate(**s.validated_data)
        )
        return Response(DealershipSerializer(dealership).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        dealership_service.delete_dealership(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses=DealershipSerializer)
    @action(detail=True, methods=["post"])
    def activate(self, request, pk=None):
        dealership = dealership_service.activate_dealership(pk)
        return Response(DealershipSerializer(dealership).data, status=status.HTTP_200_OK)

    @extend_schema(request=None, responses=DealershipSerializer)
    @action(detail=True, methods=["post"])
    def deactivate(self, request, pk=None):
        dealership = dealership_service.deactivate_dealership(pk)
        return Response(DealershipSerializer(dealership).data, status=status.HTTP_200_OK)
