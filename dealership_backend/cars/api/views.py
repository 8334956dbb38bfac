# cars/api/views.py

"""
CAR ENDPOINTS

- GET    /api/cars/                 search (keyword, brand, min_year, max_year,
                                    fuel_type, transmission)
- POST   /api/cars/
- GET    /api/cars/{id}/
- PATCH  /api/cars/{id}/
- DELETE /api/cars/{id}/

Domain errors propagate to core.api.exception_handler.
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from cars.api.serializers import CarSerializer, CarWriteSerializer
from cars.services import car_service


@extend_schema(tags=["cars"])
class CarViewSet(viewsets.GenericViewSet):
    serializer_class = CarSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        params = self.request.query_params
        return car_service.search_cars(
            keyword=params.get("keyword"),
            brand=params.get("brand"),
            min_year=params.get("min_year"),
            max_year=params.get("max_year"),
            fuel_type=params.get("fuel_type"),
            transmission=params.get("transmission"),
        )

    @extend_schema(
        parameters=[
            OpenApiParameter("keyword", str),
            OpenApiParameter("brand", str),
            OpenApiParameter("min_year", int),
            OpenApiParameter("max_year", int),
            OpenApiParameter("fuel_type", str),
            OpenApiParameter("transmission", str),
        ],
        responses=CarSerializer(many=True),
    )
    def list(self, request):
        page = self.paginate_queryset(self.get_queryset())
        data = CarSerializer(page, many=True).data
        return self.get_paginated_response(data)

    def retrieve(self, request, pk=None):
        car = car_service.find_car(pk)
        return Response(CarSerializer(car).data, status=status.HTTP_200_OK)

    @extend_schema(request=CarWriteSerializer, responses={201: CarSerializer})
    def create(self, request):
        s = CarWriteSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        car = car_service.create_car(**s.validated_data)
        return Response(CarSerializer(car).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=CarWriteSerializer, responses=CarSerializer)
    def partial_update(self, request, pk=None):
        s = CarWriteSerializer(data=request.data, partial=True)
        s.is_valid(raise_exception=True)
        car = car_service.update_car(pk, car_service.CarUpdate(**s.validated_data))
        return Response(CarSerializer(car).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None):
        car_service.delete_car(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
