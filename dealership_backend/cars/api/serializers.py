# cars/api/serializers.py

from rest_framework import serializers

from cars.models import Car


class CarSerializer(serializers.ModelSerializer):
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = Car
        fields = [
            "id",
            "brand",
            "model",
            "full_name",
            "year",
            "color",
            "mileage",
            "fuel_type",
            "transmission",
            "description",
            "images",
            "publication_date",
            "updated_at",
        ]
        read_only_fields = fields


class CarWriteSerializer(serializers.Serializer):
    """
    Request shape only. Ranges, enum values and URL rules are enforced by
    cars.services.car_service so create and update reject the same input.
    """

    brand = serializers.CharField()
    model = serializers.CharField()
    year = serializers.IntegerField()
    color = serializers.CharField()
    mileage = serializers.IntegerField(required=False)
    fuel_type = serializers.CharField(required=False)
    transmission = serializers.CharField(required=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    images = serializers.ListField(child=serializers.CharField(), required=False)
