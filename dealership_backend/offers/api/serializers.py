# offers/api/serializers.py

from rest_framework import serializers

from offers.models import CarOffer


class CarOfferSerializer(serializers.ModelSerializer):
    car_name = serializers.CharField(source="car.full_name", read_only=True)
    dealership_name = serializers.CharField(source="dealership.display_name", read_only=True)

    class Meta:
        model = CarOffer
        fields = [
            "id",
            "car",
            "car_name",
            "dealership",
            "dealership_name",
            "price",
            "offer_date",
            "dealership_notes",
            "available",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CarOfferCreateSerializer(serializers.Serializer):
    """
    Price travels as a string so its scale reaches the service untouched
    (25000.001 must be rejected, not rounded).
    """

    car_id = serializers.IntegerField()
    dealership_id = serializers.IntegerField()
    price = serializers.CharField()
    dealership_notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class CarOfferUpdateSerializer(serializers.Serializer):
    price = serializers.CharField(required=False)
    dealership_notes = serializers.CharField(required=False, allow_blank=True)


class CarOfferPriceSerializer(serializers.Serializer):
    price = serializers.CharField()
