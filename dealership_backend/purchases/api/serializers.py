# purchases/api/serializers.py

from rest_framework import serializers

from purchases.models import Purchase


class PurchaseSerializer(serializers.ModelSerializer):
    dealership = serializers.IntegerField(source="car_offer.dealership_id", read_only=True)
    car = serializers.IntegerField(source="car_offer.car_id", read_only=True)

    class Meta:
        model = Purchase
        fields = [
            "id",
            "buyer",
            "car_offer",
            "car",
            "dealership",
            "final_price",
            "purchase_date",
            "status",
            "payment_method",
            "observations",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class PurchaseCreateSerializer(serializers.Serializer):
    """
    Request shape only. Money travels as a string so its exact scale reaches
    purchase_service; enum strings are parsed there too.
    """

    buyer_id = serializers.IntegerField()
    car_offer_id = serializers.IntegerField()
    final_price = serializers.CharField()
    purchase_date = serializers.DateTimeField()
    payment_method = serializers.CharField(required=False)
    observations = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class PurchaseUpdateSerializer(serializers.Serializer):
    final_price = serializers.CharField(required=False)
    purchase_date = serializers.DateTimeField(required=False)
    status = serializers.CharField(required=False)
    payment_method = serializers.CharField(required=False)
    observations = serializers.CharField(required=False, allow_blank=True)


class PurchaseDetailsSerializer(serializers.Serializer):
    purchase_id = serializers.IntegerField()
    car = serializers.CharField()
    dealership = serializers.CharField()
    final_price = serializers.DecimalField(max_digits=16, decimal_places=2)
    purchase_date = serializers.DateTimeField()
    status = serializers.CharField()
    payment_method = serializers.CharField()
    observations = serializers.CharField(allow_null=True)
