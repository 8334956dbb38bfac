# users/api/serializers.py

from rest_framework import serializers

from users.models import Buyer, Dealership


class BuyerSerializer(serializers.ModelSerializer):
    full_name = serializers.CharField(read_only=True)

    class Meta:
        model = Buyer
        fields = [
            "id",
            "user",
            "first_name",
            "last_name",
            "full_name",
            "email",
            "phone",
            "address",
            "dni",
            "active",
            "registration_date",
        ]
        read_only_fields = fields


class BuyerWriteSerializer(serializers.Serializer):
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    email = serializers.CharField()
    address = serializers.CharField()
    dni = serializers.CharField()
    phone = serializers.CharField(required=False, allow_blank=True)


class DealershipSerializer(serializers.ModelSerializer):
    full_address = serializers.CharField(read_only=True)

    class Meta:
        model = Dealership
        fields = [
            "id",
            "user",
            "business_name",
            "cuit",
            "email",
            "phone",
            "address",
            "city",
            "province",
            "full_address",
            "description",
            "active",
            "registration_date",
        ]
        read_only_fields = fields


class DealershipWriteSerializer(serializers.Serializer):
    business_name = serializers.CharField()
    cuit = serializers.CharField()
    email = serializers.CharField()
    phone = serializers.CharField()
    address = serializers.CharField(required=False, allow_blank=True)
    city = serializers.CharField(required=False, allow_blank=True)
    province = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class DealershipUpdateSerializer(DealershipWriteSerializer):
    """CUIT is the dealership's identity and is never changed by an update."""

    cuit = None
