# favorites/api/serializers.py

from rest_framework import serializers

from favorites.models import FavoriteCar


class FavoriteCarSerializer(serializers.ModelSerializer):
    is_reviewed = serializers.BooleanField(read_only=True)

    class Meta:
        model = FavoriteCar
        fields = [
            "id",
            "buyer",
            "car",
            "date_added",
            "rating",
            "comment",
            "price_notifications",
            "is_reviewed",
        ]
        read_only_fields = fields


class FavoriteCreateSerializer(serializers.Serializer):
    buyer_id = serializers.IntegerField()
    car_id = serializers.IntegerField()
    rating = serializers.IntegerField(required=False, allow_null=True)
    comment = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    date_added = serializers.DateTimeField(required=False, allow_null=True)
    price_notifications = serializers.BooleanField(required=False, default=False)


class ReviewUpdateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(required=False)
    comment = serializers.CharField(required=False, allow_blank=True)


class NotificationsSerializer(serializers.Serializer):
    """Omit `enabled` to toggle the current setting."""

    enabled = serializers.BooleanField(required=False, allow_null=True, default=None)
