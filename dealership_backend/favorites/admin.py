# favorites/admin.py

from django.contrib import admin

from favorites.models import FavoriteCar


@admin.register(FavoriteCar)
class FavoriteCarAdmin(admin.ModelAdmin):
    list_display = ("buyer", "car", "rating", "price_notifications", "date_added")
    list_filter = ("price_notifications",)
