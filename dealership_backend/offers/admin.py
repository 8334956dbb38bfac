# offers/admin.py

from django.contrib import admin

from offers.models import CarOffer


@admin.register(CarOffer)
class CarOfferAdmin(admin.ModelAdmin):
    list_display = ("car", "dealership", "price", "available", "offer_date")
    list_filter = ("available",)
    search_fields = ("car__brand", "car__model", "dealership__business_name")
    # Availability follows the purchase lifecycle; never edited by hand.
    readonly_fields = ("available", "offer_date", "created_at", "updated_at")
