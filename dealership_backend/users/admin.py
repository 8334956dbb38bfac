# users/admin.py

from django.contrib import admin

from users.models import Buyer, Dealership


@admin.register(Buyer)
class BuyerAdmin(admin.ModelAdmin):
    list_display = ("first_name", "last_name", "email", "dni", "active", "registration_date")
    search_fields = ("first_name", "last_name", "email", "dni")
    list_filter = ("active",)


@admin.register(Dealership)
class DealershipAdmin(admin.ModelAdmin):
    list_display = ("business_name", "cuit", "email", "city", "province", "active")
    search_fields = ("business_name", "cuit", "email")
    list_filter = ("active", "province")
