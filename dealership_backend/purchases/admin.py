# purchases/admin.py

from django.contrib import admin

from purchases.models import Purchase


@admin.register(Purchase)
class PurchaseAdmin(admin.ModelAdmin):
    list_display = ("id", "buyer", "car_offer", "final_price", "status", "purchase_date")
    list_filter = ("status", "payment_method")
    search_fields = ("buyer__email", "car_offer__dealership__business_name")
    # Status changes go through purchases.services.purchase_service only.
    readonly_fields = ("status", "created_at", "updated_at")
