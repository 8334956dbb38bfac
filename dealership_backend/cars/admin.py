# cars/admin.py

from django.contrib import admin

from cars.models import Car


@admin.register(Car)
class CarAdmin(admin.ModelAdmin):
    list_display = ("brand", "model", "year", "color", "fuel_type", "transmission", "mileage")
    search_fields = ("brand", "model", "description")
    list_filter = ("fuel_type", "transmission", "year")
    readonly_fields = ("publication_date", "updated_at")
