from django.contrib import admin

from .models import Rental


@admin.register(Rental)
class RentalAdmin(admin.ModelAdmin):
    list_display = ("id", "item", "renter", "start_date", "end_date", "days", "total_price", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("item__title", "renter__email")
    raw_id_fields = ("item", "renter")
    readonly_fields = ("days", "price_per_day", "total_price", "created_at", "updated_at")
