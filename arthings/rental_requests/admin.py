from django.contrib import admin

from .models import RentalRequest


@admin.register(RentalRequest)
class RentalRequestAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "category", "city", "user", "created_at")
    list_filter = ("category",)
    search_fields = ("title", "description", "user__email")
    raw_id_fields = ("user",)
