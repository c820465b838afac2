from django.contrib import admin

from .models import Rating


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    list_display = ("id", "rental", "from_user", "to_user", "score", "created_at")
    list_filter = ("score",)
    search_fields = ("from_user__email", "to_user__email", "comment")
    raw_id_fields = ("rental", "from_user", "to_user")
