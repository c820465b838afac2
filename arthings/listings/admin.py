from django.contrib import admin
from django.utils.html import format_html

from .models import Category, City, Item, ItemImage, Favorite


class ItemImageInline(admin.TabularInline):
    model = ItemImage
    extra = 1
    fields = ("image", "sort_order", "created_at", "image_preview")
    readonly_fields = ("created_at", "image_preview")

    def image_preview(self, obj):
        if obj.image:
            return format_html('<img src="{}" width="100" height="100" />', obj.image.url)
        return "No image"

    image_preview.short_description = "Image Preview"


@admin.register(Item)
class ItemAdmin(admin.ModelAdmin):
    list_display = ("title", "owner", "category", "price", "price_unit", "city", "is_available", "views", "created_at")
    search_fields = ("title", "description", "owner__email")
    list_filter = ("category", "price_unit", "is_available", "city")
    readonly_fields = ("views", "created_at", "updated_at")
    inlines = [ItemImageInline]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "name_uk", "icon")
    search_fields = ("id", "name", "name_uk")


@admin.register(City)
class CityAdmin(admin.ModelAdmin):
    list_display = ("name",)
    search_fields = ("name",)


@admin.register(Favorite)
class FavoriteAdmin(admin.ModelAdmin):
    list_display = ("user", "item", "created_at")
    search_fields = ("user__email", "item__title")
