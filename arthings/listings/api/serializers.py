import bleach
from django.conf import settings
from rest_framework import serializers

from arthings.common.identifiers import PrefixedIdField, ITEM_PREFIX, USER_PREFIX, FAVORITE_PREFIX
from ..models import Category, City, Item, Favorite


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name", "name_uk", "icon"]


class ItemSerializer(serializers.ModelSerializer):
    """
    Public representation of a listing. Images are returned as URLs in sort order.
    """
    id = PrefixedIdField(prefix=ITEM_PREFIX, read_only=True)
    user_id = PrefixedIdField(prefix=USER_PREFIX, source="owner_id", read_only=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True)
    available = serializers.BooleanField(source="is_available", read_only=True)
    images = serializers.SerializerMethodField()
    owner_name = serializers.SerializerMethodField()
    owner_city = serializers.SerializerMethodField()

    class Meta:
        model = Item
        fields = [
            "id", "user_id", "title", "description", "category", "price", "price_unit",
            "city", "available", "images", "views", "created_at", "owner_name", "owner_city",
        ]
        read_only_fields = fields

    def get_images(self, obj) -> list[str]:
        return [image.image.url for image in obj.images.all() if image.image]

    def get_owner_name(self, obj) -> str:
        return obj.owner.name or "Unknown"

    def get_owner_city(self, obj) -> str:
        return obj.owner.city or ""


class ItemDetailSerializer(ItemSerializer):
    owner_phone = serializers.SerializerMethodField()

    class Meta(ItemSerializer.Meta):
        fields = ItemSerializer.Meta.fields + ["owner_phone"]
        read_only_fields = fields

    def get_owner_phone(self, obj) -> str:
        return obj.owner.phone or ""


class ItemWriteSerializer(serializers.ModelSerializer):
    available = serializers.BooleanField(source="is_available", default=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    images = serializers.ListField(
        child=serializers.ImageField(),
        required=False,
        write_only=True,
        max_length=settings.ITEM_IMAGE_MAX_COUNT,
    )

    class Meta:
        model = Item
        fields = ["title", "description", "category", "price", "price_unit", "city", "available", "images"]
        extra_kwargs = {
            "city": {"required": False, "allow_null": True, "allow_blank": True},
            "price_unit": {"required": False},
        }

    def _clean_required(self, value, label, max_length):
        cleaned = bleach.clean(value.strip(), tags=[], strip=True)
        if not cleaned:
            raise serializers.ValidationError(f"{label} cannot be empty.")
        if len(cleaned) > max_length:
            raise serializers.ValidationError(f"{label} cannot exceed {max_length} characters.")
        return cleaned

    def validate_title(self, value):
        return self._clean_required(value, "Title", 255)

    def validate_description(self, value):
        return self._clean_required(value, "Description", 5000)

    def validate_category(self, value):
        return self._clean_required(value, "Category", 50)

    def validate_city(self, value):
        if not value:
            return None
        return bleach.clean(value.strip(), tags=[], strip=True) or None

    def validate_images(self, files):
        allowed = settings.ITEM_IMAGE_CONTENT_TYPES
        max_size = settings.ITEM_IMAGE_MAX_SIZE
        for image in files:
            content_type = getattr(image, "content_type", None)
            if content_type not in allowed:
                raise serializers.ValidationError(
                    "Invalid file type. Only JPEG, PNG, GIF, and WebP are allowed."
                )
            if image.size > max_size:
                raise serializers.ValidationError(
                    f"Image {image.name} exceeds the {max_size // (1024 * 1024)}MB limit."
                )
        return files


class FavoriteSerializer(serializers.ModelSerializer):
    id = PrefixedIdField(prefix=FAVORITE_PREFIX, read_only=True)
    item = ItemSerializer(read_only=True)

    class Meta:
        model = Favorite
        fields = ["id", "item", "created_at"]


class ReferenceDataSerializer(serializers.Serializer):
    categories = CategorySerializer(many=True)
    cities = serializers.ListField(child=serializers.CharField())

    @staticmethod
    def build():
        return {
            "categories": Category.objects.all(),
            "cities": list(City.objects.values_list("name", flat=True)),
        }
