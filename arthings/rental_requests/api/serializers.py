import bleach
from rest_framework import serializers

from arthings.users.api.serializers import UserMiniSerializer
from ..models import RentalRequest


def truncate_clean(value, max_length):
    """Strip markup and whitespace; over-long input is cut, not rejected."""
    if not value:
        return None
    return bleach.clean(str(value).strip(), tags=[], strip=True)[:max_length] or None


class RentalRequestSerializer(serializers.ModelSerializer):
    title = serializers.CharField()
    description = serializers.CharField()
    category = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    city = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    user = UserMiniSerializer(read_only=True)

    class Meta:
        model = RentalRequest
        fields = ["id", "title", "description", "category", "city", "created_at", "user"]
        read_only_fields = ["id", "created_at", "user"]

    def validate_title(self, value):
        cleaned = truncate_clean(value, 255)
        if not cleaned:
            raise serializers.ValidationError("Title is required.")
        return cleaned

    def validate_description(self, value):
        cleaned = truncate_clean(value, 5000)
        if not cleaned:
            raise serializers.ValidationError("Description is required.")
        return cleaned

    def validate_category(self, value):
        return truncate_clean(value, 50)

    def validate_city(self, value):
        return truncate_clean(value, 100)
