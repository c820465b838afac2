import bleach
from rest_framework import serializers

from arthings.common.identifiers import PrefixedIdField, ITEM_PREFIX, USER_PREFIX, RENTAL_PREFIX
from ..models import Rental
from ..services import REQUESTABLE_STATUSES


class RentalSerializer(serializers.ModelSerializer):
    id = PrefixedIdField(prefix=RENTAL_PREFIX, read_only=True)
    item_id = PrefixedIdField(prefix=ITEM_PREFIX, read_only=True)
    item_title = serializers.CharField(source="item.title", read_only=True)
    item_image = serializers.SerializerMethodField()
    owner_id = PrefixedIdField(prefix=USER_PREFIX, source="item.owner_id", read_only=True)
    owner_name = serializers.CharField(source="item.owner.name", read_only=True)
    renter_id = PrefixedIdField(prefix=USER_PREFIX, read_only=True)
    renter_name = serializers.CharField(source="renter.name", read_only=True)
    price_per_day = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False, read_only=True)

    class Meta:
        model = Rental
        fields = [
            "id", "item_id", "item_title", "item_image", "owner_id", "owner_name",
            "renter_id", "renter_name", "start_date", "end_date", "days",
            "price_per_day", "total_price", "message", "status", "created_at", "updated_at",
        ]
        read_only_fields = fields

    def get_item_image(self, obj) -> str | None:
        first = next((image for image in obj.item.images.all() if image.image), None)
        return first.image.url if first else None


class RentalCreateSerializer(serializers.Serializer):
    item_id = PrefixedIdField(prefix=ITEM_PREFIX, label_text="product ID")
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    message = serializers.CharField(max_length=1000, required=False, allow_blank=True, allow_null=True)

    def validate_message(self, value):
        if not value:
            return None
        return bleach.clean(value.strip(), tags=[], strip=True) or None


class RentalStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=REQUESTABLE_STATUSES)
