from django.contrib.auth import get_user_model
from rest_framework import serializers

from arthings.common.identifiers import PrefixedIdField, ITEM_PREFIX, RENTAL_PREFIX, USER_PREFIX
from arthings.listings.models import Item
from arthings.rentals.models import Rental

User = get_user_model()


class AdminUserSerializer(serializers.ModelSerializer):
    id = PrefixedIdField(prefix=USER_PREFIX, read_only=True)
    is_admin = serializers.BooleanField(read_only=True)
    listings_count = serializers.IntegerField(read_only=True)
    rentals_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = User
        fields = [
            "id", "email", "name", "phone", "city", "is_verified", "is_admin",
            "created_at", "listings_count", "rentals_count",
        ]
        read_only_fields = fields


class AdminListingSerializer(serializers.ModelSerializer):
    id = PrefixedIdField(prefix=ITEM_PREFIX, read_only=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False, read_only=True)
    available = serializers.BooleanField(source="is_available", read_only=True)
    image = serializers.SerializerMethodField()
    owner_name = serializers.CharField(source="owner.name", read_only=True)
    owner_email = serializers.EmailField(source="owner.email", read_only=True)
    rentals_count = serializers.IntegerField(read_only=True)
    favorites_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Item
        fields = [
            "id", "title", "category", "price", "price_unit", "city", "available", "views", "image",
            "owner_name", "owner_email", "rentals_count", "favorites_count", "created_at",
        ]
        read_only_fields = fields

    def get_image(self, obj) -> str | None:
        first = next((image for image in obj.images.all() if image.image), None)
        return first.image.url if first else None


class AdminRentalSerializer(serializers.ModelSerializer):
    id = PrefixedIdField(prefix=RENTAL_PREFIX, read_only=True)
    item_title = serializers.CharField(source="item.title", read_only=True)
    owner_name = serializers.SerializerMethodField()
    renter_name = serializers.CharField(source="renter.name", read_only=True)
    renter_email = serializers.EmailField(source="renter.email", read_only=True)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False, read_only=True)

    class Meta:
        model = Rental
        fields = [
            "id", "item_title", "owner_name", "renter_name", "renter_email", "start_date", "end_date",
            "days", "total_price", "status", "created_at",
        ]
        read_only_fields = fields

    def get_owner_name(self, obj) -> str:
        return obj.item.owner.name or "Unknown"


class RecentRentalSerializer(serializers.ModelSerializer):
    id = PrefixedIdField(prefix=RENTAL_PREFIX, read_only=True)
    renter_name = serializers.CharField(source="renter.name", read_only=True)
    renter_email = serializers.EmailField(source="renter.email", read_only=True)
    item_title = serializers.CharField(source="item.title", read_only=True)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False, read_only=True)

    class Meta:
        model = Rental
        fields = ["id", "renter_name", "renter_email", "item_title", "status", "total_price", "created_at"]
        read_only_fields = fields


class StatsSerializer(serializers.Serializer):
    total_users = serializers.IntegerField()
    total_listings = serializers.IntegerField()
    total_rentals = serializers.IntegerField()
    active_rentals = serializers.IntegerField()
    total_revenue = serializers.DecimalField(max_digits=14, decimal_places=2, coerce_to_string=False)


class DashboardSerializer(serializers.Serializer):
    stats = StatsSerializer()
    recent_rentals = RecentRentalSerializer(many=True)


class AdminRentalStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Rental.STATUS_CHOICES)
