from rest_framework import serializers

from arthings.common.identifiers import PrefixedIdField, RENTAL_PREFIX, USER_PREFIX
from ..models import Rating


class RatingCreateSerializer(serializers.Serializer):
    rental_id = PrefixedIdField(prefix=RENTAL_PREFIX, label_text="rental ID")
    to_user_id = PrefixedIdField(prefix=USER_PREFIX, label_text="user ID")
    score = serializers.IntegerField(min_value=Rating.MIN_SCORE, max_value=Rating.MAX_SCORE)
    comment = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)


class RatingSerializer(serializers.ModelSerializer):
    rental_id = PrefixedIdField(prefix=RENTAL_PREFIX, read_only=True)
    from_user_id = PrefixedIdField(prefix=USER_PREFIX, read_only=True)
    from_user_name = serializers.CharField(source="from_user.name", read_only=True)
    to_user_id = PrefixedIdField(prefix=USER_PREFIX, read_only=True)
    to_user_name = serializers.CharField(source="to_user.name", read_only=True)

    class Meta:
        model = Rating
        fields = [
            "id", "rental_id", "from_user_id", "from_user_name", "to_user_id", "to_user_name",
            "score", "comment", "created_at",
        ]
        read_only_fields = fields


class ReceivedRatingSerializer(serializers.ModelSerializer):
    from_user_name = serializers.CharField(source="from_user.name", read_only=True)
    item_title = serializers.CharField(source="rental.item.title", read_only=True)

    class Meta:
        model = Rating
        fields = ["id", "score", "comment", "created_at", "from_user_name", "item_title"]
        read_only_fields = fields


class EligibilitySerializer(serializers.Serializer):
    can_rate_owner = serializers.BooleanField()
    can_rate_renter = serializers.BooleanField()
    already_rated_owner = serializers.BooleanField()
    already_rated_renter = serializers.BooleanField()
    owner_id = PrefixedIdField(prefix=USER_PREFIX, allow_null=True)
    owner_name = serializers.CharField(allow_null=True)
    renter_id = PrefixedIdField(prefix=USER_PREFIX, allow_null=True)
    renter_name = serializers.CharField(allow_null=True)


class RentalRatingsSerializer(EligibilitySerializer):
    ratings = RatingSerializer(many=True)


class UserRatingsSerializer(serializers.Serializer):
    ratings = ReceivedRatingSerializer(many=True)
    average_score = serializers.FloatField(allow_null=True)
    total_count = serializers.IntegerField()
