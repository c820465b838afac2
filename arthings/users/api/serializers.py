import logging

import bleach
from django.contrib.auth import get_user_model
from rest_framework import serializers

from arthings.common.identifiers import PrefixedIdField, USER_PREFIX
from arthings.legal.api.serializers import ConsentCreateSerializer

logger = logging.getLogger(__name__)
User = get_user_model()


def clean_text(value):
    return bleach.clean(value.strip(), tags=[], strip=True)


def clean_optional_text(value):
    if not value:
        return None
    return clean_text(value) or None


class UserRegistrationSerializer(serializers.ModelSerializer):
    password = serializers.CharField(write_only=True, min_length=6)
    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)
    city = serializers.CharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    consents = ConsentCreateSerializer(many=True, required=False, write_only=True)

    class Meta:
        model = User
        fields = ["email", "password", "name", "phone", "city", "consents"]
        extra_kwargs = {
            "email": {"required": True, "validators": []},
        }

    def validate_email(self, value):
        cleaned = bleach.clean(value.strip(), tags=[], strip=True).lower()
        if User.objects.filter(email__iexact=cleaned).exists():
            raise serializers.ValidationError("User with this email already exists.")
        return cleaned

    def validate_name(self, value):
        return clean_text(value) if value else value

    def validate_phone(self, value):
        return clean_optional_text(value)

    def validate_city(self, value):
        return clean_optional_text(value)


class UserSerializer(serializers.ModelSerializer):
    id = PrefixedIdField(prefix=USER_PREFIX, read_only=True)
    is_admin = serializers.BooleanField(read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "name", "phone", "city", "is_verified", "is_admin", "created_at"]
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["name", "phone", "city"]
        extra_kwargs = {
            "name": {"required": False},
            "phone": {"required": False, "allow_null": True, "allow_blank": True},
            "city": {"required": False, "allow_null": True, "allow_blank": True},
        }

    def validate_name(self, value):
        cleaned = clean_text(value)
        if not cleaned:
            raise serializers.ValidationError("Name cannot be empty.")
        return cleaned

    def validate_phone(self, value):
        return clean_optional_text(value)

    def validate_city(self, value):
        return clean_optional_text(value)


class UserMiniSerializer(serializers.ModelSerializer):
    id = PrefixedIdField(prefix=USER_PREFIX, read_only=True)

    class Meta:
        model = User
        fields = ["id", "name", "city"]
