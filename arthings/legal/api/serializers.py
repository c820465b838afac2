import bleach
from rest_framework import serializers

from arthings.common.identifiers import PrefixedIdField, USER_PREFIX
from ..models import LegalDocument, LegalConsent


class LegalDocumentSerializer(serializers.ModelSerializer):
    file_url = serializers.SerializerMethodField()

    class Meta:
        model = LegalDocument
        fields = ["type", "version", "file_url", "updated_at"]

    def get_file_url(self, obj) -> str | None:
        if not obj.file:
            return None
        request = self.context.get("request")
        url = obj.file.url
        return request.build_absolute_uri(url) if request else url


class LegalConsentSerializer(serializers.ModelSerializer):
    user_id = PrefixedIdField(prefix=USER_PREFIX, read_only=True)

    class Meta:
        model = LegalConsent
        fields = ["id", "user_id", "document_type", "document_version", "accepted_at"]
        read_only_fields = fields


class ConsentCreateSerializer(serializers.Serializer):
    document_type = serializers.CharField(max_length=50)
    document_version = serializers.CharField(max_length=20)

    def validate_document_type(self, value):
        cleaned = bleach.clean(value.strip(), tags=[], strip=True)
        if not cleaned:
            raise serializers.ValidationError("Document type is required.")
        return cleaned

    def validate_document_version(self, value):
        cleaned = bleach.clean(value.strip(), tags=[], strip=True)
        if not cleaned:
            raise serializers.ValidationError("Document version is required.")
        return cleaned


class ConsentStatusSerializer(serializers.Serializer):
    type = serializers.CharField()
    version = serializers.CharField()
    has_consent = serializers.BooleanField()
