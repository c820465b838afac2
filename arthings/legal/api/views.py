import logging

from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiParameter, OpenApiResponse
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ReadOnlyModelViewSet, ViewSet

from arthings.common.utils import client_ip
from ..models import LegalDocument
from ..services import ConsentService
from .serializers import (LegalDocumentSerializer, LegalConsentSerializer, ConsentCreateSerializer,
                          ConsentStatusSerializer)

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(tags=["Legal"], description="List the legal documents and their current versions."),
    retrieve=extend_schema(tags=["Legal"], description="Retrieve one legal document by its type."),
)
class LegalDocumentViewSet(ReadOnlyModelViewSet):
    queryset = LegalDocument.objects.all()
    serializer_class = LegalDocumentSerializer
    permission_classes = [AllowAny]
    lookup_field = "type"


class ConsentViewSet(ViewSet):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Legal"],
        summary="Record consent to a legal document version",
        request=ConsentCreateSerializer,
        responses={
            200: OpenApiResponse(LegalConsentSerializer, description="Consent already recorded"),
            201: OpenApiResponse(LegalConsentSerializer, description="Consent recorded"),
        },
    )
    def create(self, request):
        serializer = ConsentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        consent, created = ConsentService.record_consent(
            request.user,
            serializer.validated_data["document_type"],
            serializer.validated_data["document_version"],
            ip_address=client_ip(request),
            user_agent=request.META.get("HTTP_USER_AGENT"),
        )
        return Response(
            LegalConsentSerializer(consent).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    @extend_schema(
        tags=["Legal"],
        summary="Check which document versions you have accepted",
        parameters=[OpenApiParameter("type", str, description="Limit the result to one document type")],
        responses=ConsentStatusSerializer(many=True),
    )
    @action(detail=False, methods=["get"], url_path="check")
    def check(self, request):
        result = ConsentService.consent_status(request.user, request.query_params.get("type"))
        return Response(ConsentStatusSerializer(result, many=True).data)
