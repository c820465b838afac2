import logging

from django.db import connection
from django.db.utils import DatabaseError
from django.utils import timezone
from drf_spectacular.utils import extend_schema, OpenApiResponse
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


class HealthCheckView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Common"],
        summary="Health check",
        responses={
            200: OpenApiResponse(description="Database reachable"),
            503: OpenApiResponse(description="Database unreachable"),
        },
    )
    def get(self, request):
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
        except DatabaseError as exc:
            logger.error(f"Health check failed: {exc}")
            return Response(
                {"status": "unhealthy", "database": "disconnected"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response({
            "status": "healthy",
            "database": "connected",
            "timestamp": timezone.now().isoformat(),
        })
