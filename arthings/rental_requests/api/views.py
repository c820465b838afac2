from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiResponse
from rest_framework import mixins, status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from arthings.common.permissions import IsOwnerOrAdmin
from ..filters import RentalRequestFilter
from ..models import RentalRequest
from ..services import RentalRequestService, LIST_LIMIT
from .serializers import RentalRequestSerializer


@extend_schema_view(
    list=extend_schema(
        tags=["Rental Requests"],
        summary="Browse want-ads",
        description=f"Newest first, at most {LIST_LIMIT}. Filter by `category`, `city` or `user_id`.",
    ),
    retrieve=extend_schema(tags=["Rental Requests"], summary="Get a want-ad"),
    create=extend_schema(
        tags=["Rental Requests"],
        summary="Post what you would like to rent",
        responses={201: RentalRequestSerializer, 400: OpenApiResponse(description="Title or description missing")},
    ),
    destroy=extend_schema(
        tags=["Rental Requests"],
        summary="Delete your want-ad",
        responses={204: OpenApiResponse(description="Deleted"), 403: OpenApiResponse(description="Not the author")},
    ),
)
class RentalRequestViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin, mixins.CreateModelMixin,
                           mixins.DestroyModelMixin, GenericViewSet):
    serializer_class = RentalRequestSerializer
    filterset_class = RentalRequestFilter
    queryset = RentalRequest.objects.select_related("user")
    pagination_class = None

    def get_permissions(self):
        if self.action in ["list", "retrieve"]:
            return [AllowAny()]
        if self.action == "destroy":
            return [IsAuthenticated(), IsOwnerOrAdmin()]
        return [IsAuthenticated()]

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())[:LIST_LIMIT]
        return Response(self.get_serializer(queryset, many=True).data)

    def perform_create(self, serializer):
        serializer.instance = RentalRequestService.create_request(self.request.user, serializer.validated_data)

    def perform_destroy(self, instance):
        RentalRequestService.delete_request(instance, actor=self.request.user)
