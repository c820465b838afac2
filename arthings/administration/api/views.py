from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiResponse, OpenApiTypes
from rest_framework import mixins
from rest_framework.decorators import action
from rest_framework.filters import SearchFilter
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet, ViewSet

from arthings.common.identifiers import parse_id, ITEM_PREFIX, RENTAL_PREFIX, USER_PREFIX
from arthings.common.mixins import PrefixedLookupMixin
from arthings.common.pagination import AdminPagination
from arthings.common.permissions import IsAdminRole
from arthings.listings.services.item_service import ItemService
from arthings.rentals.models import Rental
from arthings.rentals.services import RentalService
from ..services import AdminService
from .serializers import (AdminUserSerializer, AdminListingSerializer, AdminRentalSerializer,
                          AdminRentalStatusSerializer, DashboardSerializer)


class AdminDashboardViewSet(ViewSet):
    permission_classes = [IsAdminRole]
    required_permission = "view_admin_dashboard"

    @extend_schema(
        tags=["Admin"],
        summary="Confirm the caller is an admin",
        responses={200: OpenApiTypes.OBJECT, 403: OpenApiResponse(description="Admin access required")},
    )
    @action(detail=False, methods=["get"])
    def check(self, request):
        return Response({"admin": True})

    @extend_schema(
        tags=["Admin"],
        summary="Dashboard statistics",
        description="Totals for users, listings and rentals, approved rentals, revenue and the 10 newest rentals.",
        responses=DashboardSerializer,
    )
    @action(detail=False, methods=["get"])
    def stats(self, request):
        return Response(DashboardSerializer(AdminService.dashboard_stats()).data)


@extend_schema_view(
    list=extend_schema(tags=["Admin"], summary="Search users by name or email"),
    destroy=extend_schema(
        tags=["Admin"],
        summary="Delete a user and everything they own",
        responses={204: OpenApiResponse(description="Deleted"), 400: OpenApiResponse(description="Own account")},
    ),
)
class AdminUserViewSet(PrefixedLookupMixin, mixins.ListModelMixin, mixins.DestroyModelMixin, GenericViewSet):
    permission_classes = [IsAdminRole]
    required_permission = "manage_users"
    serializer_class = AdminUserSerializer
    pagination_class = AdminPagination
    filter_backends = [SearchFilter]
    search_fields = ["name", "email"]
    lookup_prefix = USER_PREFIX
    lookup_label = "user ID"

    def get_queryset(self):
        return AdminService.users_with_counts().order_by("-created_at", "-id")

    def perform_destroy(self, instance):
        AdminService.delete_user(instance, admin=self.request.user)

    @extend_schema(
        tags=["Admin"],
        summary="Grant or revoke the admin role",
        request=None,
        responses={200: OpenApiTypes.OBJECT, 400: OpenApiResponse(description="Own account")},
    )
    @action(detail=True, methods=["put", "post"], url_path="toggle-admin")
    def toggle_admin(self, request, pk=None):
        user = self.get_object()
        is_admin = AdminService.toggle_admin(user, admin=request.user)
        return Response({
            "detail": f"User is now {'an admin' if is_admin else 'a regular user'}.",
            "is_admin": is_admin,
        })


@extend_schema_view(
    list=extend_schema(tags=["Admin"], summary="Search listings by title or description"),
    destroy=extend_schema(
        tags=["Admin"],
        summary="Force-delete a listing",
        responses={204: OpenApiResponse(description="Deleted")},
    ),
)
class AdminListingViewSet(PrefixedLookupMixin, mixins.ListModelMixin, mixins.DestroyModelMixin, GenericViewSet):
    permission_classes = [IsAdminRole]
    required_permission = "manage_listings"
    serializer_class = AdminListingSerializer
    pagination_class = AdminPagination
    filter_backends = [SearchFilter]
    search_fields = ["title", "description"]
    lookup_prefix = ITEM_PREFIX
    lookup_label = "listing ID"

    def get_queryset(self):
        return AdminService.listings_with_counts()

    def perform_destroy(self, instance):
        ItemService.delete_item(instance, actor=self.request.user)


@extend_schema_view(
    list=extend_schema(tags=["Admin"], summary="All rentals, optionally filtered by status"),
)
class AdminRentalViewSet(mixins.ListModelMixin, GenericViewSet):
    permission_classes = [IsAdminRole]
    required_permission = "manage_rentals"
    serializer_class = AdminRentalSerializer
    pagination_class = AdminPagination
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ["status"]
    queryset = Rental.objects.select_related("item", "item__owner", "renter")

    @extend_schema(
        tags=["Admin"],
        summary="Override the status of a rental",
        description="Any of the five statuses may be set; the usual transition rules do not apply.",
        request=AdminRentalStatusSerializer,
        responses={200: AdminRentalSerializer, 400: OpenApiResponse(description="Unknown status")},
    )
    @action(detail=True, methods=["put", "patch"], url_path="status")
    def set_status(self, request, pk=None):
        serializer = AdminRentalStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        rental = RentalService.force_status(
            rental_id=parse_id(pk, RENTAL_PREFIX, "rental ID"),
            new_status=serializer.validated_data["status"],
            admin=request.user,
        )
        return Response(AdminRentalSerializer(RentalService.get_rental(rental.pk)).data)
