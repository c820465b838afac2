import logging

from drf_spectacular.utils import (extend_schema, extend_schema_view, OpenApiTypes,
                                   OpenApiResponse)
from rest_framework import status, mixins
from rest_framework.parsers import JSONParser, FormParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import ModelViewSet, GenericViewSet

from arthings.common.identifiers import parse_id, ITEM_PREFIX
from arthings.common.mixins import PrefixedLookupMixin
from arthings.common.permissions import IsOwnerOrAdmin
from ..filters import ItemFilter
from ..models import Item
from ..services.favorite_service import FavoriteService
from ..services.item_service import ItemService
from .serializers import (ItemSerializer, ItemDetailSerializer, ItemWriteSerializer, FavoriteSerializer,
                          ReferenceDataSerializer)

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(
        tags=["Listings"],
        description="Search listings. Filters combine; `sort` is one of newest (default), price-asc, price-desc, popular.",
    ),
    retrieve=extend_schema(
        tags=["Listings"],
        description="Retrieve a listing by `prod-<id>` or numeric id. Each fetch increments its view counter.",
        responses=ItemDetailSerializer,
    ),
    create=extend_schema(
        tags=["Listings"],
        description="Create a listing. Send multipart data to attach up to 5 images (JPEG, PNG, GIF, WebP; 5MB each).",
        request=ItemWriteSerializer,
        responses={201: ItemDetailSerializer, 400: OpenApiResponse(description="Validation error")},
    ),
    update=extend_schema(
        tags=["Listings"],
        description="Update a listing (owner or admin). New images are appended after the existing ones.",
        request=ItemWriteSerializer,
        responses={200: ItemDetailSerializer, 403: OpenApiResponse(description="Not the owner")},
    ),
    partial_update=extend_schema(
        tags=["Listings"],
        description="Partially update a listing (owner or admin).",
        request=ItemWriteSerializer,
        responses={200: ItemDetailSerializer, 403: OpenApiResponse(description="Not the owner")},
    ),
    destroy=extend_schema(
        tags=["Listings"],
        description="Delete a listing with its images, favorites and rentals (owner or admin).",
        responses={204: OpenApiResponse(description="Deleted"), 403: OpenApiResponse(description="Not the owner")},
    ),
)
class ItemViewSet(PrefixedLookupMixin, ModelViewSet):
    filterset_class = ItemFilter
    parser_classes = [JSONParser, MultiPartParser, FormParser]
    lookup_prefix = ITEM_PREFIX
    lookup_label = "product ID"
    owner_field = "owner_id"

    def get_queryset(self):
        return Item.objects.select_related("owner").prefetch_related("images")

    def get_serializer_class(self):
        if self.action in ["create", "update", "partial_update"]:
            return ItemWriteSerializer
        if self.action == "retrieve":
            return ItemDetailSerializer
        return ItemSerializer

    def get_permissions(self):
        if self.action in ["list", "retrieve"]:
            return [AllowAny()]
        if self.action == "create":
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsOwnerOrAdmin()]

    def retrieve(self, request, *args, **kwargs):
        item = self.get_object()
        ItemService.increment_views(item)
        return Response(ItemDetailSerializer(item).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        images = data.pop("images", [])
        item = ItemService.create_item(request.user, data, images)
        return Response(ItemDetailSerializer(self._reload(item)).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        item = self.get_object()
        serializer = self.get_serializer(item, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        images = data.pop("images", [])
        item = ItemService.update_item(item, data, images)
        return Response(ItemDetailSerializer(self._reload(item)).data)

    def destroy(self, request, *args, **kwargs):
        item = self.get_object()
        ItemService.delete_item(item, actor=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _reload(self, item):
        return self.get_queryset().get(pk=item.pk)


class FavoriteViewSet(mixins.ListModelMixin, GenericViewSet):
    serializer_class = FavoriteSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        return FavoriteService.list_favorites(self.request.user)

    def get_permissions(self):
        if self.action == "check":
            return [AllowAny()]
        return super().get_permissions()

    @extend_schema(tags=["Favorites"], summary="List your favorite listings")
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(
        tags=["Favorites"],
        summary="Add a listing to favorites",
        request=None,
        responses={
            201: FavoriteSerializer,
            404: OpenApiResponse(description="Product not found"),
            409: OpenApiResponse(description="Already in favorites"),
        },
    )
    def add(self, request, item_id=None):
        favorite = FavoriteService.add_favorite(request.user, parse_id(item_id, ITEM_PREFIX, "product ID"))
        return Response(FavoriteSerializer(favorite).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        tags=["Favorites"],
        summary="Remove a listing from favorites",
        responses={204: OpenApiResponse(description="Removed"), 404: OpenApiResponse(description="Not a favorite")},
    )
    def remove(self, request, item_id=None):
        FavoriteService.remove_favorite(request.user, parse_id(item_id, ITEM_PREFIX, "product ID"))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        tags=["Favorites"],
        summary="Check whether a listing is in your favorites",
        responses={200: OpenApiTypes.OBJECT},
    )
    def check(self, request, item_id=None):
        is_favorite = FavoriteService.is_favorite(request.user, parse_id(item_id, ITEM_PREFIX, "product ID"))
        return Response({"is_favorite": is_favorite})


class ReferenceDataView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Common"],
        summary="Categories and cities",
        responses=ReferenceDataSerializer,
    )
    def get(self, request):
        return Response(ReferenceDataSerializer(ReferenceDataSerializer.build()).data)
