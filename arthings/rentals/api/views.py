from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from arthings.common.identifiers import parse_id, RENTAL_PREFIX
from ..services import RentalService, ROLE_OWNER, ROLE_RENTER
from .serializers import RentalSerializer, RentalCreateSerializer, RentalStatusSerializer


class RentalViewSet(ViewSet):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Rentals"],
        summary="List your rentals",
        parameters=[
            OpenApiParameter(
                "role", str, enum=[ROLE_RENTER, ROLE_OWNER],
                description="`renter` (default): rentals you requested. `owner`: rentals of your items.",
            ),
        ],
        responses=RentalSerializer(many=True),
    )
    def list(self, request):
        role = request.query_params.get("role") or ROLE_RENTER
        rentals = RentalService.list_rentals(request.user, role)
        return Response(RentalSerializer(rentals, many=True).data)

    @extend_schema(
        tags=["Rentals"],
        summary="Request a rental",
        description="Days are counted inclusively; the item's current price is fixed on the rental.",
        request=RentalCreateSerializer,
        responses={
            201: RentalSerializer,
            400: OpenApiResponse(description="Invalid dates or item unavailable"),
            404: OpenApiResponse(description="Product not found"),
            409: OpenApiResponse(description="Cannot rent your own item"),
        },
    )
    def create(self, request):
        serializer = RentalCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        rental = RentalService.create_rental(renter=request.user, **serializer.validated_data)
        rental = RentalService.get_rental(rental.pk)
        return Response(RentalSerializer(rental).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        tags=["Rentals"],
        summary="Get a rental (owner or renter only)",
        responses={200: RentalSerializer, 403: OpenApiResponse(description="Not a party")},
    )
    def retrieve(self, request, pk=None):
        rental = RentalService.get_rental_for_party(parse_id(pk, RENTAL_PREFIX, "rental ID"), request.user)
        return Response(RentalSerializer(rental).data)

    @extend_schema(
        tags=["Rentals"],
        summary="Change the status of a rental",
        description=(
            "The owner approves or declines a pending rental and completes an approved one. "
            "The renter cancels a pending or approved rental."
        ),
        request=RentalStatusSerializer,
        responses={
            200: RentalSerializer,
            400: OpenApiResponse(description="Unknown status"),
            403: OpenApiResponse(description="Transition not allowed for you"),
        },
    )
    @action(detail=True, methods=["put", "patch"], url_path="status")
    def set_status(self, request, pk=None):
        serializer = RentalStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        rental = RentalService.change_status(
            rental_id=parse_id(pk, RENTAL_PREFIX, "rental ID"),
            actor=request.user,
            new_status=serializer.validated_data["status"],
        )
        return Response(RentalSerializer(RentalService.get_rental(rental.pk)).data)
