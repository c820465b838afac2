from drf_spectacular.utils import extend_schema, OpenApiResponse
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from arthings.common.identifiers import parse_id, RENTAL_PREFIX, USER_PREFIX
from ..services import RatingService
from .serializers import (RatingCreateSerializer, RatingSerializer, EligibilitySerializer,
                          RentalRatingsSerializer, UserRatingsSerializer)


class RatingCreateView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        tags=["Ratings"],
        summary="Rate the other party of a completed rental",
        request=RatingCreateSerializer,
        responses={
            201: RatingSerializer,
            400: OpenApiResponse(description="Rental not completed or wrong target"),
            403: OpenApiResponse(description="Not a party to the rental"),
            404: OpenApiResponse(description="Rental not found"),
            409: OpenApiResponse(description="Already rated"),
        },
    )
    def post(self, request):
        serializer = RatingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        rating = RatingService.submit_rating(rater=request.user, **serializer.validated_data)
        return Response(RatingSerializer(rating).data, status=status.HTTP_201_CREATED)


class UserRatingsView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Ratings"],
        summary="Ratings a user has received",
        description="The 50 newest ratings, the average score rounded to one decimal and the total count.",
        responses=UserRatingsSerializer,
    )
    def get(self, request, user_id):
        summary = RatingService.user_summary(parse_id(user_id, USER_PREFIX, "user ID"))
        return Response(UserRatingsSerializer(summary).data)


class RentalRatingsView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Ratings"],
        summary="Ratings given on a rental",
        description="Includes whether the caller can still rate the owner or the renter.",
        responses=RentalRatingsSerializer,
    )
    def get(self, request, rental_id):
        data = RatingService.rental_ratings(parse_id(rental_id, RENTAL_PREFIX, "rental ID"), request.user)
        return Response(RentalRatingsSerializer(data).data)


class CanRateView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Ratings"],
        summary="Whom the caller can still rate on a rental",
        responses=EligibilitySerializer,
    )
    def get(self, request, rental_id):
        if not request.user.is_authenticated:
            return Response(EligibilitySerializer(RatingService.eligibility(None, request.user)).data)
        data = RatingService.can_rate(parse_id(rental_id, RENTAL_PREFIX, "rental ID"), request.user)
        return Response(EligibilitySerializer(data).data)
