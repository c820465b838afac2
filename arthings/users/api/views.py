import logging

from django.contrib.auth import get_user_model
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiResponse
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import ViewSet
from rest_framework_simplejwt.tokens import RefreshToken

from arthings.common.utils import client_ip

from ..services.user_service import UserService
from .serializers import UserRegistrationSerializer, UserSerializer, ProfileUpdateSerializer

User = get_user_model()
logger = logging.getLogger(__name__)


class RegisterView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        tags=["Authentication & Users"],
        summary="Register a new account",
        description="Creates the account and records any legal consents given at sign-up. Returns a JWT pair.",
        request=UserRegistrationSerializer,
        responses={
            201: UserSerializer,
            400: OpenApiResponse(description="Validation error or email already in use"),
        },
    )
    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        consents = data.pop("consents", [])
        user = UserService.register_user(
            data,
            consents=consents,
            ip_address=client_ip(request),
            user_agent=request.META.get("HTTP_USER_AGENT"),
        )
        refresh = RefreshToken.for_user(user)
        return Response(
            {
                "user": UserSerializer(user).data,
                "refresh": str(refresh),
                "access": str(refresh.access_token),
            },
            status=status.HTTP_201_CREATED,
        )


@extend_schema_view(
    me=extend_schema(tags=["Authentication & Users"]),
)
class UserViewSet(ViewSet):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        methods=["GET"],
        summary="Get your own profile",
        responses=UserSerializer,
    )
    @extend_schema(
        methods=["PATCH"],
        summary="Update name, phone or city",
        request=ProfileUpdateSerializer,
        responses=UserSerializer,
    )
    @extend_schema(
        methods=["DELETE"],
        summary="Delete your account and everything you own",
        responses={204: OpenApiResponse(description="Account deleted")},
    )
    @action(detail=False, methods=["get", "patch", "delete"], url_path="me")
    def me(self, request):
        user = request.user
        if request.method == "PATCH":
            serializer = ProfileUpdateSerializer(user, data=request.data, partial=True)
            serializer.is_valid(raise_exception=True)
            UserService.update_profile(user, serializer.validated_data)
        elif request.method == "DELETE":
            UserService.delete_account(user)
            return Response(status=status.HTTP_204_NO_CONTENT)
        return Response(UserSerializer(user).data)
