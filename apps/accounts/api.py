# apps/accounts/api.py
import logging
from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .serializers import (
    SignUpOrLoginRequestSerializer,
    SignUpOrLoginResponseSerializer,
    TokenRefreshRequestSerializer,
    TokenRefreshResponseSerializer,
    MessageResponseSerializer,
    UserSerializer,
    UserUpdateRequestSerializer,
)
from .services import AuthService
from .tokens import (
    TokenService,
    clear_token_cookies,
    set_access_token_cookie,
    set_refresh_token_cookie,
)

logger = logging.getLogger(__name__)

# --------------------------------------------------
# Utilities & Health Check
# --------------------------------------------------


@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """Simple health check endpoint."""
    return Response(
        {"status": "healthy", "message": "CostCook Backend is running"}
    )


# --------------------------------------------------
# Social Sign-up / Login
# --------------------------------------------------


class SignUpOrLoginAPI(APIView):
    """
    Sign up on first login, log in afterwards.

    The client finishes the Kakao/Google handshake itself and posts the
    resulting identity. Tokens come back in cookies; the access token is
    also in the body.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    @swagger_auto_schema(
        operation_summary="Social Sign-up or Login",
        tags=["Auth"],
        request_body=SignUpOrLoginRequestSerializer,
        responses={
            200: openapi.Response(
                description="Signed up and/or logged in. Sets accessToken and refreshToken cookies.",
                schema=SignUpOrLoginResponseSerializer,
                examples={
                    "application/json": {
                        "message": "회원가입 후 로그인이 완료되었습니다.",
                        "accessToken": "<access_jwt>",
                        "isNewUser": True,
                    }
                },
            ),
            400: "Missing field or unsupported provider",
            409: "Social identity already linked to another account",
        },
        security=[],
    )
    def post(self, request):
        serializer = SignUpOrLoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        response = Response(status=status.HTTP_200_OK)
        result = AuthService.sign_up_or_login(serializer.validated_data, response)
        response.data = SignUpOrLoginResponseSerializer(result).data
        return response


# --------------------------------------------------
# Token Refresh & Logout
# --------------------------------------------------


class TokenRefreshAPI(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    @swagger_auto_schema(
        operation_summary="Refresh Tokens",
        operation_description=(
            "Exchange the refresh token (cookie, or `refreshToken` in the body) "
            "for a new pair. The previous refresh token stops working."
        ),
        tags=["Auth"],
        request_body=TokenRefreshRequestSerializer,
        responses={200: TokenRefreshResponseSerializer, 401: "Invalid refresh token"},
        security=[],
    )
    def post(self, request):
        serializer = TokenRefreshRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        raw_token = request.COOKIES.get(
            settings.AUTH_COOKIES["REFRESH_TOKEN_NAME"]
        ) or serializer.validated_data.get("refreshToken")

        user, tokens = TokenService.rotate(raw_token)

        response = Response(
            TokenRefreshResponseSerializer(
                {"message": "토큰이 재발급되었습니다.", "access_token": tokens["access"]}
            ).data,
            status=status.HTTP_200_OK,
        )
        set_refresh_token_cookie(response, tokens["refresh"])
        set_access_token_cookie(response, tokens["access"])
        return response


class LogoutAPI(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_summary="Logout",
        operation_description="Invalidate the stored refresh token and clear both token cookies.",
        tags=["Auth"],
        responses={200: MessageResponseSerializer},
    )
    def post(self, request):
        TokenService.revoke(request.user)

        response = Response({"message": "로그아웃되었습니다."}, status=status.HTTP_200_OK)
        clear_token_cookies(response)
        return response


# --------------------------------------------------
# Current User
# --------------------------------------------------


class MeAPI(APIView):
    permission_classes = [IsAuthenticated]
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    @swagger_auto_schema(
        operation_summary="Get Current User",
        tags=["Users"],
        responses={200: UserSerializer},
    )
    def get(self, request):
        return Response(UserSerializer(request.user).data)

    @swagger_auto_schema(
        operation_summary="Update Current User",
        operation_description=(
            "Partial update of nickname, profileImage (multipart), "
            "preferredIngredients, dislikedIngredients and personalInfoAgreement."
        ),
        tags=["Users"],
        request_body=UserUpdateRequestSerializer,
        responses={200: UserSerializer, 400: "Validation error"},
    )
    def patch(self, request):
        serializer = UserUpdateRequestSerializer(
            request.user, data=request.data, partial=True
        )
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        logger.info(f"User {user.pk} updated profile fields: {sorted(serializer.validated_data)}")
        return Response(UserSerializer(user).data)
