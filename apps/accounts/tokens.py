# apps/accounts/tokens.py
"""
JWT issuance and the cookies that carry it.

Tokens are SimpleJWT tokens. The latest refresh token is stored on the
user row, so issuing a new pair invalidates the previous refresh token.
"""

import logging
from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings as jwt_settings
from rest_framework_simplejwt.tokens import RefreshToken

from apps.common.exceptions import InvalidRefreshTokenError

logger = logging.getLogger(__name__)
User = get_user_model()


class TokenService:

    @staticmethod
    def generate_token(user):
        """Return a fresh {"access", "refresh"} pair for user. Nothing is stored."""
        refresh = RefreshToken.for_user(user)
        return {
            "access": str(refresh.access_token),
            "refresh": str(refresh),
        }

    @classmethod
    def issue(cls, user):
        """Generate a pair and store its refresh token on the user, replacing any prior one."""
        tokens = cls.generate_token(user)
        user.refresh_token = tokens["refresh"]
        user.save(update_fields=["refresh_token", "updated_at"])
        logger.info(f"Issued new token pair for user {user.pk}")
        return tokens

    @classmethod
    def rotate(cls, raw_refresh_token):
        """
        Exchange a refresh token for a new pair.

        The token must verify (signature, expiry, type) and must be the one
        currently stored for its user. The user row is locked while the
        stored token is compared and replaced, so a token rotates only once.

        Returns:
            (user, tokens)
        Raises:
            InvalidRefreshTokenError
        """
        if not raw_refresh_token:
            raise InvalidRefreshTokenError("리프레시 토큰이 없습니다.")

        try:
            refresh = RefreshToken(raw_refresh_token)
        except TokenError as e:
            logger.warning(f"Refresh token rejected: {e}")
            raise InvalidRefreshTokenError()

        user_id = refresh.get(jwt_settings.USER_ID_CLAIM)
        with transaction.atomic():
            user = User.objects.select_for_update().filter(
                pk=user_id, is_active=True
            ).first()

            if user is None or user.refresh_token != raw_refresh_token:
                logger.warning(f"Refresh token for user {user_id} is not the current one")
                raise InvalidRefreshTokenError()

            return user, cls.issue(user)

    @staticmethod
    def revoke(user):
        user.refresh_token = None
        user.save(update_fields=["refresh_token", "updated_at"])
        logger.info(f"Revoked refresh token for user {user.pk}")


# --------------------------------------------------
# Cookies
# --------------------------------------------------


def _set_token_cookie(response, name, token, lifetime):
    cookie_settings = settings.AUTH_COOKIES
    response.set_cookie(
        name,
        token,
        max_age=int(lifetime.total_seconds()),
        path=cookie_settings["PATH"],
        domain=cookie_settings["DOMAIN"],
        secure=cookie_settings["SECURE"],
        httponly=cookie_settings["HTTPONLY"],
        samesite=cookie_settings["SAMESITE"],
    )


def set_refresh_token_cookie(response, token):
    _set_token_cookie(
        response,
        settings.AUTH_COOKIES["REFRESH_TOKEN_NAME"],
        token,
        jwt_settings.REFRESH_TOKEN_LIFETIME,
    )


def set_access_token_cookie(response, token):
    _set_token_cookie(
        response,
        settings.AUTH_COOKIES["ACCESS_TOKEN_NAME"],
        token,
        jwt_settings.ACCESS_TOKEN_LIFETIME,
    )


def clear_token_cookies(response):
    cookie_settings = settings.AUTH_COOKIES
    for name in (cookie_settings["ACCESS_TOKEN_NAME"], cookie_settings["REFRESH_TOKEN_NAME"]):
        response.delete_cookie(
            name,
            path=cookie_settings["PATH"],
            domain=cookie_settings["DOMAIN"],
            samesite=cookie_settings["SAMESITE"],
        )
