# apps/accounts/authentication.py
import logging
from django.conf import settings
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken

logger = logging.getLogger(__name__)


class CookieJWTAuthentication(JWTAuthentication):
    """
    JWT authentication from the Authorization header, falling back to the
    access token cookie.

    A bad header token is rejected with 401 as usual. A bad cookie token,
    or one whose user is gone or deactivated, leaves the request anonymous
    so public endpoints keep working for browsers holding a stale cookie.
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is not None:
            return super().authenticate(request)

        raw_token = request.COOKIES.get(settings.AUTH_COOKIES["ACCESS_TOKEN_NAME"])
        if not raw_token:
            return None

        try:
            validated_token = self.get_validated_token(raw_token)
        except InvalidToken as e:
            logger.debug(f"Ignoring invalid access token cookie: {e}")
            return None

        try:
            user = self.get_user(validated_token)
        except AuthenticationFailed as e:
            logger.debug(f"Ignoring access token cookie for unknown user: {e}")
            return None

        return user, validated_token
