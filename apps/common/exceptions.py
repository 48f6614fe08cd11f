# apps/common/exceptions.py
"""
API exceptions shared across apps.

Each one is a DRF APIException, so views simply raise and
custom_exception_handler renders the JSON error body.
"""

from rest_framework import status
from rest_framework.exceptions import APIException


class MissingFieldError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "필수 입력값이 누락되었습니다."
    default_code = "missing_field"

    def __init__(self, fields=None, detail=None, code=None):
        self.fields = list(fields or [])
        super().__init__(detail=detail, code=code)


class InvalidProviderError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "적절하지 않은 소셜 로그인 제공자입니다."
    default_code = "invalid_provider"


class InvalidRefreshTokenError(APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "유효하지 않은 리프레시 토큰입니다."
    default_code = "invalid_refresh_token"


class ReviewPermissionDenied(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "본인이 작성한 리뷰만 수정하거나 삭제할 수 있습니다."
    default_code = "review_permission_denied"


class SocialAccountConflictError(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "이미 다른 계정에 연결된 소셜 계정입니다."
    default_code = "social_account_conflict"
