# apps/common/utils.py
from django.conf import settings
from django.http import Http404
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status as http_status
import logging

from .exceptions import MissingFieldError

logger = logging.getLogger(__name__)


def custom_exception_handler(exc, context):
    """
    Custom exception handler for Django REST Framework.

    Every exception leaves the API as JSON of the shape
    ``{"error": true, "status_code", "code", "message"[, "details"]}``.

    Args:
        exc: The exception raised
        context: Context dict with 'view' and 'request'

    Returns:
        Response: JSON response with error details
    """
    # Call REST framework's default handler first to get the standard error response
    response = exception_handler(exc, context)

    if response is not None:
        custom_response_data = {
            'error': True,
            'status_code': response.status_code,
            'code': _error_code(exc),
        }

        if isinstance(response.data, dict):
            if 'detail' in response.data:
                custom_response_data['message'] = str(response.data['detail'])
                if len(response.data) > 1:
                    custom_response_data['details'] = {
                        k: v for k, v in response.data.items() if k != 'detail'
                    }
            else:
                custom_response_data['message'] = 'Validation error' if response.status_code == 400 else 'Request failed'
                custom_response_data['details'] = response.data
        elif isinstance(response.data, list):
            custom_response_data['message'] = 'Multiple errors occurred'
            custom_response_data['details'] = response.data
        else:
            custom_response_data['message'] = str(response.data)

        if isinstance(exc, MissingFieldError) and exc.fields:
            custom_response_data['details'] = {'missing_fields': exc.fields}

        response.data = custom_response_data
        return response

    # Unhandled exceptions (500 errors)
    logger.exception(f"Unhandled exception in {context.get('view', 'unknown view')}: {exc}")

    error_response = {
        'error': True,
        'status_code': 500,
        'code': 'server_error',
        'message': 'An internal server error occurred.',
    }

    # Include exception details only in DEBUG mode
    if settings.DEBUG:
        error_response['debug'] = {
            'exception_type': exc.__class__.__name__,
            'exception_message': str(exc),
            'view': str(context.get('view', 'Unknown')),
        }

    return Response(error_response, status=http_status.HTTP_500_INTERNAL_SERVER_ERROR)


def _error_code(exc):
    if isinstance(exc, Http404):
        return 'not_found'
    if isinstance(exc, APIException):
        codes = exc.get_codes()
        if isinstance(codes, str):
            return codes
        return exc.default_code
    return 'error'
