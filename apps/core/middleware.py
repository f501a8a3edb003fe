"""
API key authentication middleware.

Every /api/ endpoint requires a valid key in the X-API-KEY header.
Everything else (health probe, admin site, portal pages) is served
without one.
"""

import hmac
import logging

from django.conf import settings
from django.http import JsonResponse

logger = logging.getLogger(__name__)

PROTECTED_PREFIX = '/api/'


def _error_response(status_code: int, detail: str) -> JsonResponse:
    """Build an error body shaped like the DRF exception handler's."""
    return JsonResponse(
        {'error': True, 'status_code': status_code, 'detail': detail},
        status=status_code,
    )


def _is_valid_key(provided_key: str, api_keys) -> bool:
    return any(
        hmac.compare_digest(provided_key.encode(), key.encode())
        for key in api_keys
    )


class APIKeyMiddleware:
    """
    Checks the X-API-KEY header against settings.API_KEYS.

    An empty API_KEYS list (local development, tests) turns the
    check off and lets every request through.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        api_keys = getattr(settings, 'API_KEYS', [])

        if not api_keys or not request.path.startswith(PROTECTED_PREFIX):
            return self.get_response(request)

        provided_key = request.META.get('HTTP_X_API_KEY', '')

        if not provided_key:
            logger.warning("Rejected %s %s: missing API key", request.method, request.path)
            return _error_response(
                401, 'Authentication required. Provide X-API-KEY header.'
            )

        if not _is_valid_key(provided_key, api_keys):
            logger.warning("Rejected %s %s: invalid API key", request.method, request.path)
            return _error_response(403, 'Invalid API key.')

        return self.get_response(request)
