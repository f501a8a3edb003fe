"""
Core views for the Loan Ledger Service.
"""

import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """
    GET /health/

    Liveness probe for Docker and load balancers. Also pings the
    database so a broken connection shows up as 503.
    Exempt from API key authentication.
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        logger.exception("Health check failed: database unreachable")
        return JsonResponse({'status': 'unhealthy', 'database': 'down'}, status=503)

    return JsonResponse({'status': 'healthy', 'database': 'up'}, status=200)
