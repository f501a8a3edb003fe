"""
Custom exceptions and DRF exception handler for the Loan Ledger Service.
"""

import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class CustomerNotFoundError(APIException):
    """Raised when a customer does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Customer not found. Please register first.'
    default_code = 'customer_not_found'


class CustomerAlreadyExistsError(APIException):
    """Raised when registering a customer_id that is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Customer already exists.'
    default_code = 'conflict'


class LoanNotFoundError(APIException):
    """Raised when a loan does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Loan not found.'
    default_code = 'loan_not_found'


class CustomerLoansNotFoundError(APIException):
    """Raised when a customer has no loans to summarize."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'No loans found for customer.'
    default_code = 'no_loans_found'


class LoanAlreadyPaidOffError(APIException):
    """Raised when a payment is made against a loan that is already closed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Loan is already paid off.'
    default_code = 'loan_paid_off'


class StoreFailureError(APIException):
    """Raised when the underlying database fails."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'A storage error occurred. Please try again later.'
    default_code = 'store_failure'


def custom_exception_handler(exc, context):
    """
    Custom DRF exception handler that returns consistent error responses.

    Database errors are reported as StoreFailureError; any other
    unhandled exception is logged and returned as a generic 500.
    """
    if isinstance(exc, DatabaseError):
        logger.exception(
            "Store failure in %s",
            context.get('view', 'unknown'),
            exc_info=exc,
        )
        exc = StoreFailureError()

    response = exception_handler(exc, context)

    if response is not None:
        error_data = {
            'error': True,
            'status_code': response.status_code,
            'detail': response.data,
        }
        response.data = error_data
    else:
        # Unhandled exceptions: log and return 500
        logger.exception(
            "Unhandled exception in %s",
            context.get('view', 'unknown'),
            exc_info=exc,
        )
        response = Response(
            {
                'error': True,
                'status_code': 500,
                'detail': 'An unexpected error occurred. Please try again later.',
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return response
