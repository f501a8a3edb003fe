"""
Customer views for the Loan Ledger Service.

Views are thin; business logic lives in the service layer.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.customers.serializers import (
    RegisterCustomerResponseSerializer,
    RegisterCustomerSerializer,
)
from apps.customers.services import CustomerService
from apps.loans.serializers import CustomerOverviewResponseSerializer
from apps.loans.services import LoanService

logger = logging.getLogger(__name__)


class RegisterCustomerView(APIView):
    """
    POST /api/v1/customers

    Register a new customer in the system.
    """

    def post(self, request):
        """Handle customer registration."""
        serializer = RegisterCustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        customer = CustomerService.register(**serializer.validated_data)

        response_serializer = RegisterCustomerResponseSerializer({
            'message': 'Customer created',
            'customer_id': customer.customer_id,
            'name': customer.name,
        })

        return Response(
            response_serializer.data,
            status=status.HTTP_201_CREATED,
        )


class CustomerOverviewView(APIView):
    """
    GET /api/v1/customers/<customer_id>/overview

    Summarize every loan held by a customer.
    """

    def get(self, request, customer_id):
        """Handle the account overview."""
        overview = LoanService.get_customer_overview(customer_id)

        response_serializer = CustomerOverviewResponseSerializer(overview)

        return Response(
            response_serializer.data,
            status=status.HTTP_200_OK,
        )
