"""
Loan views for the Loan Ledger Service.

Views are thin; business logic lives in the service layer.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.loans.serializers import (
    CreateLoanResponseSerializer,
    CreateLoanSerializer,
    LedgerResponseSerializer,
    RecordPaymentResponseSerializer,
    RecordPaymentSerializer,
)
from apps.loans.services import LoanService, PaymentService

logger = logging.getLogger(__name__)


class CreateLoanView(APIView):
    """
    POST /api/v1/loans

    Lend money to a registered customer.
    """

    def post(self, request):
        """Handle loan origination."""
        serializer = CreateLoanSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        loan = LoanService.create_loan(**serializer.validated_data)

        response_serializer = CreateLoanResponseSerializer({
            'loan_id': loan.loan_id,
            'customer_id': loan.customer_id,
            'total_amount_payable': loan.total_amount,
            'monthly_emi': loan.monthly_emi,
        })

        return Response(
            response_serializer.data,
            status=status.HTTP_201_CREATED,
        )


class RecordPaymentView(APIView):
    """
    POST /api/v1/loans/<loan_id>/payments

    Record an EMI or lump-sum payment against a loan.
    """

    def post(self, request, loan_id):
        """Handle a payment."""
        serializer = RecordPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = PaymentService.record_payment(
            loan_id=loan_id,
            amount=serializer.validated_data['amount'],
            payment_type=serializer.validated_data['payment_type'],
        )

        response_serializer = RecordPaymentResponseSerializer({
            'payment_id': result['payment'].payment_id,
            'loan_id': result['loan'].loan_id,
            'message': 'Payment recorded successfully.',
            'remaining_balance': result['remaining_balance'],
            'emis_left': result['emis_left'],
            'status': result['status'],
        })

        return Response(
            response_serializer.data,
            status=status.HTTP_200_OK,
        )


class LoanLedgerView(APIView):
    """
    GET /api/v1/loans/<loan_id>/ledger

    View a loan's summary together with its full payment history.
    """

    def get(self, request, loan_id):
        """Handle the ledger view."""
        ledger = LoanService.get_ledger(loan_id)

        response_serializer = LedgerResponseSerializer(ledger)

        return Response(
            response_serializer.data,
            status=status.HTTP_200_OK,
        )
