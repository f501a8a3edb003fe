"""
Loan service layer.

Contains loan origination, payment application and the ledger and
overview read models. This is the core business logic of the loan
ledger; the arithmetic itself lives in apps.core.utils.
"""

import logging
from decimal import Decimal

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction

from apps.core.exceptions import (
    CustomerLoansNotFoundError,
    LoanAlreadyPaidOffError,
    LoanNotFoundError,
)
from apps.core.utils import apply_payment, compute_loan_terms, summarize_loan
from apps.customers.services import CustomerService
from apps.loans.models import Loan, Payment

logger = logging.getLogger(__name__)


class LoanService:
    """Service for loan origination and retrieval operations."""

    @classmethod
    @transaction.atomic
    def create_loan(
        cls,
        customer_id: str,
        loan_amount: Decimal,
        loan_period_years: int,
        interest_rate_yearly: Decimal,
    ) -> Loan:
        """
        Originate a new loan for a registered customer.

        Args:
            customer_id: The borrowing customer's ID.
            loan_amount: Principal to lend.
            loan_period_years: Loan period in whole years.
            interest_rate_yearly: Annual simple interest rate (%).

        Returns:
            The new Loan, ACTIVE, with remaining_amount equal to total_amount.

        Raises:
            CustomerNotFoundError: If the customer is not registered.
        """
        customer = CustomerService.get_customer(customer_id)

        terms = compute_loan_terms(loan_amount, loan_period_years, interest_rate_yearly)

        loan = Loan.objects.create(
            customer=customer,
            principal_amount=loan_amount,
            total_amount=terms.total_payable,
            remaining_amount=terms.total_payable,
            interest_rate=interest_rate_yearly,
            loan_period_years=loan_period_years,
            monthly_emi=terms.emi,
            status=Loan.Status.ACTIVE,
        )

        logger.info(
            "Loan %s created for customer %s: principal=%s, rate=%s%%, "
            "years=%d, total=%s, emi=%s",
            loan.loan_id,
            customer_id,
            loan_amount,
            interest_rate_yearly,
            loan_period_years,
            terms.total_payable,
            terms.emi,
        )

        return loan

    @staticmethod
    def get_loan(loan_id) -> Loan:
        """
        Retrieve a single loan by ID.

        Malformed identifiers are treated the same as unknown ones.

        Raises:
            LoanNotFoundError: If no such loan exists.
        """
        try:
            return Loan.objects.select_related('customer').get(pk=loan_id)
        except (Loan.DoesNotExist, DjangoValidationError):
            raise LoanNotFoundError(
                detail=f"Loan with ID {loan_id} not found."
            )

    @staticmethod
    def get_customer_loans(customer_id: str):
        """
        Retrieve all loans for a customer, oldest first.

        Returns:
            QuerySet of Loan instances (possibly empty).
        """
        return Loan.objects.filter(
            customer_id=customer_id,
        ).order_by('created_at')

    @classmethod
    def get_ledger(cls, loan_id) -> dict:
        """
        Build the ledger for a loan: its summary plus every payment.

        Raises:
            LoanNotFoundError: If no such loan exists.
        """
        loan = cls.get_loan(loan_id)
        payments = list(PaymentService.list_payments(loan))
        summary = summarize_loan(loan, payments)

        return {
            'loan_id': loan.loan_id,
            'customer_id': loan.customer_id,
            'principal': summary['principal'],
            'total_amount': summary['total_amount'],
            'monthly_emi': summary['monthly_emi'],
            'amount_paid': summary['amount_paid'],
            'balance_amount': summary['balance'],
            'emis_left': summary['emis_left'],
            'status': loan.status,
            'transactions': payments,
        }

    @classmethod
    def get_customer_overview(cls, customer_id: str) -> dict:
        """
        Summarize every loan held by a customer.

        Payments for all loans are fetched in a single prefetch query
        and summaries keep the loans' creation order.

        Raises:
            CustomerLoansNotFoundError: If the customer has no loans.
        """
        loans = list(
            cls.get_customer_loans(customer_id).prefetch_related('payments')
        )

        if not loans:
            raise CustomerLoansNotFoundError(
                detail=f"No loans found for customer {customer_id}."
            )

        summaries = []
        for loan in loans:
            summary = summarize_loan(loan, loan.payments.all())
            summaries.append({
                'loan_id': loan.loan_id,
                'principal': summary['principal'],
                'total_amount': summary['total_amount'],
                'total_interest': summary['total_interest'],
                'emi_amount': summary['monthly_emi'],
                'amount_paid': summary['amount_paid'],
                'balance_amount': summary['balance'],
                'emis_left': summary['emis_left'],
                'status': loan.status,
            })

        return {
            'customer_id': customer_id,
            'total_loans': len(summaries),
            'loans': summaries,
        }


class PaymentService:
    """Service for applying payments to loans."""

    @classmethod
    @transaction.atomic
    def record_payment(cls, loan_id, amount: Decimal, payment_type: str) -> dict:
        """
        Record a payment and update the loan balance in one transaction.

        The loan row is re-read with select_for_update() so concurrent
        payments on the same loan are applied one after another instead
        of overwriting each other's balance.

        Args:
            loan_id: The loan being paid.
            amount: Amount paid (> 0). Overpayment is floored at zero.
            payment_type: 'EMI' or 'LUMP_SUM'.

        Returns:
            Dict with the payment, the new balance, status and EMIs left.

        Raises:
            LoanNotFoundError: If no such loan exists.
            LoanAlreadyPaidOffError: If the loan is already PAID_OFF.
        """
        try:
            loan = Loan.objects.select_for_update().get(pk=loan_id)
        except (Loan.DoesNotExist, DjangoValidationError):
            raise LoanNotFoundError(
                detail=f"Loan with ID {loan_id} not found."
            )

        if loan.status == Loan.Status.PAID_OFF:
            raise LoanAlreadyPaidOffError(
                detail=f"Loan {loan.loan_id} is already paid off."
            )

        outcome = apply_payment(loan.remaining_amount, loan.monthly_emi, amount)

        # The payment row must be written before the balance it explains.
        # The row lock above makes the count a safe next sequence number.
        payment = Payment.objects.create(
            loan=loan,
            amount=amount,
            payment_type=payment_type,
            sequence=Payment.objects.filter(loan=loan).count() + 1,
        )

        loan.remaining_amount = outcome.new_remaining
        loan.status = outcome.status
        loan.save(update_fields=['remaining_amount', 'status', 'updated_at'])

        logger.info(
            "Payment %s on loan %s: type=%s, amount=%s, remaining=%s, "
            "emis_left=%d, status=%s",
            payment.payment_id,
            loan.loan_id,
            payment_type,
            amount,
            outcome.new_remaining,
            outcome.emis_left,
            outcome.status,
        )

        return {
            'payment': payment,
            'loan': loan,
            'remaining_balance': outcome.new_remaining,
            'emis_left': outcome.emis_left,
            'status': outcome.status,
        }

    @staticmethod
    def list_payments(loan: Loan):
        """Return a loan's payments in the order they were recorded."""
        return Payment.objects.filter(loan=loan).order_by('sequence')
