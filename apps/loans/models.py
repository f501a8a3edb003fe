"""
Loan and payment models for the Loan Ledger Service.
"""

import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.core.utils import calculate_emis_left


class Loan(models.Model):
    """
    A simple-interest loan owned by a customer.

    Terms (principal, rate, period, total and EMI) are fixed at
    origination. Only remaining_amount and status change, and only
    when a payment is applied.
    """

    class Status(models.TextChoices):
        ACTIVE = 'ACTIVE', 'Active'
        PAID_OFF = 'PAID_OFF', 'Paid off'

    loan_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    customer = models.ForeignKey(
        'customers.Customer',
        on_delete=models.PROTECT,
        related_name='loans',
        db_column='customer_id',
        help_text="The customer who owns this loan."
    )
    principal_amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
        help_text="Amount lent.",
    )
    total_amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        help_text="Principal plus simple interest for the full period.",
    )
    remaining_amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Outstanding balance, floored at zero.",
    )
    interest_rate = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
        help_text="Annual interest rate (percentage).",
    )
    loan_period_years = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text="Loan period in years."
    )
    monthly_emi = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        help_text="Fixed monthly installment.",
    )
    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.ACTIVE,
        db_index=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'loans'
        ordering = ['created_at']
        indexes = [
            models.Index(
                fields=['customer', 'created_at'],
                name='idx_loan_customer_created'
            ),
        ]

    def __str__(self):
        return (
            f"Loan {self.loan_id} - Customer: {self.customer_id} "
            f"- Amount: {self.principal_amount}"
        )

    @property
    def emis_left(self):
        """EMIs still needed to clear the remaining amount."""
        return calculate_emis_left(self.remaining_amount, self.monthly_emi)


class Payment(models.Model):
    """A single payment applied to a loan. Never changed once written."""

    class PaymentType(models.TextChoices):
        EMI = 'EMI', 'EMI'
        LUMP_SUM = 'LUMP_SUM', 'Lump sum'

    payment_id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    loan = models.ForeignKey(
        Loan,
        on_delete=models.PROTECT,
        related_name='payments',
        db_column='loan_id',
    )
    amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
    )
    payment_type = models.CharField(
        max_length=10,
        choices=PaymentType.choices,
    )
    payment_date = models.DateTimeField(auto_now_add=True, db_index=True)
    sequence = models.PositiveIntegerField(
        help_text="Position of this payment in the loan's history, from 1.",
    )

    class Meta:
        db_table = 'payments'
        ordering = ['payment_date', 'sequence']
        constraints = [
            models.UniqueConstraint(
                fields=['loan', 'sequence'],
                name='uniq_payment_loan_sequence'
            ),
        ]

    def __str__(self):
        return f"Payment {self.payment_id} - {self.payment_type} {self.amount}"
