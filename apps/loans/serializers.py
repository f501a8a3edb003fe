"""
Loan serializers for the Loan Ledger Service.
"""

from decimal import Decimal

from rest_framework import serializers

from apps.core.utils import compute_loan_terms
from apps.loans.models import Payment


class CreateLoanSerializer(serializers.Serializer):
    """Serializer for loan origination request."""

    customer_id = serializers.CharField(
        max_length=64,
        required=True,
        allow_blank=False,
        help_text="Registered customer's ID.",
    )
    loan_amount = serializers.DecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0.01'),
        required=True,
        help_text="Principal to lend.",
    )
    loan_period_years = serializers.IntegerField(
        min_value=1,
        max_value=30,
        required=True,
        help_text="Loan period in whole years.",
    )
    interest_rate_yearly = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal('0.01'),
        max_value=Decimal('100'),
        required=True,
        help_text="Annual simple interest rate (%).",
    )

    def validate(self, attrs):
        """Reject terms whose EMI would round down to zero."""
        try:
            compute_loan_terms(
                attrs['loan_amount'],
                attrs['loan_period_years'],
                attrs['interest_rate_yearly'],
            )
        except ValueError as exc:
            raise serializers.ValidationError(str(exc))
        return attrs


class CreateLoanResponseSerializer(serializers.Serializer):
    """Serializer for loan origination response."""

    loan_id = serializers.UUIDField()
    customer_id = serializers.CharField()
    total_amount_payable = serializers.DecimalField(max_digits=15, decimal_places=2)
    monthly_emi = serializers.DecimalField(max_digits=15, decimal_places=2)


class RecordPaymentSerializer(serializers.Serializer):
    """Serializer for payment request."""

    amount = serializers.DecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0.01'),
        required=True,
        help_text="Amount paid.",
    )
    payment_type = serializers.ChoiceField(
        choices=Payment.PaymentType.choices,
        required=True,
        help_text="EMI or LUMP_SUM.",
    )


class RecordPaymentResponseSerializer(serializers.Serializer):
    """Serializer for payment response."""

    payment_id = serializers.UUIDField()
    loan_id = serializers.UUIDField()
    message = serializers.CharField()
    remaining_balance = serializers.DecimalField(max_digits=15, decimal_places=2)
    emis_left = serializers.IntegerField()
    status = serializers.CharField()


class TransactionSerializer(serializers.ModelSerializer):
    """A single payment as listed in the ledger."""

    class Meta:
        model = Payment
        fields = ('payment_id', 'amount', 'payment_type', 'payment_date')


class LedgerResponseSerializer(serializers.Serializer):
    """Serializer for the per-loan ledger response."""

    loan_id = serializers.UUIDField()
    customer_id = serializers.CharField()
    principal = serializers.DecimalField(max_digits=15, decimal_places=2)
    total_amount = serializers.DecimalField(max_digits=15, decimal_places=2)
    monthly_emi = serializers.DecimalField(max_digits=15, decimal_places=2)
    amount_paid = serializers.DecimalField(max_digits=17, decimal_places=2)
    balance_amount = serializers.DecimalField(max_digits=15, decimal_places=2)
    emis_left = serializers.IntegerField()
    status = serializers.CharField()
    transactions = TransactionSerializer(many=True)


class LoanSummarySerializer(serializers.Serializer):
    """Serializer for one loan in the customer overview."""

    loan_id = serializers.UUIDField()
    principal = serializers.DecimalField(max_digits=15, decimal_places=2)
    total_amount = serializers.DecimalField(max_digits=15, decimal_places=2)
    total_interest = serializers.DecimalField(max_digits=15, decimal_places=2)
    emi_amount = serializers.DecimalField(max_digits=15, decimal_places=2)
    amount_paid = serializers.DecimalField(max_digits=17, decimal_places=2)
    balance_amount = serializers.DecimalField(max_digits=15, decimal_places=2)
    emis_left = serializers.IntegerField()
    status = serializers.CharField()


class CustomerOverviewResponseSerializer(serializers.Serializer):
    """Serializer for the customer overview response."""

    customer_id = serializers.CharField()
    total_loans = serializers.IntegerField()
    loans = LoanSummarySerializer(many=True)
