"""
Forms backing the loan portal pages.
"""

from decimal import Decimal

from django import forms

from apps.core.utils import compute_loan_terms
from apps.loans.models import Payment


class LendForm(forms.Form):
    customer_id = forms.CharField(max_length=64, label='Customer ID')
    loan_amount = forms.DecimalField(
        max_digits=15, decimal_places=2, min_value=Decimal('0.01'),
        label='Loan amount',
    )
    loan_period_years = forms.IntegerField(
        min_value=1, max_value=30, label='Loan period (years)',
    )
    interest_rate_yearly = forms.DecimalField(
        max_digits=5, decimal_places=2,
        min_value=Decimal('0.01'), max_value=Decimal('100'),
        label='Interest rate (%)',
    )

    def clean(self):
        cleaned_data = super().clean()
        fields = ('loan_amount', 'loan_period_years', 'interest_rate_yearly')
        if all(cleaned_data.get(name) is not None for name in fields):
            try:
                compute_loan_terms(*(cleaned_data[name] for name in fields))
            except ValueError as exc:
                raise forms.ValidationError(str(exc))
        return cleaned_data


class PaymentForm(forms.Form):
    loan_id = forms.CharField(max_length=64, label='Loan ID')
    amount = forms.DecimalField(
        max_digits=15, decimal_places=2, min_value=Decimal('0.01'),
        label='Amount',
    )
    payment_type = forms.ChoiceField(
        choices=Payment.PaymentType.choices,
        initial=Payment.PaymentType.LUMP_SUM,
        label='Payment type',
    )


class LedgerLookupForm(forms.Form):
    loan_id = forms.CharField(max_length=64, label='Loan ID')


class OverviewLookupForm(forms.Form):
    customer_id = forms.CharField(max_length=64, label='Customer ID')
