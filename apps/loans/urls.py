"""
Loan URL configuration.
"""

from django.urls import path

from apps.loans.views import CreateLoanView, LoanLedgerView, RecordPaymentView

urlpatterns = [
    path('loans', CreateLoanView.as_view(), name='create-loan'),
    path(
        'loans/<str:loan_id>/payments',
        RecordPaymentView.as_view(),
        name='record-payment',
    ),
    path(
        'loans/<str:loan_id>/ledger',
        LoanLedgerView.as_view(),
        name='loan-ledger',
    ),
]
