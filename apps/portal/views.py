"""
Loan portal views.

Server-rendered pages for lending, paying and looking up loans.
Every page requires a logged-in user. Each page only marshals form
input into a service call and renders the result or the error; the
ledger rules live in the service layer.
"""

import logging

from django.contrib.auth.decorators import login_required
from django.shortcuts import render
from rest_framework.exceptions import APIException

from apps.loans.services import LoanService, PaymentService
from apps.portal.forms import (
    LedgerLookupForm,
    LendForm,
    OverviewLookupForm,
    PaymentForm,
)

logger = logging.getLogger(__name__)


def _error_message(exc: APIException) -> str:
    return str(exc.detail)


@login_required
def index(request):
    return render(request, 'portal/index.html')


@login_required
def lend(request):
    """Originate a loan from the lend form."""
    context = {}
    form = LendForm(request.POST or None)

    if request.method == 'POST' and form.is_valid():
        try:
            context['loan'] = LoanService.create_loan(**form.cleaned_data)
            form = LendForm()
        except APIException as exc:
            context['error'] = _error_message(exc)

    context['form'] = form
    return render(request, 'portal/lend.html', context)


@login_required
def pay(request):
    """Record a payment from the payment form."""
    context = {}
    form = PaymentForm(request.POST or None)

    if request.method == 'POST' and form.is_valid():
        try:
            context['result'] = PaymentService.record_payment(**form.cleaned_data)
        except APIException as exc:
            context['error'] = _error_message(exc)

    context['form'] = form
    return render(request, 'portal/pay.html', context)


@login_required
def ledger(request):
    """Show a loan's ledger for the loan ID in the query string."""
    context = {}
    form = LedgerLookupForm(request.GET or None)

    if form.is_valid():
        try:
            context['ledger'] = LoanService.get_ledger(form.cleaned_data['loan_id'])
        except APIException as exc:
            context['error'] = _error_message(exc)

    context['form'] = form
    return render(request, 'portal/ledger.html', context)


@login_required
def overview(request):
    """Show every loan of the customer in the query string."""
    context = {}
    form = OverviewLookupForm(request.GET or None)

    if form.is_valid():
        try:
            context['overview'] = LoanService.get_customer_overview(
                form.cleaned_data['customer_id']
            )
        except APIException as exc:
            context['error'] = _error_message(exc)

    context['form'] = form
    return render(request, 'portal/overview.html', context)
