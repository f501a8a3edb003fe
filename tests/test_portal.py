"""
Tests for the server-rendered loan portal.
"""

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase

from apps.customers.models import Customer
from apps.loans.models import Loan, Payment
from apps.loans.services import LoanService, PaymentService


class PortalTests(TestCase):

    def setUp(self):
        Customer.objects.create(customer_id='cust001', name='Test User')
        self.user = get_user_model().objects.create_user('clerk', password='clerk-pass')
        self.client.force_login(self.user)

    def _lend(self):
        return LoanService.create_loan(
            customer_id='cust001',
            loan_amount=Decimal('100000'),
            loan_period_years=2,
            interest_rate_yearly=Decimal('10'),
        )

    def test_root_redirects_to_portal(self):
        response = self.client.get('/')
        self.assertRedirects(response, '/portal/')

    def test_index(self):
        response = self.client.get('/portal/')
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Lend')

    def test_lend_form_renders(self):
        response = self.client.get('/portal/lend/')
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'name="loan_amount"')

    def test_lend_creates_loan(self):
        response = self.client.post('/portal/lend/', {
            'customer_id': 'cust001',
            'loan_amount': '100000',
            'loan_period_years': '2',
            'interest_rate_yearly': '10',
        })
        self.assertEqual(response.status_code, 200)
        loan = Loan.objects.get()
        self.assertContains(response, str(loan.loan_id))
        self.assertContains(response, '120000.00')
        self.assertContains(response, '5000.00')

    def test_lend_unknown_customer_shows_error(self):
        response = self.client.post('/portal/lend/', {
            'customer_id': 'nobody',
            'loan_amount': '100000',
            'loan_period_years': '2',
            'interest_rate_yearly': '10',
        })
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'not found')
        self.assertEqual(Loan.objects.count(), 0)

    def test_lend_invalid_input_shows_form_errors(self):
        response = self.client.post('/portal/lend/', {
            'customer_id': 'cust001',
            'loan_amount': '0',
            'loan_period_years': '2',
            'interest_rate_yearly': '10',
        })
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.context['form'].errors)
        self.assertEqual(Loan.objects.count(), 0)

    def test_lend_total_beyond_money_column_shows_form_errors(self):
        response = self.client.post('/portal/lend/', {
            'customer_id': 'cust001',
            'loan_amount': '9999999999999.99',
            'loan_period_years': '30',
            'interest_rate_yearly': '100',
        })
        self.assertEqual(response.status_code, 200)
        self.assertIn('largest supported amount', str(response.context['form'].non_field_errors()))
        self.assertEqual(Loan.objects.count(), 0)

    def test_pay_records_payment(self):
        loan = self._lend()
        response = self.client.post('/portal/pay/', {
            'loan_id': str(loan.loan_id),
            'amount': '5000',
            'payment_type': 'EMI',
        })
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, '115000.00')
        self.assertEqual(response.context['result']['emis_left'], 23)
        self.assertEqual(Payment.objects.count(), 1)

    def test_pay_unknown_loan_shows_error(self):
        response = self.client.post('/portal/pay/', {
            'loan_id': 'missing',
            'amount': '5000',
            'payment_type': 'EMI',
        })
        self.assertContains(response, 'not found')
        self.assertEqual(Payment.objects.count(), 0)

    def test_ledger_page(self):
        loan = self._lend()
        PaymentService.record_payment(loan.loan_id, Decimal('5000'), 'EMI')
        response = self.client.get('/portal/ledger/', {'loan_id': str(loan.loan_id)})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['ledger']['emis_left'], 23)
        self.assertContains(response, '115000.00')

    def test_ledger_page_without_query(self):
        response = self.client.get('/portal/ledger/')
        self.assertEqual(response.status_code, 200)
        self.assertNotIn('ledger', response.context)

    def test_overview_page(self):
        self._lend()
        self._lend()
        response = self.client.get('/portal/overview/', {'customer_id': 'cust001'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['overview']['total_loans'], 2)
        self.assertContains(response, '2 loans for cust001')

    def test_overview_page_no_loans(self):
        response = self.client.get('/portal/overview/', {'customer_id': 'cust001'})
        self.assertContains(response, 'No loans found')


class PortalLoginTests(TestCase):
    """Portal pages are only served to logged-in users."""

    def setUp(self):
        Customer.objects.create(customer_id='cust001', name='Test User')
        get_user_model().objects.create_user('clerk', password='clerk-pass')

    def test_anonymous_page_redirects_to_login(self):
        for url in ('/portal/', '/portal/lend/', '/portal/pay/', '/portal/ledger/', '/portal/overview/'):
            response = self.client.get(url)
            self.assertRedirects(response, f'/accounts/login/?next={url}')

    def test_anonymous_lend_creates_nothing(self):
        response = self.client.post('/portal/lend/', {
            'customer_id': 'cust001',
            'loan_amount': '100000',
            'loan_period_years': '2',
            'interest_rate_yearly': '10',
        })
        self.assertRedirects(response, '/accounts/login/?next=/portal/lend/')
        self.assertEqual(Loan.objects.count(), 0)

    def test_anonymous_pay_records_nothing(self):
        loan = LoanService.create_loan(
            customer_id='cust001',
            loan_amount=Decimal('100000'),
            loan_period_years=2,
            interest_rate_yearly=Decimal('10'),
        )
        response = self.client.post('/portal/pay/', {
            'loan_id': str(loan.loan_id),
            'amount': '5000',
            'payment_type': 'EMI',
        })
        self.assertEqual(response.status_code, 302)
        self.assertEqual(Payment.objects.count(), 0)
        loan.refresh_from_db()
        self.assertEqual(loan.remaining_amount, Decimal('120000.00'))

    def test_login_page_renders(self):
        response = self.client.get('/accounts/login/')
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'name="username"')

    def test_login_then_portal(self):
        response = self.client.post('/accounts/login/', {
            'username': 'clerk',
            'password': 'clerk-pass',
        })
        self.assertRedirects(response, '/portal/')

    def test_wrong_password_stays_on_login(self):
        response = self.client.post('/accounts/login/', {
            'username': 'clerk',
            'password': 'wrong',
        })
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "didn&#x27;t match")
