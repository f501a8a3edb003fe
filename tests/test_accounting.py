"""
Tests for the simple-interest accounting helpers.
"""

from decimal import Decimal
from itertools import permutations
from types import SimpleNamespace

from django.test import SimpleTestCase

from apps.core.utils import (
    MAX_MONEY,
    STATUS_ACTIVE,
    STATUS_PAID_OFF,
    apply_payment,
    calculate_emis_left,
    compute_loan_terms,
    summarize_loan,
)


class ComputeLoanTermsTests(SimpleTestCase):
    """Test interest, total payable and EMI calculation."""

    def test_reference_loan(self):
        """100000 over 2 years at 10% → 20000 interest, 5000 EMI."""
        terms = compute_loan_terms(Decimal('100000'), 2, Decimal('10'))
        self.assertEqual(terms.interest, Decimal('20000.00'))
        self.assertEqual(terms.total_payable, Decimal('120000.00'))
        self.assertEqual(terms.emi, Decimal('5000.00'))

    def test_emi_rounded_to_two_places(self):
        """12250 over 36 months = 340.2777… → 340.28."""
        terms = compute_loan_terms(Decimal('10000'), 3, Decimal('7.5'))
        self.assertEqual(terms.interest, Decimal('2250.00'))
        self.assertEqual(terms.total_payable, Decimal('12250.00'))
        self.assertEqual(terms.emi, Decimal('340.28'))

    def test_interest_rounded_half_up(self):
        """333.33 × 7.77% = 25.899741 → 25.90."""
        terms = compute_loan_terms(Decimal('333.33'), 1, Decimal('7.77'))
        self.assertEqual(terms.interest, Decimal('25.90'))
        self.assertEqual(terms.total_payable, Decimal('359.23'))
        self.assertEqual(terms.emi, Decimal('29.94'))

    def test_emi_times_months_close_to_total(self):
        """EMI × months stays within half a cent per installment of the total."""
        for principal, years, rate in [
            ('100000', 2, '10'),
            ('10000', 3, '7.5'),
            ('333.33', 1, '7.77'),
            ('987654.32', 30, '13.13'),
            ('50', 5, '0.01'),
        ]:
            terms = compute_loan_terms(Decimal(principal), years, Decimal(rate))
            months = years * 12
            tolerance = Decimal('0.005') * months
            self.assertLessEqual(
                abs(terms.emi * months - terms.total_payable),
                tolerance,
                f"{principal}/{years}/{rate}",
            )

    def test_interest_is_not_compounded(self):
        """Doubling the period doubles the interest exactly."""
        one = compute_loan_terms(Decimal('50000'), 1, Decimal('9'))
        two = compute_loan_terms(Decimal('50000'), 2, Decimal('9'))
        self.assertEqual(two.interest, one.interest * 2)

    def test_accepts_int_float_and_str_inputs(self):
        expected = compute_loan_terms(Decimal('100000'), 2, Decimal('10'))
        self.assertEqual(compute_loan_terms(100000, 2, 10), expected)
        self.assertEqual(compute_loan_terms(100000.0, 2, 10.0), expected)
        self.assertEqual(compute_loan_terms('100000', 2, '10'), expected)

    def test_zero_principal(self):
        with self.assertRaises(ValueError):
            compute_loan_terms(Decimal('0'), 2, Decimal('10'))

    def test_negative_principal(self):
        with self.assertRaises(ValueError):
            compute_loan_terms(Decimal('-1'), 2, Decimal('10'))

    def test_zero_years(self):
        with self.assertRaises(ValueError):
            compute_loan_terms(Decimal('1000'), 0, Decimal('10'))

    def test_fractional_years(self):
        with self.assertRaises(ValueError):
            compute_loan_terms(Decimal('1000'), 2.5, Decimal('10'))

    def test_zero_rate(self):
        with self.assertRaises(ValueError):
            compute_loan_terms(Decimal('1000'), 2, Decimal('0'))

    def test_negative_rate(self):
        with self.assertRaises(ValueError):
            compute_loan_terms(Decimal('1000'), 2, Decimal('-1'))

    def test_emi_rounding_to_zero_rejected(self):
        """0.01 over 12 months rounds to a 0.00 EMI."""
        with self.assertRaises(ValueError):
            compute_loan_terms(Decimal('0.01'), 1, Decimal('1'))

    def test_total_beyond_max_money_rejected(self):
        with self.assertRaises(ValueError):
            compute_loan_terms(Decimal('9999999999999.99'), 30, Decimal('100'))

    def test_total_at_max_money_accepted(self):
        terms = compute_loan_terms(Decimal('4999999999999.99'), 1, Decimal('100'))
        self.assertEqual(terms.total_payable, Decimal('9999999999999.98'))
        self.assertLessEqual(terms.total_payable, MAX_MONEY)


class CalculateEMIsLeftTests(SimpleTestCase):
    """EMIs left is ceil(balance / emi)."""

    def test_zero_balance(self):
        self.assertEqual(calculate_emis_left(Decimal('0'), Decimal('5000')), 0)

    def test_exact_multiple(self):
        self.assertEqual(calculate_emis_left(Decimal('115000'), Decimal('5000')), 23)

    def test_partial_installment_rounds_up(self):
        self.assertEqual(calculate_emis_left(Decimal('5000.01'), Decimal('5000')), 2)
        self.assertEqual(calculate_emis_left(Decimal('0.01'), Decimal('5000')), 1)

    def test_rounded_emi_does_not_add_an_installment(self):
        """12250 / 340.28 = 35.9997… → 36 installments."""
        self.assertEqual(calculate_emis_left(Decimal('12250.00'), Decimal('340.28')), 36)


class ApplyPaymentTests(SimpleTestCase):
    """Test balance, status and EMIs left after a payment."""

    def test_emi_payment(self):
        outcome = apply_payment(Decimal('120000.00'), Decimal('5000.00'), Decimal('5000'))
        self.assertEqual(outcome.new_remaining, Decimal('115000.00'))
        self.assertEqual(outcome.status, STATUS_ACTIVE)
        self.assertEqual(outcome.emis_left, 23)

    def test_lump_sum_skips_emis(self):
        """A lump sum shortens the countdown rather than the EMI."""
        outcome = apply_payment(Decimal('115000.00'), Decimal('5000.00'), Decimal('20000'))
        self.assertEqual(outcome.new_remaining, Decimal('95000.00'))
        self.assertEqual(outcome.emis_left, 19)

    def test_partial_payment(self):
        outcome = apply_payment(Decimal('115000.00'), Decimal('5000.00'), Decimal('2500'))
        self.assertEqual(outcome.new_remaining, Decimal('112500.00'))
        self.assertEqual(outcome.emis_left, 23)

    def test_exact_payoff(self):
        outcome = apply_payment(Decimal('115000.00'), Decimal('5000.00'), Decimal('115000'))
        self.assertEqual(outcome.new_remaining, Decimal('0.00'))
        self.assertEqual(outcome.status, STATUS_PAID_OFF)
        self.assertEqual(outcome.emis_left, 0)

    def test_overpayment_floored_at_zero(self):
        outcome = apply_payment(Decimal('100.00'), Decimal('50.00'), Decimal('150'))
        self.assertEqual(outcome.new_remaining, Decimal('0.00'))
        self.assertEqual(outcome.status, STATUS_PAID_OFF)
        self.assertEqual(outcome.emis_left, 0)

    def test_zero_payment_rejected(self):
        with self.assertRaises(ValueError):
            apply_payment(Decimal('100.00'), Decimal('50.00'), Decimal('0'))

    def test_order_of_payments_does_not_matter(self):
        """Final balance is max(0, total − Σ payments) in any order."""
        total = Decimal('120000.00')
        emi = Decimal('5000.00')
        payments = [Decimal('1000'), Decimal('25000.50'), Decimal('3333.33'), Decimal('7000')]
        expected = total - sum(payments)

        for ordering in permutations(payments):
            remaining = total
            for amount in ordering:
                remaining = apply_payment(remaining, emi, amount).new_remaining
            self.assertEqual(remaining, expected)

        batched = apply_payment(total, emi, sum(payments)).new_remaining
        self.assertEqual(batched, expected)

    def test_overpaying_sequence_ends_at_zero(self):
        remaining = Decimal('1000.00')
        for amount in [Decimal('600'), Decimal('600')]:
            outcome = apply_payment(remaining, Decimal('100.00'), amount)
            remaining = outcome.new_remaining
        self.assertEqual(remaining, Decimal('0.00'))
        self.assertEqual(outcome.status, STATUS_PAID_OFF)


class SummarizeLoanTests(SimpleTestCase):
    """Test the numeric loan summary."""

    def _loan(self, **overrides):
        fields = {
            'principal_amount': Decimal('100000.00'),
            'loan_period_years': 2,
            'interest_rate': Decimal('10.00'),
            'monthly_emi': Decimal('5000.00'),
            'remaining_amount': Decimal('110000.00'),
        }
        fields.update(overrides)
        return SimpleNamespace(**fields)

    def test_summary_fields(self):
        payments = [SimpleNamespace(amount=Decimal('5000.00'))] * 2
        summary = summarize_loan(self._loan(), payments)
        self.assertEqual(summary['principal'], Decimal('100000.00'))
        self.assertEqual(summary['total_amount'], Decimal('120000.00'))
        self.assertEqual(summary['total_interest'], Decimal('20000.00'))
        self.assertEqual(summary['monthly_emi'], Decimal('5000.00'))
        self.assertEqual(summary['amount_paid'], Decimal('10000.00'))
        self.assertEqual(summary['balance'], Decimal('110000.00'))
        self.assertEqual(summary['emis_left'], 22)

    def test_no_payments(self):
        summary = summarize_loan(self._loan(remaining_amount=Decimal('120000.00')), [])
        self.assertEqual(summary['amount_paid'], Decimal('0.00'))
        self.assertEqual(summary['emis_left'], 24)

    def test_recomputed_total_matches_origination(self):
        """The summary's total equals the total computed when the loan was made."""
        for principal, years, rate in [
            ('100000', 2, '10'),
            ('10000', 3, '7.5'),
            ('333.33', 1, '7.77'),
            ('987654.32', 30, '13.13'),
        ]:
            terms = compute_loan_terms(Decimal(principal), years, Decimal(rate))
            loan = self._loan(
                principal_amount=Decimal(principal),
                loan_period_years=years,
                interest_rate=Decimal(rate),
                monthly_emi=terms.emi,
                remaining_amount=terms.total_payable,
            )
            summary = summarize_loan(loan, [])
            self.assertEqual(summary['total_amount'], terms.total_payable)
