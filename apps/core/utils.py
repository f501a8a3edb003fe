"""
Loan accounting helpers for the Loan Ledger Service.

Pure functions with no database access. Interest is simple
(non-compounding) and the EMI is fixed when the loan is created.
All financial calculations use Python's Decimal for precision.
"""

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal, getcontext
from typing import Iterable, NamedTuple

# Set high precision for intermediate financial calculations
getcontext().prec = 28

TWO_PLACES = Decimal('0.01')
ZERO = Decimal('0.00')

# Largest amount a 15-digit, 2-place money column holds
MAX_MONEY = Decimal('9999999999999.99')

STATUS_ACTIVE = 'ACTIVE'
STATUS_PAID_OFF = 'PAID_OFF'


class LoanTerms(NamedTuple):
    interest: Decimal
    total_payable: Decimal
    emi: Decimal


class PaymentOutcome(NamedTuple):
    new_remaining: Decimal
    status: str
    emis_left: int


def to_money(value) -> Decimal:
    """Coerce int/float/str/Decimal to a Decimal rounded to cents."""
    return Decimal(str(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def compute_loan_terms(principal, years: int, annual_rate) -> LoanTerms:
    """
    Calculate simple-interest loan terms.

    interest      = P × Y × (R / 100)
    total_payable = P + interest
    emi           = total_payable / (Y × 12)

    Where:
        P = principal (loan amount)
        Y = loan period in whole years
        R = annual interest rate as a percentage

    Args:
        principal: Loan amount (must be > 0). Accepts Decimal, float, int or str.
        years: Loan period in years (integer, must be >= 1).
        annual_rate: Annual interest rate as percentage (e.g., 10 for 10%).

    Returns:
        LoanTerms with every amount quantized to 2 decimal places (ROUND_HALF_UP).

    Raises:
        ValueError: If inputs are invalid, the EMI rounds down to zero or
            the total payable does not fit a money column.
    """
    principal = Decimal(str(principal))
    annual_rate = Decimal(str(annual_rate))

    if principal <= 0:
        raise ValueError("Principal must be greater than 0.")
    if isinstance(years, bool) or int(years) != years or years < 1:
        raise ValueError("Loan period must be a whole number of years, at least 1.")
    if annual_rate <= 0:
        raise ValueError("Interest rate must be greater than 0.")

    years = int(years)
    interest = (principal * years * annual_rate / Decimal('100')).quantize(
        TWO_PLACES, rounding=ROUND_HALF_UP
    )
    total_payable = (principal + interest).quantize(
        TWO_PLACES, rounding=ROUND_HALF_UP
    )
    emi = (total_payable / Decimal(years * 12)).quantize(
        TWO_PLACES, rounding=ROUND_HALF_UP
    )

    if emi <= 0:
        raise ValueError("Loan amount is too small for the requested period.")
    if total_payable > MAX_MONEY:
        raise ValueError("Total payable exceeds the largest supported amount.")

    return LoanTerms(interest=interest, total_payable=total_payable, emi=emi)


def calculate_emis_left(balance, emi) -> int:
    """
    Number of EMIs still needed to clear the balance: ceil(balance / emi).

    This is a derived countdown, not a schedule; a lump-sum payment
    lowers it by however many EMIs the amount covers.
    """
    balance = Decimal(str(balance))
    emi = Decimal(str(emi))

    if balance <= 0:
        return 0
    if emi <= 0:
        raise ValueError("EMI must be greater than 0.")

    return int((balance / emi).to_integral_value(rounding=ROUND_CEILING))


def apply_payment(current_remaining, emi, payment_amount) -> PaymentOutcome:
    """
    Apply a payment to the outstanding balance.

    Overpayment is accepted and the balance is floored at zero;
    there is no refund or credit.

    Args:
        current_remaining: Outstanding balance before the payment.
        emi: The loan's fixed monthly installment.
        payment_amount: Amount paid (must be > 0).

    Returns:
        PaymentOutcome with the new balance, loan status and EMIs left.
    """
    current_remaining = to_money(current_remaining)
    payment_amount = to_money(payment_amount)

    if payment_amount <= 0:
        raise ValueError("Payment amount must be greater than 0.")

    new_remaining = max(ZERO, current_remaining - payment_amount)
    status = STATUS_PAID_OFF if new_remaining == 0 else STATUS_ACTIVE

    return PaymentOutcome(
        new_remaining=new_remaining,
        status=status,
        emis_left=calculate_emis_left(new_remaining, emi),
    )


def summarize_loan(loan, payments: Iterable) -> dict:
    """
    Build the numeric summary of a loan from its stored terms and payments.

    total_amount is recomputed from principal, period and rate rather
    than read back; it always equals the loan's stored total_amount.

    Args:
        loan: Object exposing principal_amount, loan_period_years,
              interest_rate, monthly_emi and remaining_amount.
        payments: Iterable of objects exposing amount.

    Returns:
        Dict with principal, total_amount, total_interest, monthly_emi,
        amount_paid, balance and emis_left.
    """
    terms = compute_loan_terms(
        loan.principal_amount,
        loan.loan_period_years,
        loan.interest_rate,
    )
    amount_paid = sum((to_money(p.amount) for p in payments), ZERO)
    balance = to_money(loan.remaining_amount)

    return {
        'principal': to_money(loan.principal_amount),
        'total_amount': terms.total_payable,
        'total_interest': terms.interest,
        'monthly_emi': to_money(loan.monthly_emi),
        'amount_paid': amount_paid,
        'balance': balance,
        'emis_left': calculate_emis_left(balance, loan.monthly_emi),
    }
