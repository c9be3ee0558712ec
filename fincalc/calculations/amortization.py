"""
Loan Amortization Calculations

Fixed periodic payment that retires a principal balance, with monthly
compounding and payments made at either the end or the beginning of each
period.
"""

import enum
from typing import Union

from fincalc.calculations.rounding import (
    InvalidPaymentTypeError,
    domain_checked,
    round_to_cents,
)


class PaymentType(str, enum.Enum):
    """Unit of the amortization term."""

    years = "years"
    months = "months"

    @classmethod
    def parse(cls, value: Union["PaymentType", str]) -> "PaymentType":
        """Coerce a value into a PaymentType, failing on anything else."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidPaymentTypeError(
                f"payment_type should be either 'years' or 'months', got {value!r}"
            ) from None


def _build_numerator(
    rate_per_period: float, num_interest_accruals: float, pay_at_beginning: bool
) -> float:
    """Build the payment numerator, one accrual fewer when paying up front."""
    if pay_at_beginning:
        # No interest accrues before the first payment
        num_interest_accruals -= 1

    return rate_per_period * (1 + rate_per_period) ** num_interest_accruals


def calculate_amortization(
    principal: float,
    rate: float,
    period: float,
    payment_type: Union[PaymentType, str],
    pay_at_beginning: bool = False,
) -> float:
    """
    Calculate the monthly payment that amortizes a loan.

    A term given in years is converted to months, so 5 years and 60 months
    produce the same payment.

    Args:
        principal: Loan principal amount
        rate: Annual interest rate as percent (e.g., 7.5 for 7.5%)
        period: Loan term, in units of payment_type
        payment_type: PaymentType.years or PaymentType.months
        pay_at_beginning: True if payments are due at the start of each month

    Returns:
        Monthly payment rounded to 2 decimals

    Raises:
        InvalidPaymentTypeError: If payment_type is not years or months
        DomainError: If the payment is undefined (e.g., zero rate)
    """
    payment_type = PaymentType.parse(payment_type)
    return _amortize(principal, rate, period, payment_type, pay_at_beginning)


@domain_checked
def _amortize(
    principal: float,
    rate: float,
    period: float,
    payment_type: PaymentType,
    pay_at_beginning: bool,
) -> float:
    """Compute the rounded monthly payment for a validated payment type."""
    rate_per_period = rate / 12 / 100

    if payment_type is PaymentType.years:
        num_payments = period * 12
    else:
        num_payments = period

    numerator = _build_numerator(rate_per_period, num_payments, pay_at_beginning)
    denominator = (1 + rate_per_period) ** num_payments - 1

    am = principal * (numerator / denominator)
    return round_to_cents(am)
