"""
Time Value of Money Calculations

Present value, future value, compound interest, annuity payment and
discount factor calculations.

Rates are whole-number percentages (e.g., 5 for 5%).
"""

from typing import List

import numpy as np

from fincalc.calculations.rounding import (
    DomainError,
    ceil_integral,
    domain_checked,
    round_to_cents,
)


@domain_checked
def calculate_pv(rate: float, cash_flow: float, period: float) -> float:
    """
    Calculate Present Value (PV).

    The current worth of a future sum of money given a rate of return.

    Args:
        rate: Discount rate per period as percent (e.g., 5 for 5%)
        cash_flow: Future amount
        period: Number of periods until the cash flow

    Returns:
        Present value rounded to 2 decimals
    """
    rate = rate / 100
    pv = cash_flow / (1 + rate) ** period
    return round_to_cents(pv)


@domain_checked
def calculate_fv(rate: float, cash_flow: float, period: float) -> float:
    """
    Calculate Future Value (FV).

    The value at a future date of a sum held today.

    Args:
        rate: Growth rate per period as percent
        cash_flow: Amount today
        period: Number of periods

    Returns:
        Future value rounded to 2 decimals
    """
    rate = rate / 100
    fv = cash_flow * (1 + rate) ** period
    return round_to_cents(fv)


@domain_checked
def calculate_compound_interest(
    rate: float, num_of_compoundings: float, principal: float, num_of_periods: float
) -> float:
    """
    Calculate the balance of a deposit under compound interest.

    Args:
        rate: Nominal annual rate as percent
        num_of_compoundings: Compounding events per period (e.g., 4 for quarterly)
        principal: Initial deposit
        num_of_periods: Number of periods (years)

    Returns:
        Ending balance rounded to 2 decimals
    """
    ci = principal * (1 + ((rate / 100) / num_of_compoundings)) ** (
        num_of_compoundings * num_of_periods
    )
    return round_to_cents(ci)


@domain_checked
def calculate_pmt(rate: float, num_of_payments: float, principal: float) -> float:
    """
    Calculate the annuity payment per compounding period.

    The sign convention is Excel's: a negative principal (money received)
    yields a positive payment.

    Args:
        rate: Rate per payment period as percent
        num_of_payments: Number of payments
        principal: Present value of the annuity

    Returns:
        Payment rounded to 2 decimals
    """
    rate = rate / 100
    pmt = -(principal * rate) / (1 - (1 + rate) ** -num_of_payments)
    return round_to_cents(pmt)


@domain_checked
def calculate_discount_factors(rate: float, num_of_periods: int) -> List[float]:
    """
    Calculate discount factors for consecutive periods.

    Produces num_of_periods - 1 factors. The first factor is discounted at
    exponent 0, so it is always 1.

    Args:
        rate: Discount rate per period as percent
        num_of_periods: Number of periods, at least 1

    Returns:
        Discount factors, each rounded up to 3 decimals
    """
    if num_of_periods < 1:
        raise ValueError("num_of_periods must be at least 1")

    exponents = np.arange(num_of_periods - 1, dtype=np.float64)

    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        factors = 1 / np.power(1 + rate / 100, exponents)

    if not np.all(np.isfinite(factors)):
        raise DomainError(f"Discount factors are undefined at rate {rate}")

    return [ceil_integral(factor * 1000) / 1000 for factor in factors.tolist()]
