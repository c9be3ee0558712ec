"""
Return Calculations

ROI, CAGR, inflation-adjusted return and the Rule of 72.
"""

from fincalc.calculations.rounding import (
    domain_checked,
    round_half_away,
    round_to_cents,
)


@domain_checked
def calculate_roi(initial_investment: float, earnings: float) -> float:
    """
    Calculate Return On Investment (ROI) as a percent.

    Args:
        initial_investment: Amount invested (sign is ignored)
        earnings: Total amount returned by the investment

    Returns:
        ROI percent rounded to 2 decimals
    """
    roi = (earnings - abs(initial_investment)) / abs(initial_investment) * 100
    return round_to_cents(roi)


@domain_checked
def calculate_cagr(
    beginning_value: float, ending_value: float, num_of_periods: float
) -> float:
    """
    Calculate Compound Annual Growth Rate (CAGR) as a percent.

    Args:
        beginning_value: Value at the start
        ending_value: Value at the end
        num_of_periods: Number of years between the two values

    Returns:
        CAGR percent rounded to 2 decimals
    """
    cagr = (ending_value / beginning_value) ** (1 / num_of_periods) - 1
    return round_half_away(cagr * 10000) / 100


@domain_checked
def calculate_inflation_adjusted_return(
    investment_return: float, inflation_rate: float
) -> float:
    """
    Calculate the real return of an investment after inflation.

    Args:
        investment_return: Nominal return as decimal (e.g., 0.08 for 8%)
        inflation_rate: Inflation over the same period as decimal

    Returns:
        Real return as percent, unrounded
    """
    return 100 * (((1 + investment_return) / (1 + inflation_rate)) - 1)


@domain_checked
def calculate_rule_of_72(rate: float) -> float:
    """Approximate number of years to double money at rate percent."""
    return 72 / rate
