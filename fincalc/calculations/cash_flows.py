"""
Cash Flow Calculations

NPV, profitability index and payback period over a sequence of periodic
cash flows. The first cash flow is discounted one period after the initial
investment.
"""

from typing import List, Sequence

from fincalc.calculations.rounding import domain_checked, round_to_cents


def _discounted(rate: float, cash_flows: Sequence[float]) -> List[float]:
    """Discount each cash flow, starting at exponent 1."""
    return [cf / (1 + rate) ** (period + 1) for period, cf in enumerate(cash_flows)]


@domain_checked
def calculate_npv(
    rate: float, initial_investment: float, cash_flows: Sequence[float]
) -> float:
    """
    Calculate NPV (Net Present Value).

    Args:
        rate: Discount rate as percent (e.g., 10 for 10%)
        initial_investment: Investment at period 0 (usually negative)
        cash_flows: Cash flows for periods 1..n

    Returns:
        NPV rounded to 2 decimals
    """
    rate = rate / 100
    npv = initial_investment
    for pv in _discounted(rate, cash_flows):
        npv += pv
    return round_to_cents(npv)


@domain_checked
def calculate_profitability_index(
    rate: float, initial_investment: float, cash_flows: Sequence[float]
) -> float:
    """
    Calculate Profitability Index (PI).

    Ratio of the present value of future cash flows to the investment.

    Args:
        rate: Discount rate as percent
        initial_investment: Investment at period 0 (sign is ignored)
        cash_flows: Cash flows for periods 1..n

    Returns:
        PI rounded to 2 decimals
    """
    total_of_pvs = 0.0
    for period, cf in enumerate(cash_flows):
        discount_factor = 1 / (1 + rate / 100) ** (period + 1)
        total_of_pvs += cf * discount_factor

    pi = total_of_pvs / abs(initial_investment)
    return round_to_cents(pi)


@domain_checked
def calculate_payback_period(
    number_of_periods: int, initial_investment: float, cash_flows: Sequence[float]
) -> float:
    """
    Calculate Payback Period (PP).

    Length of time required to recover the cost of an investment.

    Args:
        number_of_periods: 0 for even cash flows, otherwise the number of
            projected periods
        initial_investment: Investment at period 0 (negative)
        cash_flows: For even cash flows, a single per-period amount;
            otherwise the projected cash flow of each period

    Returns:
        Payback period in periods, unrounded
    """
    # Even cash flows
    if number_of_periods == 0:
        return abs(initial_investment / cash_flows[0])

    cumulative_cash_flow = initial_investment
    periods = 1.0

    for cf in cash_flows:
        cumulative_cash_flow += cf

        if cumulative_cash_flow > 0:
            # Interpolate within the period that recovers the investment
            periods += (cumulative_cash_flow - cf) / cf
            break
        periods += 1

    return periods
