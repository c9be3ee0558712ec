"""
Capital Structure and Valuation Calculations

Leverage ratio, WACC, CAPM and dividend growth stock valuation.
"""

from fincalc.calculations.rounding import domain_checked, round_half_away


@domain_checked
def calculate_leverage_ratio(
    total_liabilities: float, total_debts: float, total_income: float
) -> float:
    """Calculate Leverage Ratio (LR), unrounded."""
    return (total_liabilities + total_debts) / total_income


@domain_checked
def calculate_wacc(
    market_value_of_equity: float,
    market_value_of_debt: float,
    cost_of_equity: float,
    cost_of_debt: float,
    tax_rate: float,
) -> float:
    """
    Calculate Weighted Average Cost of Capital (WACC).

    e.g., equity of 600,000, debt of 400,000, cost of equity 6%, cost of
    debt 5% and tax rate 35% gives a WACC of 4.9%.

    Args:
        market_value_of_equity: Market value of equity (E)
        market_value_of_debt: Market value of debt (D)
        cost_of_equity: Cost of equity as percent (Re)
        cost_of_debt: Pre-tax cost of debt as percent (Rd)
        tax_rate: Corporate tax rate as percent (T)

    Returns:
        WACC percent rounded to 1 decimal
    """
    e = market_value_of_equity
    d = market_value_of_debt
    v = market_value_of_equity + market_value_of_debt

    wacc = ((e / v) * cost_of_equity / 100) + (
        ((d / v) * cost_of_debt / 100) * (1 - tax_rate / 100)
    )
    return round_half_away(wacc * 1000) / 10


@domain_checked
def calculate_capm(
    risk_free_rate: float, beta: float, expected_market_return: float
) -> float:
    """
    Calculate the expected return of an asset with CAPM.

    Args:
        risk_free_rate: Risk-free rate as percent
        beta: Asset beta
        expected_market_return: Expected market return as percent

    Returns:
        Expected return as decimal, unrounded
    """
    return risk_free_rate / 100 + beta * (
        expected_market_return / 100 - risk_free_rate / 100
    )


@domain_checked
def calculate_stock_pv(
    growth_rate: float, required_return: float, current_dividend: float
) -> float:
    """
    Value a stock whose dividend grows at a constant rate in perpetuity.

    Gordon growth model: D0 * (1 + g) / (ke - g).

    Args:
        growth_rate: Dividend growth rate as percent (g)
        required_return: Required rate of return as percent (ke)
        current_dividend: Most recent dividend (D0)

    Returns:
        Stock value rounded to the nearest integer
    """
    value = (current_dividend * (1 + growth_rate / 100)) / (
        (required_return / 100) - (growth_rate / 100)
    )
    return round_half_away(value)
