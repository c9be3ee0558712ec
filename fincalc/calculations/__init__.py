"""
Financial Formula Library

Standalone financial-mathematics formulas. Each function is pure and
applies its own rounding convention.
"""

from fincalc.calculations import amortization, capital, cash_flows, returns, time_value
from fincalc.calculations.amortization import PaymentType, calculate_amortization
from fincalc.calculations.capital import (
    calculate_capm,
    calculate_leverage_ratio,
    calculate_stock_pv,
    calculate_wacc,
)
from fincalc.calculations.cash_flows import (
    calculate_npv,
    calculate_payback_period,
    calculate_profitability_index,
)
from fincalc.calculations.returns import (
    calculate_cagr,
    calculate_inflation_adjusted_return,
    calculate_roi,
    calculate_rule_of_72,
)
from fincalc.calculations.rounding import DomainError, InvalidPaymentTypeError
from fincalc.calculations.time_value import (
    calculate_compound_interest,
    calculate_discount_factors,
    calculate_fv,
    calculate_pmt,
    calculate_pv,
)

__all__ = [
    "amortization",
    "capital",
    "cash_flows",
    "returns",
    "time_value",
    "PaymentType",
    "DomainError",
    "InvalidPaymentTypeError",
    "calculate_amortization",
    "calculate_capm",
    "calculate_cagr",
    "calculate_compound_interest",
    "calculate_discount_factors",
    "calculate_fv",
    "calculate_inflation_adjusted_return",
    "calculate_leverage_ratio",
    "calculate_npv",
    "calculate_payback_period",
    "calculate_pmt",
    "calculate_profitability_index",
    "calculate_pv",
    "calculate_roi",
    "calculate_rule_of_72",
    "calculate_stock_pv",
    "calculate_wacc",
]
