"""
Financial formula API endpoints.

Each endpoint accepts the formula inputs as JSON and returns the result.
"""

import logging
from typing import Callable, List, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from fincalc.calculations import (
    PaymentType,
    calculate_amortization,
    calculate_cagr,
    calculate_capm,
    calculate_compound_interest,
    calculate_discount_factors,
    calculate_fv,
    calculate_inflation_adjusted_return,
    calculate_leverage_ratio,
    calculate_npv,
    calculate_payback_period,
    calculate_pmt,
    calculate_profitability_index,
    calculate_pv,
    calculate_roi,
    calculate_rule_of_72,
    calculate_stock_pv,
    calculate_wacc,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class CalculationResponse(BaseModel):
    """Result of a single formula."""

    result: Union[float, List[float]]


def _run(func: Callable, *args) -> CalculationResponse:
    """Call a formula and map ValueError to HTTP 400."""
    try:
        return CalculationResponse(result=func(*args))
    except ValueError as e:
        logger.warning(f"Rejected {func.__name__}{args}: {e}")
        raise HTTPException(status_code=400, detail=str(e))


class TimeValueInput(BaseModel):
    """Input for PV and FV."""

    rate: float
    cash_flow: float
    period: float


@router.post("/pv", response_model=CalculationResponse)
async def present_value(inputs: TimeValueInput):
    """Calculate present value."""
    return _run(calculate_pv, inputs.rate, inputs.cash_flow, inputs.period)


@router.post("/fv", response_model=CalculationResponse)
async def future_value(inputs: TimeValueInput):
    """Calculate future value."""
    return _run(calculate_fv, inputs.rate, inputs.cash_flow, inputs.period)


class DiscountedCashFlowInput(BaseModel):
    """Input for NPV and profitability index."""

    rate: float
    initial_investment: float
    cash_flows: List[float]


@router.post("/npv", response_model=CalculationResponse)
async def net_present_value(inputs: DiscountedCashFlowInput):
    """Calculate net present value."""
    return _run(
        calculate_npv, inputs.rate, inputs.initial_investment, inputs.cash_flows
    )


@router.post("/profitability-index", response_model=CalculationResponse)
async def profitability_index(inputs: DiscountedCashFlowInput):
    """Calculate profitability index."""
    return _run(
        calculate_profitability_index,
        inputs.rate,
        inputs.initial_investment,
        inputs.cash_flows,
    )


class ROIInput(BaseModel):
    """Input for ROI calculation."""

    initial_investment: float
    earnings: float


@router.post("/roi", response_model=CalculationResponse)
async def return_on_investment(inputs: ROIInput):
    """Calculate return on investment."""
    return _run(calculate_roi, inputs.initial_investment, inputs.earnings)


class PaybackPeriodInput(BaseModel):
    """Input for payback period calculation."""

    number_of_periods: int
    initial_investment: float
    cash_flows: List[float] = Field(min_length=1)


@router.post("/payback-period", response_model=CalculationResponse)
async def payback_period(inputs: PaybackPeriodInput):
    """Calculate payback period."""
    return _run(
        calculate_payback_period,
        inputs.number_of_periods,
        inputs.initial_investment,
        inputs.cash_flows,
    )


class AmortizationInput(BaseModel):
    """Input for amortization calculation."""

    principal: float
    rate: float
    period: float
    payment_type: PaymentType
    pay_at_beginning: bool = False


@router.post("/amortization", response_model=CalculationResponse)
async def amortization(inputs: AmortizationInput):
    """Calculate the monthly payment that amortizes a loan."""
    return _run(
        calculate_amortization,
        inputs.principal,
        inputs.rate,
        inputs.period,
        inputs.payment_type,
        inputs.pay_at_beginning,
    )


class DiscountFactorsInput(BaseModel):
    """Input for discount factor calculation."""

    rate: float
    num_of_periods: int


@router.post("/discount-factors", response_model=CalculationResponse)
async def discount_factors(inputs: DiscountFactorsInput):
    """Calculate discount factors."""
    return _run(calculate_discount_factors, inputs.rate, inputs.num_of_periods)


class CompoundInterestInput(BaseModel):
    """Input for compound interest calculation."""

    rate: float
    num_of_compoundings: float
    principal: float
    num_of_periods: float


@router.post("/compound-interest", response_model=CalculationResponse)
async def compound_interest(inputs: CompoundInterestInput):
    """Calculate compound interest balance."""
    return _run(
        calculate_compound_interest,
        inputs.rate,
        inputs.num_of_compoundings,
        inputs.principal,
        inputs.num_of_periods,
    )


class CAGRInput(BaseModel):
    """Input for CAGR calculation."""

    beginning_value: float
    ending_value: float
    num_of_periods: float


@router.post("/cagr", response_model=CalculationResponse)
async def compound_annual_growth_rate(inputs: CAGRInput):
    """Calculate compound annual growth rate."""
    return _run(
        calculate_cagr,
        inputs.beginning_value,
        inputs.ending_value,
        inputs.num_of_periods,
    )


class LeverageRatioInput(BaseModel):
    """Input for leverage ratio calculation."""

    total_liabilities: float
    total_debts: float
    total_income: float


@router.post("/leverage-ratio", response_model=CalculationResponse)
async def leverage_ratio(inputs: LeverageRatioInput):
    """Calculate leverage ratio."""
    return _run(
        calculate_leverage_ratio,
        inputs.total_liabilities,
        inputs.total_debts,
        inputs.total_income,
    )


class RuleOf72Input(BaseModel):
    """Input for Rule of 72."""

    rate: float


@router.post("/rule-of-72", response_model=CalculationResponse)
async def rule_of_72(inputs: RuleOf72Input):
    """Estimate years to double money."""
    return _run(calculate_rule_of_72, inputs.rate)


class PMTInput(BaseModel):
    """Input for annuity payment calculation."""

    rate: float
    num_of_payments: float
    principal: float


@router.post("/pmt", response_model=CalculationResponse)
async def payment(inputs: PMTInput):
    """Calculate annuity payment."""
    return _run(calculate_pmt, inputs.rate, inputs.num_of_payments, inputs.principal)


class InflationAdjustedReturnInput(BaseModel):
    """Input for inflation-adjusted return calculation."""

    investment_return: float
    inflation_rate: float


@router.post("/inflation-adjusted-return", response_model=CalculationResponse)
async def inflation_adjusted_return(inputs: InflationAdjustedReturnInput):
    """Calculate inflation-adjusted return."""
    return _run(
        calculate_inflation_adjusted_return,
        inputs.investment_return,
        inputs.inflation_rate,
    )


class WACCInput(BaseModel):
    """Input for WACC calculation."""

    market_value_of_equity: float
    market_value_of_debt: float
    cost_of_equity: float
    cost_of_debt: float
    tax_rate: float


@router.post("/wacc", response_model=CalculationResponse)
async def weighted_average_cost_of_capital(inputs: WACCInput):
    """Calculate weighted average cost of capital."""
    return _run(
        calculate_wacc,
        inputs.market_value_of_equity,
        inputs.market_value_of_debt,
        inputs.cost_of_equity,
        inputs.cost_of_debt,
        inputs.tax_rate,
    )


class CAPMInput(BaseModel):
    """Input for CAPM calculation."""

    risk_free_rate: float
    beta: float
    expected_market_return: float


@router.post("/capm", response_model=CalculationResponse)
async def capital_asset_pricing_model(inputs: CAPMInput):
    """Calculate expected return with CAPM."""
    return _run(
        calculate_capm,
        inputs.risk_free_rate,
        inputs.beta,
        inputs.expected_market_return,
    )


class StockPVInput(BaseModel):
    """Input for dividend growth stock valuation."""

    growth_rate: float
    required_return: float
    current_dividend: float


@router.post("/stock-pv", response_model=CalculationResponse)
async def stock_present_value(inputs: StockPVInput):
    """Value a stock with constantly growing dividends."""
    return _run(
        calculate_stock_pv,
        inputs.growth_rate,
        inputs.required_return,
        inputs.current_dividend,
    )
