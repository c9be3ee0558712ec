"""
Tests for the calculation API endpoints.
"""

import importlib
import logging

import pytest


class TestHealth:
    """Test the health endpoint."""

    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_import_leaves_logging_untouched(self, monkeypatch):
        """Logging is configured only when the app runs as a script."""
        import fincalc.main

        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        importlib.reload(fincalc.main)
        assert calls == []


class TestCalculationEndpoints:
    """Test formula endpoints."""

    @pytest.mark.parametrize("path,payload,expected", [
        ("/pv", {"rate": 5, "cash_flow": 100, "period": 1}, 95.24),
        ("/fv", {"rate": 0.5, "cash_flow": 1000, "period": 12}, 1061.68),
        (
            "/npv",
            {
                "rate": 10,
                "initial_investment": -500000,
                "cash_flows": [200000, 300000, 200000],
            },
            80015.03,
        ),
        ("/roi", {"initial_investment": -55000, "earnings": 60000}, 9.09),
        (
            "/payback-period",
            {
                "number_of_periods": 5,
                "initial_investment": -50,
                "cash_flows": [10, 13, 16, 19, 22],
            },
            3.4210526315789473,
        ),
        (
            "/compound-interest",
            {
                "rate": 4.3,
                "num_of_compoundings": 4,
                "principal": 1500,
                "num_of_periods": 6,
            },
            1938.84,
        ),
        (
            "/cagr",
            {"beginning_value": 10000, "ending_value": 19500, "num_of_periods": 3},
            24.93,
        ),
        (
            "/leverage-ratio",
            {"total_liabilities": 25, "total_debts": 10, "total_income": 20},
            1.75,
        ),
        ("/rule-of-72", {"rate": 10}, 7.2),
        (
            "/pmt",
            {"rate": 2, "num_of_payments": 36, "principal": -1000000},
            39232.85,
        ),
        (
            "/inflation-adjusted-return",
            {"investment_return": 0.08, "inflation_rate": 0.03},
            4.854368932038833,
        ),
        (
            "/wacc",
            {
                "market_value_of_equity": 600000,
                "market_value_of_debt": 400000,
                "cost_of_equity": 6,
                "cost_of_debt": 5,
                "tax_rate": 35,
            },
            4.9,
        ),
        (
            "/profitability-index",
            {
                "rate": 10,
                "initial_investment": -40000,
                "cash_flows": [18000, 12000, 10000, 9000, 6000],
            },
            1.09,
        ),
        (
            "/capm",
            {"risk_free_rate": 2, "beta": 2, "expected_market_return": 10},
            0.18,
        ),
        (
            "/stock-pv",
            {"growth_rate": 5, "required_return": 15, "current_dividend": 10},
            105,
        ),
    ])
    def test_scalar_formulas(self, client, path, payload, expected):
        response = client.post(f"/api/calculate{path}", json=payload)
        assert response.status_code == 200
        assert response.json()["result"] == expected

    def test_discount_factors(self, client):
        response = client.post(
            "/api/calculate/discount-factors",
            json={"rate": 10, "num_of_periods": 6},
        )
        assert response.status_code == 200
        assert response.json()["result"] == [1, 0.91, 0.827, 0.752, 0.684]

    @pytest.mark.parametrize("payment_type,period", [("years", 5), ("months", 60)])
    def test_amortization(self, client, payment_type, period):
        response = client.post(
            "/api/calculate/amortization",
            json={
                "principal": 20000,
                "rate": 7.5,
                "period": period,
                "payment_type": payment_type,
                "pay_at_beginning": True,
            },
        )
        assert response.status_code == 200
        assert response.json()["result"] == 398.27

    def test_amortization_invalid_payment_type(self, client):
        response = client.post(
            "/api/calculate/amortization",
            json={
                "principal": 20000,
                "rate": 7.5,
                "period": 5,
                "payment_type": "weeks",
            },
        )
        assert response.status_code == 422


class TestCalculationErrors:
    """Test that degenerate inputs are rejected."""

    def test_domain_error_returns_400(self, client):
        response = client.post(
            "/api/calculate/wacc",
            json={
                "market_value_of_equity": 0,
                "market_value_of_debt": 0,
                "cost_of_equity": 6,
                "cost_of_debt": 5,
                "tax_rate": 35,
            },
        )
        assert response.status_code == 400
        assert "calculate_wacc" in response.json()["detail"]

    def test_missing_cash_flow_returns_422(self, client):
        """An empty payback cash flow list is rejected before calculating."""
        response = client.post(
            "/api/calculate/payback-period",
            json={"number_of_periods": 0, "initial_investment": -105, "cash_flows": []},
        )
        assert response.status_code == 422

    def test_invalid_discount_periods_returns_400(self, client):
        response = client.post(
            "/api/calculate/discount-factors",
            json={"rate": 10, "num_of_periods": 0},
        )
        assert response.status_code == 400
