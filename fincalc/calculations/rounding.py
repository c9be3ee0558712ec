"""
Numeric Policy

Rounding helpers and the degenerate-input policy shared by every formula.

Results are rounded half away from zero (not Python's banker's rounding),
so values like 0.125 round to 0.13. Division by zero, overflow and
non-real or non-finite results are all reported as DomainError.
"""

import math
from decimal import Decimal, ROUND_CEILING, ROUND_HALF_UP
from functools import wraps
from typing import Callable, List, Union


class DomainError(ValueError):
    """Raised when inputs fall outside the domain of a formula."""


class InvalidPaymentTypeError(ValueError):
    """Raised when a payment type is neither years nor months."""


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    _require_finite(value)
    return float(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def ceil_integral(value: float) -> float:
    """Round up to the nearest integer."""
    _require_finite(value)
    return float(Decimal(value).to_integral_value(rounding=ROUND_CEILING))


def round_to_cents(value: float) -> float:
    """Round to 2 decimals."""
    return round_half_away(value * 100) / 100


def _require_finite(value: float) -> None:
    """Raise DomainError unless value is a finite real number."""
    if isinstance(value, complex) or not math.isfinite(value):
        raise DomainError(f"Result is not a finite real number: {value!r}")


def _check_result(result: Union[float, List[float]]) -> None:
    """Check a scalar result or every item of a list result."""
    if isinstance(result, list):
        for item in result:
            _require_finite(item)
    else:
        _require_finite(result)


def domain_checked(func: Callable) -> Callable:
    """
    Normalize degenerate arithmetic into DomainError.

    Python raises ZeroDivisionError or OverflowError, or silently returns a
    complex number, depending on which operation fails. Formulas wrapped
    with this decorator raise DomainError in all of those cases.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            result = func(*args, **kwargs)
        except (ZeroDivisionError, OverflowError) as e:
            raise DomainError(f"{func.__name__}: {e}") from e
        _check_result(result)
        return result

    return wrapper
