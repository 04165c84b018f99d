"""Compound interest with compounding frequency and currency conversion."""

from __future__ import annotations

import logging
import math
import re
from types import MappingProxyType
from typing import Mapping, Optional, Union

from calculator.schemas.compound import (
    CalculationRequest,
    CalculationResult,
    InputValidationError,
)

logger = logging.getLogger(__name__)

# Compounding periods per year.
FREQUENCIES: Mapping[str, int] = MappingProxyType(
    {
        "annually": 1,
        "semiannually": 2,
        "quarterly": 4,
        "monthly": 12,
    }
)

# Approximate USD -> currency multipliers, not live rates.
CURRENCY_RATES: Mapping[str, float] = MappingProxyType(
    {
        "USD": 1.0,
        "INR": 83.5,
        "EUR": 0.95,
        "GBP": 0.80,
    }
)

FREQUENCY_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "annually": "Annually",
        "semiannually": "Semi-Annually",
        "quarterly": "Quarterly",
        "monthly": "Monthly",
    }
)

CURRENCY_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {
        "USD": "$",
        "INR": "₹",
        "EUR": "€",
        "GBP": "£",
    }
)

PRINCIPAL_ERROR = "Please enter a valid principal amount greater than 0."
RATE_ERROR = "Please enter a valid interest rate greater than 0."
TIME_ERROR = "Please enter a valid time period greater than 0."
FREQUENCY_ERROR = "Please select a valid compounding frequency."
CURRENCY_ERROR = "Please select a valid currency."

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: Union[float, str, None]) -> Optional[float]:
    """Return ``value`` as a finite float, or None if it is not a plain number.

    Strings may carry surrounding whitespace, a sign, a decimal point and an
    exponent. Spellings Python's ``float`` would also take (``"nan"``,
    ``"inf"``, ``"1_000"``) are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _NUMBER_RE.fullmatch(text):
            return None
        number = float(text)
    else:
        return None
    return number if math.isfinite(number) else None


def _positive(value: Union[float, str, None]) -> Optional[float]:
    number = parse_number(value)
    if number is None or number <= 0:
        return None
    return number


def growth_factor(periodic_rate: float, periods: float) -> float:
    """``(1 + periodic_rate) ** periods``, saturating to inf on overflow."""
    try:
        return (1 + periodic_rate) ** periods
    except OverflowError:
        # float ** raises instead of returning inf
        return math.inf


def calculate(request: CalculationRequest) -> Union[CalculationResult, InputValidationError]:
    """Validate ``request`` and compute the compounded amount.

    Checks run in a fixed order and the first failure is returned; nothing is
    raised for bad input.
    """
    principal = _positive(request.principal)
    if principal is None:
        return _reject(PRINCIPAL_ERROR)
    annual_rate = _positive(request.annual_rate_percent)
    if annual_rate is None:
        return _reject(RATE_ERROR)
    years = _positive(request.years)
    if years is None:
        return _reject(TIME_ERROR)
    if request.frequency not in FREQUENCIES:
        return _reject(FREQUENCY_ERROR)
    if request.currency not in CURRENCY_RATES:
        return _reject(CURRENCY_ERROR)

    periods_per_year = FREQUENCIES[request.frequency]
    rate = annual_rate / 100
    amount_usd = principal * growth_factor(rate / periods_per_year, periods_per_year * years)
    interest_usd = amount_usd - principal

    conversion_rate = CURRENCY_RATES[request.currency]
    result = CalculationResult(
        principal=principal,
        final_amount=amount_usd * conversion_rate,
        interest_earned=interest_usd * conversion_rate,
        currency=request.currency,
    )
    logger.debug(
        "compound interest: principal=%s rate=%s years=%s n=%s currency=%s -> %s",
        principal,
        annual_rate,
        years,
        periods_per_year,
        request.currency,
        result.final_amount,
    )
    return result


def _reject(message: str) -> InputValidationError:
    logger.info("rejected calculator input: %s", message)
    return InputValidationError(message=message)
