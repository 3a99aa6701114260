"""Amortization engine - fixed-rate, fixed-term, fully-amortizing loans"""

import math
import sys
from decimal import Context, Decimal, ROUND_HALF_UP
from numbers import Integral, Real
from typing import List, Optional

from gameplan_gateway.domain.models import LoanRequest, AmortizationEntry, AmortizationResult
from gameplan_gateway.domain.exceptions import InvalidInputError

PERIODS_PER_YEAR = 12
TWO_PLACES = Decimal("0.01")

# Wide enough to hold any finite float to the cent (max float has 309 integer digits)
CURRENCY_CONTEXT = Context(prec=320)

# Ceiling on (1 + r)^n: the balance recurrence amplifies float error by this factor
MAX_COMPOUND_GROWTH = 1e8


def round_currency(value: float) -> float:
    """
    Round to 2 decimal places, half away from zero.

    Rounds the exact binary value of the float, so 1.005 (stored as
    1.00499999...) becomes 1.0, the same result as JavaScript's toFixed(2).
    Rounding an already-rounded value returns it unchanged.
    """
    return float(Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP, context=CURRENCY_CONTEXT))


def periodic_rate(annual_rate_percent: float) -> float:
    """Convert an annual percentage rate to a monthly decimal rate"""
    return (annual_rate_percent / 100) / PERIODS_PER_YEAR


def calculate_payment(principal: float, rate: float, term_periods: int) -> float:
    """
    Constant periodic payment that retires `principal` in `term_periods`.

    Formula:
        payment = P * r * (1 + r)^n / ((1 + r)^n - 1)
                = P * r / (1 - (1 + r)^-n)

    The denominator is evaluated as -expm1(-n * log1p(r)), which neither
    overflows for large n*r nor cancels for tiny r. Zero rate, or a rate
    whose interest over the whole term is below float resolution, falls
    back to straight-line repayment P / n.
    """
    if rate * term_periods < sys.float_info.epsilon:
        return principal / term_periods

    return principal * rate / -math.expm1(-term_periods * math.log1p(rate))


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_request(request: LoanRequest, max_term_periods: Optional[int] = None) -> None:
    """
    Check loan parameters before any computation.

    Rules:
    - principal, rate and term must be finite real numbers
    - principal > 0
    - term is a whole number of periods, > 0 and <= max_term_periods if given
    - rate >= 0 (negative rates are rejected)
    - (1 + monthly rate)^term <= MAX_COMPOUND_GROWTH

    Raises:
        InvalidInputError: On the first rule that fails
    """
    for name in ("principal", "annual_rate_percent", "term_periods"):
        value = getattr(request, name)
        if not _is_number(value):
            raise InvalidInputError(f"{name} must be a number, got {type(value).__name__}")
        if not math.isfinite(value):
            raise InvalidInputError(f"{name} must be finite, got {value}")

    if not isinstance(request.term_periods, Integral):
        raise InvalidInputError(f"term_periods must be a whole number, got {request.term_periods}")
    if request.principal <= 0:
        raise InvalidInputError(f"principal must be positive, got {request.principal}")
    if request.term_periods <= 0:
        raise InvalidInputError(f"term_periods must be positive, got {request.term_periods}")
    if request.annual_rate_percent < 0:
        raise InvalidInputError(f"annual_rate_percent must not be negative, got {request.annual_rate_percent}")
    if max_term_periods is not None and request.term_periods > max_term_periods:
        raise InvalidInputError(f"term_periods must not exceed {max_term_periods}, got {request.term_periods}")

    growth_log = request.term_periods * math.log1p(periodic_rate(request.annual_rate_percent))
    if growth_log > math.log(MAX_COMPOUND_GROWTH):
        raise InvalidInputError(
            f"rate of {request.annual_rate_percent}% over {request.term_periods} periods compounds "
            f"beyond {MAX_COMPOUND_GROWTH:g}x"
        )


def compute(request: LoanRequest, max_term_periods: Optional[int] = None) -> AmortizationResult:
    """
    Main entry point: validate the request and build the full schedule.

    Running balance and total interest stay in full precision; rounding is
    applied only to the values emitted in each entry and in the result.
    The last period forces the balance to exactly zero, absorbing drift.

    Example:
        1000 at 12% over 12 months -> payment 88.85,
        period 1: interest 10.00, principal 78.85, balance 921.15
    """
    validate_request(request, max_term_periods)

    n = int(request.term_periods)
    rate = periodic_rate(request.annual_rate_percent)
    payment = calculate_payment(request.principal, rate, n)
    if not math.isfinite(payment):
        raise InvalidInputError(f"payment for principal {request.principal} is too large to represent")

    balance = float(request.principal)
    total_interest = 0.0
    schedule: List[AmortizationEntry] = []

    for period in range(1, n + 1):
        interest = balance * rate
        principal_part = payment - interest

        if period == n:
            balance = 0.0
        else:
            balance -= principal_part

        total_interest += interest

        schedule.append(
            AmortizationEntry(
                period=period,
                payment=round_currency(payment),
                interest_portion=round_currency(interest),
                principal_portion=round_currency(principal_part),
                remaining_balance=round_currency(max(0.0, balance)),
            )
        )

    if not math.isfinite(total_interest):
        raise InvalidInputError(f"total interest for principal {request.principal} is too large to represent")

    return AmortizationResult(
        payment=round_currency(payment),
        total_interest=round_currency(total_interest),
        schedule=tuple(schedule),
    )
