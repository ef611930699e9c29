"""
IRR and NPV Calculations

Implements IRR using the Newton-Raphson method over annual cash flows.

The solver never raises. A result that did not converge is still returned
as a best-effort estimate, with `converged` False and the final NPV
residual attached so callers can judge it.
"""

import logging
import math
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 100
TOLERANCE = 1e-4
DEFAULT_GUESS = 0.1

# Rate bounds applied after every Newton step
MIN_RATE = -0.99
MAX_RATE = 10.0


@dataclass(frozen=True)
class IRRResult:
    """Outcome of an IRR solve."""

    rate: float  # percent, e.g. 10.0 for 10%
    npv: float  # NPV residual at the returned rate, may be inf or nan
    # when the solve stopped outside float range
    iterations: int
    converged: bool


def calculate_npv(cash_flows: List[float], discount_rate: float) -> float:
    """
    Calculate NPV (Net Present Value) of cash flows.

    Args:
        cash_flows: Array of cash flows (negative = outflow, positive = inflow),
            first flow at period 0
        discount_rate: Annual discount rate (e.g., 0.10 for 10%)

    Returns:
        NPV value
    """
    npv = 0.0
    for period, cf in enumerate(cash_flows):
        if cf:
            npv += cf * _discount_factor(discount_rate, period)
    return npv


def npv_derivative(cash_flows: List[float], rate: float) -> float:
    """Calculate derivative of NPV with respect to rate (for Newton-Raphson)."""
    dnpv = 0.0
    for period, cf in enumerate(cash_flows):
        if cf and period:
            dnpv -= period * cf * _discount_factor(rate, period + 1)
    return dnpv


def _discount_factor(rate: float, periods: int) -> float:
    """
    1 / (1 + rate) ** periods.

    Underflows to 0 for long series at high rates; returns inf where the
    factor exceeds float range (long series near the lower rate bound).
    """
    try:
        return (1 + rate) ** -periods
    except OverflowError:
        return math.inf


def _clamp_rate(rate: float) -> float:
    return min(max(rate, MIN_RATE), MAX_RATE)


def solve_irr(cash_flows: List[float], guess: float = DEFAULT_GUESS) -> IRRResult:
    """
    Calculate IRR (Internal Rate of Return) using Newton-Raphson method.

    Stops when |NPV| falls below TOLERANCE, when the derivative is too flat
    to take a step, or after MAX_ITERATIONS.

    Args:
        cash_flows: Array of periodic cash flows, initial investment first
        guess: Initial guess for rate (default 0.1 = 10%)

    Returns:
        IRRResult with the rate as a percentage
    """
    if not cash_flows:
        return IRRResult(rate=0.0, npv=0.0, iterations=0, converged=False)

    rate = guess

    for iteration in range(MAX_ITERATIONS):
        npv = calculate_npv(cash_flows, rate)

        if abs(npv) < TOLERANCE:
            return IRRResult(
                rate=rate * 100, npv=npv, iterations=iteration, converged=True
            )

        dnpv = npv_derivative(cash_flows, rate)

        if not (math.isfinite(npv) and math.isfinite(dnpv)):
            logger.debug("IRR stopped at %.6f: NPV out of float range", rate)
            return IRRResult(
                rate=rate * 100, npv=npv, iterations=iteration, converged=False
            )

        if abs(dnpv) < TOLERANCE:
            logger.debug("IRR stopped at %.6f: derivative too small", rate)
            return IRRResult(
                rate=rate * 100, npv=npv, iterations=iteration, converged=False
            )

        rate = _clamp_rate(rate - npv / dnpv)

    npv = calculate_npv(cash_flows, rate)
    converged = abs(npv) < TOLERANCE
    if not converged:
        logger.debug(
            "IRR did not converge after %d iterations (rate=%.6f, npv=%.6f)",
            MAX_ITERATIONS,
            rate,
            npv,
        )

    return IRRResult(
        rate=rate * 100, npv=npv, iterations=MAX_ITERATIONS, converged=converged
    )


def calculate_irr(cash_flows: List[float], guess: float = DEFAULT_GUESS) -> float:
    """IRR of periodic cash flows as a percentage (best effort)."""
    return solve_irr(cash_flows, guess).rate


def calculate_multiple(cash_flows: List[float]) -> float:
    """
    Calculate equity multiple.

    Args:
        cash_flows: Array of cash flows (investments are negative)

    Returns:
        Multiple (e.g., 2.0 = 2.0x return), 0 when nothing was invested
    """
    total_inflows = sum(cf for cf in cash_flows if cf > 0)
    total_outflows = abs(sum(cf for cf in cash_flows if cf < 0))

    if total_outflows == 0:
        return 0.0

    return total_inflows / total_outflows


def calculate_profit(cash_flows: List[float]) -> float:
    """Calculate profit (total inflows minus total outflows)."""
    return sum(cash_flows)
