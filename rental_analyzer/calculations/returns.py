"""
Return Metrics

Cash-on-cash return and IRR for a property record.
"""

from typing import List, Optional

from rental_analyzer.calculations.acquisition import acquisition_cost
from rental_analyzer.calculations.cashflow import YearlyCashFlow, project_cash_flows
from rental_analyzer.calculations.irr import IRRResult, solve_irr
from rental_analyzer.calculations.record import PropertyRecord


def cash_flow_series(
    record: PropertyRecord, cash_flows: Optional[List[YearlyCashFlow]] = None
) -> List[float]:
    """
    Build the investor cash flow series used for IRR.

    Returns:
        [-acquisition_cost, annual_cash_flow(year 1), ..., annual_cash_flow(year N)]
    """
    if cash_flows is None:
        cash_flows = project_cash_flows(record)
    return [-acquisition_cost(record)] + [cf.annual_cash_flow for cf in cash_flows]


def calculate_cash_on_cash(
    annual_cash_flows: List[float], total_cash_invested: float
) -> float:
    """
    Calculate cash-on-cash return.

    Args:
        annual_cash_flows: Annual cash flow for each hold year
        total_cash_invested: Cash invested at acquisition

    Returns:
        Average annual cash flow as a percent of cash invested, or 0 when
        nothing was invested or there are no cash flows
    """
    if total_cash_invested <= 0 or not annual_cash_flows:
        return 0.0

    average = sum(annual_cash_flows) / len(annual_cash_flows)
    return average / total_cash_invested * 100


def cash_on_cash_roi(record: PropertyRecord) -> float:
    """Cash-on-cash return on the record's acquisition cost, as a percent."""
    return calculate_cash_on_cash(
        [cf.annual_cash_flow for cf in project_cash_flows(record)],
        acquisition_cost(record),
    )


def irr_result(record: PropertyRecord) -> IRRResult:
    """Solve IRR over the record's cash flow series."""
    if acquisition_cost(record) <= 0:
        return IRRResult(rate=0.0, npv=0.0, iterations=0, converged=False)
    return solve_irr(cash_flow_series(record))


def calculate_irr(record: PropertyRecord) -> float:
    """IRR of the record's cash flows as a percent (best effort)."""
    return irr_result(record).rate
