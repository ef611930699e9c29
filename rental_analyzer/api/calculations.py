"""
Financial calculation API endpoints.

These endpoints accept a property record and return calculated results.
Nothing is stored; every request is a fresh calculation pass.
"""

import math
from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from rental_analyzer.calculations import amortization, analysis, irr
from rental_analyzer.calculations.financing import loan_amount, monthly_payment
from rental_analyzer.calculations.record import PropertyRecord

router = APIRouter()


@router.post("/analysis")
async def calculate_analysis(record: PropertyRecord):
    """Year-one analysis snapshot and hold-period returns."""
    return asdict(analysis.analyze_property(record))


@router.post("/projections")
async def calculate_projections(record: PropertyRecord):
    """Year-by-year projections over the hold period."""
    return asdict(analysis.project_property(record))


@router.post("/amortization")
async def calculate_amortization(record: PropertyRecord, start_date: Optional[date] = None):
    """Generate the loan amortization schedule for the hold period."""
    yearly = amortization.generate_amortization_schedule(record)
    monthly = amortization.generate_monthly_schedule(record, start_date)

    return {
        "loan_amount": loan_amount(record),
        "monthly_payment": monthly_payment(record),
        "schedule": [asdict(row) for row in yearly],
        "monthly_schedule": monthly,
        "total_interest": amortization.calculate_total_interest(yearly),
        "total_principal": sum(row.yearly_principal_paid for row in yearly),
    }


class IRRInput(BaseModel):
    """Input for IRR calculation."""

    cash_flows: List[float]


class IRRResponse(BaseModel):
    """Response with IRR calculation."""

    irr: float
    converged: bool
    iterations: int
    npv_residual: Optional[float]  # None when outside float range
    multiple: float
    profit: float
    npv_at_10_percent: float


@router.post("/irr", response_model=IRRResponse)
async def calculate_irr_endpoint(inputs: IRRInput):
    """Calculate IRR (percent) for annual cash flows, initial outflow first."""
    result = irr.solve_irr(inputs.cash_flows)

    return IRRResponse(
        irr=result.rate,
        converged=result.converged,
        iterations=result.iterations,
        npv_residual=result.npv if math.isfinite(result.npv) else None,
        multiple=irr.calculate_multiple(inputs.cash_flows),
        profit=irr.calculate_profit(inputs.cash_flows),
        npv_at_10_percent=irr.calculate_npv(inputs.cash_flows, 0.10),
    )
