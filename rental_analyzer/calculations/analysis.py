"""
Property Analysis

Combines the engine's calculations into the two views the frontend shows:
a year-one analysis snapshot and a year-by-year projection table.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from rental_analyzer.calculations.acquisition import acquisition_cost
from rental_analyzer.calculations.amortization import (
    generate_amortization_schedule,
    remaining_balance,
)
from rental_analyzer.calculations.cashflow import (
    calculate_growth_factor,
    project_cash_flows,
    sum_cash_flows,
)
from rental_analyzer.calculations.expenses import expense_breakdown
from rental_analyzer.calculations.financing import (
    down_payment_amount,
    loan_amount,
    monthly_payment,
)
from rental_analyzer.calculations.income import total_monthly_income
from rental_analyzer.calculations.irr import calculate_multiple, solve_irr
from rental_analyzer.calculations.record import PropertyRecord, coalesce
from rental_analyzer.calculations.returns import calculate_cash_on_cash, cash_flow_series
from rental_analyzer.calculations.valuation import (
    project_net_proceeds,
    property_value,
)


@dataclass(frozen=True)
class ReturnAnalysis:
    """Return metrics over the full hold."""

    irr: float
    irr_converged: bool
    cash_on_cash_return: float
    total_return: float
    total_return_percentage: float
    average_annual_cash_flow: float
    initial_investment: float
    projected_final_value: float
    equity_multiple: float


@dataclass(frozen=True)
class PropertyAnalysis:
    """Year-one operating snapshot plus hold-period returns."""

    monthly_income: float
    effective_monthly_income: float
    monthly_expenses: float
    monthly_mortgage: float
    monthly_cash_flow: float
    annual_cash_flow: float
    total_cash_invested: float
    cash_on_cash_return: float
    cap_rate: float
    net_operating_income: float
    loan_amount: float
    down_payment: float
    debt_service_coverage: float
    loan_to_value: float
    vacancy_rate: float
    return_analysis: ReturnAnalysis
    expense_breakdown: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class ProjectionYear:
    """One row of the projection table."""

    year: int
    monthly_income: float
    monthly_expenses: float
    monthly_cash_flow: float
    annual_income: float
    annual_expenses: float
    annual_cash_flow: float
    property_value: float
    monthly_mortgage: float
    annual_mortgage: float
    net_operating_income: float
    cap_rate: float
    remaining_loan_balance: float
    net_proceeds: float


@dataclass(frozen=True)
class PropertyProjections:
    """Projection table with the assumptions behind it and totals."""

    projections: List[ProjectionYear]
    assumptions: Dict[str, float]
    summary: Dict[str, float]


def _percent_of(numerator: float, denominator: float) -> float:
    if denominator <= 0:
        return 0.0
    return numerator / denominator * 100


def analyze_property(record: PropertyRecord) -> PropertyAnalysis:
    """
    Build the analysis snapshot for a property.

    Operating figures are for year one. Net operating income excludes debt
    service; debt service coverage is 0 for an all-cash purchase.
    """
    monthly_income = total_monthly_income(record)
    breakdown = expense_breakdown(record, monthly_income)
    operating_expenses = sum(breakdown.values())
    mortgage = monthly_payment(record)
    monthly_cash_flow = monthly_income - operating_expenses - mortgage

    purchase_price = coalesce(record.purchase_price)
    vacancy_rate = coalesce(record.vacancy_rate)
    noi = (monthly_income - operating_expenses) * 12
    annual_debt_service = mortgage * 12

    cash_flows = project_cash_flows(record)
    annual_cash_flows = [cf.annual_cash_flow for cf in cash_flows]
    total_cash_invested = acquisition_cost(record)
    cash_on_cash = calculate_cash_on_cash(annual_cash_flows, total_cash_invested)

    return_analysis = _analyze_returns(
        record, cash_flows, total_cash_invested, cash_on_cash
    )

    return PropertyAnalysis(
        monthly_income=monthly_income,
        effective_monthly_income=monthly_income * (1 - vacancy_rate / 100),
        monthly_expenses=operating_expenses,
        monthly_mortgage=mortgage,
        monthly_cash_flow=monthly_cash_flow,
        annual_cash_flow=monthly_cash_flow * 12,
        total_cash_invested=total_cash_invested,
        cash_on_cash_return=cash_on_cash,
        cap_rate=_percent_of(noi, purchase_price),
        net_operating_income=noi,
        loan_amount=loan_amount(record),
        down_payment=down_payment_amount(record),
        debt_service_coverage=(
            noi / annual_debt_service if annual_debt_service > 0 else 0.0
        ),
        loan_to_value=_percent_of(loan_amount(record), purchase_price),
        vacancy_rate=vacancy_rate,
        return_analysis=return_analysis,
        expense_breakdown=breakdown,
    )


def _analyze_returns(record, cash_flows, total_cash_invested, cash_on_cash):
    """Hold-period returns, including a sale at the end of the final year."""
    total_cash_flow = sum_cash_flows(cash_flows)
    average_cash_flow = total_cash_flow / len(cash_flows) if cash_flows else 0.0

    proceeds = project_net_proceeds(record)
    final_net_proceeds = proceeds[-1].net_proceeds if proceeds else 0.0
    final_value = property_value(record, record.hold_period)

    if total_cash_invested > 0:
        irr = solve_irr(cash_flow_series(record, cash_flows))
        irr_rate, irr_converged = irr.rate, irr.converged
    else:
        irr_rate, irr_converged = 0.0, False

    total_return = total_cash_flow + final_net_proceeds - total_cash_invested

    flows_with_sale = [-total_cash_invested] + [cf.annual_cash_flow for cf in cash_flows]
    if cash_flows:
        flows_with_sale[-1] += final_net_proceeds

    return ReturnAnalysis(
        irr=irr_rate,
        irr_converged=irr_converged,
        cash_on_cash_return=cash_on_cash,
        total_return=total_return,
        total_return_percentage=_percent_of(total_return, total_cash_invested),
        average_annual_cash_flow=average_cash_flow,
        initial_investment=total_cash_invested,
        projected_final_value=final_value,
        equity_multiple=calculate_multiple(flows_with_sale),
    )


def project_property(record: PropertyRecord) -> PropertyProjections:
    """
    Build the year-by-year projection table for a property.

    Cash flow columns come from the cash flow projector. Net operating
    income grows operating expenses (without debt service) at the expense
    growth rate; cap rate is measured against that year's property value.
    """
    base_income = total_monthly_income(record)
    base_operating_expenses = sum(expense_breakdown(record, base_income).values())
    mortgage = monthly_payment(record)
    expense_growth = coalesce(record.expense_growth_rate)

    schedule = generate_amortization_schedule(record)
    proceeds = {row.year: row.net_proceeds for row in project_net_proceeds(record, schedule)}

    rows = []
    for cf in project_cash_flows(record):
        value = property_value(record, cf.year)
        operating_expenses = base_operating_expenses * calculate_growth_factor(
            expense_growth, cf.year - 1
        )
        noi = (cf.monthly_income - operating_expenses) * 12

        rows.append(
            ProjectionYear(
                year=cf.year,
                monthly_income=cf.monthly_income,
                monthly_expenses=cf.monthly_expenses,
                monthly_cash_flow=cf.monthly_cash_flow,
                annual_income=cf.monthly_income * 12,
                annual_expenses=cf.monthly_expenses * 12,
                annual_cash_flow=cf.annual_cash_flow,
                property_value=value,
                monthly_mortgage=mortgage,
                annual_mortgage=mortgage * 12,
                net_operating_income=noi,
                cap_rate=_percent_of(noi, value),
                remaining_loan_balance=remaining_balance(schedule, cf.year),
                net_proceeds=proceeds.get(cf.year, 0.0),
            )
        )

    total_cash_flow = sum(row.annual_cash_flow for row in rows)

    return PropertyProjections(
        projections=rows,
        assumptions={
            "rent_growth_rate": coalesce(record.projected_rent_growth),
            "expense_growth_rate": expense_growth,
            "appreciation_rate": coalesce(record.appreciation_rate),
            "hold_period": record.hold_period,
            "vacancy_rate": coalesce(record.vacancy_rate),
        },
        summary={
            "total_cash_flow": total_cash_flow,
            "average_annual_cash_flow": total_cash_flow / len(rows) if rows else 0.0,
            "final_property_value": rows[-1].property_value if rows else 0.0,
        },
    )
