"""
Cash Flow Calculations

Generates yearly cash flow projections for a rental property over the
hold period.
"""

from dataclasses import dataclass
from typing import List

from rental_analyzer.calculations.expenses import total_monthly_expenses
from rental_analyzer.calculations.financing import monthly_payment
from rental_analyzer.calculations.income import total_monthly_income
from rental_analyzer.calculations.record import PropertyRecord, coalesce


@dataclass(frozen=True)
class YearlyCashFlow:
    """Projected cash flow for one year of the hold (year is 1-based)."""

    year: int
    monthly_income: float
    monthly_expenses: float  # operating expenses plus debt service
    monthly_cash_flow: float
    annual_cash_flow: float


def calculate_growth_factor(annual_rate: float, years: int) -> float:
    """
    Calculate the compound growth factor after a number of years.

    Args:
        annual_rate: Annual growth rate as percent (e.g., 3 for 3%)
        years: Number of full years of growth
    """
    return (1 + annual_rate / 100) ** years


def project_cash_flows(record: PropertyRecord) -> List[YearlyCashFlow]:
    """
    Project monthly and annual cash flow for each year of the hold.

    Year 1 uses current income and expenses; each later year compounds
    income at the rent growth rate and expenses at the expense growth rate.
    Debt service is included in expenses and grows with them.

    Args:
        record: Property record

    Returns:
        One YearlyCashFlow per year, years 1..hold_period
    """
    base_income = total_monthly_income(record)
    base_expenses = total_monthly_expenses(record) + monthly_payment(record)
    rent_growth = coalesce(record.projected_rent_growth)
    expense_growth = coalesce(record.expense_growth_rate)

    cash_flows = []
    for year in range(1, record.hold_period + 1):
        income = base_income * calculate_growth_factor(rent_growth, year - 1)
        expenses = base_expenses * calculate_growth_factor(expense_growth, year - 1)
        monthly_cash_flow = income - expenses

        cash_flows.append(
            YearlyCashFlow(
                year=year,
                monthly_income=income,
                monthly_expenses=expenses,
                monthly_cash_flow=monthly_cash_flow,
                annual_cash_flow=monthly_cash_flow * 12,
            )
        )

    return cash_flows


def sum_cash_flows(cash_flows: List[YearlyCashFlow]) -> float:
    """Total annual cash flow across the projection."""
    return sum(cf.annual_cash_flow for cf in cash_flows)
