"""
Property Value and Sale Proceeds

Appreciation-based property value and net proceeds from a sale at the end
of each hold year.
"""

from dataclasses import dataclass
from typing import List, Optional

from rental_analyzer.calculations.amortization import (
    LoanYearBalance,
    generate_amortization_schedule,
)
from rental_analyzer.calculations.cashflow import calculate_growth_factor
from rental_analyzer.calculations.financing import loan_amount
from rental_analyzer.calculations.record import PropertyRecord, coalesce

# Broker commission, transfer taxes and seller closing costs, as share of price
SELLING_COST_RATE = 0.07


@dataclass(frozen=True)
class PropertyValueYear:
    """Projected market value at the end of a hold year."""

    year: int
    property_value: float


@dataclass(frozen=True)
class NetProceedsYear:
    """Cash to the owner from a sale at the end of a hold year."""

    year: int
    sale_price: float
    remaining_loan: float
    selling_costs: float
    net_proceeds: float


def property_value(record: PropertyRecord, year: int) -> float:
    """
    Calculate property value at the end of a year.

    Value already reflects a full year of appreciation in year 1, unlike
    income and expense growth which start compounding in year 2.
    """
    return coalesce(record.purchase_price) * calculate_growth_factor(
        coalesce(record.appreciation_rate), year
    )


def project_property_values(record: PropertyRecord) -> List[PropertyValueYear]:
    """Project property value for years 1..hold_period."""
    return [
        PropertyValueYear(year=year, property_value=property_value(record, year))
        for year in range(1, record.hold_period + 1)
    ]


def calculate_selling_costs(sale_price: float) -> float:
    """Costs of sale at the standard selling-cost rate."""
    return sale_price * SELLING_COST_RATE


def project_net_proceeds(
    record: PropertyRecord, schedule: Optional[List[LoanYearBalance]] = None
) -> List[NetProceedsYear]:
    """
    Project net sale proceeds for each hold year.

    Proceeds are aligned with the loan amortization schedule by year and
    stop where the schedule stops. An all-cash purchase has no loan to pay
    off and yields proceeds for every hold year.

    Args:
        record: Property record
        schedule: Precomputed amortization schedule (generated if omitted)

    Returns:
        One NetProceedsYear per year covered by both series
    """
    if schedule is None:
        schedule = generate_amortization_schedule(record)

    if loan_amount(record) <= 0:
        balances = [0.0] * record.hold_period
    else:
        balances = [row.remaining_balance for row in schedule]

    proceeds = []
    for value_year, remaining_loan in zip(project_property_values(record), balances):
        sale_price = value_year.property_value
        selling_costs = calculate_selling_costs(sale_price)
        proceeds.append(
            NetProceedsYear(
                year=value_year.year,
                sale_price=sale_price,
                remaining_loan=remaining_loan,
                selling_costs=selling_costs,
                net_proceeds=sale_price - remaining_loan - selling_costs,
            )
        )

    return proceeds
