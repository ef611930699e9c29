"""
Acquisition Cost

Total cash invested at purchase: the denominator for cash-on-cash return
and the initial outflow for IRR.
"""

from typing import List

from rental_analyzer.calculations.expenses import total_one_time_expenses
from rental_analyzer.calculations.financing import down_payment_amount, points_amount
from rental_analyzer.calculations.record import PropertyRecord, coalesce, sum_amounts


def total_development_costs(record: PropertyRecord) -> float:
    """Rehab hard costs plus soft costs."""
    if record.rehab is None:
        return 0.0
    return sum_amounts(record.rehab.hard_costs) + sum_amounts(record.rehab.soft_costs)


def lost_revenue_by_year(record: PropertyRecord) -> List[float]:
    """
    Normalize rehab-period lost revenue into one total per hold year.

    Returns:
        List of length hold_period; index 0 is year 1. Entries for years
        past the hold period are ignored, missing years are 0 and repeated
        entries for the same year are summed.
    """
    by_year = [0.0] * record.hold_period
    if record.rehab is None:
        return by_year

    for entry in record.rehab.lost_revenue_and_costs:
        if entry.year <= record.hold_period:
            by_year[entry.year - 1] += sum_amounts(entry.items)

    return by_year


def total_lost_revenue(record: PropertyRecord) -> float:
    """Lost revenue and carrying costs over the hold period."""
    return sum(lost_revenue_by_year(record))


def acquisition_cost(record: PropertyRecord) -> float:
    """
    Calculate total cash invested at acquisition.

    Down payment + closing costs + points + other loan costs + one-time
    expenses + rehab costs + rehab-period lost revenue.
    """
    finance = record.finance
    return (
        down_payment_amount(record)
        + coalesce(finance.closing_costs)
        + points_amount(record)
        + coalesce(finance.other_costs)
        + total_one_time_expenses(record)
        + total_development_costs(record)
        + total_lost_revenue(record)
    )
