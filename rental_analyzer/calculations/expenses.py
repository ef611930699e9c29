"""
Expense Calculations

Aggregates recurring monthly operating expenses and one-time expenses.

Percentage-based expenses (repairs/maintenance, property management) are
evaluated against the monthly income passed in, which defaults to the
record's current total monthly income.
"""

from typing import Dict, Optional

from rental_analyzer.calculations.income import total_monthly_income
from rental_analyzer.calculations.record import PropertyRecord, coalesce, sum_amounts

# Flat monthly expense fields, in breakdown order
FIXED_MONTHLY_FIELDS = [
    "hoa",
    "water",
    "gas",
    "electricity",
    "landscaping_snow_removal",
    "internet",
    "security",
    "administrative_management",
]


def percentage_expense(
    record: PropertyRecord,
    percentage: Optional[float],
    monthly_income: Optional[float] = None,
) -> float:
    """
    Calculate a monthly expense expressed as a percent of income.

    Args:
        record: Property record
        percentage: Percent of income (e.g., 8 for 8%)
        monthly_income: Income to apply the percentage to
            (defaults to total_monthly_income(record))

    Returns:
        Monthly expense amount
    """
    if monthly_income is None:
        monthly_income = total_monthly_income(record)
    return monthly_income * coalesce(percentage) / 100


def expense_breakdown(
    record: PropertyRecord, monthly_income: Optional[float] = None
) -> Dict[str, float]:
    """
    Itemize recurring monthly expenses.

    Custom expenses are keyed by category; repeated categories are summed.
    Leasing fees and replacement reserves are not recurring monthly items
    and are not included.
    """
    expenses = record.expenses

    breakdown = {
        "property_taxes": coalesce(expenses.annual_property_taxes) / 12,
        "property_insurance": coalesce(expenses.annual_property_insurance) / 12,
    }
    for field in FIXED_MONTHLY_FIELDS:
        breakdown[field] = coalesce(getattr(expenses, field))

    breakdown["repairs_maintenance"] = percentage_expense(
        record, expenses.repairs_maintenance_percentage, monthly_income
    )
    breakdown["property_management"] = percentage_expense(
        record, expenses.property_management_percentage, monthly_income
    )

    for item in expenses.custom_expenses:
        key = item.category or "other"
        breakdown[key] = breakdown.get(key, 0.0) + coalesce(item.amount)

    return breakdown


def total_monthly_expenses(
    record: PropertyRecord, monthly_income: Optional[float] = None
) -> float:
    """Calculate total recurring monthly operating expenses (no debt service)."""
    return sum(expense_breakdown(record, monthly_income).values())


def total_one_time_expenses(record: PropertyRecord) -> float:
    """Sum one-time expenses, incurred once at acquisition."""
    return sum_amounts(record.expenses.one_time_expenses)
