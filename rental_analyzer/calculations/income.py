"""
Income Calculations

Aggregates recurring monthly income from the rent roll and other sources.
"""

from rental_analyzer.calculations.record import PropertyRecord, coalesce, sum_amounts


def total_rental_income(record: PropertyRecord) -> float:
    """Monthly rent across all units (rent x number of units per unit type)."""
    return sum(
        coalesce(unit.monthly_rent) * (unit.number_of_units or 1)
        for unit in record.units
    )


def total_other_income(record: PropertyRecord) -> float:
    """Monthly income from parking, laundry, storage and similar items."""
    return sum_amounts(record.other_income)


def total_monthly_income(record: PropertyRecord) -> float:
    """
    Calculate total monthly income.

    Args:
        record: Property record

    Returns:
        Rent from every unit plus all other recurring income
    """
    return total_rental_income(record) + total_other_income(record)
