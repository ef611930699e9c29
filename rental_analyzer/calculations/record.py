"""
Property Record

Immutable input models for the projection engine. A PropertyRecord is
validated once at the boundary (API request or stored JSON) and then passed
unchanged through every calculation.

Optional numeric fields default to None; the engine treats them as zero.
"""

import enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PropertyType(str, enum.Enum):
    """Property type enumeration."""

    single_family = "SingleFamily"
    multi_family = "MultiFamily"
    condo = "Condo"
    townhouse = "Townhouse"


class DownPaymentType(str, enum.Enum):
    """How Finance.down_payment is expressed."""

    percentage = "percentage"
    amount = "amount"


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class LineItem(FrozenModel):
    """A categorized dollar amount (income, expense or cost line)."""

    category: str = ""
    amount: Optional[float] = Field(default=None, ge=0)


class Unit(FrozenModel):
    """A unit type in the rent roll."""

    monthly_rent: Optional[float] = Field(default=None, ge=0)
    number_of_units: int = Field(default=1, ge=1)

    # Informational only
    beds: Optional[float] = None
    baths: Optional[float] = None
    sqft: Optional[float] = None


class Finance(FrozenModel):
    """Fixed-rate, fully-amortizing acquisition loan."""

    down_payment: Optional[float] = Field(default=None, ge=0)
    down_payment_type: DownPaymentType = DownPaymentType.percentage
    interest_rate: Optional[float] = Field(default=None, ge=0)  # percent
    loan_term: Optional[float] = Field(default=30, gt=0)  # years
    closing_costs: Optional[float] = Field(default=None, ge=0)
    points: Optional[float] = Field(default=None, ge=0)  # percent of loan
    other_costs: Optional[float] = Field(default=None, ge=0)


class Expenses(FrozenModel):
    """Operating expenses. Monthly unless prefixed with annual_."""

    annual_property_taxes: Optional[float] = None
    annual_property_insurance: Optional[float] = None
    hoa: Optional[float] = None
    water: Optional[float] = None
    gas: Optional[float] = None
    electricity: Optional[float] = None
    landscaping_snow_removal: Optional[float] = None
    internet: Optional[float] = None
    security: Optional[float] = None
    administrative_management: Optional[float] = None

    # Percent of total monthly income
    repairs_maintenance_percentage: Optional[float] = None
    property_management_percentage: Optional[float] = None

    leasing_fee: Optional[float] = None
    replacement_reserves: Optional[float] = None

    custom_expenses: List[LineItem] = Field(default_factory=list)
    one_time_expenses: List[LineItem] = Field(default_factory=list)


class LostRevenueYear(FrozenModel):
    """Revenue lost and carrying costs incurred during rehab, for one year."""

    year: int = Field(ge=1)
    items: List[LineItem] = Field(default_factory=list)


class Rehab(FrozenModel):
    """Development / rehab budget."""

    hard_costs: List[LineItem] = Field(default_factory=list)
    soft_costs: List[LineItem] = Field(default_factory=list)
    lost_revenue_and_costs: List[LostRevenueYear] = Field(default_factory=list)


class PropertyRecord(FrozenModel):
    """Everything the engine needs to analyze one property."""

    purchase_price: Optional[float] = Field(default=None, ge=0)
    property_type: PropertyType = PropertyType.single_family
    units: List[Unit] = Field(min_length=1)
    other_income: List[LineItem] = Field(default_factory=list)
    finance: Finance = Field(default_factory=Finance)
    expenses: Expenses = Field(default_factory=Expenses)
    rehab: Optional[Rehab] = None

    # Growth and analysis assumptions (percent per year unless noted)
    projected_rent_growth: Optional[float] = 2.0
    expense_growth_rate: Optional[float] = 3.0
    appreciation_rate: Optional[float] = 2.0
    hold_period: int = Field(default=5, ge=1)  # years
    vacancy_rate: Optional[float] = 5.0
    average_lease_length: Optional[float] = 12.0  # months


def coalesce(value: Optional[float]) -> float:
    """Treat a missing number as zero."""
    if value is None:
        return 0.0
    return float(value)


def sum_amounts(items: Optional[List[LineItem]]) -> float:
    """Sum the amounts of a list of line items."""
    return sum(coalesce(item.amount) for item in items or [])
