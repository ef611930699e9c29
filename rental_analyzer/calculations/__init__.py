"""
Financial Calculation Engine

Pure calculation modules for rental property investment analysis.
Every function takes an immutable PropertyRecord and returns freshly
computed numbers or series; nothing is stored between calls.
"""

from rental_analyzer.calculations import (
    acquisition,
    amortization,
    analysis,
    cashflow,
    expenses,
    financing,
    income,
    irr,
    returns,
    valuation,
)
from rental_analyzer.calculations.record import PropertyRecord

__all__ = [
    "PropertyRecord",
    "acquisition",
    "amortization",
    "analysis",
    "cashflow",
    "expenses",
    "financing",
    "income",
    "irr",
    "returns",
    "valuation",
]
