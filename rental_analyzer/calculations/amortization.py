"""
Loan Amortization Calculations

Month-by-month simulation of the acquisition loan, reported as payment
rows or aggregated to year-end balances over the hold period.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterator, List, Optional, Tuple

from dateutil.relativedelta import relativedelta

from rental_analyzer.calculations.financing import (
    loan_amount,
    monthly_payment,
    monthly_rate,
    number_of_payments,
)
from rental_analyzer.calculations.record import PropertyRecord

logger = logging.getLogger(__name__)

# Balances at or below this are treated as paid off
PAID_OFF_THRESHOLD = 0.01


@dataclass(frozen=True)
class LoanYearBalance:
    """Loan position at the end of a hold year."""

    year: int
    remaining_balance: float
    yearly_principal_paid: float
    yearly_interest_paid: float


def _simulate_months(
    record: PropertyRecord,
) -> Iterator[Tuple[int, float, float, float, float]]:
    """
    Yield (period, beginning_balance, interest, principal, ending_balance)
    for each month paid during the hold, stopping once the loan is paid off.
    """
    principal = loan_amount(record)
    rate = monthly_rate(record)
    payments = number_of_payments(record)

    if principal <= 0 or rate <= 0 or payments <= 0:
        logger.debug(
            "No amortization: principal=%s rate=%s payments=%s",
            principal,
            rate,
            payments,
        )
        return

    payment = monthly_payment(record)
    total_months = min(record.hold_period * 12, int(round(payments)))
    balance = principal

    for period in range(1, total_months + 1):
        interest = balance * rate
        principal_pmt = min(payment - interest, balance)
        ending_balance = balance - principal_pmt

        if ending_balance <= PAID_OFF_THRESHOLD:
            ending_balance = 0.0

        yield period, balance, interest, principal_pmt, ending_balance

        balance = ending_balance
        if balance == 0:
            break


def generate_monthly_schedule(
    record: PropertyRecord, start_date: Optional[date] = None
) -> List[Dict]:
    """
    Generate monthly amortization rows for the hold period.

    Args:
        record: Property record
        start_date: Date of first payment (rows carry no date if omitted)

    Returns:
        List of amortization rows, empty for a degenerate loan
    """
    schedule = []

    for period, beginning, interest, principal_pmt, ending in _simulate_months(record):
        period_date = None
        if start_date is not None:
            period_date = (start_date + relativedelta(months=period - 1)).isoformat()

        schedule.append(
            {
                "period": period,
                "date": period_date,
                "beginning_balance": round(beginning, 2),
                "payment": round(principal_pmt + interest, 2),
                "interest": round(interest, 2),
                "principal": round(principal_pmt, 2),
                "ending_balance": round(ending, 2),
            }
        )

    return schedule


def generate_amortization_schedule(record: PropertyRecord) -> List[LoanYearBalance]:
    """
    Generate year-end loan balances for each year of the hold.

    Years after the loan is paid off report a zero balance and nothing paid.

    Args:
        record: Property record

    Returns:
        One LoanYearBalance per year 1..hold_period, or an empty list when
        there is no loan, the rate is zero or the term is not positive
    """
    months = list(_simulate_months(record))
    if not months:
        return []

    schedule = []
    balance = loan_amount(record)

    for year in range(1, record.hold_period + 1):
        first, last = (year - 1) * 12 + 1, year * 12
        year_months = [m for m in months if first <= m[0] <= last]

        if year_months:
            balance = year_months[-1][4]

        schedule.append(
            LoanYearBalance(
                year=year,
                remaining_balance=balance,
                yearly_principal_paid=sum(m[3] for m in year_months),
                yearly_interest_paid=sum(m[2] for m in year_months),
            )
        )

    return schedule


def remaining_balance(schedule: List[LoanYearBalance], year: int) -> float:
    """Loan balance at the end of a given year (0 past the schedule)."""
    for row in schedule:
        if row.year == year:
            return row.remaining_balance
    return 0.0


def calculate_total_interest(schedule: List[LoanYearBalance]) -> float:
    """Total interest paid over the schedule."""
    return sum(row.yearly_interest_paid for row in schedule)
