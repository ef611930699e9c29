"""
Financing Calculations

Down payment, loan principal, fixed-rate payment and loan costs.
"""

from rental_analyzer.calculations.record import (
    DownPaymentType,
    PropertyRecord,
    coalesce,
)


def down_payment_amount(record: PropertyRecord) -> float:
    """
    Resolve the down payment to a dollar amount.

    Args:
        record: Property record

    Returns:
        Down payment in dollars (0 if price or down payment is unset)
    """
    purchase_price = coalesce(record.purchase_price)
    down_payment = coalesce(record.finance.down_payment)

    if purchase_price <= 0 or down_payment <= 0:
        return 0.0

    if record.finance.down_payment_type == DownPaymentType.percentage:
        return purchase_price * down_payment / 100
    return down_payment


def loan_amount(record: PropertyRecord) -> float:
    """Loan principal: purchase price less down payment, never negative."""
    purchase_price = coalesce(record.purchase_price)
    if purchase_price <= 0:
        return 0.0
    return max(purchase_price - down_payment_amount(record), 0.0)


def monthly_rate(record: PropertyRecord) -> float:
    """Monthly interest rate as a decimal."""
    return coalesce(record.finance.interest_rate) / 100 / 12


def number_of_payments(record: PropertyRecord) -> float:
    """Total monthly payments over the loan term."""
    return coalesce(record.finance.loan_term) * 12


def calculate_payment(
    principal: float, rate: float, payments: float
) -> float:
    """
    Calculate a fixed-rate, fully-amortizing monthly payment.

    Args:
        principal: Loan principal
        rate: Monthly interest rate as decimal (e.g., 0.005 for 6% annual)
        payments: Number of monthly payments

    Returns:
        Monthly payment, or 0 when principal, rate or payment count is not
        positive (zero-rate loans are not amortized linearly)
    """
    if principal <= 0 or rate <= 0 or payments <= 0:
        return 0.0

    growth = (1 + rate) ** payments
    return principal * rate * growth / (growth - 1)


def monthly_payment(record: PropertyRecord) -> float:
    """Monthly principal-and-interest payment on the acquisition loan."""
    return calculate_payment(
        loan_amount(record), monthly_rate(record), number_of_payments(record)
    )


def points_amount(record: PropertyRecord) -> float:
    """Loan points in dollars."""
    return loan_amount(record) * coalesce(record.finance.points) / 100
