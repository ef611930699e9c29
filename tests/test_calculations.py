"""
Tests for the aggregators, financing calculator and cash flow projector.
"""

import itertools

import pytest

from rental_analyzer.calculations.acquisition import (
    acquisition_cost,
    lost_revenue_by_year,
    total_development_costs,
    total_lost_revenue,
)
from rental_analyzer.calculations.cashflow import calculate_growth_factor, project_cash_flows
from rental_analyzer.calculations.expenses import (
    expense_breakdown,
    percentage_expense,
    total_monthly_expenses,
    total_one_time_expenses,
)
from rental_analyzer.calculations.financing import (
    calculate_payment,
    down_payment_amount,
    loan_amount,
    monthly_payment,
    points_amount,
)
from rental_analyzer.calculations.income import total_monthly_income
from rental_analyzer.calculations.record import PropertyRecord
from rental_analyzer.calculations.returns import calculate_irr, cash_on_cash_roi


class TestIncome:
    """Test income aggregation."""

    def test_rent_times_unit_count(self, make_record):
        """Each unit type contributes rent x number of units."""
        record = make_record(
            units=[
                {"monthly_rent": 1200, "number_of_units": 3},
                {"monthly_rent": 900, "number_of_units": 2},
            ],
            other_income=[{"category": "Parking", "amount": 150}],
        )
        assert total_monthly_income(record) == pytest.approx(3600 + 1800 + 150)

    def test_missing_rent_is_zero(self, make_record):
        """A unit without rent contributes nothing."""
        record = make_record(units=[{"number_of_units": 4}])
        assert total_monthly_income(record) == 0

    def test_order_independent(self, make_record):
        """Reordering units and other income does not change the total."""
        units = [
            {"monthly_rent": 1000.10, "number_of_units": 1},
            {"monthly_rent": 850.35, "number_of_units": 3},
            {"monthly_rent": 1725.5, "number_of_units": 2},
        ]
        other = [
            {"category": "Laundry", "amount": 80.25},
            {"category": "Storage", "amount": 45},
        ]
        expected = total_monthly_income(make_record(units=units, other_income=other))

        for unit_order in itertools.permutations(units):
            for other_order in itertools.permutations(other):
                record = make_record(units=list(unit_order), other_income=list(other_order))
                assert total_monthly_income(record) == pytest.approx(expected)


class TestExpenses:
    """Test expense aggregation."""

    def test_total_monthly_expenses(self, record):
        """Annual items are monthly-ized, percentages apply to income."""
        # taxes 300 + insurance 100 + hoa 50 + water 40
        # + repairs 5% of 2500 + management 8% of 2500 + custom 25
        assert total_monthly_expenses(record) == pytest.approx(840)

    def test_percentage_expense_uses_current_income(self, record):
        """Percentage expenses follow the income they are evaluated against."""
        assert percentage_expense(record, 10) == pytest.approx(250)
        assert percentage_expense(record, 10, monthly_income=3000) == pytest.approx(300)

    def test_breakdown_sums_to_total(self, make_record):
        """Breakdown itemizes the recurring total, merging repeated categories."""
        record = make_record(
            expenses={
                "custom_expenses": [
                    {"category": "Snow", "amount": 30},
                    {"category": "Snow", "amount": 20},
                    {"category": "Trash", "amount": 15},
                ]
            }
        )
        breakdown = expense_breakdown(record)
        assert breakdown["Snow"] == 50
        assert breakdown["Trash"] == 15
        assert breakdown["property_taxes"] == 300
        assert sum(breakdown.values()) == pytest.approx(total_monthly_expenses(record))

    def test_leasing_fee_and_reserves_not_recurring(self, record, make_record):
        """Leasing fee and replacement reserves stay out of the monthly total."""
        with_extras = make_record(expenses={"leasing_fee": 500, "replacement_reserves": 100})
        assert total_monthly_expenses(with_extras) == pytest.approx(
            total_monthly_expenses(record)
        )

    def test_one_time_expenses_excluded_from_monthly(self, make_record):
        """One-time expenses are totalled separately."""
        record = make_record(
            expenses={
                "one_time_expenses": [
                    {"category": "Inspection", "amount": 500},
                    {"category": "Appraisal", "amount": 650},
                ]
            }
        )
        assert total_one_time_expenses(record) == 1150
        assert total_monthly_expenses(record) == pytest.approx(840)


class TestFinancing:
    """Test financing calculations."""

    def test_down_payment_percentage(self, record):
        """25% of $300k is $75k."""
        assert down_payment_amount(record) == 75000

    def test_down_payment_type_equivalence(self, record, make_record):
        """A dollar down payment equal to the percentage gives the same result."""
        by_amount = make_record(
            finance={"down_payment": 75000, "down_payment_type": "amount"}
        )
        assert down_payment_amount(by_amount) == down_payment_amount(record)
        assert loan_amount(by_amount) == loan_amount(record)

    def test_loan_amount(self, record):
        assert loan_amount(record) == 225000

    def test_loan_amount_never_negative(self, make_record):
        """A down payment larger than the price leaves no loan."""
        record = make_record(finance={"down_payment": 400000, "down_payment_type": "amount"})
        assert loan_amount(record) == 0

    def test_zero_price_zero_down_payment(self, make_record):
        record = make_record(purchase_price=0)
        assert down_payment_amount(record) == 0
        assert loan_amount(record) == 0

    def test_monthly_payment_known_value(self, record):
        """$225k at 6% for 30 years."""
        assert monthly_payment(record) == pytest.approx(1348.99, abs=0.01)

    def test_zero_rate_has_no_payment(self, make_record):
        """Zero-interest loans are not amortized linearly."""
        record = make_record(finance={"interest_rate": 0})
        assert monthly_payment(record) == 0

    def test_payment_guards(self):
        assert calculate_payment(0, 0.005, 360) == 0
        assert calculate_payment(100000, 0, 360) == 0
        assert calculate_payment(100000, 0.005, 0) == 0

    def test_points(self, record):
        """One point on $225k."""
        assert points_amount(record) == pytest.approx(2250)


class TestAcquisition:
    """Test acquisition cost aggregation."""

    def test_acquisition_cost(self, record):
        """Down payment + closing + points + other costs + one-time expenses."""
        assert acquisition_cost(record) == pytest.approx(75000 + 6000 + 2250 + 500 + 500)

    def test_rehab_costs_included(self, record, make_record):
        rehab = make_record(
            rehab={
                "hard_costs": [{"category": "Roof", "amount": 12000}],
                "soft_costs": [{"category": "Permits", "amount": 800}],
                "lost_revenue_and_costs": [
                    {"year": 1, "items": [{"category": "Vacancy", "amount": 5000}]}
                ],
            }
        )
        assert total_development_costs(rehab) == 12800
        assert acquisition_cost(rehab) == pytest.approx(acquisition_cost(record) + 17800)

    def test_lost_revenue_dense_by_year(self, make_record):
        """Years past the hold are ignored, repeated years summed, gaps are zero."""
        record = make_record(
            hold_period=5,
            rehab={
                "lost_revenue_and_costs": [
                    {
                        "year": 1,
                        "items": [
                            {"category": "Vacancy", "amount": 3000},
                            {"category": "Utilities", "amount": 400},
                        ],
                    },
                    {"year": 3, "items": [{"category": "Vacancy", "amount": 1000}]},
                    {"year": 1, "items": [{"category": "Insurance", "amount": 100}]},
                    {"year": 9, "items": [{"category": "Vacancy", "amount": 99999}]},
                ]
            },
        )
        assert lost_revenue_by_year(record) == [3500, 0, 1000, 0, 0]
        assert total_lost_revenue(record) == 4500

    def test_no_rehab(self, record):
        assert total_development_costs(record) == 0
        assert lost_revenue_by_year(record) == [0.0] * 5


class TestCashFlows:
    """Test yearly cash flow projection."""

    def test_length_matches_hold_period(self, make_record):
        cash_flows = project_cash_flows(make_record(hold_period=7))
        assert [cf.year for cf in cash_flows] == [1, 2, 3, 4, 5, 6, 7]

    def test_year_one_is_unescalated(self, record):
        cf = project_cash_flows(record)[0]
        assert cf.monthly_income == pytest.approx(2500)
        assert cf.monthly_expenses == pytest.approx(840 + monthly_payment(record))
        assert cf.monthly_cash_flow == pytest.approx(cf.monthly_income - cf.monthly_expenses)
        assert cf.annual_cash_flow == pytest.approx(cf.monthly_cash_flow * 12)

    def test_growth_compounds_from_year_two(self, record):
        """Income grows at the rent rate, expenses and debt service at the expense rate."""
        cash_flows = project_cash_flows(record)
        base_expenses = 840 + monthly_payment(record)

        year_three = cash_flows[2]
        assert year_three.monthly_income == pytest.approx(2500 * 1.02 ** 2)
        assert year_three.monthly_expenses == pytest.approx(base_expenses * 1.03 ** 2)

    def test_growth_factor(self):
        assert calculate_growth_factor(3, 0) == 1.0
        assert calculate_growth_factor(3, 2) == pytest.approx(1.0609)


class TestZeroBaseline:
    """A record with nothing in it produces zeros everywhere."""

    def test_all_zero(self):
        record = PropertyRecord.model_validate(
            {
                "purchase_price": 0,
                "units": [{"monthly_rent": 0}],
                "finance": {
                    "down_payment": 0,
                    "interest_rate": 0,
                    "closing_costs": 0,
                    "points": 0,
                    "other_costs": 0,
                },
            }
        )
        assert total_monthly_income(record) == 0
        assert total_monthly_expenses(record) == 0
        assert loan_amount(record) == 0
        assert monthly_payment(record) == 0
        assert acquisition_cost(record) == 0
        assert cash_on_cash_roi(record) == 0
        assert calculate_irr(record) == 0
