"""
Seed the database with a demo fourplex.
"""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rental_analyzer.api.properties import apply_record
from rental_analyzer.calculations.analysis import analyze_property
from rental_analyzer.calculations.record import PropertyRecord
from rental_analyzer.db.database import init_db, store_session
from rental_analyzer.db.models import Property

DEMO_NAME = "Maple Street Fourplex"

DEMO_RECORD = {
    "purchase_price": 480000,
    "property_type": "MultiFamily",
    "units": [
        {"monthly_rent": 1350, "number_of_units": 2, "beds": 2, "baths": 1, "sqft": 850},
        {"monthly_rent": 1150, "number_of_units": 2, "beds": 1, "baths": 1, "sqft": 650},
    ],
    "other_income": [{"category": "Laundry", "amount": 120}],
    "finance": {
        "down_payment": 25,
        "down_payment_type": "percentage",
        "interest_rate": 6.5,
        "loan_term": 30,
        "closing_costs": 9600,
        "points": 1,
        "other_costs": 1500,
    },
    "expenses": {
        "annual_property_taxes": 7200,
        "annual_property_insurance": 2400,
        "water": 180,
        "electricity": 60,
        "landscaping_snow_removal": 75,
        "repairs_maintenance_percentage": 5,
        "property_management_percentage": 8,
        "custom_expenses": [{"category": "Pest control", "amount": 40}],
        "one_time_expenses": [{"category": "Inspection", "amount": 650}],
    },
    "rehab": {
        "hard_costs": [{"category": "Kitchens", "amount": 18000}],
        "soft_costs": [{"category": "Permits", "amount": 1200}],
        "lost_revenue_and_costs": [
            {"year": 1, "items": [{"category": "Vacant unit", "amount": 2500}]}
        ],
    },
    "hold_period": 7,
}


def main():
    init_db()
    record = PropertyRecord.model_validate(DEMO_RECORD)

    with store_session() as db:
        existing = db.query(Property).filter(Property.name == DEMO_NAME).first()
        if existing:
            print(f"Property '{DEMO_NAME}' already exists (ID: {existing.id})")
            return

        prop = Property(name=DEMO_NAME, address="412 Maple St")
        apply_record(prop, record)
        db.add(prop)
        db.flush()
        print(f"Created property: {prop.name} (ID: {prop.id})")

    result = analyze_property(record)
    print(f"  Cash invested:  {result.total_cash_invested:,.2f}")
    print(f"  Cash-on-cash:   {result.cash_on_cash_return:.2f}%")
    print(f"  IRR:            {result.return_analysis.irr:.2f}%")


if __name__ == "__main__":
    main()
