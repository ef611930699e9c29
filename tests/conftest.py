"""
Pytest configuration and shared fixtures.
"""

import copy

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rental_analyzer.main import app
from rental_analyzer.db.database import create_store_engine, get_db, init_db
from rental_analyzer.db.models import Base
from rental_analyzer.calculations.record import PropertyRecord


# A single-family rental: $300k, 25% down, 6% 30-year loan, $2,500/month rent
BASE_RECORD = {
    "purchase_price": 300000,
    "property_type": "SingleFamily",
    "units": [{"monthly_rent": 2500, "number_of_units": 1, "beds": 3, "baths": 2, "sqft": 1400}],
    "other_income": [],
    "finance": {
        "down_payment": 25,
        "down_payment_type": "percentage",
        "interest_rate": 6,
        "loan_term": 30,
        "closing_costs": 6000,
        "points": 1,
        "other_costs": 500,
    },
    "expenses": {
        "annual_property_taxes": 3600,
        "annual_property_insurance": 1200,
        "hoa": 50,
        "water": 40,
        "repairs_maintenance_percentage": 5,
        "property_management_percentage": 8,
        "custom_expenses": [{"category": "Pest control", "amount": 25}],
        "one_time_expenses": [{"category": "Inspection", "amount": 500}],
    },
    "projected_rent_growth": 2,
    "expense_growth_rate": 3,
    "appreciation_rate": 2,
    "hold_period": 5,
    "vacancy_rate": 5,
}


def _merge(base: dict, overrides: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@pytest.fixture
def record_data():
    """Raw JSON-style data for the base record."""
    return copy.deepcopy(BASE_RECORD)


@pytest.fixture
def make_record():
    """Build a PropertyRecord from the base record with nested overrides."""

    def _make(**overrides) -> PropertyRecord:
        return PropertyRecord.model_validate(_merge(BASE_RECORD, overrides))

    return _make


@pytest.fixture
def record(make_record):
    """The base record."""
    return make_record()


# Shared in-memory store for the API tests
test_engine = create_store_engine("sqlite:///:memory:", poolclass=StaticPool)
TestingSessionLocal = sessionmaker(bind=test_engine, autoflush=False)


def override_get_db():
    """Override database dependency for testing."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and drop after."""
    init_db(test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def session_factory():
    """Session factory bound to the test store."""
    return TestingSessionLocal
