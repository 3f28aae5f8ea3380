# This project was developed with assistance from AI tools.
"""Shared fixtures.

The real app from ``mortgage_affordability.main`` is a module singleton.
``_clean_overrides`` ensures dependency_overrides are cleared after every
test so a market profile swapped in by one test never leaks into the next.
"""

import pytest
from fastapi.testclient import TestClient

from mortgage_affordability.main import app as real_app
from mortgage_affordability.schemas.calculator import (
    HeatingType,
    MortgageCalculationRequest,
    PropertyType,
)
from mortgage_affordability.services.market_data import DEFAULT_MARKET_DATA


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Clear app dependency overrides after each test."""
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def app():
    """Return the real FastAPI app with all routers mounted."""
    return real_app


@pytest.fixture
def client(app):
    """TestClient with the app lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def market():
    return DEFAULT_MARKET_DATA


@pytest.fixture
def make_request():
    """Factory fixture: a valid request with the calculator's default inputs."""

    def _make(**overrides) -> MortgageCalculationRequest:
        fields = {
            "property_value": 400_000,
            "down_payment": 80_000,
            "interest_rate": 4.84,
            "amortization_years": 25,
            "property_type": PropertyType.SINGLE_FAMILY,
            "heating_type": HeatingType.GAS,
            "is_first_time_buyer": False,
        }
        fields.update(overrides)
        return MortgageCalculationRequest(**fields)

    return _make
