# This project was developed with assistance from AI tools.
"""Shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from mortgage_api.main import app


@pytest.fixture
def client():
    """TestClient against the real app with all routers mounted."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def valid_body():
    """10% down on a $500,000 home, 25 years, monthly."""
    return {
        "propertyPrice": 500000,
        "downPayment": 50000,
        "annualInterestRate": 3,
        "amortizationPeriod": 25,
        "paymentSchedule": "monthly",
    }
