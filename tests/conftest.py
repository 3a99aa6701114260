"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from gameplan_gateway.api.main import create_app
from gameplan_gateway.domain.models import LoanRequest


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def zero_rate_loan() -> LoanRequest:
    """$1200 over 12 months with no interest"""
    return LoanRequest(principal=1200, annual_rate_percent=0, term_periods=12)


@pytest.fixture
def standard_loan() -> LoanRequest:
    """$1000 at 12% APR over 12 months (1% per month)"""
    return LoanRequest(principal=1000, annual_rate_percent=12, term_periods=12)


@pytest.fixture
def mortgage_loan() -> LoanRequest:
    """30-year $250k mortgage at 6.5%"""
    return LoanRequest(principal=250_000, annual_rate_percent=6.5, term_periods=360)
