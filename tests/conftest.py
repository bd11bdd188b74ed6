"""Pytest fixtures for testing"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from fd_gateway.api.main import create_app
from fd_gateway.api.dependencies import get_generation_client
from fd_gateway.domain.models import CompoundingFrequency, DepositInput


@pytest.fixture
def generator() -> AsyncMock:
    """Stub text generator; tests set return_value or side_effect as needed"""
    stub = AsyncMock()
    stub.generate_advisory.return_value = (
        "The interest rate looks unusually high for this period. Please double-check it."
    )
    return stub


@pytest.fixture
def client(generator: AsyncMock) -> TestClient:
    """Create FastAPI test client with a stubbed generation service"""
    app = create_app()
    app.dependency_overrides[get_generation_client] = lambda: generator
    return TestClient(app)


@pytest.fixture
def typical_deposit() -> DepositInput:
    """Default deposit from the calculator form: 1 lakh at 6.5% for 5 years"""
    return DepositInput(
        principal=100000,
        annual_rate_percent=6.5,
        tenure_years=5,
        compounding=CompoundingFrequency.ANNUAL,
    )
