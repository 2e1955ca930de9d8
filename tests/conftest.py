"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import List
from fastapi.testclient import TestClient
from loan_gateway.api.main import create_app
from loan_gateway.api.dependencies import get_decision_engine
from loan_gateway.domain.decision_engine import DecisionEngine


# Fixed "today" for age calculations
TODAY = date(2024, 6, 1)

# Real Estonian personal codes (valid checksums), all decided as of TODAY
SEGMENT_1_CODE = "49002010965"  # born 1990-02-01, last four 0965
SEGMENT_2_CODE = "39002014505"  # born 1990-02-01, last four 4505
SEGMENT_3_CODE = "39002018003"  # born 1990-02-01, last four 8003
UNDERAGE_CODE = "61003152003"  # born 2010-03-15
ELDERLY_CODE = "34505057005"  # born 1945-05-05, checksum needs second pass
BAD_CHECKSUM_CODE = "49002010961"


class FakeValidator:
    """Personal code validator returning a fixed answer and recording calls"""

    def __init__(self, valid: bool = True):
        self.valid = valid
        self.calls: List[str] = []

    def is_valid(self, code: str) -> bool:
        self.calls.append(code)
        return self.valid


@pytest.fixture
def fake_validator() -> FakeValidator:
    return FakeValidator()


@pytest.fixture
def engine(fake_validator: FakeValidator) -> DecisionEngine:
    """Decision engine with an accept-all validator and a fixed clock"""
    return DecisionEngine(validator=fake_validator, today=lambda: TODAY)


@pytest.fixture
def app():
    """FastAPI app whose decision engine uses the real validator and a fixed clock"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: DecisionEngine(today=lambda: TODAY)
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)
