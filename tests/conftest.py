"""
Shared test fixtures — test client, sample calculation.
"""

import os
import pytest
from fastapi.testclient import TestClient

# Pin display settings before importing app modules (ignore any local .env)
os.environ["CURRENCY_SYMBOL"] = "₹"
os.environ["DIGIT_GROUPING"] = "indian"
os.environ["DEFAULT_PARTICIPANT_SLOTS"] = "5"

from backend.main import app
from backend.schemas import CalculationInput, FixedCosts, Participant


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def session_scenario():
    """Court 500 + shuttle 100, A plays 2, a blank placeholder row, B plays 4."""
    return CalculationInput(
        fixed_costs=FixedCosts(cost_a=500, cost_b=100),
        participants=(
            Participant(id="1", name="A", attendance_units=2),
            Participant(id="2", name="", attendance_units=0),
            Participant(id="3", name="B", attendance_units=4),
        ),
    )
