import pytest
from fastapi.testclient import TestClient

from main import app
from services.validation import validate_assessment


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def example_payload():
    """Young smoker who never exercises, high stress, otherwise neutral."""
    return {
        "age": 25,
        "smoke": "Yes",
        "exercise": "Never",
        "conditions": [],
        "stress": 8,
        "mentalWellbeing": 5,
        "relaxationFrequency": "Often",
        "screenTime": "<2h",
    }


@pytest.fixture
def calm_payload():
    """Zero-contribution baseline except the age band (1 point)."""
    return {
        "age": 25,
        "gender": "female",
        "smoke": "No",
        "alcohol": "None",
        "exercise": "Daily",
        "stress": 0,
        "mentalWellbeing": 10,
        "anxiety": 0,
        "sleepQuality": 10,
        "mentalSupport": "Yes",
        "relaxationFrequency": "Often",
        "screenTime": "<2h",
        "socialConnection": 10,
    }


@pytest.fixture
def record():
    def _build(**fields):
        return validate_assessment(fields)

    return _build
