# This project was developed with assistance from AI tools.
"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from mortgage_calculator.main import app


@pytest.fixture
def client():
    return TestClient(app)
