"""
Shared fixtures
"""

import pytest
from fastapi.testclient import TestClient

from dashboard.main import create_app


@pytest.fixture
def app():
    """A fresh application with freshly seeded stores."""
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)
