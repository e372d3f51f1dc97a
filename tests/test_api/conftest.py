"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.services.database import close_db


@pytest.fixture(scope="module")
def client():
    """Create a TestClient for the FastAPI application."""
    with TestClient(app) as c:
        yield c
    close_db()


@pytest.fixture
def customer_query():
    """Build the query string for submitted customer filter state."""
    from api.services.customer_filters import CustomerFilters

    def build(params):
        filters = CustomerFilters()
        filters.parse_params(params)
        return filters.to_query()

    return build
