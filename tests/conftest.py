"""Pytest configuration and fixtures for filterset tests."""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.database import get_memory_connection
from src.filterset import FilterSet


class SampleFilters(FilterSet):
    """One filter of every kind over the demo customers table."""

    def filters(self):
        self.filter("text", "Customer Name", "customers.name")
        self.filter("select", "Customer Type", "customers.customer_type",
                    choices=["Customer", "Prospect", "Lead"])
        self.filter("date", "Customer Since", "customers.since")
        self.filter("check_boxes", "Job Type", "customers.job_type",
                    choices=[["HVAC", "1"], ["Electrical", 2], ["Plumbing", 3]])
        self.filter("boolean", "Commercial?", "customers.commercial", allow_blank=True)
        self.filter("radio_buttons", "Sex", "customers.sex",
                    choices=[["Male", "m"], ["Female", "f"]])


@pytest.fixture
def test_db():
    """In-memory DuckDB with the demo customers loaded."""
    conn = get_memory_connection(initialize=True)
    yield conn
    conn.close()


@pytest.fixture
def sample_filters():
    """Fresh filter set with one filter of every kind."""
    return SampleFilters()


@pytest.fixture
def sample_filters_class():
    """The filter set class, for building several independent instances."""
    return SampleFilters


@pytest.fixture
def submitted_params():
    """Submitted form state touching every filter kind."""
    return {
        "fields": ["customer_name", "customer_type", "customer_since", "job_type", "commercial", "sex"],
        "operators": {
            "customer_name": "contains",
            "customer_type": "is",
            "customer_since": "between",
            "job_type": "is_not",
            "commercial": "yes",
            "sex": "is",
        },
        "values": {
            "customer_name": "Acme",
            "customer_type": ["Customer", "Lead"],
            "customer_since": ["2015-01-01", "2024-12-31"],
            "job_type": ["2", "3"],
            "sex": "m",
        },
    }
