"""API services."""

from api.services.database import get_db, close_db, DatabaseService
from api.services.customer_filters import CustomerFilters

__all__ = ["get_db", "close_db", "DatabaseService", "CustomerFilters"]
