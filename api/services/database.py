"""Database connection service for FastAPI."""

import duckdb
from typing import Optional
from pathlib import Path

from api.config import get_settings
from src.database import get_memory_connection, open_database


class DatabaseService:
    """Holds the DuckDB connection holding the demo customers."""

    def __init__(self, db_path: Optional[Path] = None):
        """Initialize database service.

        Args:
            db_path: Path to database file. In-memory when not set.
        """
        settings = get_settings()
        self.db_path = db_path or settings.database_path
        self._connection: Optional[duckdb.DuckDBPyConnection] = None

    def connect(self) -> duckdb.DuckDBPyConnection:
        """Get or create database connection, creating the schema on first use."""
        if self._connection is None:
            if self.db_path is None:
                self._connection = get_memory_connection(initialize=True)
            else:
                self._connection = open_database(self.db_path, initialize=True)
        return self._connection

    def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None


# Global database instance
_db_service: Optional[DatabaseService] = None


def get_db() -> DatabaseService:
    """Get global database service instance."""
    global _db_service
    if _db_service is None:
        _db_service = DatabaseService()
    return _db_service


def close_db() -> None:
    """Close global database connection."""
    global _db_service
    if _db_service:
        _db_service.close()
        _db_service = None
