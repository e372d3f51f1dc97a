"""DuckDB connections for the demo customers database."""

import duckdb
from pathlib import Path
from typing import Optional
from contextlib import contextmanager
import sys

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger
from src.database.schema import initialize_database

logger = get_logger("database")


def open_database(
    db_path: Optional[Path] = None,
    read_only: bool = False,
    initialize: bool = False,
) -> duckdb.DuckDBPyConnection:
    """
    Open a DuckDB database file.

    Args:
        db_path: Path to database file. Defaults to config setting.
        read_only: Open database in read-only mode.
        initialize: Create the schema and load the demo customers.

    Returns:
        DuckDB connection object.
    """
    path = Path(db_path or config.database.path)
    path.parent.mkdir(parents=True, exist_ok=True)

    conn = duckdb.connect(str(path), read_only=read_only)
    logger.info(f"Connected to database: {path}")

    if initialize and not read_only:
        initialize_database(conn)
    return conn


@contextmanager
def get_connection(db_path: Optional[Path] = None, read_only: bool = False):
    """
    Context manager for database connections.

    Example:
        with get_connection() as conn:
            rows = fetch_filtered(conn, "customers", filters)
    """
    conn = open_database(db_path, read_only=read_only)
    try:
        yield conn
    finally:
        conn.close()
        logger.info("Database connection closed")


def get_memory_connection(initialize: bool = False) -> duckdb.DuckDBPyConnection:
    """
    Get an in-memory database connection.

    Args:
        initialize: Create the schema and load the demo customers.

    Returns:
        In-memory DuckDB connection.
    """
    conn = duckdb.connect(":memory:")
    if initialize:
        initialize_database(conn)
    return conn
