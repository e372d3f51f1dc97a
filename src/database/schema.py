"""DuckDB schema for the demo customers dataset.

The customers table backs the demo filter set served by the API and the
end-to-end tests of combined filter conditions.
"""

from datetime import date
from typing import Optional
import duckdb
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.logging_config import get_logger

logger = get_logger("schema")

# Schema version for migrations
SCHEMA_VERSION = "1.0"

# =============================================================================
# CUSTOMERS TABLE
# =============================================================================

CREATE_CUSTOMERS = """
CREATE TABLE IF NOT EXISTS customers (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    customer_type VARCHAR,
    since DATE,
    job_type VARCHAR,
    commercial BOOLEAN,
    sex VARCHAR
)
"""

CREATE_APP_SETTINGS = """
CREATE TABLE IF NOT EXISTS app_settings (
    key VARCHAR PRIMARY KEY,
    value VARCHAR
)
"""

CREATE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_customers_name ON customers(name)",
    "CREATE INDEX IF NOT EXISTS idx_customers_since ON customers(since)",
]

SAMPLE_CUSTOMERS = [
    (1, "Acme Heating", "Customer", date(2019, 3, 14), "1", True, None),
    (2, "Acme Plumbing", "Prospect", date(2021, 7, 1), "3", True, None),
    (3, "Jones, Mary", "Customer", date(2015, 11, 20), "2", False, "f"),
    (4, "Jones, Robert", "Lead", None, "1", False, "m"),
    (5, "Baker Electric", "Customer", date(2024, 1, 5), "2", True, None),
    (6, "Smith, Alex", None, date(2024, 1, 10), None, None, "m"),
]


def create_all_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """
    Create all database tables.

    Args:
        conn: DuckDB connection.
    """
    tables = [
        ("customers", CREATE_CUSTOMERS),
        ("app_settings", CREATE_APP_SETTINGS),
    ]

    for table_name, create_sql in tables:
        try:
            conn.execute(create_sql)
            logger.info(f"Created table: {table_name}")
        except Exception as e:
            logger.error(f"Error creating table {table_name}: {e}")
            raise


def create_all_indexes(conn: duckdb.DuckDBPyConnection) -> None:
    """
    Create all database indexes.

    Args:
        conn: DuckDB connection.
    """
    for index_sql in CREATE_INDEXES:
        conn.execute(index_sql)

    logger.info(f"Created {len(CREATE_INDEXES)} indexes")


def load_sample_customers(conn: duckdb.DuckDBPyConnection) -> int:
    """
    Insert the demo customers missing from the table.

    Args:
        conn: DuckDB connection.

    Returns:
        Number of rows loaded.
    """
    existing = {row[0] for row in conn.execute("SELECT id FROM customers").fetchall()}
    rows = [row for row in SAMPLE_CUSTOMERS if row[0] not in existing]

    if rows:
        conn.executemany("INSERT INTO customers VALUES (?, ?, ?, ?, ?, ?, ?)", rows)
    logger.info(f"Loaded {len(rows)} sample customers")
    return len(rows)


def initialize_database(conn: duckdb.DuckDBPyConnection, load_samples: bool = True) -> None:
    """
    Initialize the database with all tables and indexes.

    Args:
        conn: DuckDB connection.
        load_samples: Also load the demo customers.
    """
    logger.info("Initializing database schema...")
    create_all_tables(conn)
    create_all_indexes(conn)

    conn.execute(
        "INSERT OR REPLACE INTO app_settings (key, value) VALUES ('schema_version', ?)",
        [SCHEMA_VERSION],
    )

    if load_samples:
        load_sample_customers(conn)

    logger.info("Database initialization complete")


def get_schema_version(conn: duckdb.DuckDBPyConnection) -> Optional[str]:
    """
    Get the current schema version.

    Args:
        conn: DuckDB connection.

    Returns:
        Schema version string or None.
    """
    try:
        result = conn.execute(
            "SELECT value FROM app_settings WHERE key = 'schema_version'"
        ).fetchone()
        return result[0] if result else None
    except duckdb.CatalogException:
        return None


def get_table_columns(conn: duckdb.DuckDBPyConnection, table_name: str) -> list:
    """
    Get column names for a table.

    Args:
        conn: DuckDB connection.
        table_name: Name of the table.

    Returns:
        List of column names.
    """
    result = conn.execute(f"DESCRIBE {table_name}").fetchall()
    return [row[0] for row in result]
