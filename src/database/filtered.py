"""Queries restricted by a filter set's combined condition."""

from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Union
import sys

import duckdb
import pandas as pd

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger
from src.filterset import Condition, FilterSet

logger = get_logger("filtered")


def _condition_of(source: Union[FilterSet, Condition, None]) -> Optional[Condition]:
    if isinstance(source, FilterSet):
        return source.conditions
    return source


def build_filtered_query(
    table: str,
    source: Union[FilterSet, Condition, None] = None,
    columns: Sequence[str] = ("*",),
    order_by: Optional[str] = None,
    limit: Optional[int] = None,
    offset: int = 0,
) -> Tuple[str, List[Any]]:
    """
    Build a SELECT restricted by a filter set's conditions.

    Args:
        table: Table (or FROM clause) to query.
        source: FilterSet or Condition. None selects every row.
        columns: Columns to select.
        order_by: ORDER BY clause.
        limit: Maximum rows to return.
        offset: Rows to skip.

    Returns:
        Tuple of (SQL query string, list of parameters).
    """
    condition = _condition_of(source)

    sql = f"SELECT {', '.join(columns)}\nFROM {table}"
    params: List[Any] = []

    if condition is not None:
        where, params = condition.to_sql()
        sql += f"\nWHERE {where}"

    if order_by:
        sql += f"\nORDER BY {order_by}"

    if limit is not None:
        sql += f"\nLIMIT {int(limit)} OFFSET {int(offset)}"

    return sql, params


def build_count_query(
    table: str,
    source: Union[FilterSet, Condition, None] = None,
) -> Tuple[str, List[Any]]:
    """Build a COUNT(*) query restricted by the conditions."""
    return build_filtered_query(table, source, columns=("COUNT(*)",))


def fetch_filtered(
    conn: duckdb.DuckDBPyConnection,
    table: str,
    source: Union[FilterSet, Condition, None] = None,
    columns: Sequence[str] = ("*",),
    order_by: Optional[str] = None,
    limit: Optional[int] = None,
) -> pd.DataFrame:
    """
    Fetch rows matching the conditions as a DataFrame.

    Args:
        conn: DuckDB connection.
        table: Table to query.
        source: FilterSet or Condition.
        columns: Columns to select.
        order_by: ORDER BY clause.
        limit: Maximum rows; defaults to the configured row cap.

    Returns:
        DataFrame with matching rows.
    """
    sql, params = build_filtered_query(
        table,
        source,
        columns=columns,
        order_by=order_by,
        limit=config.database.max_rows if limit is None else limit,
    )
    logger.debug(f"Executing query: {sql}")
    logger.debug(f"Parameters: {params}")
    return conn.execute(sql, params).df()


def count_filtered(
    conn: duckdb.DuckDBPyConnection,
    table: str,
    source: Union[FilterSet, Condition, None] = None,
) -> int:
    """Count rows matching the conditions."""
    sql, params = build_count_query(table, source)
    return conn.execute(sql, params).fetchone()[0]
