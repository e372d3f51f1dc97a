"""Database module for DuckDB operations."""

from .connection import (
    open_database,
    get_connection,
    get_memory_connection,
)
from .schema import (
    initialize_database,
    create_all_tables,
    create_all_indexes,
    load_sample_customers,
    get_schema_version,
    get_table_columns,
)
from .filtered import (
    build_filtered_query,
    build_count_query,
    fetch_filtered,
    count_filtered,
)
