#!/usr/bin/env python3
"""
Run the demo customer filters from the command line.

Creates the demo customers database if needed, applies a filter query string
(as produced by the API or FilterSet.to_query) and prints the matching rows.

Usage:
    python scripts/query_customers.py --query "fields[]=sex&values[sex]=m"
    python scripts/query_customers.py --describe
"""

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import DEFAULT_LOG_FILE, get_logger, setup_logging
from api.services.customer_filters import CustomerFilters
from src.database import count_filtered, fetch_filtered, get_connection, initialize_database

logger = get_logger("query_customers")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Query the demo customers with a filter query string",
    )
    parser.add_argument("--db", type=Path, default=config.database.path, help="Database file")
    parser.add_argument("--query", default="", help="Filter query string")
    parser.add_argument("--limit", type=int, default=config.database.max_rows, help="Max rows to print")
    parser.add_argument("--describe", action="store_true", help="Print the filters and their operators")
    parser.add_argument("--log-level", default=config.app.log_level, help="Logging level")
    parser.add_argument("--log-file", action="store_true", help=f"Also log to {DEFAULT_LOG_FILE}")
    args = parser.parse_args(argv)

    setup_logging(log_level=args.log_level, log_file=DEFAULT_LOG_FILE if args.log_file else None)

    filters = CustomerFilters()

    if args.describe:
        for f in filters.all_filters:
            operators = ", ".join(f.operators())
            print(f"{f.name:<16} {f.kind:<14} {operators}")
        return 0

    filters.parse_query(args.query)
    if not filters.valid:
        for error in filters.errors:
            print(f"ERROR: {error}")
        return 1

    if args.db == config.database.path:
        config.ensure_directories()

    with get_connection(args.db) as conn:
        initialize_database(conn)
        df = fetch_filtered(conn, "customers", filters, order_by="customers.id", limit=args.limit)
        total = count_filtered(conn, "customers", filters)

    if filters.conditions is not None:
        sql, params = filters.conditions.to_sql()
        logger.info(f"WHERE {sql} {params}")

    print(df.to_string(index=False) if not df.empty else "No matching customers")
    print(f"\n{total} matching customer(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
