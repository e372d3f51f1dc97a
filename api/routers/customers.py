"""Customers API router."""

from typing import Any

import pandas as pd
from fastapi import APIRouter, HTTPException, Query

from api.config import get_settings
from api.models.schemas import CustomerListResponse
from api.services.customer_filters import CustomerFilters
from api.services.database import get_db
from src.database import count_filtered, fetch_filtered

router = APIRouter()

settings = get_settings()


def _json_value(value: Any) -> Any:
    if isinstance(value, pd.Timestamp):
        return value.date().isoformat()
    if value is None or pd.isna(value):
        return None
    if hasattr(value, "item"):
        return value.item()
    return value


@router.get("", response_model=CustomerListResponse)
async def list_customers(
    q: str = Query("", description="Filter query string"),
    limit: int = Query(settings.default_limit, ge=1, le=settings.max_limit, description="Max results"),
):
    """List customers matching the submitted filters."""
    filters = CustomerFilters()
    if q:
        filters.parse_query(q)

    if not filters.valid:
        raise HTTPException(status_code=422, detail={"errors": filters.errors})

    conn = get_db().connect()
    df = fetch_filtered(conn, "customers", filters, order_by="customers.id", limit=limit)
    records = [
        {key: _json_value(value) for key, value in row.items()}
        for row in df.to_dict(orient="records")
    ]

    return {
        "total": count_filtered(conn, "customers", filters),
        "customers": records,
        "query": filters.to_query(),
    }
