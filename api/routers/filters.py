"""Filter set API router.

Exposes the demo customer filter set: its controls, and the conditions and
errors produced from submitted filter state.
"""

from fastapi import APIRouter, Query

from api.models.schemas import FilterParams, FilterSetResult
from api.services.customer_filters import CustomerFilters
from src.filterset import FilterSet

router = APIRouter()


def filter_set_result(filters: FilterSet) -> dict:
    """Serialize a validated filter set for a response."""
    return {
        "valid": filters.valid,
        "errors": filters.errors,
        "conditions": filters.conditions.to_dict() if filters.conditions else None,
        "query": filters.to_query(),
        "filters": [f.describe() for f in filters.all_filters],
    }


@router.get("", response_model=FilterSetResult)
async def describe_filters():
    """Get the filters with their default state."""
    return filter_set_result(CustomerFilters())


@router.post("/apply", response_model=FilterSetResult)
async def apply_filters(params: FilterParams):
    """Apply submitted filter state, or reset to the defaults."""
    filters = CustomerFilters()
    if not params.reset:
        filters.parse_params(params.model_dump(exclude={"reset"}))
    return filter_set_result(filters)


@router.get("/parse", response_model=FilterSetResult)
async def parse_filters(
    q: str = Query("", description="Query string produced by a previous apply"),
):
    """Restore filter state from a query string."""
    filters = CustomerFilters()
    filters.parse_query(q)
    return filter_set_result(filters)
