"""API Pydantic models."""

from api.models.schemas import (
    FilterParams,
    FilterState,
    ConditionResponse,
    FilterSetResult,
    CustomerListResponse,
)

__all__ = [
    "FilterParams",
    "FilterState",
    "ConditionResponse",
    "FilterSetResult",
    "CustomerListResponse",
]
