"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import Any, Optional


class FilterParams(BaseModel):
    """Submitted filter state."""
    fields: list[str] = Field(default_factory=list, description="Names of active filters")
    operators: dict[str, Any] = Field(default_factory=dict, description="Operator per filter name")
    values: dict[str, Any] = Field(default_factory=dict, description="Value per filter name")
    reset: bool = Field(False, description="Reset to default filters instead of applying")


class OperatorOption(BaseModel):
    """Operator choice for a filter control."""
    value: str
    label: str


class ChoiceOption(BaseModel):
    """Choice for select, check box and radio button controls."""
    label: str
    value: str


class FilterState(BaseModel):
    """Public state of one filter, enough to render its control."""
    name: str
    label: str
    kind: str
    active: bool
    operator: Optional[str] = None
    operators: list[OperatorOption]
    value: Any = None
    error: Optional[str] = None
    choices: Optional[list[ChoiceOption]] = None
    size: Optional[int] = None
    multiple: Optional[bool] = None


class ConditionResponse(BaseModel):
    """Combined SQL condition."""
    sql: str
    params: list[Any]


class FilterSetResult(BaseModel):
    """Result of applying filter state."""
    valid: bool
    errors: list[str]
    conditions: Optional[ConditionResponse] = None
    query: str
    filters: list[FilterState]


class CustomerListResponse(BaseModel):
    """Customers matching the filters."""
    total: int
    customers: list[dict[str, Any]]
    query: str
