"""Filter sets for building search forms over relational data."""

from .conditions import Condition, merge_conditions
from .dates import DateWindow, parse_date
from .exceptions import FilterSetError, UnknownFilterKindError, DuplicateFilterError
from .filters import (
    Filter,
    TextFilter,
    SelectFilter,
    CheckBoxesFilter,
    RadioButtonsFilter,
    DateFilter,
    BooleanFilter,
    FILTER_KINDS,
    choice_condition,
    filter_class,
    parameterize,
)
from .filter_set import FilterSet
from .query_string import build_nested_query, parse_nested_query

__all__ = [
    # Conditions
    "Condition",
    "merge_conditions",
    # Dates
    "DateWindow",
    "parse_date",
    # Errors
    "FilterSetError",
    "UnknownFilterKindError",
    "DuplicateFilterError",
    # Filters
    "Filter",
    "TextFilter",
    "SelectFilter",
    "CheckBoxesFilter",
    "RadioButtonsFilter",
    "DateFilter",
    "BooleanFilter",
    "FILTER_KINDS",
    "choice_condition",
    "filter_class",
    "parameterize",
    # Filter sets
    "FilterSet",
    "build_nested_query",
    "parse_nested_query",
]
