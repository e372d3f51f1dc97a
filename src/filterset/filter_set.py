"""Filter sets.

A ``FilterSet`` is an ordered collection of filters that produces one
combined SQL condition for a query, plus a list of error messages for
filters whose input is invalid.

Usage:
    class CustomerFilters(FilterSet):
        def filters(self):
            self.filter("text", "Customer Name", "customers.name")
            self.filter("date", "Customer Since", "customers.since")

    filters = CustomerFilters()
    filters.parse_params({
        "fields": ["customer_name"],
        "operators": {"customer_name": "starts_with"},
        "values": {"customer_name": "Acme"},
    })
    if filters.valid:
        sql, params = filters.conditions.to_sql()
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Type, Union
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.logging_config import get_logger
from src.filterset.conditions import Condition, merge_conditions
from src.filterset.exceptions import DuplicateFilterError
from src.filterset.filters import Filter, filter_class
from src.filterset.query_string import build_nested_query, parse_nested_query

logger = get_logger("filter_set")


class FilterSet:
    """
    An ordered set of filters.

    Subclasses declare their filters by overriding ``filters()``. Instances
    are not thread-safe; use one instance per request.
    """

    def __init__(self):
        self.all_filters: List[Filter] = []
        self.errors: List[str] = []
        self.conditions: Optional[Condition] = None
        self.filters()
        self.reset()

    def filters(self) -> None:
        """Add the initial filters to the set. Override in subclasses."""

    def filter(self, kind: Union[str, Type[Filter], Filter], *args, **options) -> Filter:
        """
        Add a filter to the set.

        Add using a built-in kind:
            filter("text", "Customer Name", "customers.name", operator="is", value="Jones")
        Add using a Filter subclass:
            filter(MyFilter, "Job", "jobs.id", **options)
        Add a filter object already constructed:
            filter(my_filter)

        Filter names must be unique within the set.

        Returns:
            The added filter.

        Raises:
            UnknownFilterKindError: If ``kind`` names no built-in filter.
            DuplicateFilterError: If a filter with the same name exists.
        """
        if isinstance(kind, str):
            return self.filter(filter_class(kind), *args, **options)
        if isinstance(kind, type) and issubclass(kind, Filter):
            return self.filter(kind(*args, **options))
        if not isinstance(kind, Filter):
            raise TypeError(f"Expected a filter kind, Filter subclass or Filter, got {kind!r}")

        if self.find(kind.name) is not None:
            raise DuplicateFilterError(kind.name)
        self.all_filters.append(kind)
        return kind

    def find(self, name: str) -> Optional[Filter]:
        """Return the filter with this name, or None."""
        for f in self.all_filters:
            if f.name == name:
                return f
        return None

    def active_filters(self) -> List[Filter]:
        return [f for f in self.all_filters if f.active]

    def reset(self) -> bool:
        """Reset all filters to their defaults, then validate."""
        for f in self.all_filters:
            f.reset()
        return self.validate()

    def parse_params(self, params: Optional[Mapping[str, Any]]) -> bool:
        """
        Set filter state from submitted parameters.

        ``params`` holds ``fields`` (names of active filters), ``operators``
        (name -> operator) and ``values`` (name -> value). Unknown names and
        operators outside a filter's vocabulary are ignored.

        Returns:
            True if every active filter is valid.
        """
        for f in self.all_filters:
            f.reset()
            f.active = False

        data = dict(params or {})
        names = data.get("fields") or []
        if isinstance(names, str):
            names = [names]
        operators = data.get("operators") or {}
        values = data.get("values") or {}
        if not isinstance(operators, Mapping):
            operators = {}
        if not isinstance(values, Mapping):
            values = {}

        for name in names:
            f = self.find(name) if isinstance(name, str) else None
            if f is None:
                logger.debug(f"Ignoring unknown filter: {name!r}")
                continue

            f.active = True
            operator = operators.get(name)
            if operator in f.operators():
                f.operator = operator
            elif operator is not None:
                logger.debug(f"Ignoring operator {operator!r} for filter {name!r}")
            f.value = f.normalize_value(values.get(name))

        return self.validate()

    def to_query(self) -> str:
        """Return a query string representing the active filters."""
        data: Dict[str, Any] = {"fields": [], "operators": {}, "values": {}}
        for f in self.active_filters():
            data["fields"].append(f.name)
            data["operators"][f.name] = f.operator
            data["values"][f.name] = f.value
        return build_nested_query(data)

    def parse_query(self, query: str) -> bool:
        """Set filter state from a query string produced by ``to_query``."""
        return self.parse_params(parse_nested_query(query))

    def validate(self) -> bool:
        """Validate active filters, then rebuild ``errors`` and ``conditions``."""
        active = self.active_filters()
        for f in active:
            f.validate()

        self.errors = [f"{f.label}: {f.error}" for f in active if not f.valid]
        self.conditions = merge_conditions(*(f.condition for f in active if f.valid))

        if self.errors:
            logger.debug(f"{self.__class__.__name__} has {len(self.errors)} invalid filter(s)")
        return self.valid

    @property
    def valid(self) -> bool:
        """True if all active filters are valid."""
        return not self.errors

    def describe(self) -> Dict[str, Any]:
        """State of every filter plus errors, for rendering."""
        return {
            "filters": [f.describe() for f in self.all_filters],
            "errors": list(self.errors),
            "valid": self.valid,
        }
