"""SQL condition fragments and their combination.

A condition is a SQL template with ``?`` positional placeholders plus the
ordered parameters that fill them. Conditions never touch a database; they
are handed to whatever executes the query.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from config.constants import CONDITION_SEPARATOR


@dataclass(frozen=True)
class Condition:
    """A single SQL condition with positional parameters."""

    sql: str
    params: Tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of params, store as a tuple
        object.__setattr__(self, "params", tuple(self.params))

    @property
    def placeholder_count(self) -> int:
        """Number of ``?`` placeholders in the template."""
        return self.sql.count("?")

    def to_sql(self) -> Tuple[str, List[Any]]:
        """Return the (sql, params) pair expected by DB-API style executors."""
        return self.sql, list(self.params)

    def to_dict(self) -> dict:
        """Serialize for JSON responses."""
        return {"sql": self.sql, "params": [_jsonable(p) for p in self.params]}


def _jsonable(value: Any) -> Any:
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value


def placeholders(values) -> str:
    """Build a ``?, ?, ?`` placeholder list for an IN clause."""
    return ", ".join(["?" for _ in values])


def merge_conditions(*conditions: Optional[Condition]) -> Optional[Condition]:
    """
    Combine conditions into one conjunctive condition.

    ``None`` entries are skipped. Each template is wrapped in parentheses and
    parameters are concatenated in the same order as their templates, so
    placeholders keep their positional correspondence.

    Args:
        *conditions: Conditions to combine, in order.

    Returns:
        Combined condition, or None if nothing was given.
    """
    present = [c for c in conditions if c is not None]
    if not present:
        return None

    sql = CONDITION_SEPARATOR.join(f"({c.sql})" for c in present)
    params: List[Any] = []
    for c in present:
        params.extend(c.params)

    return Condition(sql, params)
