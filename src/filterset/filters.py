"""Filter definitions.

A filter is one named, typed query condition with mutable state: whether it
is active, which operator is selected and what value was entered. Calling
``validate()`` turns that state into either a ``Condition`` or an error
message. Validation never raises on bad input.

Kinds:
    text           TextFilter
    select         SelectFilter
    check_boxes    CheckBoxesFilter
    radio_buttons  RadioButtonsFilter
    date           DateFilter
    boolean        BooleanFilter
"""

import re
import unicodedata
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type
import sys

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import MAX_SELECT_SIZE, config
from config.logging_config import get_logger
from src.filterset.conditions import Condition, placeholders
from src.filterset.dates import DateWindow, parse_date
from src.filterset.exceptions import UnknownFilterKindError

logger = get_logger("filters")

BLANK = "blank"


def parameterize(label: str) -> str:
    """Derive a filter name from its label ('Customer Name' -> 'customer_name')."""
    text = unicodedata.normalize("NFKD", str(label)).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]+", "_", text.lower()).strip("_")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset)):
        # A collection of blank entries counts as missing
        return all(_is_blank(v) for v in value)
    return False


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class Filter:
    """
    Base class for a filter.

    Args:
        label: Name of the filter shown to the user.
        field: Column (or SQL expression) the condition applies to.
        **options: Filter options. Supported by all filters:
            active   - True if the filter is initially active
            operator - initial operator
            value    - initial value(s)
    """

    kind = "filter"

    def __init__(self, label: str, field: str, **options):
        self.name = parameterize(label)
        self.label = label
        self.field = field
        self.options: Dict[str, Any] = {**self.default_options(), **options}
        self.reset()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, active={self.active!r}, "
            f"operator={self.operator!r}, value={self.value!r})"
        )

    def default_options(self) -> Dict[str, Any]:
        return {"active": False, "operator": "is", "value": None}

    def operators(self) -> List[str]:
        """Allowable operators for this filter, in display order."""
        return ["is"]

    @property
    def condition(self) -> Optional[Condition]:
        return self._condition

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def valid(self) -> bool:
        return not self._error

    def reset(self) -> None:
        """Restore active/operator/value from options and clear results."""
        self.active = bool(self.options.get("active"))
        self.operator = self.options.get("operator")
        value = self.options.get("value")
        if isinstance(value, (list, tuple, set, frozenset)):
            value = _as_list(value)
        self.value = value
        self._condition: Optional[Condition] = None
        self._error: Optional[str] = None

    def validate(self) -> None:
        """Set ``condition`` or ``error`` from the current state."""
        self._condition = None
        self._error = f"No validation implemented for {self.__class__.__name__}.validate"

    def normalize_value(self, raw: Any) -> Any:
        """Coerce a submitted value into the shape this filter stores."""
        return raw

    def operator_label(self, op: str) -> str:
        """Display text for an operator ('does_not_contain' -> 'does not contain')."""
        return str(op).replace("_", " ")

    def stringified_choices(self, choices=None) -> List[Any]:
        """Choices with every entry stringified; [text, value] pairs are kept."""
        if choices is None:
            choices = _as_list(self.options.get("choices"))
        return [
            self.stringified_choices(entry) if isinstance(entry, (list, tuple)) else str(entry)
            for entry in choices
        ]

    def describe(self) -> Dict[str, Any]:
        """Public state needed to render a control for this filter."""
        return {
            "name": self.name,
            "label": self.label,
            "kind": self.kind,
            "active": self.active,
            "operator": self.operator,
            "operators": [
                {"value": op, "label": self.operator_label(op)} for op in self.operators()
            ],
            "value": _jsonable_value(self.value),
            "error": self._error,
        }


def _jsonable_value(value: Any) -> Any:
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_as_text(v) if isinstance(v, date) else v for v in value]
    if isinstance(value, date):
        return value.isoformat()
    return value


class TextFilter(Filter):
    """Free text filter."""

    kind = "text"

    TEMPLATES = {
        "is": ("{field} = ?", "{value}"),
        "is_not": ("{field} <> ?", "{value}"),
        "contains": ("{field} LIKE ?", "%{value}%"),
        "does_not_contain": ("{field} NOT LIKE ?", "%{value}%"),
        "starts_with": ("{field} LIKE ?", "{value}%"),
    }

    def default_options(self) -> Dict[str, Any]:
        return {**super().default_options(), "operator": "contains"}

    def operators(self) -> List[str]:
        return ["is", "is_not", "contains", "does_not_contain", "starts_with", BLANK]

    def normalize_value(self, raw: Any) -> str:
        if isinstance(raw, (list, tuple)):
            raw = raw[0] if raw else None
        return _as_text(raw)

    def validate(self) -> None:
        self._error = self._condition = None
        v = _as_text(self.value).strip()
        if not v and self.operator != BLANK:
            self._error = "please enter a value"
            return

        if self.operator == BLANK:
            self._condition = Condition(f"{self.field} IS NULL")
        elif self.operator in self.TEMPLATES:
            sql, pattern = self.TEMPLATES[self.operator]
            self._condition = Condition(sql.format(field=self.field), [pattern.format(value=v)])

    def describe(self) -> Dict[str, Any]:
        data = super().describe()
        data["size"] = self.options.get("size", 30)
        return data


def choice_condition(field: str, operator: str, value: Any) -> Tuple[Optional[Condition], Optional[str]]:
    """
    Shared validation for choice-set filters (select, check boxes, radio buttons).

    Returns:
        (condition, error); exactly one is set for a known operator.
    """
    if _is_blank(value) and operator != BLANK:
        return None, "Please select a value"

    if operator == BLANK:
        return Condition(f"{field} IS NULL"), None

    values = _as_list(value)
    if operator == "is":
        return Condition(f"{field} IN ({placeholders(values)})", values), None
    if operator == "is_not":
        return Condition(f"{field} NOT IN ({placeholders(values)})", values), None
    return None, None


# Operator vocabulary shared by the choice-set filters
CHOICE_OPERATORS = ("is", "is_not", BLANK)


class SelectFilter(Filter):
    """Drop-down selection of one or more choices.

    Options:
        choices - list of values or [text, value] pairs
    """

    kind = "select"

    def operators(self) -> List[str]:
        return list(CHOICE_OPERATORS)

    def normalize_value(self, raw: Any) -> Optional[List[str]]:
        if raw is None:
            return None
        return [_as_text(v) for v in _as_list(raw)]

    def validate(self) -> None:
        self._condition, self._error = choice_condition(self.field, self.operator, self.value)

    def describe(self) -> Dict[str, Any]:
        data = super().describe()
        data["choices"] = _choice_entries(self.stringified_choices())
        data["multiple"] = len(_as_list(self.value)) != 1
        data["size"] = min(len(data["choices"]), MAX_SELECT_SIZE) if data["multiple"] else 1
        return data


class CheckBoxesFilter(Filter):
    """A check box per choice; any number may be ticked."""

    kind = "check_boxes"

    def operators(self) -> List[str]:
        return list(CHOICE_OPERATORS)

    def normalize_value(self, raw: Any) -> Optional[List[str]]:
        if raw is None:
            return None
        return [_as_text(v) for v in _as_list(raw)]

    def validate(self) -> None:
        self._condition, self._error = choice_condition(self.field, self.operator, self.value)

    def describe(self) -> Dict[str, Any]:
        data = super().describe()
        data["choices"] = _choice_entries(self.stringified_choices())
        return data


class RadioButtonsFilter(Filter):
    """A radio button per choice; exactly one may be picked."""

    kind = "radio_buttons"

    def operators(self) -> List[str]:
        return list(CHOICE_OPERATORS)

    def normalize_value(self, raw: Any) -> Optional[str]:
        if isinstance(raw, (list, tuple)):
            raw = raw[0] if raw else None
        return None if raw is None else _as_text(raw)

    def validate(self) -> None:
        self._condition, self._error = choice_condition(self.field, self.operator, self.value)

    def describe(self) -> Dict[str, Any]:
        data = super().describe()
        data["choices"] = _choice_entries(self.stringified_choices())
        return data


def _choice_entries(choices: List[Any]) -> List[Dict[str, str]]:
    entries = []
    for choice in choices:
        if isinstance(choice, list):
            text = choice[0] if choice else ""
            value = choice[1] if len(choice) > 1 else text
        else:
            text = value = choice
        entries.append({"label": text, "value": value})
    return entries


class DateFilter(Filter):
    """Date filter with single-date and range operators.

    Options:
        year_window - years after the current year at which the two-digit-year
                      window ends (defaults to configuration)
    """

    kind = "date"

    TEMPLATES = {
        "is": "{field} = ?",
        "on_or_after": "{field} >= ?",
        "on_or_before": "{field} <= ?",
    }

    def default_options(self) -> Dict[str, Any]:
        return {**super().default_options(), "year_window": config.dates.year_window}

    def operators(self) -> List[str]:
        return ["is", "on_or_after", "on_or_before", "between", BLANK]

    @property
    def window(self) -> DateWindow:
        return DateWindow(years_ahead=int(self.options["year_window"]))

    def normalize_value(self, raw: Any) -> Optional[List[str]]:
        if raw is None:
            return None
        return [_as_text(v) for v in _as_list(raw)][:2]

    def validate(self) -> None:
        self._error = self._condition = None
        values = [_as_text(v).strip() for v in _as_list(self.value)]
        v1, v2 = (values + ["", ""])[:2]
        window = self.window
        d1 = d2 = None

        if self.operator != BLANK:
            if not v1:
                self._error = "please enter a date"
                return
            try:
                d1 = parse_date(v1, window)
            except ValueError:
                logger.debug(f"Could not parse date for {self.name}: {v1!r}")
                self._error = "date is invalid"
                return
            if self.operator == "between":
                # Checks v1 again, so a blank second date is reported as invalid
                if not v1:
                    self._error = "please enter a second date"
                    return
                try:
                    d2 = parse_date(v2, window)
                except ValueError:
                    logger.debug(f"Could not parse second date for {self.name}: {v2!r}")
                    self._error = "second date is invalid"
                    return
                if d2 < d1:
                    self._error = "second date cannot be earlier than first date"
                    return

        if self.operator == BLANK:
            self._condition = Condition(f"{self.field} IS NULL")
        elif self.operator == "between":
            self._condition = Condition(f"{self.field} BETWEEN ? AND ?", [d1, d2])
        elif self.operator in self.TEMPLATES:
            self._condition = Condition(self.TEMPLATES[self.operator].format(field=self.field), [d1])


class BooleanFilter(Filter):
    """Yes/no filter on a boolean column.

    Options:
        allow_blank - also offer a 'blank' operator matching NULL
    """

    kind = "boolean"

    def default_options(self) -> Dict[str, Any]:
        return {**super().default_options(), "operator": "yes", "allow_blank": False}

    def operators(self) -> List[str]:
        ops = ["yes", "no"]
        if self.options.get("allow_blank"):
            ops.append(BLANK)
        return ops

    def normalize_value(self, raw: Any) -> None:
        return None

    def validate(self) -> None:
        self._error = None
        self._condition = {
            "yes": Condition(f"{self.field}"),
            "no": Condition(f"NOT {self.field}"),
            BLANK: Condition(f"{self.field} IS NULL"),
        }.get(self.operator)


FILTER_KINDS: Dict[str, Type[Filter]] = {
    "text": TextFilter,
    "select": SelectFilter,
    "check_boxes": CheckBoxesFilter,
    "radio_buttons": RadioButtonsFilter,
    "date": DateFilter,
    "boolean": BooleanFilter,
}


def filter_class(kind: str) -> Type[Filter]:
    """
    Look up a built-in filter class by kind name.

    Raises:
        UnknownFilterKindError: If the kind is not registered.
    """
    try:
        return FILTER_KINDS[str(kind).lower()]
    except KeyError:
        raise UnknownFilterKindError(str(kind), FILTER_KINDS) from None
