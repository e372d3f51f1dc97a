"""Date parsing for submitted filter values."""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Union

from config.constants import DATE_FORMATS, DEFAULT_YEAR_WINDOW

# m/d/yy or m-d-yy
_TWO_DIGIT_YEAR = re.compile(r"^(\d{1,2})[/-](\d{1,2})[/-](\d{2})$")


@dataclass(frozen=True)
class DateWindow:
    """
    100-year window used to expand two-digit years.

    The window ends ``years_ahead`` years after ``today``'s year. With
    ``years_ahead=19`` and a current year of 2026 the window is 1946-2045,
    so '35' is read as 2035 and '46' as 1946.
    """

    years_ahead: int = DEFAULT_YEAR_WINDOW
    today: date = field(default_factory=date.today)

    @property
    def end_year(self) -> int:
        return self.today.year + self.years_ahead

    @property
    def begin_year(self) -> int:
        return self.end_year - 99

    def expand_year(self, two_digit_year: int) -> int:
        """Map a two-digit year onto the window."""
        year = self.begin_year - self.begin_year % 100 + two_digit_year
        if year < self.begin_year:
            year += 100
        return year


def parse_date(value: Union[str, date, None], window: Optional[DateWindow] = None) -> date:
    """
    Parse a submitted date.

    Args:
        value: Date string (or an already-parsed date).
        window: Two-digit-year window. Defaults to ``DateWindow()``.

    Returns:
        Parsed date.

    Raises:
        ValueError: If the value is empty or is not a calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = "" if value is None else str(value).strip()
    if not text:
        raise ValueError("empty date")

    match = _TWO_DIGIT_YEAR.match(text)
    if match:
        window = window or DateWindow()
        month, day, year = (int(g) for g in match.groups())
        return date(window.expand_year(year), month, day)

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"invalid date: {text!r}")
