"""Constants for the filterset package."""

from typing import List


# =============================================================================
# Date Input
# =============================================================================

# Years after the current year at which the two-digit-year window ends.
# With a window of 19 in 2026, '45' means 2045 and '46' means 1946.
DEFAULT_YEAR_WINDOW = 19

# Four-digit-year formats tried in order after the two-digit-year pattern
DATE_FORMATS: List[str] = [
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%Y%m%d",
    "%d-%b-%Y",
    "%B %d, %Y",
    "%b %d, %Y",
]


# =============================================================================
# Query Building
# =============================================================================

# Separator used when combining filter conditions
CONDITION_SEPARATOR = " AND "

# Maximum choices shown at once in a multi-select control
MAX_SELECT_SIZE = 7
