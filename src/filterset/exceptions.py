"""Exceptions raised while declaring a filter set.

These signal programming errors at setup time. Bad user input is never
raised; it is reported through ``Filter.error`` and ``FilterSet.errors``.
"""


class FilterSetError(Exception):
    """Base class for filter set setup errors."""


class UnknownFilterKindError(FilterSetError):
    """Raised when a filter kind name does not match a registered kind."""

    def __init__(self, kind: str, known):
        self.kind = kind
        self.known = sorted(known)
        super().__init__(f"Unknown filter kind {kind!r}; expected one of: {', '.join(self.known)}")


class DuplicateFilterError(FilterSetError):
    """Raised when two filters in one set share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A filter named {name!r} is already registered")
