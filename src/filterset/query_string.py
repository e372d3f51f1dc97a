"""Bracket-style nested query strings.

Encodes and decodes the ``fields[]=a&operators[a]=is&values[a][]=x`` form
that HTML forms submit for nested parameters.
"""

import re
from datetime import date
from typing import Any, Dict, List
from urllib.parse import parse_qsl, quote_plus

from config.logging_config import get_logger

logger = get_logger("query_string")

_KEY = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_SEGMENT = re.compile(r"\[([^\[\]]*)\]")


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def build_nested_query(value: Any, prefix: str = None) -> str:
    """
    Encode a nested mapping as a URL query string.

    Mapping keys are emitted in sorted order and list order is preserved.
    ``None`` encodes as an empty value, sets encode as sorted lists and empty
    lists are omitted.

    Args:
        value: Mapping (or list/scalar when recursing).
        prefix: Key prefix for nested values.

    Returns:
        URL-encoded query string.
    """
    if isinstance(value, dict):
        parts = [
            build_nested_query(v, f"{prefix}[{k}]" if prefix else str(k))
            for k, v in sorted(value.items(), key=lambda item: str(item[0]))
        ]
        return "&".join(p for p in parts if p)

    if isinstance(value, (set, frozenset)):
        value = sorted(value, key=str)

    if isinstance(value, (list, tuple)):
        return "&".join(build_nested_query(v, f"{prefix}[]") for v in value)

    if prefix is None:
        raise TypeError("A top-level value must be a mapping")

    return f"{quote_plus(prefix)}={quote_plus(_scalar(value))}"


def parse_nested_query(query: str) -> Dict[str, Any]:
    """
    Decode a URL query string with bracketed keys into nested dicts and lists.

    ``a[b]=1`` becomes ``{"a": {"b": "1"}}`` and ``a[]=1&a[]=2`` becomes
    ``{"a": ["1", "2"]}``. Keys that do not fit this grammar are skipped.

    Args:
        query: URL-encoded query string (a leading '?' is ignored).

    Returns:
        Nested parameters dict.
    """
    params: Dict[str, Any] = {}
    for key, value in parse_qsl((query or "").lstrip("?"), keep_blank_values=True):
        match = _KEY.match(key)
        if not match:
            logger.debug(f"Skipping malformed query key: {key!r}")
            continue
        parts = [match.group(1)] + _SEGMENT.findall(match.group(2))
        _assign(params, parts, value)
    return params


def _assign(params: Dict[str, Any], parts: List[str], value: str) -> None:
    target = params
    for i, part in enumerate(parts[:-1]):
        following = parts[i + 1]
        is_list = following == "" and i + 1 == len(parts) - 1

        if part == "" or (following == "" and not is_list):
            # Lists of mappings (a[][b]) are not part of the format
            logger.debug(f"Skipping unsupported query key: {parts!r}")
            return

        if is_list:
            existing = target.get(part)
            if not isinstance(existing, list):
                existing = target[part] = []
            existing.append(value)
            return

        child = target.get(part)
        if not isinstance(child, dict):
            child = target[part] = {}
        target = child

    target[parts[-1]] = value
