"""Solr filter query syntax used by splits.

Ranges are half-open so neighbouring splits never match the same document:

    field:[lo TO hi}     lo <= value < hi
    field:[lo TO *]      value >= lo (open upper end)
    field:[* TO hi}      value < hi (open lower end)
    field:[* TO *]       any value present
    -field:[* TO *]      field missing
"""

from datetime import datetime, timezone
from typing import Any

# Characters with meaning in the standard query parser that may appear in values
_SPECIAL_CHARS = set('+-&|!(){}[]^"~*?:\\/ ')


def format_value(value: Any) -> str:
    """Render a bound value in Solr's query syntax."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.isoformat(timespec="milliseconds") + "Z"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    text = str(value)
    return "".join(f"\\{ch}" if ch in _SPECIAL_CHARS else ch for ch in text)


def range_filter(field: str, lower: Any, upper: Any) -> str:
    """Half-open range filter; None on either side is unbounded."""
    lo = "*" if lower is None else format_value(lower)
    if upper is None:
        return f"{field}:[{lo} TO *]"
    return f"{field}:[{lo} TO {format_value(upper)}}}"


def missing_filter(field: str) -> str:
    """Filter matching documents that have no value for ``field``."""
    return f"-{field}:[* TO *]"


def or_filter(lhs: str, rhs: str) -> str:
    return f"{lhs} OR {rhs}"
