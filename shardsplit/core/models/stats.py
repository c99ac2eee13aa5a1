"""Field statistics snapshot."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldStats:
    """Statistics for one field over the documents matching a filter.

    Attributes:
        count: Documents that have a value for the field
        min: Smallest observed value (raw backend representation), None if absent
        max: Largest observed value (raw backend representation), None if absent
        missing: Documents lacking the field, None when the backend did not report it
    """

    count: int
    min: Any = None
    max: Any = None
    missing: int | None = None

    @property
    def is_degenerate(self) -> bool:
        """True when there is nothing to divide: no values or no bounds."""
        return self.count <= 0 or self.min is None or self.max is None

    @classmethod
    def from_response(cls, payload: dict[str, Any] | None) -> "FieldStats":
        """Build from a backend stats entry (``stats.stats_fields[field]``)."""
        if not payload:
            return cls(count=0)
        missing = payload.get("missing")
        return cls(
            count=int(payload.get("count") or 0),
            min=payload.get("min"),
            max=payload.get("max"),
            missing=int(missing) if missing is not None else None,
        )
