"""In-memory shard for split tests.

SyntheticShardGateway implements the StatsGateway protocol over a sorted list
of field values plus a number of documents missing the field. It evaluates the
filter syntax produced by shardsplit (half-open ranges, missing-value filters
and OR-combinations) with bisect, so million-document shards stay fast.
"""

import re
from bisect import bisect_left, bisect_right
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta, timezone
from typing import Any

from shardsplit.core.exceptions import BackendQueryError
from shardsplit.core.models import FieldStats

_TERM = re.compile(r"^(-?)([^:\s]+):\[(\S+) TO (\S+)([\]}])$")

EPOCH_2024 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def parse_iso(text: str) -> datetime:
    return datetime.fromisoformat(text.replace("Z", "+00:00"))


def render_iso(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class SyntheticShardGateway:
    """Deterministic StatsGateway fake with call recording.

    Args:
        values: Field values of documents that have the field
        missing: Number of documents without the field
        field: Name of the split field
        parse: Parses a bound literal from a filter back into a value
        render: Renders a value the way the backend reports stats min/max
        reports_missing: Whether top-level stats include the missing count
        fail_after: Raise BackendQueryError once this many calls succeeded
    """

    def __init__(
        self,
        values: Iterable[Any],
        missing: int = 0,
        field: str = "value",
        parse: Callable[[str], Any] = int,
        render: Callable[[Any], Any] = float,
        reports_missing: bool = True,
        fail_after: int | None = None,
    ) -> None:
        self.values = sorted(values)
        self.missing = missing
        self.field = field
        self._parse = parse
        self._render = render
        self.reports_missing = reports_missing
        self.fail_after = fail_after
        self.calls: list[tuple[str, str | None]] = []
        self.closed = False

    # Context manager / lifecycle

    def __enter__(self) -> "SyntheticShardGateway":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        self.closed = True

    @property
    def total_docs(self) -> int:
        return len(self.values) + self.missing

    # StatsGateway

    def field_stats(
        self, filter_query: str | None, field: str, distributed: bool = False
    ) -> FieldStats:
        self._record("stats", filter_query)
        slices, missing_hit = self._evaluate(filter_query)
        count = sum(j - i for i, j in slices)
        non_empty = [(i, j) for i, j in slices if j > i]
        if not non_empty:
            return FieldStats(count=0, missing=self._reported_missing(filter_query))
        return FieldStats(
            count=count,
            min=self._render(min(self.values[i] for i, _ in non_empty)),
            max=self._render(max(self.values[j - 1] for _, j in non_empty)),
            missing=self._reported_missing(filter_query),
        )

    def count(self, filter_query: str | None) -> int:
        self._record("count", filter_query)
        slices, missing_hit = self._evaluate(filter_query)
        return sum(j - i for i, j in slices) + (self.missing if missing_hit else 0)

    # Helpers used by tests

    def matches(self, filter_query: str, value: Any) -> bool:
        """True when a document with ``value`` (None = missing) matches."""
        for negated, lo, hi, hi_inclusive in self._terms(filter_query):
            if negated:
                if value is None:
                    return True
                continue
            if value is None:
                continue
            if lo is not None and value < lo:
                continue
            if hi is not None and (value > hi if hi_inclusive else value >= hi):
                continue
            return True
        return False

    def stats_calls(self) -> list[str | None]:
        return [f for kind, f in self.calls if kind == "stats"]

    def count_calls(self) -> list[str | None]:
        return [f for kind, f in self.calls if kind == "count"]

    # Internals

    def _record(self, kind: str, filter_query: str | None) -> None:
        if self.fail_after is not None and len(self.calls) >= self.fail_after:
            raise BackendQueryError("synthetic backend failure", shard_url="synthetic")
        self.calls.append((kind, filter_query))

    def _reported_missing(self, filter_query: str | None) -> int | None:
        if not self.reports_missing:
            return None
        return self.missing if filter_query is None else 0

    def _terms(self, filter_query: str) -> list[tuple[bool, Any, Any, bool]]:
        terms = []
        for raw in filter_query.split(" OR "):
            match = _TERM.match(raw.strip())
            if match is None or match.group(2) != self.field:
                raise BackendQueryError(f"unparseable filter: {raw!r}")
            negated, _, lo, hi, close = match.groups()
            terms.append(
                (
                    negated == "-",
                    None if lo == "*" else self._parse(lo),
                    None if hi == "*" else self._parse(hi),
                    close == "]",
                )
            )
        return terms

    def _evaluate(self, filter_query: str | None) -> tuple[list[tuple[int, int]], bool]:
        if filter_query is None:
            return [(0, len(self.values))], True

        slices: list[tuple[int, int]] = []
        missing_hit = False
        for negated, lo, hi, hi_inclusive in self._terms(filter_query):
            if negated:
                missing_hit = True
                continue
            i = 0 if lo is None else bisect_left(self.values, lo)
            if hi is None:
                j = len(self.values)
            elif hi_inclusive:
                j = bisect_right(self.values, hi)
            else:
                j = bisect_left(self.values, hi)
            slices.append((i, max(i, j)))
        return slices, missing_hit


def uniform_values(n: int) -> list[int]:
    """One document per value in 0..n-1."""
    return list(range(n))


def skewed_values() -> list[int]:
    """1,000,000 documents; 90% of them in the lowest quarter of 0..1,000,000."""
    dense = [i * 250_000 // 900_000 for i in range(900_000)]
    sparse = [250_000 + i * 750_000 // 100_000 for i in range(100_000)]
    return dense + sparse


def hourly_datetimes(n: int) -> list[datetime]:
    return [EPOCH_2024 + timedelta(hours=h) for h in range(n)]
