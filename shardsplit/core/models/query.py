"""Base query model shared by every split of a shard."""

from dataclasses import dataclass, field, replace

# Parameters that must not leak into zero-row statistics queries
_PAGING_PARAMS = ("cursorMark", "rows", "start", "distrib", "sort")


@dataclass(frozen=True)
class ShardQuery:
    """Backend query that a shard's splits partition.

    Attributes:
        q: Main query string
        filter_queries: Filter queries applied on top of ``q``
        params: Any additional request parameters (sort, cursorMark, fl, ...)
    """

    q: str = "*:*"
    filter_queries: tuple[str, ...] = ()
    params: dict[str, str] = field(default_factory=dict)

    def with_filter(self, filter_query: str | None) -> "ShardQuery":
        """Return a copy with one more filter query appended."""
        if not filter_query:
            return self
        return replace(self, filter_queries=self.filter_queries + (filter_query,))

    def for_stats(self, distributed: bool = False) -> "ShardQuery":
        """Return a copy normalized for a zero-row, shard-local stats query."""
        params = {k: v for k, v in self.params.items() if k not in _PAGING_PARAMS}
        params["rows"] = "0"
        params["start"] = "0"
        params["distrib"] = "true" if distributed else "false"
        return replace(self, params=params)

    def to_params(self) -> list[tuple[str, str]]:
        """Flatten into request parameters (``fq`` repeats once per filter)."""
        pairs: list[tuple[str, str]] = [("q", self.q)]
        pairs.extend(("fq", fq) for fq in self.filter_queries)
        pairs.extend(self.params.items())
        return pairs
