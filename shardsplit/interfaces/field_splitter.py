"""FieldTypeSplitter protocol - per field type range arithmetic."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

from shardsplit.core.models import FieldStats, RangeSplit, ShardQuery

if TYPE_CHECKING:
    from .stats_gateway import StatsGateway


class FieldTypeSplitter(Protocol):
    """Pluggable strategy that knows how to divide one field type's values.

    Selected once per field (numeric, temporal, ...) and carried by every
    RangeSplit it creates.
    """

    field_type: str

    def range_filter(self, field: str, lower: Any, upper: Any) -> str:
        """Render the half-open ``[lower, upper)`` predicate; None is unbounded."""
        ...

    def create_split(
        self,
        query: ShardQuery,
        shard_url: str,
        field: str,
        stats: FieldStats,
        lower: Any,
        upper: Any,
        num_hits: int = 0,
    ) -> RangeSplit:
        """Range constructor used for new, re-split and joined splits."""
        ...

    def initial_split(
        self, query: ShardQuery, shard_url: str, field: str, stats: FieldStats
    ) -> RangeSplit:
        """One open-ended split spanning the whole shard, tagged with stats.count."""
        ...

    def re_split(
        self, split: RangeSplit, gateway: "StatsGateway", docs_per_split: int
    ) -> Sequence[RangeSplit]:
        """Contiguous, ordered children that exactly partition ``split``."""
        ...
