"""Split value types.

A split is one sub-partition of a shard's result set for the base query. Two
variants exist:

- RangeSplit: a half-open ``[lower_inclusive, upper)`` range over the split
  field. Open ends (None) are unbounded. The filter predicate is rendered by
  the field splitter that created it.
- CompositeSplit: an arbitrary filter predicate, produced by OR-ing two
  non-contiguous splits together or by the missing-value bucket.

Splits are immutable. ``num_hits`` is an estimate fixed at construction; joins
and re-splits produce new splits rather than updating existing ones.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from .query import ShardQuery
from .stats import FieldStats

if TYPE_CHECKING:
    from shardsplit.interfaces.field_splitter import FieldTypeSplitter
    from shardsplit.interfaces.stats_gateway import StatsGateway


@dataclass(frozen=True, kw_only=True)
class ShardSplit(ABC):
    """Common contract of every split; only the variants below are instantiated."""

    shard_url: str
    query: ShardQuery = field(repr=False)
    field_name: str
    num_hits: int = 0

    @property
    @abstractmethod
    def filter_predicate(self) -> str:
        """Backend filter selecting exactly this split's documents."""

    def with_hits(self, num_hits: int) -> "ShardSplit":
        """Return a copy carrying a different hit estimate."""
        return replace(self, num_hits=num_hits)

    def split_query(self) -> ShardQuery:
        """Base query restricted to this split, ready to be executed."""
        return self.query.with_filter(self.filter_predicate)

    def re_split(
        self, gateway: "StatsGateway", docs_per_split: int
    ) -> list["ShardSplit"]:
        """Divide into children of roughly ``docs_per_split`` hits each.

        Splits without range semantics cannot be divided and return themselves.
        """
        return [self]

    def __str__(self) -> str:
        return f"{self.filter_predicate} ({self.num_hits} hits)"


@dataclass(frozen=True, kw_only=True)
class RangeSplit(ShardSplit):
    """Contiguous range of the split field; None marks an open end."""

    lower_inclusive: Any = None
    upper: Any = None
    stats: FieldStats = field(repr=False, compare=False)
    splitter: "FieldTypeSplitter" = field(repr=False, compare=False)

    @property
    def filter_predicate(self) -> str:
        return self.splitter.range_filter(
            self.field_name, self.lower_inclusive, self.upper
        )

    def re_split(
        self, gateway: "StatsGateway", docs_per_split: int
    ) -> list[ShardSplit]:
        return list(self.splitter.re_split(self, gateway, docs_per_split))


@dataclass(frozen=True, kw_only=True)
class CompositeSplit(ShardSplit):
    """Split defined only by its filter predicate (OR of splits, missing values)."""

    predicate: str

    @property
    def filter_predicate(self) -> str:
        return self.predicate
