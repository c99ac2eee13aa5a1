"""Iterative split balancing.

Balancing works on an ordered list of splits using the hit estimates attached
to each split. Each pass scans left to right:

- An undersized split (below ``threshold``) greedily absorbs following
  neighbours while the joined size stays at or below ``threshold``.
- An oversized split (above ``docs_per_split * resplit_factor``) is re-split
  into children targeting ``docs_per_split`` and, when it produced more than
  one child, that child group is balanced recursively.
- Anything else is kept.

The gap between the merge threshold (~118% of target) and the re-split
trigger (~180% of target) keeps splits from oscillating between merge and
re-split on consecutive passes. A single greedy pass is not globally optimal
on skewed data, so several passes are run, followed by a sweep that pairs up
small splits which are not neighbours.
"""

from loguru import logger

from shardsplit.core.config.splitting_config import SplittingConfig
from shardsplit.core.models import CompositeSplit, FieldStats, RangeSplit, ShardSplit
from shardsplit.core.utils import round_half_up
from shardsplit.interfaces.stats_gateway import StatsGateway
from shardsplit.providers.solr.filters import or_filter


def join_splits(stats: FieldStats, lhs: ShardSplit, rhs: ShardSplit) -> ShardSplit:
    """Join two splits into one whose ``num_hits`` is the exact sum.

    Exactly contiguous ranges become a single range split; anything else
    (gaps, composite or missing-value splits) becomes an OR of both
    predicates.
    """
    num_hits = lhs.num_hits + rhs.num_hits

    if (
        isinstance(lhs, RangeSplit)
        and isinstance(rhs, RangeSplit)
        and lhs.lower_inclusive is not None
        and rhs.lower_inclusive is not None
    ):
        small, big = (rhs, lhs) if rhs.lower_inclusive < lhs.lower_inclusive else (lhs, rhs)
        if small.upper is not None and small.upper == big.lower_inclusive:
            return small.splitter.create_split(
                lhs.query,
                lhs.shard_url,
                lhs.field_name,
                stats,
                small.lower_inclusive,
                big.upper,
                num_hits=num_hits,
            )

    return CompositeSplit(
        shard_url=lhs.shard_url,
        query=lhs.query,
        field_name=lhs.field_name,
        num_hits=num_hits,
        predicate=or_filter(lhs.filter_predicate, rhs.filter_predicate),
    )


class SplitBalancer:
    """Merges undersized and re-splits oversized splits."""

    def __init__(self, config: SplittingConfig | None = None) -> None:
        self._config = config or SplittingConfig()

    def threshold_for(self, docs_per_split: int) -> int:
        """Upper size bound for merging, relative to the per-split target."""
        return round_half_up(self._config.merge_tolerance * docs_per_split)

    def balance(
        self,
        splits: list[ShardSplit],
        threshold: int,
        docs_per_split: int,
        gateway: StatsGateway,
        stats: FieldStats,
    ) -> list[ShardSplit]:
        """Run the configured number of balancing passes."""
        for _ in range(self._config.balance_passes):
            splits = self.balance_pass(splits, threshold, docs_per_split, gateway, stats)
        return splits

    def balance_pass(
        self,
        splits: list[ShardSplit],
        threshold: int,
        docs_per_split: int,
        gateway: StatsGateway,
        stats: FieldStats,
    ) -> list[ShardSplit]:
        """One left-to-right merge/re-split pass; returns a new list."""
        resplit_above = docs_per_split * self._config.resplit_factor
        balanced: list[ShardSplit] = []

        s = 0
        while s < len(splits):
            split = splits[s]

            if split.num_hits < threshold and s < len(splits) - 1:
                j = s
                while True:
                    if split.num_hits + splits[j + 1].num_hits > threshold:
                        break
                    j += 1
                    split = join_splits(stats, split, splits[j])
                    if j + 1 == len(splits) or split.num_hits >= threshold:
                        break
                if j > s:
                    logger.debug(f"Joined {j - s + 1} adjacent splits into {split}")
                balanced.append(split)
                s = j + 1
                continue

            if split.num_hits > resplit_above:
                children = split.re_split(gateway, docs_per_split)
                if len(children) > 1:
                    children = self.balance_pass(
                        children, threshold, docs_per_split, gateway, stats
                    )
                balanced.extend(children)
            else:
                balanced.append(split)
            s += 1

        return balanced

    def join_non_adjacent_small_splits(
        self, stats: FieldStats, splits: list[ShardSplit], threshold: int
    ) -> None:
        """Pair up small splits anywhere in the list, in place.

        A split below half size keeps absorbing the next small split after it
        until it is no longer small or none is left, so at most one small
        split survives and a second sweep changes nothing.

        Deliberately not one join per small split: that variant leaves small
        leftovers which a repeated sweep would merge again.
        """
        half_size = round_half_up(threshold / self._config.resplit_factor)

        b = 0
        while b < len(splits):
            while splits[b].num_hits < half_size:
                j = next(
                    (
                        k
                        for k in range(b + 1, len(splits))
                        if splits[k].num_hits < half_size
                    ),
                    None,
                )
                if j is None:
                    break
                splits[b] = join_splits(stats, splits[b], splits[j])
                del splits[j]
            b += 1
