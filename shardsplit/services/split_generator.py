"""Initial split generation for one shard."""

from loguru import logger

from shardsplit.core.models import FieldStats, ShardQuery, ShardSplit
from shardsplit.core.utils import round_half_up
from shardsplit.interfaces.field_splitter import FieldTypeSplitter
from shardsplit.interfaces.stats_gateway import StatsGateway


class SplitGenerator:
    """Builds the baseline partition from one round of field statistics.

    A single whole-shard split is created and immediately re-split, which
    yields an ordered (ascending lower bound) list of contiguous ranges.
    """

    def __init__(self, splitter: FieldTypeSplitter) -> None:
        self._splitter = splitter

    def generate_initial_splits(
        self,
        gateway: StatsGateway,
        shard_url: str,
        query: ShardQuery,
        split_field: str,
        splits_per_shard: int,
    ) -> tuple[list[ShardSplit], FieldStats]:
        """Fetch field stats and return (ordered splits, stats).

        Backend failures propagate unchanged.
        """
        stats = gateway.field_stats(None, split_field)
        logger.info(f"Using stats for {split_field} in {shard_url}: {stats}")

        first_split = self._splitter.initial_split(query, shard_url, split_field, stats)
        if stats.is_degenerate:
            # Nothing to divide; a single pass-through split covers the shard
            return [first_split], stats

        docs_per_split = round_half_up(stats.count / splits_per_shard)
        return list(first_split.re_split(gateway, docs_per_split)), stats
