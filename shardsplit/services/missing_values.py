"""Catch-all split for documents that lack the split field."""

from loguru import logger

from shardsplit.core.config.splitting_config import SplittingConfig
from shardsplit.core.models import CompositeSplit, FieldStats, ShardQuery, ShardSplit
from shardsplit.interfaces.stats_gateway import StatsGateway
from shardsplit.providers.solr.filters import missing_filter


class MissingValueHandler:
    """Appends a missing-value split when the shard has such documents."""

    def __init__(self, config: SplittingConfig | None = None) -> None:
        self._config = config or SplittingConfig()

    def missing_count(
        self, gateway: StatsGateway, split_field: str, stats: FieldStats
    ) -> int:
        """Missing count from the stats snapshot, queried only when unreported."""
        if stats.missing is not None and not self._config.always_count_missing:
            return stats.missing
        return gateway.count(missing_filter(split_field))

    def append_missing_split(
        self,
        gateway: StatsGateway,
        splits: list[ShardSplit],
        shard_url: str,
        query: ShardQuery,
        split_field: str,
        stats: FieldStats,
        docs_per_split: int,
    ) -> tuple[int, str | None]:
        """Append the missing-value split in place.

        Returns:
            Tuple of (missing count, warning message or None). A warning is
            produced when the single missing-value bucket is large enough to
            dominate one worker's processing time.
        """
        count = self.missing_count(gateway, split_field, stats)
        if count <= 0:
            return count, None

        splits.append(
            CompositeSplit(
                shard_url=shard_url,
                query=query,
                field_name=split_field,
                num_hits=count,
                predicate=missing_filter(split_field),
            )
        )

        warning = None
        if count > docs_per_split * self._config.missing_warning_factor:
            warning = (
                f"Found {count} missing values for field {split_field} in shard "
                f"{shard_url}. This can lead to poor performance when processing "
                f"this shard."
            )
            logger.warning(warning)
        return count, warning
