"""Shard split service - computes balanced splits for one shard.

Pipeline for a single shard (all queries issued sequentially over one
gateway, which is closed on every exit path):

    field stats -> initial ranges -> N balancing passes
        -> non-adjacent small-split sweep -> missing-value split -> report
"""

import time
from collections.abc import Sequence

from loguru import logger

from shardsplit.core.config.solr_config import SolrConfig
from shardsplit.core.config.splitting_config import SplittingConfig
from shardsplit.core.diagnostics import (
    LoggingReportSink,
    ReportingSink,
    build_split_report,
)
from shardsplit.core.exceptions import InvalidSplitRequestError
from shardsplit.core.models import ShardQuery, ShardSplit
from shardsplit.core.utils import round_half_up
from shardsplit.interfaces.field_splitter import FieldTypeSplitter
from shardsplit.interfaces.stats_gateway import GatewayFactory
from shardsplit.providers.solr.solr_gateway import SolrStatsGateway
from shardsplit.providers.splitters import create_field_splitter

from .balancer import SplitBalancer
from .missing_values import MissingValueHandler
from .split_generator import SplitGenerator


class ShardSplitService:
    """Computes balanced filter-based splits of one shard.

    Instances hold no per-call state, so one service may serve several shards
    from different threads. Reports reach callers only through the sinks.
    """

    def __init__(
        self,
        splitter: FieldTypeSplitter,
        config: SplittingConfig | None = None,
        gateway_factory: GatewayFactory | None = None,
        report_sinks: Sequence[ReportingSink] | None = None,
        solr_config: SolrConfig | None = None,
    ) -> None:
        """Initialize split service.

        Args:
            splitter: Range arithmetic for the split field's type
            config: Balancing knobs (defaults read SHARDSPLIT_SPLITTING_*)
            gateway_factory: Opens a stats gateway for (shard_url, base query);
                defaults to an HTTP Solr gateway
            report_sinks: Receivers of the per-shard summary; logs by default
            solr_config: HTTP settings for the default gateway factory
        """
        self._config = config or SplittingConfig()
        self._solr_config = solr_config
        self._gateway_factory = gateway_factory or self._solr_gateway
        self._report_sinks = (
            list(report_sinks) if report_sinks is not None else [LoggingReportSink()]
        )
        self._generator = SplitGenerator(splitter)
        self._balancer = SplitBalancer(self._config)
        self._missing = MissingValueHandler(self._config)

    @classmethod
    def for_field_type(cls, field_type: str, **kwargs) -> "ShardSplitService":
        """Build a service with the built-in splitter for ``field_type``."""
        return cls(create_field_splitter(field_type), **kwargs)

    def _solr_gateway(self, shard_url: str, query: ShardQuery) -> SolrStatsGateway:
        return SolrStatsGateway(shard_url, query, self._solr_config)

    def get_splits(
        self,
        shard_url: str,
        query: ShardQuery,
        split_field: str,
        splits_per_shard: int,
    ) -> list[ShardSplit]:
        """Partition the shard's result set for ``query`` into balanced splits.

        Args:
            shard_url: Shard (core) to query directly
            query: Base query the splits partition
            split_field: Field whose value range is divided
            splits_per_shard: Desired number of splits

        Returns:
            Ordered splits whose predicates are mutually exclusive and together
            cover every document matching ``query``, including documents
            without a value for ``split_field``.

        Raises:
            InvalidSplitRequestError: If splits_per_shard is less than 1
            BackendQueryError: If any stats or count query fails
        """
        if splits_per_shard < 1:
            raise InvalidSplitRequestError(
                f"splits_per_shard must be at least 1, got {splits_per_shard}"
            )

        start = time.perf_counter()
        warnings: list[str] = []

        with self._gateway_factory(shard_url, query) as gateway:
            splits, stats = self._generator.generate_initial_splits(
                gateway, shard_url, query, split_field, splits_per_shard
            )

            docs_per_split = round_half_up(stats.count / splits_per_shard)
            if stats.count > 0:
                docs_per_split = max(1, docs_per_split)
            threshold = self._balancer.threshold_for(docs_per_split)

            splits = self._balancer.balance(
                splits, threshold, docs_per_split, gateway, stats
            )
            self._balancer.join_non_adjacent_small_splits(stats, splits, threshold)

            missing_count, warning = self._missing.append_missing_split(
                gateway, splits, shard_url, query, split_field, stats, docs_per_split
            )
            if warning:
                warnings.append(warning)

        elapsed_ms = (time.perf_counter() - start) * 1000
        report = build_split_report(
            shard_url,
            split_field,
            splits,
            elapsed_ms,
            self._config.outlier_factor,
            missing_count=missing_count,
            warnings=warnings,
        )
        for sink in self._report_sinks:
            sink.report(report)

        logger.debug(f"Splits for {split_field} in {shard_url}: {[str(s) for s in splits]}")
        return splits
