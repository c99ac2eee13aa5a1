"""shardsplit - balanced filter-based splits of a search shard.

Partitions one shard's result set into splits of roughly equal size using
only approximate field statistics, so a parallel job can scan the shard
concurrently.
"""

from shardsplit.core.config import Config, SolrConfig, SplittingConfig
from shardsplit.core.exceptions import (
    BackendQueryError,
    InvalidSplitRequestError,
    SplitError,
)
from shardsplit.core.models import (
    CompositeSplit,
    FieldStats,
    RangeSplit,
    ShardQuery,
    ShardSplit,
)
from shardsplit.providers.solr import SolrStatsGateway
from shardsplit.providers.splitters import create_field_splitter
from shardsplit.services import ShardSplitService

__version__ = "0.1.0"

__all__ = [
    "BackendQueryError",
    "CompositeSplit",
    "Config",
    "FieldStats",
    "InvalidSplitRequestError",
    "RangeSplit",
    "ShardQuery",
    "ShardSplit",
    "ShardSplitService",
    "SolrConfig",
    "SolrStatsGateway",
    "SplitError",
    "SplittingConfig",
    "create_field_splitter",
]
