"""Service layer for shardsplit - split generation, balancing and orchestration."""

from .balancer import SplitBalancer, join_splits
from .missing_values import MissingValueHandler
from .shard_split_service import ShardSplitService
from .split_generator import SplitGenerator

__all__ = [
    "MissingValueHandler",
    "ShardSplitService",
    "SplitBalancer",
    "SplitGenerator",
    "join_splits",
]
